"""Shared fixtures for seqext tests."""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    gender: str
    age: int


@pytest.fixture
def digits():
    """The integers 0 through 9 as a list."""
    return list(range(10))


@pytest.fixture
def persons():
    """Seven people, four of them male."""
    return [
        Person("John", "Doe", "M", 24),
        Person("Jane", "Doe", "F", 30),
        Person("Sally", "Murphy", "F", 27),
        Person("Brian", "Dorsey", "M", 32),
        Person("William", "Fredericks", "M", 50),
        Person("Laura", "Appletree", "F", 43),
        Person("Bob", "Stevens", "M", 40),
    ]
