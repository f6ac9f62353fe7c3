"""
Error types raised by seqext operations.

Two concrete kinds share one base: a bad or missing argument, and an
operation that needs at least one element but was handed none.
"""

from typing import Optional, Any, Dict


class SequenceError(Exception):
    """
    Base exception for all seqext errors.

    Carries a structured ``details`` mapping alongside the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize sequence error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(SequenceError, ValueError):
    """
    Raised when a required argument is missing (None) or out of its domain.

    Examples are a chunk size below 1 or an unknown empty-collection policy.
    """

    def __init__(self, message: str,
                 argument: Optional[str] = None,
                 value: Any = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Name of the offending parameter
            value: The rejected value
            details: Additional error context
        """
        super().__init__(message, details)
        self.argument = argument
        self.value = value

        self.details.update({
            'argument': argument,
            'value': repr(value)
        })


class EmptyCollectionError(SequenceError):
    """
    Raised when an operation that requires elements receives an empty input.

    Partition, init, tail and chunk raise it only under ``OnEmpty.THROW``;
    the similarity functions always raise it.
    """

    def __init__(self, message: str,
                 operation: str = 'general',
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize empty collection error.

        Args:
            message: Error message
            operation: Operation that failed ('partition', 'chunk', 'jaccard_sort', etc.)
            details: Additional error context
        """
        super().__init__(message, details)
        self.operation = operation

        self.details.update({
            'operation': operation
        })


def is_invalid_argument(error: Exception) -> bool:
    """Check if error is due to a missing or out-of-domain argument."""
    return isinstance(error, InvalidArgumentError)


def is_empty_collection(error: Exception) -> bool:
    """Check if error is due to an empty input collection."""
    return isinstance(error, EmptyCollectionError)


def require(value: Any, argument: str) -> Any:
    """Return ``value`` unchanged, raising InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(f"{argument} must not be None", argument=argument, value=value)
    return value
