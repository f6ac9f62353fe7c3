"""Main entry point for running seqext as a module."""

from .cli import main

if __name__ == "__main__":
    main()
