"""Session- or database-backed todo list manager."""

__version__ = "1.0.0"
