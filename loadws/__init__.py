"""Interactive workspace picker that emits a shell script to load the choice."""

__version__ = "1.0.0"
