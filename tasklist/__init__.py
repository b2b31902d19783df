"""Keep a to-do list of prioritised tasks in a binary file, from Python or the command line."""

__version__ = "0.1.0"
__all__ = ["app", "document", "editor", "view"]