"""swiftkit - validated batch file operations for a host application."""

__version__ = "0.1.0"
