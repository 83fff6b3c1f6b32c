"""
Custom exceptions for tool operations.
"""

class ToolError(ValueError):
    """Base exception for all tool-related errors."""
    pass

class InvalidInputError(ToolError):
    """Raised when the input text cannot be processed by a tool."""
    pass

class UnsupportedOptionError(ToolError):
    """Raised when an option value is not one the tool supports."""
    pass
