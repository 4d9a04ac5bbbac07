"""secconfig Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for secconfig. Expected failures
of the store (missing keys, immutable entries, malformed imports) are reported
through return values; these exceptions cover programming errors and problems
with external configuration sources.
"""

from typing import Optional, Any, Dict


class SecConfigError(Exception):
    """Base exception for all secconfig-specific errors.
    
    Carries a human-readable message, a context dictionary and the
    underlying cause, if any.
    """
    
    def __init__(
        self, 
        message: str, 
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize secconfig error.
        
        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., keys, file paths)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause
    
    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ValidationError(SecConfigError):
    """Raised when a domain model is built from invalid data."""
    
    def __init__(
        self, 
        field: str, 
        value: Any, 
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.
        
        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(SecConfigError):
    """Raised when an external configuration source is missing or unreadable.
    
    Used for override files that cannot be opened or parsed and for
    invalid process settings.
    """
    
    def __init__(
        self, 
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.
        
        Args:
            config_key: Configuration key or source that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"
        
        super().__init__(message, context, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
