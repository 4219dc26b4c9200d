# jsmigrate/exceptions.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Exception types raised by jsmigrate."""

from typing import Optional


class JsMigrateError(Exception):
    """Base class for all jsmigrate errors."""
    pass


class ParseError(JsMigrateError):
    """Source text could not be parsed without syntax errors."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class OverlappingEditsError(JsMigrateError):
    """Two edits in one batch touch the same span of source."""
    pass


class UnknownRecipeError(JsMigrateError, KeyError):
    """Requested recipe is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown recipe"


class ConfigError(JsMigrateError):
    """Configuration file is missing or invalid."""
    pass
