"""
minicc Compiler Errors

Defines exception classes for compilation errors and the non-fatal
diagnostics collected while scanning.
"""

from dataclasses import dataclass
from typing import Optional


class MiniccError(Exception):
    """Base exception for all minicc errors."""
    
    def __init__(self, message: str, line: Optional[int] = None, 
                 column: Optional[int] = None, filename: Optional[str] = None):
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(self._format_message())
    
    def _format_message(self) -> str:
        """Format the error message with location information."""
        if self.line is None:
            if self.filename:
                return f"{self.filename}: {self.message}"
            return self.message
        
        location = f"{self.line}"
        if self.column is not None:
            location += f":{self.column}"
        
        if self.filename:
            return f"{self.filename}:{location}: {self.message}"
        return f"line {location}: {self.message}"


class LexError(MiniccError):
    """Raised for unrecognized characters when lexing in strict mode."""
    pass


class ParseError(MiniccError):
    """Raised when the token stream does not form a function in strict mode."""
    pass


class ConfigError(MiniccError):
    """Raised for invalid compiler options."""
    pass


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem reported while compiling."""
    
    message: str
    line: int
    column: int
    
    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"
    
    def to_error(self, filename: Optional[str] = None) -> LexError:
        """Promote this diagnostic to a LexError."""
        return LexError(self.message, self.line, self.column, filename)
