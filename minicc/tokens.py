"""
minicc Token Definitions

Defines the token types and the Token class for lexical analysis.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """All token types in minicc."""
    
    IDENTIFIER = auto()
    KEYWORD = auto()
    INTEGER = auto()
    OPERATOR = auto()      # Reserved, the language has no operators
    PUNCTUATION = auto()
    EOF = auto()


# Closed keyword set
KEYWORDS = frozenset({'int', 'return'})

PUNCTUATION = frozenset('(){};')


@dataclass(frozen=True)
class Token:
    """Represents a single token from the source code."""
    
    type: TokenType
    lexeme: Optional[str]
    line: int
    column: int
    
    def __repr__(self) -> str:
        if self.lexeme is None:
            return f"Token({self.type.name}, line={self.line}, column={self.column})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line}, column={self.column})"
    
    def is_keyword(self, word: str) -> bool:
        """Check if this token is the given keyword."""
        return self.type == TokenType.KEYWORD and self.lexeme == word
    
    def is_punctuation(self, char: str) -> bool:
        """Check if this token is the given punctuation character."""
        return self.type == TokenType.PUNCTUATION and self.lexeme == char
