"""
minicc Lexer

Tokenizes minicc source code into a stream of tokens.

Unrecognized characters never stop the scan: each one is reported as a
Diagnostic, logged, and skipped.
"""

import logging
from typing import List
from .tokens import Token, TokenType, KEYWORDS, PUNCTUATION
from .errors import Diagnostic

logger = logging.getLogger(__name__)

WHITESPACE = ' \t\r\v\f'
DIGITS = '0123456789'


def is_identifier_start(c: str) -> bool:
    return c.isascii() and (c.isalpha() or c == '_')


def is_identifier_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == '_')


class Lexer:
    """Lexical analyzer for minicc source code."""
    
    def __init__(self, source: str):
        """
        Initialize the lexer.
        
        Args:
            source: minicc source code to tokenize
        """
        self.source = source
        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []
        self.start = 0      # Start of current token
        self.current = 0    # Current position
        self.line = 1       # Current line number
        self.line_start = 0 # Position of current line start
    
    @property
    def column(self) -> int:
        """Column of the current position (1-based)."""
        return self.current - self.line_start + 1
    
    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.
        
        Returns:
            List of tokens, terminated by a single EOF token
        """
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        
        self.tokens.append(Token(TokenType.EOF, None, self.line, self.column))
        return self.tokens
    
    def scan_token(self) -> None:
        """Scan the next token."""
        c = self.advance()
        
        if c in WHITESPACE:
            return
        
        if c == '\n':
            self.line += 1
            self.line_start = self.current
            return
        
        if c in PUNCTUATION:
            self.add_token(TokenType.PUNCTUATION)
        elif c in DIGITS:
            self.integer()
        elif is_identifier_start(c):
            self.identifier()
        else:
            self.report(f"Unexpected character: {c}")
    
    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        return c
    
    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.is_at_end():
            return '\0'
        return self.source[self.current]
    
    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)
    
    def add_token(self, type: TokenType) -> None:
        """Add a token spanning start..current to the token list."""
        lexeme = self.source[self.start:self.current]
        col = self.start - self.line_start + 1
        self.tokens.append(Token(type, lexeme, self.line, col))
    
    def report(self, message: str) -> None:
        """Record a diagnostic for the character at start."""
        col = self.start - self.line_start + 1
        diagnostic = Diagnostic(message, self.line, col)
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)
    
    def integer(self) -> None:
        """Scan a decimal integer literal."""
        while self.peek() in DIGITS:
            self.advance()
        self.add_token(TokenType.INTEGER)
    
    def identifier(self) -> None:
        """Scan an identifier or keyword."""
        while is_identifier_char(self.peek()):
            self.advance()
        
        text = self.source[self.start:self.current]
        self.add_token(TokenType.KEYWORD if text in KEYWORDS else TokenType.IDENTIFIER)


def tokenize(source: str) -> List[Token]:
    """Tokenize source text, returning the token list."""
    return Lexer(source).tokenize()
