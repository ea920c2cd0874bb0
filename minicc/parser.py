"""
minicc Parser

Single-pass recognizer that builds an AST from tokens.

The parser scans forward looking for

    int NAME ( ) { [return INTEGER [;]] }

Whenever an ``int`` keyword is found it greedily consumes that shape. A
mismatch abandons the half-built function without a diagnostic and the
scan carries on one token past the point of failure. Recognized functions
are linked in front of the ones found before them.
"""

import logging
from typing import List, Optional
from .tokens import Token, TokenType
from .ast import Program, FunctionDecl, ReturnStmt, IntegerLiteral
from .errors import ParseError

logger = logging.getLogger(__name__)


def describe(token: Token) -> str:
    """Human-readable name of a token for messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    return f"{token.lexeme!r}"


class Parser:
    """Pattern-matching parser for minicc."""
    
    def __init__(self, tokens: List[Token], strict: bool = False):
        """
        Initialize the parser.
        
        Args:
            tokens: List of tokens from the lexer
            strict: Raise ParseError instead of silently dropping
                malformed declarations
        """
        self.tokens = tokens
        self.strict = strict
        self.current = 0
    
    def parse(self) -> Program:
        """
        Parse the token stream into an AST.
        
        Returns:
            Program AST node, possibly with no declarations
        """
        program = Program()
        
        while not self.is_at_end():
            if self.peek().is_keyword('int'):
                self.advance()
                function = self.function_declaration()
                if function is not None:
                    program.prepend(function)
            # Steps over the closing brace, the token that broke a match,
            # or any token outside a declaration.
            self.advance()
        
        if self.strict and not program.declarations:
            token = self.tokens[-1] if self.tokens else None
            raise ParseError("No function declaration found",
                             token.line if token else None,
                             token.column if token else None)
        
        return program
    
    def function_declaration(self) -> Optional[FunctionDecl]:
        """Parse the remainder of a function after the 'int' keyword."""
        name = self.expect(TokenType.IDENTIFIER, None, "function name")
        if name is None:
            return None
        function = FunctionDecl(name.lexeme, token=name)
        
        for char in '(){':
            if self.expect(TokenType.PUNCTUATION, char, f"'{char}'") is None:
                return None
        
        function.body = self.return_statement()
        
        # The closing brace is checked but left for the scan loop to step over
        if not self.check(TokenType.PUNCTUATION, '}'):
            self.abandon("'}'")
            return None
        
        logger.debug("Recognized function %s", function.name)
        return function
    
    def return_statement(self) -> Optional[ReturnStmt]:
        """Parse an optional 'return INTEGER [;]' body."""
        if not self.check(TokenType.KEYWORD, 'return'):
            if self.strict:
                self.abandon("'return'")
            return None
        keyword = self.advance()
        
        if not self.check(TokenType.INTEGER):
            if self.strict:
                self.abandon("integer literal")
            return None
        
        value = self.integer_literal()
        self.match(TokenType.PUNCTUATION, ';')
        return ReturnStmt(value, keyword)
    
    def integer_literal(self) -> IntegerLiteral:
        """Parse an integer literal, the only expression form."""
        token = self.advance()
        return IntegerLiteral(int(token.lexeme), token)
    
    # =========================================================================
    # Helper Methods
    # =========================================================================
    
    def expect(self, type: TokenType, lexeme: Optional[str], 
               what: str) -> Optional[Token]:
        """Consume the expected token, or abandon the declaration."""
        if self.check(type, lexeme):
            return self.advance()
        self.abandon(what)
        return None
    
    def abandon(self, expected: str) -> None:
        """Drop the declaration being built; raises in strict mode."""
        token = self.peek()
        if self.strict:
            raise ParseError(f"Expected {expected}, found {describe(token)}",
                             token.line, token.column)
        logger.debug("Dropped declaration at line %d, column %d: expected %s, found %s",
                     token.line, token.column, expected, describe(token))
    
    def match(self, type: TokenType, lexeme: Optional[str] = None) -> bool:
        """Consume the current token if it matches."""
        if self.check(type, lexeme):
            self.advance()
            return True
        return False
    
    def check(self, type: TokenType, lexeme: Optional[str] = None) -> bool:
        """Check if the current token has the given type (and lexeme)."""
        if self.is_at_end():
            return False
        token = self.peek()
        return token.type == type and (lexeme is None or token.lexeme == lexeme)
    
    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.peek()
        if self.current < len(self.tokens):
            self.current += 1
        return token
    
    def is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.peek().type == TokenType.EOF
    
    def peek(self) -> Token:
        """Return the current token, or a synthetic EOF past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        if self.tokens:
            last = self.tokens[-1]
            return Token(TokenType.EOF, None, last.line, last.column)
        return Token(TokenType.EOF, None, 1, 1)


def parse(tokens: List[Token], strict: bool = False) -> Program:
    """Parse a token list into a Program."""
    return Parser(tokens, strict).parse()
