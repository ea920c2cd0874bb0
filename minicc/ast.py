"""
minicc Abstract Syntax Tree

Defines AST node classes for the minicc language.

The tree is deliberately small: a Program holds function declarations,
a function body is at most one return statement, and the only expression
is an integer literal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Any
from .tokens import Token


# =============================================================================
# Base Classes
# =============================================================================

class ASTNode(ABC):
    """Base class for all AST nodes."""
    
    @abstractmethod
    def accept(self, visitor: 'ASTVisitor') -> Any:
        """Accept a visitor for traversal."""
        pass


class Expression(ASTNode):
    """Base class for expression nodes."""
    pass


class Statement(ASTNode):
    """Base class for statement nodes."""
    pass


# =============================================================================
# Expressions
# =============================================================================

@dataclass
class IntegerLiteral(Expression):
    """Integer literal expression."""
    value: int
    token: Optional[Token] = None
    
    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_integer(self)


# =============================================================================
# Statements
# =============================================================================

@dataclass
class ReturnStmt(Statement):
    """Return statement."""
    value: IntegerLiteral
    keyword: Optional[Token] = None
    
    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_return(self)


@dataclass
class FunctionDecl(Statement):
    """Function declaration; body is None when no return was recognized."""
    name: str
    body: Optional[ReturnStmt] = None
    token: Optional[Token] = None
    
    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_function(self)


@dataclass
class Program(ASTNode):
    """Root node of the AST."""
    declarations: List[FunctionDecl] = field(default_factory=list)
    
    def accept(self, visitor: 'ASTVisitor') -> Any:
        return visitor.visit_program(self)
    
    def prepend(self, decl: FunctionDecl) -> None:
        """Link a declaration in front of those already recognized."""
        self.declarations.insert(0, decl)


# =============================================================================
# Visitor Interface
# =============================================================================

class ASTVisitor(ABC):
    """Base class for AST visitors."""
    
    @abstractmethod
    def visit_integer(self, node: IntegerLiteral) -> Any:
        pass
    
    @abstractmethod
    def visit_return(self, node: ReturnStmt) -> Any:
        pass
    
    @abstractmethod
    def visit_function(self, node: FunctionDecl) -> Any:
        pass
    
    @abstractmethod
    def visit_program(self, node: Program) -> Any:
        pass


# =============================================================================
# AST Printer (for debugging)
# =============================================================================

class ASTPrinter(ASTVisitor):
    """Prints AST for debugging."""
    
    def __init__(self):
        self.indent = 0
    
    def print(self, node: ASTNode) -> str:
        return node.accept(self)
    
    def _indent(self) -> str:
        return "  " * self.indent
    
    def _children(self, nodes: List[ASTNode]) -> List[str]:
        self.indent += 1
        lines = [n.accept(self) for n in nodes]
        self.indent -= 1
        return lines
    
    def visit_integer(self, node: IntegerLiteral) -> str:
        return f"{self._indent()}Integer({node.value})"
    
    def visit_return(self, node: ReturnStmt) -> str:
        value = self._children([node.value])
        return "\n".join([f"{self._indent()}Return"] + value)
    
    def visit_function(self, node: FunctionDecl) -> str:
        body = self._children([node.body]) if node.body is not None else []
        return "\n".join([f"{self._indent()}Function({node.name})"] + body)
    
    def visit_program(self, node: Program) -> str:
        decls = self._children(node.declarations)
        return "\n".join(["Program"] + decls)
