"""
minicc Code Generator

Generates x86 assembly text from an AST.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
from .ast import ASTVisitor, Program, FunctionDecl, ReturnStmt, IntegerLiteral
from .errors import ConfigError


@dataclass(frozen=True)
class Dialect:
    """Assembly syntax flavour: file header and instruction templates."""
    name: str
    header: Tuple[str, ...]
    load_return: str
    ret: str


DIALECTS: Dict[str, Dialect] = {
    'att': Dialect(
        name='att',
        header=('.global main', 'main:'),
        load_return='    movl ${value}, %eax',
        ret='    ret',
    ),
    'intel': Dialect(
        name='intel',
        header=('.intel_syntax noprefix', '.global main', 'main:'),
        load_return='    mov eax, {value}',
        ret='    ret',
    ),
}


def get_dialect(name: str) -> Dialect:
    """Look up an assembly dialect by name."""
    try:
        return DIALECTS[name]
    except KeyError:
        choices = ", ".join(sorted(DIALECTS))
        raise ConfigError(f"Unknown assembly syntax {name!r} (choose from {choices})") from None


class CodeGenerator(ASTVisitor):
    """Generates assembly from an AST."""
    
    def __init__(self, syntax: str = 'att'):
        self.dialect = get_dialect(syntax)
        self.lines: List[str] = []
    
    def generate(self, program: Program) -> str:
        """Generate assembly text from a program AST."""
        self.lines = list(self.dialect.header)
        program.accept(self)
        return "".join(line + "\n" for line in self.lines)
    
    def emit(self, line: str) -> None:
        self.lines.append(line)
    
    def visit_program(self, node: Program) -> None:
        for decl in node.declarations:
            decl.accept(self)
    
    def visit_function(self, node: FunctionDecl) -> None:
        # Functions without a recognized return emit nothing
        if isinstance(node.body, ReturnStmt):
            node.body.accept(self)
    
    def visit_return(self, node: ReturnStmt) -> None:
        if not isinstance(node.value, IntegerLiteral):
            return
        self.emit(self.dialect.load_return.format(value=node.value.accept(self)))
        self.emit(self.dialect.ret)
    
    def visit_integer(self, node: IntegerLiteral) -> str:
        # Emitted as parsed, no range check against the register width
        return str(node.value)


def generate(program: Program, syntax: str = 'att') -> str:
    """Generate assembly text for a program."""
    return CodeGenerator(syntax).generate(program)
