"""
minicc Compiler Package

A Python compiler for a minimal C subset: one function whose body returns
an integer literal. Source text is lexed, parsed and turned into x86
assembly that exits with that integer.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .tokens import Token, TokenType
from .lexer import Lexer, tokenize
from .ast import *
from .parser import Parser, parse
from .codegen import CodeGenerator, generate
from .config import CompilerOptions, configure_logging
from .errors import MiniccError, LexError, ParseError, ConfigError, Diagnostic

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenType",
    "Lexer",
    "Parser",
    "CodeGenerator",
    "CompilerOptions",
    "CompileResult",
    "MiniccError",
    "LexError",
    "ParseError",
    "ConfigError",
    "Diagnostic",
    "tokenize",
    "parse",
    "generate",
    "compile_source",
    "compile_file",
    "configure_logging",
]


@dataclass
class CompileResult:
    """Everything produced by one compilation."""
    assembly: str
    tokens: List[Token] = field(default_factory=list)
    program: Optional[Program] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)


def compile_source(source: str, options: Optional[CompilerOptions] = None,
                   filename: Optional[str] = None) -> CompileResult:
    """
    Compile minicc source code to assembly.
    
    Args:
        source: minicc source code string
        options: Compiler options, defaults when omitted
        filename: Name used in error messages
        
    Returns:
        CompileResult with the assembly text
        
    Raises:
        ConfigError: If the options are invalid
        LexError, ParseError: In strict mode, for malformed source
    """
    options = (options or CompilerOptions()).validate()
    
    lexer = Lexer(source)
    tokens = lexer.tokenize()
    if options.strict and lexer.diagnostics:
        raise lexer.diagnostics[0].to_error(filename)
    
    parser = Parser(tokens, strict=options.strict)
    try:
        program = parser.parse()
    except ParseError as e:
        raise ParseError(e.message, e.line, e.column, filename) from None
    
    codegen = CodeGenerator(options.syntax)
    assembly = codegen.generate(program)
    
    return CompileResult(assembly, tokens, program, lexer.diagnostics)


def compile_file(filepath: Union[str, Path],
                 options: Optional[CompilerOptions] = None) -> CompileResult:
    """
    Compile a minicc source file to assembly.
    
    Args:
        filepath: Path to the source file
        options: Compiler options, defaults when omitted
        
    Returns:
        CompileResult with the assembly text
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()
    return compile_source(source, options, str(filepath))
