"""
minicc Configuration

Compiler options and logging setup.
"""

import logging
from dataclasses import dataclass

from .codegen import get_dialect

LOGGER_NAME = 'minicc'
LOG_FORMAT = '[%(levelname)s] %(message)s'


@dataclass
class CompilerOptions:
    """
    Options controlling a compilation.
    
    Attributes:
        syntax: Assembly dialect to emit, 'att' or 'intel'
        strict: Turn dropped characters and declarations into errors
    """
    syntax: str = 'att'
    strict: bool = False
    
    def validate(self) -> 'CompilerOptions':
        """Check option values, raising ConfigError on bad ones."""
        get_dialect(self.syntax)
        return self


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Attach a stream handler to the package logger.
    
    Args:
        verbosity: 0 for warnings, positive for debug output,
            negative for errors only
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    
    if verbosity > 0:
        logger.setLevel(logging.DEBUG)
    elif verbosity < 0:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.WARNING)
    return logger
