"""
quantcalc Package

The lexical and semantic core of a units-aware arithmetic expression
language: tokens, the AST, and the unit algebra that values carry through
evaluation.

Architecture:
    quantcalc/
    ├── lexer/           # Tokenization and lexical analysis
    ├── syntax/          # AST nodes, construction helpers, visitors
    ├── units/           # Unit algebra and quantity arithmetic
    ├── numeric.py       # Decimal helpers
    └── config.py        # Precision and rounding

Author: xwest
License: MIT
"""

import logging

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@quantcalc.org"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import NumericConfig, get_config, set_config
from .lexer import Lexer, Token, TokenType, Span, tokenize_string
from .syntax import Node, NodeType, NodeVisitor
from .units import Unit, UnitAtom, Quantity, UnitError, apply_binary

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Span",
    "tokenize_string",
    "Node",
    "NodeType",
    "NodeVisitor",
    "Unit",
    "UnitAtom",
    "Quantity",
    "UnitError",
    "apply_binary",

    # Configuration
    "NumericConfig",
    "get_config",
    "set_config",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
