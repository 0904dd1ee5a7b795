"""
TSX Analyzer - Snippet Validation, Tokenizing and Debug Stripping
=================================================================

This package analyzes snippets of JavaScript, TypeScript and JSX source.
For every snippet it decides whether the code is valid and, if it is,
produces a token stream for display and a version of the code with
debug output calls stripped, together with size statistics.

Main Components
---------------
- **validator**: syntax validation behind an abstract interface
    The shipped implementation uses tree-sitter's TypeScript/TSX grammar

- **classifier**: sorts validator messages into LEXICAL, SYNTACTIC
    and SEMANTIC errors

- **lexer**: two tokenizers with one contract
    A full JS/TS/JSX lexer and a coarse single-regex classifier

- **optimizer**: removes ``console.log(...)`` calls and blank lines

- **metrics**: size reduction statistics and memory telemetry

- **server**: FastAPI service exposing ``POST /analyze``

Quick Start
-----------
Analyze a snippet:
    >>> from tsx_analyzer import Analyzer
    >>> result = Analyzer().analyze("let a = 1;\\nconsole.log(a);")
    >>> result.optimized_text
    'let a = 1;'

Tokenize without validating:
    >>> from tsx_analyzer import tokenize
    >>> [t.kind.value for t in tokenize("a => b")]
    ['IDENTIFIER', 'ARROW', 'IDENTIFIER']

Or use the command-line tool:
    $ tsxa analyze component.tsx
    $ tsxa tokens component.tsx
    $ tsxa optimize component.tsx -o component.min.tsx
    $ tsxa serve --port 8080

Version History
---------------
1.0.0 - Initial release with validator, both tokenizers, optimizer and service
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from tsx_analyzer.errors import (
    AnalyzerError,
    SourceLocation,
    LexerError,
    InvalidCharacterError,
    UnterminatedLiteralError,
    ValidatorError,
    OptimizerError,
    ConfigError,
)
from tsx_analyzer.classifier import ErrorCategory, classify
from tsx_analyzer.lexer import Token, TokenKind, JSLexer, tokenize, tokenize_coarse
from tsx_analyzer.optimizer import DebugCallOptimizer, OptimizationStats, optimize_code
from tsx_analyzer.metrics import SizeMetrics, compute_metrics, measure
from tsx_analyzer.validator import (
    Validator,
    ValidationIssue,
    ValidationOutcome,
    TreeSitterValidator,
)
from tsx_analyzer.config import AnalyzerConfig
from tsx_analyzer.analyzer import (
    Analyzer,
    AnalysisResult,
    Diagnostic,
    InvalidResult,
    ValidResult,
    analyze,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Pipeline
    "Analyzer",
    "AnalysisResult",
    "Diagnostic",
    "InvalidResult",
    "ValidResult",
    "analyze",
    # Classifier
    "ErrorCategory",
    "classify",
    # Lexer
    "Token",
    "TokenKind",
    "JSLexer",
    "tokenize",
    "tokenize_coarse",
    # Optimizer
    "DebugCallOptimizer",
    "OptimizationStats",
    "optimize_code",
    # Metrics
    "SizeMetrics",
    "compute_metrics",
    "measure",
    # Validator
    "Validator",
    "ValidationIssue",
    "ValidationOutcome",
    "TreeSitterValidator",
    # Configuration
    "AnalyzerConfig",
    # Exception hierarchy
    "AnalyzerError",
    "SourceLocation",
    "LexerError",
    "InvalidCharacterError",
    "UnterminatedLiteralError",
    "ValidatorError",
    "OptimizerError",
    "ConfigError",
]
