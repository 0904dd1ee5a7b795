"""
Analysis Pipeline
=================

This module ties the components together into the single operation the
service exposes:

    analyze(code) -> AnalysisResult

Pipeline
--------
    Source → Validator ─┬─ invalid → Classifier → InvalidResult
                        └─ valid   → Optimizer ─┐
                                   → Tokenizer ─┴→ Metrics → ValidResult

The optimizer and tokenizer are independent pure functions of the
original text; neither sees the other's output.

Error Handling
--------------
Nothing in the pipeline raises for bad input:
- Rejected code becomes an InvalidResult carrying exactly one diagnostic
  (the validator's first).
- A validator that cannot run at all is reported the same way, as a
  SYNTACTIC diagnostic on line 1, and logged as an error.
- The tokenizer stops early on unscannable text; the optimizer degrades
  to a no-op.

Usage
-----
>>> from tsx_analyzer.analyzer import Analyzer
>>> result = Analyzer().analyze("const x = 1;\\nconsole.log(x);\\n")
>>> result.is_valid, result.optimized_text
(True, 'const x = 1;')
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Union

from tsx_analyzer.classifier import ErrorCategory, classify
from tsx_analyzer.config import AnalyzerConfig
from tsx_analyzer.errors import ConfigError, ValidatorError
from tsx_analyzer.lexer import Token, TOKENIZERS, DEFAULT_TOKENIZER
from tsx_analyzer.metrics import SizeMetrics, measure
from tsx_analyzer.optimizer import DebugCallOptimizer, DEFAULT_DEBUG_CALLEES
from tsx_analyzer.validator import TreeSitterValidator, ValidationIssue, Validator


logger = logging.getLogger(__name__)


INVALID_MESSAGE = "An error was found in the code"
VALID_MESSAGE = "Analysis and optimization completed"


# =============================================================================
# Result Types
# =============================================================================

@dataclass(frozen=True)
class Diagnostic:
    """
    The single categorized problem reported for invalid code.

    Attributes:
        line: Line number (1-indexed)
        message: Validator message, unchanged
        category: Classifier verdict
        column: Column number (1-indexed), when the validator provides one
    """
    line: int
    message: str
    category: ErrorCategory
    column: Optional[int] = None

    @property
    def detail(self) -> str:
        """Display form: 'Line {n}: {message}'."""
        return f"Line {self.line}: {self.message}"

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> "Diagnostic":
        return cls(
            line=max(issue.line, 1),
            message=issue.message,
            category=classify(issue.message),
            column=issue.column,
        )


@dataclass(frozen=True)
class InvalidResult:
    """Analysis of code the validator rejected."""
    diagnostic: Diagnostic

    is_valid: ClassVar[bool] = False
    message: ClassVar[str] = INVALID_MESSAGE


@dataclass(frozen=True)
class ValidResult:
    """
    Analysis of accepted code.

    Attributes:
        tokens: Token stream in source order
        optimized_text: Code with debug calls removed
        metrics: Size comparison between original and optimized text
    """
    tokens: tuple[Token, ...]
    optimized_text: str
    metrics: SizeMetrics

    is_valid: ClassVar[bool] = True
    message: ClassVar[str] = VALID_MESSAGE


AnalysisResult = Union[InvalidResult, ValidResult]


# =============================================================================
# Analyzer
# =============================================================================

class Analyzer:
    """
    Runs the validate → optimize/tokenize → measure pipeline.

    An Analyzer holds only configuration; every analyze() call works on
    fresh per-request objects, so one instance can serve many requests.

    Attributes:
        validator: Syntax validator
        tokenizer: Tokenizer design name ("lexer" or "coarse")
        debug_callees: Callee names stripped by the optimizer
    """

    def __init__(
        self,
        validator: Optional[Validator] = None,
        tokenizer: str = DEFAULT_TOKENIZER,
        debug_callees: Iterable[str] = DEFAULT_DEBUG_CALLEES,
    ):
        if tokenizer not in TOKENIZERS:
            raise ConfigError(
                f"unknown tokenizer '{tokenizer}'",
                hint=f"choose from: {', '.join(TOKENIZERS)}",
            )
        self.validator = validator if validator is not None else TreeSitterValidator()
        self.tokenizer = tokenizer
        self.debug_callees = tuple(debug_callees)

    @classmethod
    def from_config(
        cls,
        config: AnalyzerConfig,
        validator: Optional[Validator] = None,
    ) -> "Analyzer":
        """Build an Analyzer from an AnalyzerConfig."""
        config.validate()
        return cls(
            validator=validator or TreeSitterValidator(config.dialect),
            tokenizer=config.tokenizer,
            debug_callees=config.debug_callees,
        )

    def analyze(self, code: str) -> AnalysisResult:
        """
        Analyze one snippet.

        Args:
            code: Source text

        Returns:
            InvalidResult with one diagnostic, or ValidResult with tokens,
            optimized text and size metrics
        """
        try:
            outcome = self.validator.parse(code)
        except ValidatorError as e:
            logger.error(f"Validator could not run: {e.message}")
            return InvalidResult(
                Diagnostic(line=1, message=e.message, category=ErrorCategory.SYNTACTIC)
            )

        if not outcome.valid:
            issue = outcome.first_issue
            if issue is None:
                issue = ValidationIssue(1, 1, "Invalid code")
            diagnostic = Diagnostic.from_issue(issue)
            logger.debug(f"Invalid code ({diagnostic.category.value}): {diagnostic.detail}")
            return InvalidResult(diagnostic)

        optimized = self.optimize(code)
        tokens = self.tokenize(code)
        metrics = measure(code, optimized)

        logger.debug(
            f"Valid code: {len(tokens)} tokens,"
            f" {metrics.original_size} -> {metrics.optimized_size} chars"
        )
        return ValidResult(tokens=tuple(tokens), optimized_text=optimized, metrics=metrics)

    def optimize(self, code: str) -> str:
        """Optimize code with this analyzer's debug callees."""
        return DebugCallOptimizer(self.debug_callees).optimize(code)

    def tokenize(self, code: str) -> list[Token]:
        """Tokenize code with this analyzer's tokenizer design."""
        return TOKENIZERS[self.tokenizer](code)


def analyze(code: str) -> AnalysisResult:
    """Analyze code with a default Analyzer."""
    return Analyzer().analyze(code)
