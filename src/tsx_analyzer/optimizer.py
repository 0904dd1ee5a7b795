"""
Debug Statement Optimizer
=========================

This module strips debug output calls from JavaScript/TypeScript source
and compacts the blank lines they leave behind. It is a plain text
transform: it does not parse the code.

Transformation
--------------
1. **Debug-call removal**: every ``console.log(`` ... ``)`` span, with an
   optional trailing ``;``, is deleted. The argument list may span lines.
   Matching is *non-greedy*: the call ends at the first ``)`` after the
   opening parenthesis.

2. **Blank-line compaction**: the result is split on line feeds, lines
   that are empty after stripping whitespace are dropped, and the rest are
   joined with ``\\n``.

Removal runs repeatedly until nothing matches (fixpoint), so text that
forms a new debug call once an inner one is cut out is removed as well.
This makes the whole transform idempotent:
``optimize(optimize(code)) == optimize(code)``.

Size Guarantee
--------------
Both steps only delete characters: kept lines are joined with at most as
many line feeds as originally separated them. The output is never longer
than the input.

Limitations
-----------
- Nested parentheses are not tracked: ``console.log(f(x));`` removes
  ``console.log(f(x)`` and leaves ``);``.
- A ``)`` inside a string argument ends the match early.
- Matches inside strings and comments are removed too.

These limitations are accepted to keep the transform simple and total:
it never raises, whatever the input.

Usage
-----
>>> from tsx_analyzer.optimizer import optimize_code
>>> optimize_code("const x = 1;\\nconsole.log(x);\\n")
'const x = 1;'

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from tsx_analyzer.errors import OptimizerError


logger = logging.getLogger(__name__)


DEFAULT_DEBUG_CALLEES: tuple[str, ...] = ("console.log",)


# =============================================================================
# Optimization Statistics
# =============================================================================

@dataclass
class OptimizationStats:
    """
    Statistics about one optimize() call.

    Attributes:
        removed_calls: Debug calls deleted (across all passes)
        removed_blank_lines: Blank lines dropped during compaction
        total_passes: Number of removal passes run
    """
    removed_calls: int = 0
    removed_blank_lines: int = 0
    total_passes: int = 0

    def __str__(self) -> str:
        """Human-readable summary of optimizations."""
        lines = ["Optimization Statistics:"]
        if self.removed_calls:
            lines.append(f"  Debug calls removed: {self.removed_calls}")
        if self.removed_blank_lines:
            lines.append(f"  Blank lines removed: {self.removed_blank_lines}")
        lines.append(f"  Total passes: {self.total_passes}")
        return "\n".join(lines)


# =============================================================================
# Pattern Construction
# =============================================================================

def build_debug_call_pattern(callees: Iterable[str]) -> re.Pattern:
    """
    Build the removal pattern for the given callee names.

    Args:
        callees: Dotted callee names such as "console.log"

    Returns:
        Compiled pattern matching ``callee(`` through the first ``)``
        and an optional ``;``

    Raises:
        OptimizerError: If no usable callee is given or compilation fails
    """
    names = [name.strip() for name in callees if name and name.strip()]
    if not names:
        raise OptimizerError(
            "no debug callees configured",
            hint="pass at least one name such as 'console.log'",
        )

    alternation = "|".join(re.escape(name) for name in names)
    try:
        return re.compile(rf"(?:{alternation})\(.*?\);?", re.DOTALL)
    except re.error as e:
        raise OptimizerError(f"cannot compile debug-call pattern: {e}") from e


# =============================================================================
# Optimizer
# =============================================================================

class DebugCallOptimizer:
    """
    Removes debug calls and compacts blank lines.

    Attributes:
        enabled: If False, optimize() returns the code unchanged
        callees: Callee names whose calls are removed
        stats: Statistics about the last optimize() call
    """

    def __init__(
        self,
        callees: Iterable[str] = DEFAULT_DEBUG_CALLEES,
        enabled: bool = True,
    ):
        self.callees = tuple(callees)
        self.enabled = enabled
        self.stats = OptimizationStats()

        self._pattern: Optional[re.Pattern]
        try:
            self._pattern = build_debug_call_pattern(self.callees)
        except OptimizerError as e:
            # Degrade to a no-op rather than failing requests
            logger.warning(f"Debug-call removal disabled: {e.message}")
            self._pattern = None

    def optimize(self, code: str) -> str:
        """
        Optimize source text.

        Args:
            code: Source text (any content, including malformed code)

        Returns:
            Optimized text, or the input unchanged if the optimizer is
            disabled or has no usable pattern
        """
        self.stats = OptimizationStats()

        if not self.enabled or self._pattern is None:
            return code

        result = self._remove_debug_calls(code)
        result = self._compact_blank_lines(result)

        logger.debug(
            f"Optimized {len(code)} -> {len(result)} chars"
            f" ({self.stats.removed_calls} calls, {self.stats.total_passes} passes)"
        )
        return result

    def _remove_debug_calls(self, code: str) -> str:
        # Every substitution deletes at least len("x()") characters, so the
        # loop always reaches a pass with no matches.
        while True:
            self.stats.total_passes += 1
            code, count = self._pattern.subn("", code)
            self.stats.removed_calls += count
            if count == 0:
                return code

    def _compact_blank_lines(self, code: str) -> str:
        lines = code.split("\n")
        kept = [line for line in lines if line.strip()]
        self.stats.removed_blank_lines += len(lines) - len(kept)
        return "\n".join(kept)


# =============================================================================
# Convenience Function
# =============================================================================

def optimize_code(
    code: str,
    callees: Iterable[str] = DEFAULT_DEBUG_CALLEES,
) -> str:
    """
    Strip debug calls from code with a fresh optimizer.

    Args:
        code: Source text
        callees: Callee names whose calls are removed

    Returns:
        Optimized text
    """
    return DebugCallOptimizer(callees).optimize(code)
