"""
TSX Analyzer - Test Configuration
=================================

Shared pytest fixtures:
- A scripted validator, so pipeline and service tests do not depend on
  the exact diagnostics tree-sitter produces
- Sample snippets used across test modules

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from tsx_analyzer.errors import ValidatorError
from tsx_analyzer.validator import ValidationIssue, ValidationOutcome, Validator


# ═══════════════════════════════════════════════════════════════════════════════
# FAKE VALIDATORS
# ═══════════════════════════════════════════════════════════════════════════════


class FakeValidator(Validator):
    """
    Validator returning a fixed outcome and recording what it was asked.

    With no issues every input is valid; otherwise every input fails with
    the given issues.
    """

    def __init__(self, *issues: ValidationIssue):
        self.issues = issues
        self.calls: list[str] = []

    def parse(self, code: str) -> ValidationOutcome:
        self.calls.append(code)
        if self.issues:
            return ValidationOutcome.failure(*self.issues)
        return ValidationOutcome.success()


class BrokenValidator(Validator):
    """Validator whose underlying parser cannot run."""

    def parse(self, code: str) -> ValidationOutcome:
        raise ValidatorError("parser library not loaded")


@pytest.fixture
def make_validator():
    """Fixture: the FakeValidator class, for tests that script their own issues."""
    return FakeValidator


@pytest.fixture
def accepting_validator() -> FakeValidator:
    """Fixture: validator that accepts everything."""
    return FakeValidator()


@pytest.fixture
def rejecting_validator() -> FakeValidator:
    """Fixture: validator that rejects everything with two issues."""
    return FakeValidator(
        ValidationIssue(3, 7, "Invalid character '@'"),
        ValidationIssue(5, 1, "Unexpected token"),
    )


@pytest.fixture
def broken_validator() -> BrokenValidator:
    """Fixture: validator that raises ValidatorError."""
    return BrokenValidator()


# ═══════════════════════════════════════════════════════════════════════════════
# SAMPLE SNIPPETS
# ═══════════════════════════════════════════════════════════════════════════════


MULTILINE_DEBUG = (
    "const a = 1;\n"
    "console.log(\n"
    "  a,\n"
    "  b\n"
    ");\n"
    "const b = 2;\n"
)

COMPONENT = (
    "import React from 'react';\n"
    "\n"
    "export default function App({ name }: { name: string }) {\n"
    "  console.log(name);\n"
    "  return <div className=\"greeting\">Hello</div>;\n"
    "}\n"
)


@pytest.fixture
def multiline_debug() -> str:
    """Fixture: a multi-line console.log between two statements."""
    return MULTILINE_DEBUG


@pytest.fixture
def component() -> str:
    """Fixture: a small TSX component with one debug call."""
    return COMPONENT
