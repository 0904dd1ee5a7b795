# =============================================================================
# test_analyzer.py - Analysis Pipeline Tests
# =============================================================================
# Tests for analyze(): validation gating, classification of the first
# diagnostic, and the valid-path optimizer / tokenizer / metrics results.
#
# Most tests use the scripted validators from conftest.py; the end-to-end
# class at the bottom runs the real tree-sitter validator.
# =============================================================================

import pytest
from tsx_analyzer.analyzer import (
    INVALID_MESSAGE,
    VALID_MESSAGE,
    Analyzer,
    Diagnostic,
    InvalidResult,
    ValidResult,
    analyze,
)
from tsx_analyzer.classifier import ErrorCategory
from tsx_analyzer.config import AnalyzerConfig
from tsx_analyzer.errors import ConfigError
from tsx_analyzer.lexer import TokenKind
from tsx_analyzer.validator import ValidationIssue


# =============================================================================
# Invalid Code Tests
# =============================================================================

class TestInvalidCode:
    """Test the rejected-code path."""

    def test_first_issue_is_authoritative(self, rejecting_validator):
        """Only the first validator issue is reported."""
        result = Analyzer(rejecting_validator).analyze("x @ y")
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.line == 3
        assert result.diagnostic.message == "Invalid character '@'"

    def test_first_issue_is_classified(self, rejecting_validator):
        """The diagnostic carries the classifier verdict."""
        result = Analyzer(rejecting_validator).analyze("x @ y")
        assert result.diagnostic.category == ErrorCategory.LEXICAL

    def test_detail_format(self, rejecting_validator):
        """The display form is 'Line {n}: {message}'."""
        result = Analyzer(rejecting_validator).analyze("x @ y")
        assert result.diagnostic.detail == "Line 3: Invalid character '@'"

    def test_result_flags(self, rejecting_validator):
        """Invalid results carry the fixed message."""
        result = Analyzer(rejecting_validator).analyze("x")
        assert result.is_valid is False
        assert result.message == INVALID_MESSAGE

    def test_broken_validator_contained(self, broken_validator, caplog):
        """A validator that cannot run yields a SYNTACTIC line-1 diagnostic."""
        result = Analyzer(broken_validator).analyze("x")
        assert isinstance(result, InvalidResult)
        assert result.diagnostic.line == 1
        assert result.diagnostic.category == ErrorCategory.SYNTACTIC
        assert "parser library not loaded" in result.diagnostic.message
        assert "Validator could not run" in caplog.text

    def test_line_clamped_to_one(self):
        """A validator reporting line 0 still yields a 1-based line."""
        diagnostic = Diagnostic.from_issue(ValidationIssue(0, 1, "Unexpected token"))
        assert diagnostic.line == 1

    def test_semantic_message(self):
        """Type-system messages are SEMANTIC."""
        issue = ValidationIssue(1, 5, "Type 'string' is not assignable to type 'number'")
        assert Diagnostic.from_issue(issue).category == ErrorCategory.SEMANTIC


# =============================================================================
# Valid Code Tests
# =============================================================================

class TestValidCode:
    """Test the accepted-code path."""

    def test_optimized_text(self, accepting_validator):
        """Debug calls are stripped from valid code."""
        result = Analyzer(accepting_validator).analyze("const x = 1;\nconsole.log(x);\n")
        assert isinstance(result, ValidResult)
        assert result.optimized_text == "const x = 1;"

    def test_result_flags(self, accepting_validator):
        """Valid results carry the fixed message."""
        result = Analyzer(accepting_validator).analyze("x")
        assert result.is_valid is True
        assert result.message == VALID_MESSAGE

    def test_metrics(self, accepting_validator):
        """Metrics compare the original and optimized lengths."""
        code = "const x = 1;\nconsole.log(x);\n"
        result = Analyzer(accepting_validator).analyze(code)
        assert result.metrics.original_size == len(code)
        assert result.metrics.optimized_size == len("const x = 1;")
        expected = (len(code) - 12) / len(code) * 100
        assert result.metrics.reduction_percent == pytest.approx(expected)

    def test_tokens_from_original_text(self, accepting_validator):
        """The tokenizer sees the original code, debug calls included."""
        result = Analyzer(accepting_validator).analyze("console.log(x);")
        assert [t.text for t in result.tokens] == ["console", ".", "log", "(", "x", ")", ";"]
        assert result.optimized_text == ""

    def test_empty_code(self, accepting_validator):
        """Empty code has no tokens and no reduction."""
        result = Analyzer(accepting_validator).analyze("")
        assert result.tokens == ()
        assert result.optimized_text == ""
        assert result.metrics.original_size == 0
        assert result.metrics.reduction_percent == 0.0

    def test_multiline_debug_call(self, accepting_validator, multiline_debug):
        """A multi-line call between statements leaves no blank gap."""
        result = Analyzer(accepting_validator).analyze(multiline_debug)
        assert result.optimized_text == "const a = 1;\nconst b = 2;"

    def test_coarse_tokenizer(self, accepting_validator):
        """The coarse design can be selected."""
        result = Analyzer(accepting_validator, tokenizer="coarse").analyze("let a => b")
        assert [t.kind for t in result.tokens] == [
            TokenKind.KEYWORD,
            TokenKind.LITERAL,
            TokenKind.ARROW,
            TokenKind.LITERAL,
        ]

    def test_extra_debug_callees(self, accepting_validator):
        """Configured callees are stripped."""
        analyzer = Analyzer(accepting_validator, debug_callees=["console.debug"])
        result = analyzer.analyze("console.debug(1);\nconsole.log(2);")
        assert result.optimized_text == "console.log(2);"

    def test_validator_sees_original(self, accepting_validator):
        """The validator receives the code unchanged."""
        Analyzer(accepting_validator).analyze("let a;\n")
        assert accepting_validator.calls == ["let a;\n"]


# =============================================================================
# Construction Tests
# =============================================================================

class TestAnalyzerConstruction:
    """Test building analyzers."""

    def test_unknown_tokenizer(self, accepting_validator):
        """An unknown tokenizer design is rejected at construction."""
        with pytest.raises(ConfigError):
            Analyzer(accepting_validator, tokenizer="magic")

    def test_from_config(self, accepting_validator):
        """from_config copies pipeline settings."""
        config = AnalyzerConfig(tokenizer="coarse", debug_callees=["print"])
        analyzer = Analyzer.from_config(config, validator=accepting_validator)
        assert analyzer.tokenizer == "coarse"
        assert analyzer.debug_callees == ("print",)
        assert analyzer.validator is accepting_validator

    def test_from_config_validates(self, accepting_validator):
        """from_config rejects an invalid configuration."""
        with pytest.raises(ConfigError):
            Analyzer.from_config(AnalyzerConfig(dialect="cobol"), accepting_validator)


# =============================================================================
# End-to-End Tests
# =============================================================================

class TestEndToEnd:
    """Test analyze() with the real validator."""

    def test_valid_snippet(self):
        """The reference snippet is valid and loses its debug call."""
        result = analyze("const x = 1;\nconsole.log(x);\n")
        assert result.is_valid
        assert result.optimized_text == "const x = 1;"
        assert result.metrics.optimized_size <= result.metrics.original_size

    def test_empty_snippet(self):
        """Empty input is valid with nothing to report."""
        result = analyze("")
        assert result.is_valid
        assert result.tokens == ()
        assert result.metrics.reduction_percent == 0

    def test_invalid_snippet(self):
        """An unclosed parameter list is a SYNTACTIC error on line 1."""
        result = analyze("function f( {")
        assert not result.is_valid
        assert result.diagnostic.category == ErrorCategory.SYNTACTIC
        assert result.diagnostic.detail.startswith("Line 1: ")

    def test_component(self, component):
        """A TSX component is valid and tokenized in source order."""
        result = analyze(component)
        assert result.is_valid
        lines = [t.line for t in result.tokens]
        assert lines == sorted(lines)
        assert "console.log" not in result.optimized_text

    def test_illegal_character(self):
        """A symbol the grammar takes for a name is a LEXICAL error."""
        result = analyze("const x = ¤;")
        assert not result.is_valid
        assert result.diagnostic.category == ErrorCategory.LEXICAL
        assert result.diagnostic.detail == 'Line 1: Invalid character "¤"'

    def test_missing_type_name_is_syntactic(self):
        """A missing name after 'type Foo =' is not mistaken for a type error."""
        result = analyze("type Foo = ;")
        assert not result.is_valid
        assert result.diagnostic.category == ErrorCategory.SYNTACTIC

    def test_jsx_text_with_apostrophe(self):
        """Element text with an apostrophe does not cut the token stream short."""
        result = analyze("const v = <p>Don't stop</p>;\nconst w = 2;\n")
        assert result.is_valid
        assert [t.text for t in result.tokens][-5:] == ["const", "w", "=", "2", ";"]
        assert result.tokens[-1].line == 2
