# =============================================================================
# test_validator.py - Source Validation Tests
# =============================================================================
# Tests for the Validator interface and the tree-sitter implementation.
#
# tree-sitter's error recovery decides exactly where ERROR and MISSING
# nodes land, so assertions on real diagnostics stick to what is stable:
# validity, the first issue's line and the message shape. Illegal
# characters in names are found by a separate walk, so those positions are
# exact.
# =============================================================================

import re

import pytest
from tsx_analyzer.classifier import ErrorCategory, classify
from tsx_analyzer.errors import ConfigError
from tsx_analyzer.validator import (
    DEFAULT_DIALECT,
    DIALECTS,
    TreeSitterValidator,
    ValidationIssue,
    ValidationOutcome,
    Validator,
)


MESSAGE_SHAPE = re.compile(r'^(Expected "|Invalid character "|Unexpected ")|^Unexpected end of input$')


@pytest.fixture(scope="module")
def validator():
    """Fixture: shared default-dialect validator."""
    return TreeSitterValidator()


# =============================================================================
# Outcome Tests
# =============================================================================

class TestValidationOutcome:
    """Test the outcome value type."""

    def test_success(self):
        """A successful outcome has no issues."""
        outcome = ValidationOutcome.success()
        assert outcome.valid
        assert outcome.issues == ()
        assert outcome.first_issue is None

    def test_failure_keeps_order(self):
        """The first issue given is the authoritative one."""
        first = ValidationIssue(2, 1, "Unexpected token")
        outcome = ValidationOutcome.failure(first, ValidationIssue(9, 1, "later"))
        assert not outcome.valid
        assert outcome.first_issue == first

    def test_validator_is_abstract(self):
        """The interface cannot be instantiated."""
        with pytest.raises(TypeError):
            Validator()


# =============================================================================
# tree-sitter Validator Tests
# =============================================================================

class TestTreeSitterValid:
    """Test code the parser accepts."""

    def test_empty_input(self, validator):
        """Empty input is a valid program."""
        assert validator.parse("").valid

    def test_statement_with_debug_call(self, validator):
        """Plain JavaScript is accepted."""
        assert validator.parse("const x = 1;\nconsole.log(x);\n").valid

    def test_tsx_component(self, validator, component):
        """TypeScript annotations and JSX are accepted together."""
        assert validator.parse(component).valid

    def test_arrow_and_template(self, validator):
        """Arrow functions and templates are accepted."""
        assert validator.parse("const greet = (n) => `hi ${n}`;").valid

    def test_typescript_dialect(self):
        """The typescript dialect accepts annotated code."""
        assert TreeSitterValidator("typescript").parse("let n: number = 1;").valid


class TestTreeSitterInvalid:
    """Test code the parser rejects."""

    def test_unclosed_parameter_list(self, validator):
        """An unclosed parameter list is reported on line 1."""
        outcome = validator.parse("function f( {")
        assert not outcome.valid
        assert outcome.first_issue.line == 1
        assert outcome.first_issue.column >= 1

    def test_error_after_valid_lines(self, validator):
        """Errors are never reported on preceding valid lines."""
        outcome = validator.parse("const a = 1;\nconst b = 2;\nfunction f( {")
        assert not outcome.valid
        assert outcome.first_issue.line >= 3

    def test_message_shape(self, validator):
        """Messages follow the Expected / Invalid character / Unexpected forms."""
        outcome = validator.parse("function f( {")
        for issue in outcome.issues:
            assert MESSAGE_SHAPE.match(issue.message), issue.message

    def test_issues_in_document_order(self, validator):
        """Issues are ordered by position."""
        outcome = validator.parse("let = ;\nlet = ;\n")
        assert not outcome.valid
        positions = [(issue.line, issue.column) for issue in outcome.issues]
        assert positions == sorted(positions)


class TestDialects:
    """Test dialect selection."""

    def test_default_dialect(self):
        """TSX is the default."""
        assert DEFAULT_DIALECT == "tsx"
        assert TreeSitterValidator().dialect == "tsx"

    def test_known_dialects(self):
        """Both grammars are available."""
        assert set(DIALECTS) == {"tsx", "typescript"}

    def test_unknown_dialect(self):
        """An unknown dialect is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            TreeSitterValidator("coffeescript")
        assert "unknown dialect" in str(exc_info.value)


class TestMessages:
    """Test the wording of synthesized messages."""

    def test_missing_name_is_readable(self, validator):
        """A missing type name is reported without the grammar symbol."""
        outcome = validator.parse("type Foo = ;")
        assert not outcome.valid
        message = outcome.first_issue.message
        assert "_identifier" not in message
        assert classify(message) == ErrorCategory.SYNTACTIC

    def test_offending_token_quoted(self, validator):
        """The token the parser stopped at is quoted, not the statement start."""
        message = validator.parse("function f( {").first_issue.message
        assert "function" not in message
        assert re.fullmatch(r'(Expected|Unexpected) "[(){}]"', message), message


class TestIllegalCharacters:
    """Test characters the grammar lets into names."""

    def test_currency_sign(self, validator):
        """A lone symbol where a name is expected is an invalid character."""
        outcome = validator.parse("const x = ¤;")
        assert not outcome.valid
        assert outcome.first_issue == ValidationIssue(1, 11, 'Invalid character "¤"')

    @pytest.mark.parametrize("source,char", [
        ("let x = a§b;", "§"),
        ("function f() {\n  return ¶;\n}", "¶"),
    ])
    def test_inside_or_after_names(self, validator, source, char):
        """The first illegal character is reported wherever it sits in a name."""
        outcome = validator.parse(source)
        assert not outcome.valid
        assert outcome.first_issue.message == f'Invalid character "{char}"'

    def test_reported_on_its_line(self, validator):
        """Earlier valid lines do not take the diagnostic."""
        outcome = validator.parse("const a = 1;\nconst b = ¤;")
        assert outcome.first_issue.line == 2
        assert outcome.first_issue.column == 11

    def test_unicode_names_accepted(self, validator):
        """Letters, marks and digits from any script are legal in names."""
        assert validator.parse("const café = 1;\nconst π = 3.14;\nconst $_a1 = 2;").valid

    def test_private_field_accepted(self, validator):
        """The leading '#' of a private name is not checked as a name character."""
        assert validator.parse("class A {\n  #count = 0;\n}").valid
