# =============================================================================
# test_server.py - HTTP Service Tests
# =============================================================================
# Tests for the FastAPI application: the /analyze contract, the camelCase
# wire format, transport errors, CORS and the health probe.
# =============================================================================

import re

import pytest
from fastapi.testclient import TestClient

from tsx_analyzer import __version__
from tsx_analyzer.analyzer import Analyzer
from tsx_analyzer.config import AnalyzerConfig
from tsx_analyzer.server import create_app
from tsx_analyzer.server.app import BAD_REQUEST_DETAIL
from tsx_analyzer.validator import ValidationIssue


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client(accepting_validator):
    """Fixture: client for a service whose validator accepts everything."""
    app = create_app(AnalyzerConfig(), analyzer=Analyzer(accepting_validator))
    return TestClient(app)


@pytest.fixture
def rejecting_client(make_validator):
    """Fixture: client for a service whose validator rejects everything."""
    validator = make_validator(ValidationIssue(4, 2, "Unexpected token"))
    app = create_app(AnalyzerConfig(), analyzer=Analyzer(validator))
    return TestClient(app)


# =============================================================================
# Valid Response Tests
# =============================================================================

class TestAnalyzeValid:
    """Test responses for accepted code."""

    def test_valid_response_fields(self, client):
        """Valid code returns tokens, optimized code and sizes."""
        code = "const x = 1;\nconsole.log(x);\n"
        response = client.post("/analyze", json={"code": code})
        assert response.status_code == 200

        body = response.json()
        assert body["isValid"] is True
        assert body["message"] == "Analysis and optimization completed"
        assert body["optimizedCode"] == "const x = 1;"
        assert body["originalSize"] == len(code)
        assert body["optimizedSize"] == 12
        assert body["reductionPercentage"] == pytest.approx((len(code) - 12) / len(code) * 100)
        assert re.fullmatch(r"\d+\.\d{2} MB", body["serverMemoryUsage"])

    def test_error_fields_absent(self, client):
        """Error fields are omitted for valid code."""
        body = client.post("/analyze", json={"code": "x"}).json()
        assert "errorDetail" not in body
        assert "errorType" not in body

    def test_token_wire_form(self, client):
        """Tokens are serialized as line/type/value."""
        body = client.post("/analyze", json={"code": "const a = 1;"}).json()
        assert body["tokens"][0] == {"line": 1, "type": "CONST_KEYWORD", "value": "const"}
        assert [t["value"] for t in body["tokens"]] == ["const", "a", "=", "1", ";"]

    def test_empty_code(self, client):
        """Empty code is a valid request with zero reduction."""
        body = client.post("/analyze", json={"code": ""}).json()
        assert body["isValid"] is True
        assert body["tokens"] == []
        assert body["optimizedCode"] == ""
        assert body["reductionPercentage"] == 0

    def test_extra_fields_ignored(self, client):
        """Unknown request fields do not cause an error."""
        response = client.post("/analyze", json={"code": "x", "language": "tsx"})
        assert response.status_code == 200


# =============================================================================
# Invalid Response Tests
# =============================================================================

class TestAnalyzeInvalid:
    """Test responses for rejected code."""

    def test_invalid_response_fields(self, rejecting_client):
        """Invalid code returns a categorized diagnostic."""
        response = rejecting_client.post("/analyze", json={"code": "x"})
        assert response.status_code == 200

        body = response.json()
        assert body["isValid"] is False
        assert body["message"] == "An error was found in the code"
        assert body["errorDetail"] == "Line 4: Unexpected token"
        assert body["errorType"] == "SYNTACTIC"
        assert "serverMemoryUsage" in body

    def test_valid_fields_absent(self, rejecting_client):
        """Token and size fields are omitted for invalid code."""
        body = rejecting_client.post("/analyze", json={"code": "x"}).json()
        for key in ("tokens", "optimizedCode", "originalSize", "optimizedSize", "reductionPercentage"):
            assert key not in body


# =============================================================================
# Transport Tests
# =============================================================================

class TestTransport:
    """Test verbs and malformed bodies."""

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_other_verbs_not_allowed(self, client, method):
        """Only POST and OPTIONS are served on /analyze."""
        response = client.request(method, "/analyze")
        assert response.status_code == 405

    def test_options_preflight_noop(self, client):
        """A bare OPTIONS request succeeds with an empty body."""
        response = client.options("/analyze")
        assert response.status_code == 200
        assert response.content == b""

    def test_body_not_json(self, client):
        """A body that is not JSON is a bad request."""
        response = client.post(
            "/analyze",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"detail": BAD_REQUEST_DETAIL}

    @pytest.mark.parametrize("payload", [{}, {"code": 42}, {"code": None}, ["code"]])
    def test_missing_or_wrong_code(self, client, payload):
        """A body without a string 'code' is a bad request."""
        response = client.post("/analyze", json=payload)
        assert response.status_code == 400


# =============================================================================
# CORS Tests
# =============================================================================

class TestCors:
    """Test the cross-origin policy."""

    def test_preflight(self, client):
        """A browser pre-flight is answered for any origin."""
        response = client.options(
            "/analyze",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_simple_request(self, client):
        """Responses to cross-origin POSTs carry the allow-origin header."""
        response = client.post(
            "/analyze",
            json={"code": "x"},
            headers={"Origin": "http://example.com"},
        )
        assert response.headers["access-control-allow-origin"] == "*"

    def test_restricted_origins(self, accepting_validator):
        """Configured origins replace the wildcard."""
        config = AnalyzerConfig(cors_origins=["http://allowed.test"])
        client = TestClient(create_app(config, analyzer=Analyzer(accepting_validator)))
        response = client.post(
            "/analyze",
            json={"code": "x"},
            headers={"Origin": "http://other.test"},
        )
        assert "access-control-allow-origin" not in response.headers


# =============================================================================
# Health and End-to-End Tests
# =============================================================================

class TestHealth:
    """Test the liveness probe."""

    def test_health(self, client):
        """The probe reports the package version."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True, "version": __version__}


class TestRealValidator:
    """Test the service with the tree-sitter validator."""

    def test_invalid_code(self):
        """An unclosed parameter list is a SYNTACTIC error on line 1."""
        client = TestClient(create_app(AnalyzerConfig()))
        body = client.post("/analyze", json={"code": "function f( {"}).json()
        assert body["isValid"] is False
        assert body["errorType"] == "SYNTACTIC"
        assert body["errorDetail"].startswith("Line 1: ")
