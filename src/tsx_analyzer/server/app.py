"""
TSX Analyzer HTTP Service
=========================

FastAPI application exposing the analysis pipeline.

Endpoints
---------
| Method  | Path       | Purpose                                  |
|---------|------------|------------------------------------------|
| POST    | /analyze   | Analyze ``{"code": "..."}``              |
| OPTIONS | /analyze   | Pre-flight no-op (200, empty body)       |
| GET     | /health    | Liveness probe                           |

Any other verb on /analyze answers 405. A body that is not JSON, or has
no string ``code`` field, answers 400.

Usage
-----
    $ tsxa serve --port 8080

    # Or programmatically
    app = create_app(AnalyzerConfig.from_env())
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tsx_analyzer import __version__
from tsx_analyzer.analyzer import Analyzer
from tsx_analyzer.config import AnalyzerConfig
from tsx_analyzer.metrics import memory_usage_report
from tsx_analyzer.server.schemas import AnalysisResponse, AnalyzeRequest


logger = logging.getLogger(__name__)

BAD_REQUEST_DETAIL = "Error decoding JSON request body"


def create_app(
    config: Optional[AnalyzerConfig] = None,
    analyzer: Optional[Analyzer] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Service configuration (default: from environment)
        analyzer: Pipeline to serve (default: built from config)
    """
    if config is None:
        config = AnalyzerConfig.from_env()
    if analyzer is None:
        analyzer = Analyzer.from_config(config)

    app = FastAPI(title="TSX Analyzer", version=__version__)
    app.state.analyzer = analyzer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": BAD_REQUEST_DETAIL},
        )

    @app.post(
        "/analyze",
        response_model=AnalysisResponse,
        response_model_exclude_none=True,
    )
    def analyze(body: AnalyzeRequest) -> AnalysisResponse:
        result = app.state.analyzer.analyze(body.code)
        return AnalysisResponse.from_result(result, memory_usage_report())

    @app.options("/analyze")
    def analyze_preflight() -> Response:
        return Response(status_code=status.HTTP_200_OK)

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "version": __version__}

    return app
