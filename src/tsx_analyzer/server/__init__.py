"""
HTTP Service
============

FastAPI application factory and wire models. Run it with ``tsxa serve``
or any ASGI server:

    $ uvicorn --factory tsx_analyzer.server:create_app
"""

from tsx_analyzer.server.app import create_app
from tsx_analyzer.server.schemas import AnalysisResponse, AnalyzeRequest, TokenModel

__all__ = ["create_app", "AnalysisResponse", "AnalyzeRequest", "TokenModel"]
