"""Request and response models for the HTTP service."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tsx_analyzer.analyzer import AnalysisResult, InvalidResult
from tsx_analyzer.lexer import Token


class AnalyzeRequest(BaseModel):
    code: str


class TokenModel(BaseModel):
    line: int
    type: str
    value: str

    @classmethod
    def from_token(cls, token: Token) -> "TokenModel":
        return cls(**token.to_dict())


class AnalysisResponse(BaseModel):
    """
    Wire form of an AnalysisResult.

    Field names are camelCase on the wire. Error fields are present only
    for invalid code; token and size fields only for valid code.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    message: str
    error_detail: Optional[str] = None
    error_type: Optional[str] = None
    tokens: Optional[List[TokenModel]] = None
    optimized_code: Optional[str] = None
    original_size: Optional[int] = None
    optimized_size: Optional[int] = None
    reduction_percentage: Optional[float] = None
    server_memory_usage: str

    @classmethod
    def from_result(cls, result: AnalysisResult, memory_usage: str) -> "AnalysisResponse":
        if isinstance(result, InvalidResult):
            return cls(
                is_valid=False,
                message=result.message,
                error_detail=result.diagnostic.detail,
                error_type=result.diagnostic.category.value,
                server_memory_usage=memory_usage,
            )

        return cls(
            is_valid=True,
            message=result.message,
            tokens=[TokenModel.from_token(token) for token in result.tokens],
            optimized_code=result.optimized_text,
            original_size=result.metrics.original_size,
            optimized_size=result.metrics.optimized_size,
            reduction_percentage=result.metrics.reduction_percent,
            server_memory_usage=memory_usage,
        )
