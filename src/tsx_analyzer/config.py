"""
TSX Analyzer - Configuration
============================

Service and pipeline configuration. Values come from:
- Default values (defined here)
- Environment variables (``AnalyzerConfig.from_env()``)
- Command-line options (applied by the CLI on top of the above)

Environment Variables
---------------------
| Variable                     | Field          | Default       |
|------------------------------|----------------|---------------|
| TSX_ANALYZER_HOST            | host           | 127.0.0.1     |
| TSX_ANALYZER_PORT            | port           | 8080          |
| TSX_ANALYZER_TOKENIZER       | tokenizer      | lexer         |
| TSX_ANALYZER_DIALECT         | dialect        | tsx           |
| TSX_ANALYZER_DEBUG_CALLEES   | debug_callees  | console.log   |
| TSX_ANALYZER_CORS_ORIGINS    | cors_origins   | *             |
| TSX_ANALYZER_LOG_LEVEL       | log_level      | INFO          |

List values are comma separated.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List

from tsx_analyzer.errors import ConfigError
from tsx_analyzer.lexer import TOKENIZERS, DEFAULT_TOKENIZER
from tsx_analyzer.optimizer import DEFAULT_DEBUG_CALLEES
from tsx_analyzer.validator import DIALECTS, DEFAULT_DIALECT


logger = logging.getLogger(__name__)

ENV_PREFIX = "TSX_ANALYZER_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class AnalyzerConfig:
    """
    Configuration for the analysis pipeline and HTTP service.

    Attributes:
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        tokenizer: Tokenizer design, "lexer" or "coarse"
        dialect: Validator grammar, "tsx" or "typescript"
        debug_callees: Callee names stripped by the optimizer
        cors_origins: Origins allowed to call the service
        log_level: Root logging level name
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════

    host: str = "127.0.0.1"
    port: int = 8080
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # ═══════════════════════════════════════════════════════════════════════════
    # PIPELINE
    # ═══════════════════════════════════════════════════════════════════════════

    tokenizer: str = DEFAULT_TOKENIZER
    dialect: str = DEFAULT_DIALECT
    debug_callees: List[str] = field(
        default_factory=lambda: list(DEFAULT_DEBUG_CALLEES)
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # LOGGING
    # ═══════════════════════════════════════════════════════════════════════════

    log_level: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """
        Create AnalyzerConfig from environment variables.

        Unparseable numbers are ignored (the default is kept) with a
        warning. Unknown choices are caught later by validate().
        """
        config = cls()

        if host := os.environ.get(f"{ENV_PREFIX}HOST"):
            config.host = host

        if port := os.environ.get(f"{ENV_PREFIX}PORT"):
            try:
                config.port = int(port)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_PREFIX}PORT={port!r}")

        if tokenizer := os.environ.get(f"{ENV_PREFIX}TOKENIZER"):
            config.tokenizer = tokenizer.strip().lower()

        if dialect := os.environ.get(f"{ENV_PREFIX}DIALECT"):
            config.dialect = dialect.strip().lower()

        if callees := os.environ.get(f"{ENV_PREFIX}DEBUG_CALLEES"):
            config.debug_callees = _split_list(callees)

        if origins := os.environ.get(f"{ENV_PREFIX}CORS_ORIGINS"):
            config.cors_origins = _split_list(origins)

        if level := os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
            config.log_level = level.strip().upper()

        return config

    def validate(self) -> "AnalyzerConfig":
        """
        Check choice fields.

        Returns:
            self, for chaining

        Raises:
            ConfigError: On an unknown tokenizer, dialect or log level,
                         or a port outside 1-65535
        """
        if self.tokenizer not in TOKENIZERS:
            raise ConfigError(
                f"unknown tokenizer '{self.tokenizer}'",
                hint=f"choose from: {', '.join(TOKENIZERS)}",
            )
        if self.dialect not in DIALECTS:
            raise ConfigError(
                f"unknown dialect '{self.dialect}'",
                hint=f"choose from: {', '.join(DIALECTS)}",
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"unknown log level '{self.log_level}'",
                hint=f"choose from: {', '.join(LOG_LEVELS)}",
            )
        if not 0 < self.port < 65536:
            raise ConfigError(f"port {self.port} out of range 1-65535")
        return self


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the command-line tools and server."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
