"""
tsxa - TSX Analyzer Command-Line Interface
==========================================

Run the analysis pipeline on files from the terminal, or start the HTTP
service.

Usage Examples
--------------
Analyze a snippet:
    $ tsxa analyze page.tsx

Same, as the JSON the service would return:
    $ tsxa analyze --json page.tsx

Show tokens with the coarse classifier:
    $ tsxa tokens --coarse page.tsx

Strip debug calls into a new file:
    $ tsxa optimize page.tsx -o page.min.tsx

Start the service:
    $ tsxa serve --port 8080

FILE may be ``-`` to read standard input.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from tsx_analyzer import __version__
from tsx_analyzer.analyzer import Analyzer, InvalidResult
from tsx_analyzer.cli.errors import ExitCode, handle_cli_exception
from tsx_analyzer.config import AnalyzerConfig, configure_logging
from tsx_analyzer.lexer import TOKENIZERS
from tsx_analyzer.metrics import memory_usage_report
from tsx_analyzer.optimizer import DebugCallOptimizer
from tsx_analyzer.validator import DIALECTS


SOURCE_FILE = click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path)


def _read_source(path: Path) -> str:
    """Read a source file, or standard input for '-'."""
    if str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _display_name(path: Path) -> str:
    return "<stdin>" if str(path) == "-" else str(path)


def _load_config(
    tokenizer: Optional[str] = None,
    dialect: Optional[str] = None,
    verbose: bool = False,
) -> AnalyzerConfig:
    """Environment configuration with command-line overrides applied."""
    config = AnalyzerConfig.from_env()
    if tokenizer:
        config.tokenizer = tokenizer
    if dialect:
        config.dialect = dialect
    if verbose:
        config.log_level = "DEBUG"
    config.validate()
    configure_logging(config.log_level)
    return config


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="tsxa")
def main() -> None:
    """
    TSX Analyzer: validate, tokenize and strip debug calls from
    JavaScript, TypeScript and JSX snippets.

    \b
    Commands:
      analyze   Validate a file and report tokens and size reduction
      tokens    Print the token stream of a file
      optimize  Write a file with debug calls removed
      serve     Run the HTTP service

    \b
    Examples:
      tsxa analyze page.tsx
      tsxa tokens --coarse page.tsx
      tsxa optimize page.tsx -o page.min.tsx
      tsxa serve --port 8080
    """
    pass


# =============================================================================
# Analyze Command
# =============================================================================

@main.command("analyze")
@click.argument("input_file", type=SOURCE_FILE)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the service JSON response instead of a summary",
)
@click.option(
    "-t", "--tokenizer",
    type=click.Choice(list(TOKENIZERS)),
    default=None,
    help="Tokenizer design (default: lexer, or TSX_ANALYZER_TOKENIZER)",
)
@click.option(
    "-d", "--dialect",
    type=click.Choice(list(DIALECTS)),
    default=None,
    help="Validator grammar (default: tsx, or TSX_ANALYZER_DIALECT)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def cmd_analyze(
    input_file: Path,
    as_json: bool,
    tokenizer: Optional[str],
    dialect: Optional[str],
    verbose: bool,
) -> None:
    """
    Validate INPUT_FILE and report the analysis.

    Exits with status 1 when the code is invalid.
    """
    try:
        config = _load_config(tokenizer, dialect, verbose)
        source = _read_source(input_file)
        result = Analyzer.from_config(config).analyze(source)

        if as_json:
            from tsx_analyzer.server.schemas import AnalysisResponse
            response = AnalysisResponse.from_result(result, memory_usage_report())
            click.echo(response.model_dump_json(by_alias=True, exclude_none=True, indent=2))
        elif isinstance(result, InvalidResult):
            diagnostic = result.diagnostic
            column = f":{diagnostic.column}" if diagnostic.column else ""
            click.echo(
                f"{_display_name(input_file)}:{diagnostic.line}{column}: "
                f"{diagnostic.category.value.lower()} error: {diagnostic.message}",
                err=True,
            )
        else:
            metrics = result.metrics
            click.echo(f"{_display_name(input_file)}: valid")
            click.echo(f"  Tokens: {len(result.tokens)}")
            click.echo(
                f"  Size: {metrics.original_size} -> {metrics.optimized_size} chars"
                f" ({metrics.reduction_percent:.2f}% smaller)"
            )

        if isinstance(result, InvalidResult):
            sys.exit(ExitCode.ANALYSIS_FAILED)

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Tokens Command
# =============================================================================

@main.command("tokens")
@click.argument("input_file", type=SOURCE_FILE)
@click.option(
    "--coarse",
    is_flag=True,
    help="Use the coarse classifier instead of the full lexer",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def cmd_tokens(input_file: Path, coarse: bool, verbose: bool) -> None:
    """
    Print the token stream of INPUT_FILE without validating it.

    \b
    Output columns:
      LINE  KIND  VALUE
    """
    try:
        config = _load_config("coarse" if coarse else None, verbose=verbose)
        source = _read_source(input_file)
        tokens = Analyzer.from_config(config).tokenize(source)

        width = max((len(t.kind.value) for t in tokens), default=4)
        click.echo(f"{'LINE':>5}  {'KIND':<{width}}  VALUE")
        for token in tokens:
            click.echo(f"{token.line:>5}  {token.kind.value:<{width}}  {token.text!r}")

        if verbose:
            click.echo(f"\n{len(tokens)} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Optimize Command
# =============================================================================

@main.command("optimize")
@click.argument("input_file", type=SOURCE_FILE)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: print to stdout)",
)
@click.option("-v", "--verbose", is_flag=True, help="Print optimization statistics")
def cmd_optimize(input_file: Path, output: Optional[Path], verbose: bool) -> None:
    """
    Remove debug calls from INPUT_FILE.

    The code is not validated first; the transform is purely textual.
    """
    try:
        config = _load_config(verbose=verbose)
        source = _read_source(input_file)

        optimizer = DebugCallOptimizer(config.debug_callees)
        optimized = optimizer.optimize(source)

        if output is None:
            click.echo(optimized)
        else:
            output.write_text(optimized, encoding="utf-8")
            click.echo(
                f"Optimized {_display_name(input_file)} -> {output}"
                f" ({len(source)} -> {len(optimized)} chars)",
                err=True,
            )

        if verbose:
            click.echo(str(optimizer.stats), err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Serve Command
# =============================================================================

@main.command("serve")
@click.option("--host", default=None, help="Bind address (default: 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Port (default: 8080)")
@click.option("--reload", is_flag=True, help="Restart on code changes (development)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def cmd_serve(
    host: Optional[str],
    port: Optional[int],
    reload: bool,
    verbose: bool,
) -> None:
    """
    Run the HTTP service.

    Pipeline settings come from TSX_ANALYZER_* environment variables.
    """
    import uvicorn

    try:
        config = _load_config(verbose=verbose)
        if host:
            config.host = host
        if port is not None:
            config.port = port
        config.validate()

        click.echo(f"TSX Analyzer {__version__} listening on http://{config.host}:{config.port}")

        if reload:
            # The reloader needs an import string; workers rebuild config from env
            uvicorn.run(
                "tsx_analyzer.server:create_app",
                factory=True,
                host=config.host,
                port=config.port,
                reload=True,
                log_level=config.log_level.lower(),
            )
        else:
            from tsx_analyzer.server import create_app
            uvicorn.run(
                create_app(config),
                host=config.host,
                port=config.port,
                log_level=config.log_level.lower(),
            )

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
