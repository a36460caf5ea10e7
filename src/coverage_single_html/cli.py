"""CLI interface for coverage-single-html."""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from typer.core import TyperCommand

from coverage_single_html import __version__
from coverage_single_html.builder.bundle import bundle_coverage
from coverage_single_html.builder.output import format_size, write_report
from coverage_single_html.ingest.collector import ReportInputError
from coverage_single_html.model.report import INDEX_PAGE, BundleOptions
from coverage_single_html.ui.progress import ProgressReporter

PROG_NAME = "coverage-single-html"
DEFAULT_OUTPUT = Path("coverage-report.html")

EPILOG = (
    "Examples:\n\n"
    "  coverage-single-html coverage/merged -o report.html\n\n"
    "  coverage-single-html coverage/lcov-report\n\n"
    '  coverage-single-html coverage -t "My Project Coverage" -o coverage.html'
)


# typer.BadParameter derives from the UsageError of the click implementation
# typer runs on, whether that is click itself or the copy bundled with typer.
UsageError: type[Exception] = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"
)


class BundleCommand(TyperCommand):
    """Command whose usage errors exit with status 1."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        ctx.meta["empty_argv"] = not args
        try:
            return super().parse_args(ctx, args)
        except UsageError as exc:
            exc.exit_code = 1  # type: ignore[attr-defined]
            raise


app = typer.Typer(
    name=PROG_NAME,
    help="Convert coverage HTML reports to a single file.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING

    class CleanFormatter(logging.Formatter):
        def format(self, record: logging.LogRecord) -> str:
            if record.levelno >= logging.WARNING:
                return f"{record.levelname}: {record.getMessage()}"
            return record.getMessage()

    handler = logging.StreamHandler()
    handler.setFormatter(CleanFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"{PROG_NAME} v{__version__}")
        raise typer.Exit()


def _fail(message: str, *hints: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    for hint in hints:
        typer.echo(hint, err=True)
    raise typer.Exit(1)


@app.command(cls=BundleCommand, epilog=EPILOG)
def bundle(
    ctx: typer.Context,
    input_dir: Annotated[
        Path | None,
        typer.Argument(
            help=(
                "Directory containing an Istanbul/Vitest HTML coverage report "
                "(should contain index.html, base.css, etc.)"
            ),
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path,
        typer.Option("-o", "--output", help="Output file path"),
    ] = DEFAULT_OUTPUT,
    title: Annotated[
        str | None,
        typer.Option("-t", "--title", help="Custom title for the report"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug details to stderr"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "-v",
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    Bundle all HTML pages, CSS, JS and images of a coverage report into a
    single self-contained HTML file that opens directly in a browser.
    """
    if input_dir is None:
        if not ctx.meta.get("empty_argv", False):
            _fail("Input directory is required")
        typer.echo(ctx.get_help())
        raise typer.Exit()

    setup_logging(verbose)

    resolved_input = input_dir.resolve()
    if not resolved_input.is_dir():
        _fail(f"Input directory not found: {resolved_input}")
    if not (resolved_input / INDEX_PAGE).is_file():
        _fail(
            f"No index.html found in {resolved_input}",
            "Make sure this is an Istanbul/Vitest HTML coverage report directory",
        )

    output_file = output.resolve()
    typer.echo(f"Bundling coverage report from: {resolved_input}")

    try:
        with ProgressReporter() as pr:
            result = bundle_coverage(
                BundleOptions(input_dir=resolved_input, title=title or None),
                on_progress=pr.emit,
            )
        write_report(output_file, result.html)
    except (ReportInputError, OSError) as exc:
        typer.echo(f"Error bundling coverage: {exc}", err=True)
        raise typer.Exit(1) from exc

    typer.echo("\nSuccess!")
    typer.echo(f"  Files bundled: {result.file_count}")
    typer.echo(f"  Output size: {format_size(result.total_size)}")
    typer.echo(f"  Output: {output_file}")


def run() -> None:
    """Console script entry point."""
    app(prog_name=PROG_NAME)


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    run()
