"""
Command-line interface for Magazine Scan Combiner.
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn, TimeRemainingColumn

from scan_combiner import __version__
from scan_combiner.exceptions import CreateFailedError, OpenFailedError
from scan_combiner.operation import CombineOperation
from scan_combiner.types import OperationState
from scan_combiner.utils import abbreviate_with_tilde, ensure_path, get_logger, reachable_file

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

ARGUMENTS_METAVAR = "FRONT_PAGES_PDF REVERSED_BACK_PAGES_PDF OUTPUT_PDF"

EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_CANCELED = 130


def _error(message):
    err_console.print(f"[bold red]✗[/bold red] {escape(message)}", soft_wrap=True)


def _run_with_progress(operation, show_progress):
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=err_console,
        transient=True,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("Combining pages", total=None)

        def update_progress(current, total):
            progress.update(task, completed=current, total=total)

        operation.progress.add_observer(update_progress)
        future = operation.start_in_background()
        try:
            return future.result()
        except KeyboardInterrupt:
            operation.cancel()
            return future.result()


@click.command(name="scancombine")
@click.argument("paths", nargs=-1, metavar=ARGUMENTS_METAVAR)
@click.option("--verbose", "-v", is_flag=True, help="Log progress details to stderr")
@click.option("--quiet", "-q", is_flag=True, help="Do not display a progress bar")
@click.option(
    "--no-metadata",
    is_flag=True,
    help="Do not copy title/author metadata from the front pages PDF",
)
@click.version_option(version=__version__, prog_name="scancombine")
@click.pass_context
def cli(ctx, paths, verbose, quiet, no_metadata):
    """
    Combine a front pages PDF and a reversed back pages PDF into one PDF.

    The back pages are expected in the order a sheet feeder produces after the
    stack is flipped, i.e. last sheet first. Output pages alternate between
    the two scans.

    Example:

        scancombine fronts.pdf backs.pdf ~/Magazines/issue-42.pdf
    """
    if len(paths) != 3:
        err_console.print(f"Usage: {ctx.info_name} {ARGUMENTS_METAVAR}", soft_wrap=True, markup=False)
        sys.exit(EXIT_FAILURE)

    if verbose:
        get_logger("scancombine", logging.DEBUG)

    front_arg, back_arg, output_arg = paths

    front_path = reachable_file(front_arg)
    if front_path is None:
        _error(f"Could not open front pages PDF {front_arg}")
        sys.exit(EXIT_BAD_INPUT)

    back_path = reachable_file(back_arg)
    if back_path is None:
        _error(f"Could not open reversed back pages PDF {back_arg}")
        sys.exit(EXIT_BAD_INPUT)

    output_path = ensure_path(output_arg)

    operation = CombineOperation(front_path, back_path, output_path, copy_metadata=not no_metadata)
    try:
        result = _run_with_progress(operation, show_progress=not quiet)
    except Exception as e:
        _error(f"Error: {e}")
        sys.exit(EXIT_FAILURE)

    if result.state is OperationState.SUCCEEDED:
        location = escape(abbreviate_with_tilde(output_path))
        console.print(
            f"[bold green]✓[/bold green] Successfully combined PDFs and saved output to {location}.",
            soft_wrap=True,
        )
        sys.exit(0)

    if result.state is OperationState.CANCELED:
        _error("Canceled.")
        sys.exit(EXIT_CANCELED)

    error = result.error
    if isinstance(error, OpenFailedError):
        _error(f"Could not open input PDF {abbreviate_with_tilde(error.location)}.")
    elif isinstance(error, CreateFailedError):
        _error(f"Could not create output PDF {abbreviate_with_tilde(error.location)}.")
    else:
        _error(f"Error: {error}")
    sys.exit(EXIT_FAILURE)


if __name__ == '__main__':
    cli()
