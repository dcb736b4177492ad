"""Command-line interface for the post classifier.

Trains on one CSV file and scores another, using ``click`` for argument
handling and ``rich`` for errors and log output.

Usage::

    post-classifier train.csv test.csv
    post-classifier train.csv test.csv --debug

Exit codes: 0 on success, 1 for bad arguments, 2 if a file cannot be opened.
"""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import report
from .pipeline import PostClassifier

EXIT_USAGE = 1
EXIT_FILE_ERROR = 2

err_console = Console(stderr=True)


class _ClassifyCommand(click.Command):
    """Command that reports bad arguments with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, _positional_layout(ctx, args))
        except click.UsageError as exc:
            exc.exit_code = EXIT_USAGE
            raise

    def collect_usage_pieces(self, ctx: click.Context) -> list[str]:
        # options metavar goes last: TRAIN_FILE TEST_FILE [--debug]
        pieces = super().collect_usage_pieces(ctx)
        return pieces[1:] + pieces[:1]


def _positional_layout(ctx: click.Context, args: list[str]) -> list[str]:
    """Accept only ``TRAIN_FILE TEST_FILE [--debug]`` in that exact order.

    The file names are passed after ``--`` so names starting with a dash
    are not read as options.
    """
    if len(args) not in (2, 3) or (len(args) == 3 and args[2] != "--debug"):
        raise click.UsageError("expected TRAIN_FILE TEST_FILE [--debug]", ctx=ctx)
    flags = ["--debug"] if len(args) == 3 else []
    return flags + ["--", args[0], args[1]]


def _configure_logging(debug: bool) -> None:
    """Route package log records to stderr through rich."""
    package_logger = logging.getLogger("post_classifier")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def _open_or_exit(stack: ExitStack, path: Path) -> TextIO:
    try:
        return stack.enter_context(path.open("r", encoding="utf-8", errors="replace"))
    except OSError:
        err_console.print(
            f"[bold red]Error opening file:[/] {escape(str(path))}", soft_wrap=True
        )
        sys.exit(EXIT_FILE_ERROR)


def _echo_lines(lines) -> None:
    for line in lines:
        click.echo(line)


@click.command(
    cls=_ClassifyCommand,
    options_metavar="[--debug]",
    context_settings={"help_option_names": []},
)
@click.argument("train_file", type=click.Path(path_type=Path))
@click.argument("test_file", type=click.Path(path_type=Path))
@click.option("--debug", is_flag=True, default=False,
              help="Print the training trace and the learned parameters.")
def main(train_file: Path, test_file: Path, debug: bool) -> None:
    """Train a Naive Bayes post classifier on TRAIN_FILE and score TEST_FILE.

    Both files are CSV with a header row naming a ``tag`` and a ``content``
    column.
    """
    _configure_logging(debug)

    with ExitStack() as stack:
        train_stream = _open_or_exit(stack, train_file)
        test_stream = _open_or_exit(stack, test_file)

        pipeline = PostClassifier()

        if debug:
            click.echo("training data:")
            classifier = pipeline.train(
                train_stream,
                on_record=lambda record: click.echo(report.training_record_line(record)),
            )
        else:
            classifier = pipeline.train(train_stream)
        _echo_lines(report.training_summary(classifier, debug=debug))

        if debug:
            _echo_lines(report.classes_lines(classifier))
            _echo_lines(report.parameter_lines(classifier))

        _echo_lines(report.prediction_header_lines(debug=debug))
        performance = pipeline.evaluate(
            test_stream,
            on_prediction=lambda prediction: _echo_lines(report.prediction_lines(prediction)),
        )
        _echo_lines(report.performance_lines(performance))


if __name__ == "__main__":
    main()
