"""Plain-text rendering of the training trace and prediction output.

Counts are shown with 10 significant digits and log values with 3, so a
log-prior of ``-0.6931...`` reads ``-0.693``.
"""

from __future__ import annotations

from collections.abc import Iterator

from .classifier import NaiveBayesClassifier
from .models import PerformanceReport, Prediction, Record


def format_count(value: float) -> str:
    return format(value, ".10g")


def format_log(value: float) -> str:
    return format(value, ".3g")


def training_record_line(record: Record) -> str:
    return f"  label = {record.label}, content = {record.content or ''}"


def training_summary(classifier: NaiveBayesClassifier, debug: bool = False) -> list[str]:
    """Lines printed once training has finished."""
    lines = [f"trained on {classifier.total_posts} examples"]
    if debug:
        lines.append(f"vocabulary size = {classifier.vocab_size}")
        lines.append("")
    return lines


def classes_lines(classifier: NaiveBayesClassifier) -> Iterator[str]:
    """Each label with its example count and log-prior."""
    yield "classes:"
    for label in classifier.classes:
        yield (
            f"  {label}, {format_count(classifier.label_counts[label])} examples, "
            f"log-prior = {format_log(classifier.log_prior(label))}"
        )


def parameter_lines(classifier: NaiveBayesClassifier) -> Iterator[str]:
    """Each (label, word) pair with its document count and log-likelihood."""
    yield "classifier parameters:"
    for (label, word), count in classifier.parameters():
        yield (
            f"  {label}:{word}, count = {format_count(count)}, "
            f"log-likelihood = {format_log(classifier.log_likelihood(label, word))}"
        )
    yield ""


def prediction_header_lines(debug: bool = False) -> list[str]:
    # the debug trace already ends with a blank line
    return ["test data:"] if debug else ["", "test data:"]


def prediction_lines(prediction: Prediction) -> list[str]:
    """The two lines describing one prediction, then a separator."""
    return [
        f"  correct = {prediction.correct_label}, "
        f"predicted = {prediction.predicted_label or ''}, "
        f"log-probability score = {format_log(prediction.score)}",
        f"  content = {prediction.content or ''}",
        "",
    ]


def performance_lines(report: PerformanceReport) -> list[str]:
    return [report.summary()]
