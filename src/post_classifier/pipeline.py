"""Training and prediction pipelines over CSV line streams.

``PostClassifier`` is the primary entry point. It reads a labeled CSV
stream into a ``NaiveBayesClassifier``, then scores a second CSV stream
record by record and tallies the predictions against the labels it
carries.

Example::

    pc = PostClassifier()
    with open("train.csv", encoding="utf-8") as f:
        pc.train(f)
    with open("test.csv", encoding="utf-8") as f:
        report = pc.evaluate(f)
    print(report.summary())
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from .classifier import NaiveBayesClassifier
from .models import PerformanceReport, Prediction, Record
from .parsers import iter_records
from .preprocessing import unique_words

logger = logging.getLogger(__name__)


class PostClassifier:
    """Train on one CSV stream, then predict labels for another.

    Args:
        classifier: The model to populate (a fresh one by default).
    """

    def __init__(self, classifier: Optional[NaiveBayesClassifier] = None) -> None:
        self._classifier = classifier if classifier is not None else NaiveBayesClassifier()
        self._is_trained = False

    @property
    def classifier(self) -> NaiveBayesClassifier:
        return self._classifier

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(
        self,
        lines: Iterable[str],
        on_record: Optional[Callable[[Record], None]] = None,
    ) -> NaiveBayesClassifier:
        """Count every data row of a labeled CSV stream.

        Args:
            lines: The CSV lines, header first.
            on_record: Called with each parsed record before it is counted.

        Returns:
            The trained classifier.

        Raises:
            RuntimeError: If this pipeline or its classifier was already trained.
        """
        if self._is_trained or self._classifier.is_trained:
            raise RuntimeError(
                "Classifier already trained. Create a new PostClassifier to retrain."
            )

        def _records() -> Iterator[Record]:
            for record in iter_records(lines):
                if on_record is not None:
                    on_record(record)
                yield record

        self._classifier.fit(_records())
        self._is_trained = True
        return self._classifier

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------

    def classify(self, record: Record) -> Prediction:
        """Predict the label of a single record.

        A record without a content field is decided by the log-prior alone.
        """
        if record.has_content:
            label, score = self._classifier.predict(unique_words(record.content))
        else:
            label, score = self._classifier.predict_from_priors()

        return Prediction(
            correct_label=record.label,
            predicted_label=label,
            score=score,
            content=record.content,
        )

    def predict(self, lines: Iterable[str]) -> Iterator[Prediction]:
        """Yield a Prediction for every data row of a CSV stream."""
        for record in iter_records(lines):
            yield self.classify(record)

    def evaluate(
        self,
        lines: Iterable[str],
        on_prediction: Optional[Callable[[Prediction], None]] = None,
    ) -> PerformanceReport:
        """Predict every row and count how many match their labels.

        Args:
            lines: The CSV lines, header first.
            on_prediction: Called with each prediction as it is made.

        Returns:
            PerformanceReport with the correct and total counts.
        """
        report = PerformanceReport()
        for prediction in self.predict(lines):
            if on_prediction is not None:
                on_prediction(prediction)
            report.add(prediction)

        logger.debug("Predicted %d posts, %d correct", report.total, report.correct)
        return report
