"""Data models for post classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Record:
    """A single data row read from a CSV file."""

    label: str
    content: Optional[str] = None

    @property
    def has_content(self) -> bool:
        return self.content is not None


@dataclass
class Prediction:
    """The outcome of scoring one test record."""

    correct_label: str
    predicted_label: Optional[str]
    score: float
    content: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return self.predicted_label == self.correct_label


@dataclass
class PerformanceReport:
    """Running tally of predictions against ground truth labels."""

    correct: int = 0
    total: int = 0
    predictions: list[Prediction] = field(default_factory=list)

    def add(self, prediction: Prediction) -> None:
        self.predictions.append(prediction)
        self.total += 1
        if prediction.is_correct:
            self.correct += 1

    @property
    def accuracy(self) -> float:
        """Fraction of records predicted correctly (0-1)."""
        if not self.total:
            return 0.0
        return self.correct / self.total

    def summary(self) -> str:
        return f"performance: {self.correct} / {self.total} posts predicted correctly"
