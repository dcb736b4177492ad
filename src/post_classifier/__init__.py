"""Post Classifier -- multinomial Naive Bayes over bag-of-words CSV posts."""

__version__ = "0.1.0"

from .classifier import NaiveBayesClassifier
from .models import PerformanceReport, Prediction, Record
from .parsers import (
    ColumnLayout,
    find_columns,
    iter_records,
    resolve_layout,
    split_fields,
)
from .pipeline import PostClassifier
from .preprocessing import unique_words

__all__ = [
    # Core
    "PostClassifier",
    "NaiveBayesClassifier",
    # Models
    "Record",
    "Prediction",
    "PerformanceReport",
    # CSV reading
    "ColumnLayout",
    "find_columns",
    "resolve_layout",
    "split_fields",
    "iter_records",
    # Tokenization
    "unique_words",
]
