"""Multinomial Naive Bayes over bag-of-words post content.

The model is nothing but three document-frequency counters plus two totals,
accumulated in a single training pass:

- documents per label
- documents containing each word (presence, not multiplicity)
- documents per (label, word) pair

Scoring combines a log-prior per label with a log-likelihood per word. The
likelihood does not use Laplace smoothing. Instead it falls back in three
tiers, checked in this order:

1. word never seen in training:        ``log(1 / total_posts)``
2. word seen, but never with the label: ``log(word_docs / total_posts)``
3. otherwise:                           ``log(label_word_docs / label_docs)``

Degenerate counts (an unknown label, an empty training set) produce
non-finite scores instead of raising.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from .models import Record
from .preprocessing import unique_words

logger = logging.getLogger(__name__)


def _log_ratio(numerator: float, denominator: float) -> float:
    """Natural log of ``numerator / denominator`` with IEEE-style edge cases.

    ``math.log`` raises on zero and division raises on a zero denominator,
    so both are mapped to the values floating-point arithmetic would give.
    """
    if denominator == 0:
        return math.nan if numerator == 0 else math.inf
    if numerator == 0:
        return -math.inf
    return math.log(numerator / denominator)


@dataclass
class NaiveBayesClassifier:
    """Document-frequency Naive Bayes classifier.

    Example::

        nb = NaiveBayesClassifier()
        nb.add_example("sports", "go team go")
        nb.add_example("news", "breaking news today")
        nb.predict(unique_words("go team"))   # ("sports", -0.693...)
    """

    total_posts: int = 0
    vocab_size: int = 0
    label_counts: Counter[str] = field(default_factory=Counter, repr=False)
    word_doc_counts: Counter[str] = field(default_factory=Counter, repr=False)
    label_word_doc_counts: Counter[tuple[str, str]] = field(
        default_factory=Counter, repr=False
    )

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def add_example(self, label: Optional[str], content: Optional[str]) -> None:
        """Count one training post.

        Args:
            label: The post's label, or ``None`` if the row had no label field.
            content: The post's text, or ``None`` if the row had no content
                field. Such a post still counts toward ``total_posts``.
        """
        if label is not None:
            self.label_counts[label] += 1

        if content is not None:
            for word in unique_words(content):
                self.word_doc_counts[word] += 1
                if self.word_doc_counts[word] == 1:
                    self.vocab_size += 1
                self.label_word_doc_counts[(label or "", word)] += 1

        self.total_posts += 1

    def fit(self, records: Iterable[Record]) -> "NaiveBayesClassifier":
        """Count every record in ``records``.

        Returns:
            Self (for method chaining).
        """
        for record in records:
            self.add_example(record.label, record.content)
        logger.debug(
            "Trained on %d posts, %d labels, vocabulary size %d",
            self.total_posts,
            len(self.label_counts),
            self.vocab_size,
        )
        return self

    @property
    def is_trained(self) -> bool:
        return self.total_posts > 0

    @property
    def classes(self) -> list[str]:
        """Known labels in enumeration order (sorted)."""
        return sorted(self.label_counts)

    def parameters(self) -> Iterator[tuple[tuple[str, str], int]]:
        """Yield ``((label, word), count)`` for every co-occurring pair, sorted."""
        for key in sorted(self.label_word_doc_counts):
            yield key, self.label_word_doc_counts[key]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def log_prior(self, label: str) -> float:
        """Log of the fraction of training posts carrying ``label``."""
        return _log_ratio(self.label_counts[label], self.total_posts)

    def log_likelihood(self, label: str, word: str) -> float:
        """Log-likelihood of ``word`` given ``label`` under the fallback policy."""
        word_docs = self.word_doc_counts[word]
        if word_docs == 0:
            return _log_ratio(1, self.total_posts)

        pair_docs = self.label_word_doc_counts[(label, word)]
        if pair_docs == 0:
            return _log_ratio(word_docs, self.total_posts)

        return _log_ratio(pair_docs, self.label_counts[label])

    def log_posterior(self, label: str, words: Iterable[str]) -> float:
        """Unnormalized log posterior of ``label`` for a set of words."""
        score = self.log_prior(label)
        for word in sorted(words):
            score += self.log_likelihood(label, word)
        return score

    def predict(self, words: Iterable[str]) -> tuple[Optional[str], float]:
        """Return the best label for ``words`` and its score.

        Labels are tried in sorted order and only a strictly greater score
        replaces the current best, so the earliest label wins ties. With no
        known labels the result is ``(None, -inf)``.
        """
        words = frozenset(words)
        return self._argmax(lambda label: self.log_posterior(label, words))

    def predict_from_priors(self) -> tuple[Optional[str], float]:
        """Return the label with the highest log-prior and that log-prior."""
        return self._argmax(self.log_prior)

    def _argmax(self, score_fn) -> tuple[Optional[str], float]:
        best_label: Optional[str] = None
        best_score = -math.inf
        for label in self.classes:
            score = score_fn(label)
            if score > best_score:
                best_label, best_score = label, score
        return best_label, best_score
