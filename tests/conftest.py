"""Shared test fixtures for post-classifier tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from post_classifier.classifier import NaiveBayesClassifier
from post_classifier.parsers import iter_records


@pytest.fixture
def tiny_train_lines() -> list[str]:
    """Two-post training set: one sports post, one news post."""
    return [
        "tag,content\n",
        "sports,go team go\n",
        "news,breaking news today\n",
    ]


@pytest.fixture
def tiny_test_lines() -> list[str]:
    return [
        "tag,content\n",
        "sports,go team\n",
        "news,today breaking\n",
    ]


@pytest.fixture
def corpus_lines() -> list[str]:
    """Small training set with distinctive vocabulary per label."""
    return [
        "n,tag,content\n",
        "1,sports,go team go\n",
        "2,sports,team wins game\n",
        "3,sports,great game tonight team\n",
        "4,news,breaking news today\n",
        "5,news,news anchor reports today\n",
        "6,news,election news update\n",
    ]


@pytest.fixture
def tiny_model(tiny_train_lines: list[str]) -> NaiveBayesClassifier:
    return NaiveBayesClassifier().fit(iter_records(tiny_train_lines))


@pytest.fixture
def corpus_model(corpus_lines: list[str]) -> NaiveBayesClassifier:
    return NaiveBayesClassifier().fit(iter_records(corpus_lines))


@pytest.fixture
def write_csv(tmp_path: Path):
    """Factory writing a list of lines to a CSV file under tmp_path."""

    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return path

    return _write
