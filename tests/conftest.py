# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - silence_logger (autouse) → no loguru output during tests
# - clean_config (autouse)   → config singleton rebuilt per test
# - training_examples        → the labeled (X, Y) pair dataset
# - nb                       → untrained NaiveBayes, default scoring
# - trained_nb               → NaiveBayes trained on training_examples
#
# ==============================================

import pytest
from loguru import logger

from naive_bayes import NaiveBayes, ScoringPolicy
from naive_bayes.config import reset_config


@pytest.fixture(autouse=True)
def silence_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in ("NB_PRIOR_MODE", "NB_SMOOTHING", "NB_LOG_LEVEL", "NB_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


def pairs(value):
    """Extractor: each example already is a list of (axis, value) features."""
    return value


@pytest.fixture
def training_examples():
    return [
        ("A", [("X", 5), ("Y", 4)]),
        ("A", [("X", 5), ("Y", 2)]),
        ("A", [("X", 3), ("Y", 2)]),
        ("B", [("X", 4), ("Y", 4)]),
        ("B", [("X", 5), ("Y", 3)]),
    ]


@pytest.fixture
def nb():
    return NaiveBayes(pairs, policy=ScoringPolicy())


@pytest.fixture
def trained_nb(nb, training_examples):
    nb.train(training_examples)
    return nb
