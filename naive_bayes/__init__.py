# ==============================================
# Naive Bayes Classifier
# ==============================================
#
# Package Structure (2 Topics):
#
# naive_bayes/
# ├── counting/   # Topic 1: Frequency Store (label + feature counts)
# ├── model/      # Topic 2: Classifier Engine (train, score, rank)
# ├── config.py   # Configuration management
# └── logger.py   # loguru sink setup
#
# USAGE:
# ------
#   from naive_bayes import NaiveBayes
#   nb = NaiveBayes(lambda pairs: pairs)
#   nb.train([("A", [("X", 5)]), ("B", [("X", 4)])])
#   nb.classify([("X", 5)])
#
# ==============================================

from loguru import logger

from .counting import FrequencyStore, Histogram
from .model import (
    Classifier,
    FeatureExtractor,
    IdentityExtractor,
    InvalidExampleError,
    ModelNotTrainedError,
    NaiveBayes,
    NaiveBayesError,
    PriorMode,
    ScoringPolicy,
)

__version__ = "0.1.0"

# Silent until the application calls naive_bayes.logger.setup_logging()
logger.disable("naive_bayes")

__all__ = [
    "Classifier",
    "FeatureExtractor",
    "FrequencyStore",
    "Histogram",
    "IdentityExtractor",
    "InvalidExampleError",
    "ModelNotTrainedError",
    "NaiveBayes",
    "NaiveBayesError",
    "PriorMode",
    "ScoringPolicy",
]
