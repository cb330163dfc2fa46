# ==============================================
# TOPIC 2: MODEL (Classifier Engine)
# ==============================================
#
# This package trains on labeled values and ranks labels for new
# values using the counts kept by naive_bayes.counting.
#
# Modules:
# --------
# - extractor.py   → Feature extraction strategy (caller supplied)
# - scoring.py     → PriorMode, ScoringPolicy, ranking order
# - rw_lock.py     → Shared-reader / exclusive-writer lock
# - errors.py      → Exceptions raised by the engine
# - classifier.py  → Classifier contract and the NaiveBayes engine
#
# ==============================================

from .errors import NaiveBayesError, ModelNotTrainedError, InvalidExampleError
from .extractor import FeatureExtractor, IdentityExtractor
from .scoring import PriorMode, ScoringPolicy, rank_scores
from .classifier import Classifier, NaiveBayes

__all__ = [
    "NaiveBayesError",
    "ModelNotTrainedError",
    "InvalidExampleError",
    "FeatureExtractor",
    "IdentityExtractor",
    "PriorMode",
    "ScoringPolicy",
    "rank_scores",
    "Classifier",
    "NaiveBayes",
]
