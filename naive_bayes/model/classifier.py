# ==============================================
# NaiveBayes — Classifier Engine
# ==============================================
#
# PURPOSE:
#   Learn label / feature frequencies from labeled values, then pick
#   the most likely label for a new value, assuming its features are
#   independent given the label.
#
#   P(L | F1 ∩ F2) ∝ P(F1 | L) P(F2 | L) ...
#   P(Feature) is the same for every label, so it is dropped: scores
#   rank labels but are not real probabilities.
#
# CLASSES:
# --------
# - Classifier (ABC)
#     train(examples) / classify(example) — the supervised contract.
#
# - NaiveBayes(Classifier)
#
#   Constructor:
#   ------------
#   - __init__(extractor, policy: ScoringPolicy | None = None,
#              config: AppConfig | None = None)
#       extractor → callable or FeatureExtractor, stored for life
#       policy    → if None, built from config.scoring
#
#   Methods:
#   --------
#   - train(examples: iterable of (label, value)) -> None
#       Extract every example's features first (duplicates within one
#       example collapse to a single occurrence), then record all
#       counts under the write lock. Any failure before recording
#       (extractor error, malformed pair, unhashable key, labels that
#       cannot be ordered) leaves the counts untouched.
#
#   - classify(example) -> label
#       Top of rank(example).
#
#   - rank(example) -> list[(score, label)]
#       1. Extract features
#       2. Start every known label at 1.0
#       3. Multiply in policy.feature_factor(f, L) for every f, L
#       4. Sort ascending by (score, label)
#
#   - scores(example) -> dict[label, float]
#   - classify_all(examples) -> list[label]
#
#   States:
#   -------
#   untrained (no labels; classify raises ModelNotTrainedError)
#   trained   (≥1 example recorded; train may still be called)
#
# ==============================================

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from loguru import logger

from naive_bayes.config import AppConfig, get_config
from naive_bayes.counting import FrequencyStore
from .errors import InvalidExampleError, ModelNotTrainedError
from .extractor import resolve_extractor
from .rw_lock import ReadWriteLock
from .scoring import PriorMode, ScoringPolicy, rank_scores

L = TypeVar("L")
V = TypeVar("V")


class Classifier(ABC, Generic[V, L]):
    """Anything that learns from (label, value) pairs and predicts labels."""

    @abstractmethod
    def train(self, examples: Iterable[Tuple[L, V]]) -> None:
        """Learn from labeled values."""

    @abstractmethod
    def classify(self, example: V) -> L:
        """Predict the label of ``example``."""


class NaiveBayes(Classifier[V, L]):
    """
    Incrementally trainable Naive Bayes classifier over caller-defined
    values, features and labels.

    Labels must be hashable and mutually orderable; features must be
    hashable. Values are only ever passed to the extractor.
    """

    def __init__(
        self,
        extractor: Any,
        policy: Optional[ScoringPolicy] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Initialize an untrained classifier.

        Args:
            extractor: Callable (or FeatureExtractor) mapping a value to
                       an iterable of hashable features
            policy: Scoring rule. If not provided, built from config.
            config: Application configuration. If None, loads from environment.

        Raises:
            TypeError: If ``extractor`` is not callable
        """
        self._extract = resolve_extractor(extractor)

        if policy is None:
            scoring = (config or get_config()).scoring
            policy = ScoringPolicy(
                prior_mode=PriorMode(scoring.prior_mode),
                smoothing=scoring.smoothing,
            )
        self.policy = policy

        self._store = FrequencyStore()
        self._lock = ReadWriteLock()

    # ======================================
    # Properties
    # ======================================
    @property
    def store(self) -> FrequencyStore:
        """The underlying counts. Treat as read-only."""
        return self._store

    @property
    def is_trained(self) -> bool:
        return not self._store.is_empty

    @property
    def labels(self) -> List[L]:
        with self._lock.read():
            return self._store.known_labels()

    def p_label(self, label: L) -> float:
        with self._lock.read():
            return self._store.label_probability(label)

    # ======================================
    # Training
    # ======================================
    def train(self, examples: Iterable[Tuple[L, V]]) -> None:
        """
        Add a batch of labeled values to the model.

        Repeating an example simply adds more evidence. The order of
        examples does not change the resulting counts.

        Args:
            examples: Iterable of (label, value) pairs

        Raises:
            InvalidExampleError: If an item is not a (label, value) pair
            TypeError: If a label or feature is unhashable, or a new label
                       cannot be ordered against the known ones
            Exception: Whatever the extractor raises, unchanged
        """
        prepared = self._prepare(examples)
        if not prepared:
            logger.debug("train() called with no examples; model unchanged")
            return

        with self._lock.write():
            self._check_label_order(label for label, _ in prepared)

            for label, features in prepared:
                self._store.bump_label(label)
                for feature in features:
                    self._store.bump_feature_label(feature, label)

            logger.info(
                "Trained on {} examples ({} total, {} labels, {} distinct features)",
                len(prepared),
                self._store.total_occurrences,
                len(self._store.label_counts),
                self._store.feature_count,
            )

    def _prepare(self, examples: Iterable[Tuple[L, V]]) -> List[Tuple[L, List[Hashable]]]:
        """
        Unpack and extract every example without touching the counts.

        Returns:
            (label, features) pairs in input order
        """
        prepared = []
        for index, example in enumerate(examples):
            try:
                label, value = example
            except (TypeError, ValueError):
                logger.warning("Rejecting malformed training example at position {}", index)
                raise InvalidExampleError(index, example) from None

            # A feature repeated within one example counts once, so no
            # feature can co-occur with a label more often than the label.
            # dict.fromkeys also rejects unhashable features before recording.
            features = list(dict.fromkeys(self._extract(value)))
            hash(label)

            prepared.append((label, features))

        logger.debug("Prepared {} training examples", len(prepared))
        return prepared

    def _check_label_order(self, new_labels: Iterable[L]) -> None:
        labels = set(self._store.known_labels())
        labels.update(new_labels)
        try:
            sorted(labels)
        except TypeError:
            logger.warning("Training labels cannot be ordered against each other: {}", labels)
            raise

    # ======================================
    # Classification
    # ======================================
    def classify(self, example: V) -> L:
        """
        Return the highest-scoring label for ``example``.

        Exact score ties go to the largest label in natural order.

        Raises:
            ModelNotTrainedError: If no training example has been recorded
        """
        _, label = self.rank(example)[-1]
        return label

    def classify_all(self, examples: Iterable[V]) -> List[L]:
        return [self.classify(example) for example in examples]

    def rank(self, example: V) -> List[Tuple[float, L]]:
        """
        Score every known label for ``example`` and sort them.

        Args:
            example: The value to classify

        Returns:
            (score, label) pairs, ascending; the last one wins.

        Raises:
            ModelNotTrainedError: If no training example has been recorded
        """
        ranking = rank_scores(self.scores(example))
        logger.debug("Ranking: {}", ranking)
        return ranking

    def scores(self, example: V) -> Dict[L, float]:
        """
        Unnormalized score per known label.

        Raises:
            ModelNotTrainedError: If no training example has been recorded
        """
        features = list(self._extract(example))

        with self._lock.read():
            labels = self._store.known_labels()
            if not labels:
                logger.warning("classify() called on an untrained model")
                raise ModelNotTrainedError()

            scores = {label: 1.0 for label in labels}
            for feature in features:
                for label in labels:
                    scores[label] *= self.policy.feature_factor(self._store, feature, label)

        return scores

    def __repr__(self) -> str:
        return (
            f"NaiveBayes(prior_mode={self.policy.prior_mode.value}, "
            f"smoothing={self.policy.smoothing}, store={self._store!r})"
        )
