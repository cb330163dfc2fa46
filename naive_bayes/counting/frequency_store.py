# ==============================================
# FrequencyStore
# ==============================================
#
# PURPOSE:
#   Holds all the evidence a Naive Bayes model learns from training:
#   how often each label occurred, and for each feature, how often
#   each label occurred together with that feature.
#
# WHY THIS CLASS EXISTS:
#   Training only ever adds counts, and classification only ever
#   reads them. Keeping the counts behind one small API makes the
#   invariants easy to hold in one place.
#
# CLASS: FrequencyStore
# ---------------------
#   Stateful — purely additive; nothing is ever removed.
#
#   Attributes:
#   -----------
#   - label_counts: Histogram                 → Label → occurrences
#   - feature_counts: dict[Feature, Histogram] → Feature → (Label → co-occurrences)
#
#   Methods:
#   --------
#   - bump_label(label) -> None
#   - bump_feature_label(feature, label) -> None
#       Creates the feature's Histogram the first time the feature is seen.
#   - label_count(label) -> int
#   - label_probability(label) -> float
#       count(label) / total_occurrences, or 0.0 for an empty store.
#   - feature_label_count(feature, label) -> int
#       0 when the feature was never seen, or never seen with this label.
#   - known_labels() -> list
#       Labels with at least one occurrence, in natural order.
#
# INVARIANT:
#   feature_label_count(f, L) <= label_count(L) for every f and L,
#   provided each feature bump is paired with a label bump for the
#   same example.
#
# ==============================================

from typing import Dict, Hashable, List

from .histogram import Histogram


class FrequencyStore:
    """
    Label and feature-conditional label counts for a Naive Bayes model.
    """

    def __init__(self):
        self.label_counts = Histogram()
        self.feature_counts: Dict[Hashable, Histogram] = {}

    # ======================================
    # Update logic
    # ======================================
    def bump_label(self, label: Hashable) -> None:
        self.label_counts.bump(label)

    def bump_feature_label(self, feature: Hashable, label: Hashable) -> None:
        """
        Record one co-occurrence of ``feature`` with ``label``.

        Args:
            feature: Feature extracted from a training value
            label: Label of that training value
        """
        if feature not in self.feature_counts:
            self.feature_counts[feature] = Histogram()
        self.feature_counts[feature].bump(label)

    # ======================================
    # Queries
    # ======================================
    @property
    def total_occurrences(self) -> int:
        """Number of labels recorded, i.e. training examples seen."""
        return self.label_counts.total

    @property
    def is_empty(self) -> bool:
        return self.label_counts.total == 0

    @property
    def feature_count(self) -> int:
        return len(self.feature_counts)

    def label_count(self, label: Hashable) -> int:
        return self.label_counts.count(label)

    def label_probability(self, label: Hashable) -> float:
        """
        Prior probability of ``label`` among all recorded examples.

        Returns:
            count(label) / total_occurrences, or 0.0 if nothing has
            been recorded yet.
        """
        if self.label_counts.total == 0:
            return 0.0
        return self.label_counts.count(label) / self.label_counts.total

    def feature_label_count(self, feature: Hashable, label: Hashable) -> int:
        histogram = self.feature_counts.get(feature)
        if histogram is None:
            return 0
        return histogram.count(label)

    def known_labels(self) -> List[Hashable]:
        """
        Return every label seen at least once, in natural sort order.

        The order matters: ranking relies on it to break exact ties.
        """
        return self.label_counts.keys()

    def known_features(self) -> List[Hashable]:
        # Features are only required to be hashable, so no ordering here
        return list(self.feature_counts)

    def __repr__(self) -> str:
        return (
            f"FrequencyStore(examples={self.total_occurrences}, "
            f"labels={len(self.label_counts)}, features={self.feature_count})"
        )
