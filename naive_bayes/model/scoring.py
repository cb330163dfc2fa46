# ==============================================
# Scoring Policy
# ==============================================
#
# PURPOSE:
#   Everything that decides HOW a label is scored and ranked,
#   kept apart from the classifier that applies it.
#
# ENUMS:
# ------
# - PriorMode(Enum): PER_FEATURE, NONE
#     PER_FEATURE → every feature factor is also multiplied by the
#                   label's prior probability P(L)
#     NONE        → likelihood factors only
#
# CLASSES:
# --------
# - ScoringPolicy (dataclass)
#     prior_mode: PriorMode   (default PER_FEATURE)
#     smoothing: float        (default 1.0 → add-one / Laplace)
#
#     - feature_factor(store, feature, label) -> float
#         (count(f, L) + smoothing) / (count(L) + smoothing)
#         times P(L) under PER_FEATURE.
#
# FUNCTION:
# ---------
# - rank_scores(scores: dict[label, float]) -> list[(score, label)]
#     Ascending by score; exact ties fall back to the label's natural
#     order, so the LAST entry is the winner and ties go to the
#     largest label.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple

from naive_bayes.counting import FrequencyStore


class PriorMode(Enum):
    """
    Whether the label prior enters the score.

    - PER_FEATURE: multiply P(L) into each feature factor
    - NONE: product of smoothed likelihoods only
    """
    PER_FEATURE = "per_feature"
    NONE = "none"


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Configurable scoring rule for ranking labels.

    The defaults reproduce add-one smoothing with the prior applied once
    per feature-label pairing.
    """

    prior_mode: PriorMode = PriorMode.PER_FEATURE
    smoothing: float = 1.0

    def __post_init__(self):
        if not isinstance(self.prior_mode, PriorMode):
            # Accept the string form ("per_feature" / "none") as well
            object.__setattr__(self, "prior_mode", PriorMode(self.prior_mode))
        if self.smoothing <= 0:
            raise ValueError(f"smoothing must be positive, got {self.smoothing}")

    def feature_factor(
        self,
        store: FrequencyStore,
        feature: Hashable,
        label: Hashable
    ) -> float:
        """
        Multiplier one feature contributes to one label's score.

        A feature never seen with ``label`` (or never seen at all) still
        contributes smoothing / (count(L) + smoothing), never zero.

        Args:
            store: Trained frequency counts
            feature: Feature extracted from the value being classified
            label: Candidate label

        Returns:
            The factor to multiply into the label's running score
        """
        label_total = store.label_count(label) + self.smoothing
        joint_count = store.feature_label_count(feature, label) + self.smoothing
        factor = joint_count / label_total

        if self.prior_mode is PriorMode.PER_FEATURE:
            factor *= store.label_probability(label)

        return factor


def rank_scores(scores: Dict[Hashable, float]) -> List[Tuple[float, Hashable]]:
    """
    Order (score, label) pairs from worst to best.

    Args:
        scores: Label → unnormalized score

    Returns:
        Ascending list; the last element is the top-ranked label.
    """
    return sorted(
        ((score, label) for label, score in scores.items()),
        key=lambda pair: (pair[0], pair[1])
    )
