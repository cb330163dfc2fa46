# ==============================================
# Tests for Scoring Module
# ==============================================

import pytest

from naive_bayes.counting import FrequencyStore
from naive_bayes.model.scoring import PriorMode, ScoringPolicy, rank_scores


@pytest.fixture
def store():
    s = FrequencyStore()
    for label, features in [("A", ["x"]), ("A", ["x"]), ("A", ["y"]), ("B", ["y"])]:
        s.bump_label(label)
        for feature in features:
            s.bump_feature_label(feature, label)
    return s


class TestScoringPolicy:
    """Tests for per-feature factors."""

    def test_defaults(self):
        policy = ScoringPolicy()
        assert policy.prior_mode is PriorMode.PER_FEATURE
        assert policy.smoothing == 1.0

    def test_string_prior_mode_accepted(self):
        assert ScoringPolicy(prior_mode="none").prior_mode is PriorMode.NONE

    def test_unknown_prior_mode_rejected(self):
        with pytest.raises(ValueError):
            ScoringPolicy(prior_mode="twice")

    def test_non_positive_smoothing_rejected(self):
        with pytest.raises(ValueError):
            ScoringPolicy(smoothing=0)

    def test_factor_without_prior(self, store):
        policy = ScoringPolicy(prior_mode=PriorMode.NONE)
        # (2 + 1) / (3 + 1)
        assert policy.feature_factor(store, "x", "A") == pytest.approx(3 / 4)
        # (0 + 1) / (1 + 1)
        assert policy.feature_factor(store, "x", "B") == pytest.approx(1 / 2)

    def test_factor_with_prior(self, store):
        policy = ScoringPolicy(prior_mode=PriorMode.PER_FEATURE)
        assert policy.feature_factor(store, "x", "A") == pytest.approx(3 / 4 * 3 / 4)
        assert policy.feature_factor(store, "x", "B") == pytest.approx(1 / 2 * 1 / 4)

    def test_unseen_feature_governed_by_smoothing(self, store):
        policy = ScoringPolicy(prior_mode=PriorMode.NONE)
        assert policy.feature_factor(store, "never", "A") == pytest.approx(1 / 4)
        assert policy.feature_factor(store, "never", "B") == pytest.approx(1 / 2)

    def test_custom_smoothing(self, store):
        policy = ScoringPolicy(prior_mode=PriorMode.NONE, smoothing=0.5)
        assert policy.feature_factor(store, "x", "A") == pytest.approx(2.5 / 3.5)


class TestRankScores:
    """Tests for ranking order and tie-breaking."""

    def test_ascending_by_score(self):
        ranking = rank_scores({"A": 0.2, "B": 0.9, "C": 0.5})
        assert [label for _, label in ranking] == ["A", "C", "B"]

    def test_exact_tie_goes_to_largest_label(self):
        ranking = rank_scores({"B": 0.5, "A": 0.5, "C": 0.1})
        assert ranking[-1] == (0.5, "B")

    def test_empty(self):
        assert rank_scores({}) == []
