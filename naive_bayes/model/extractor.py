# ==============================================
# Feature Extraction
# ==============================================
#
# PURPOSE:
#   The classifier never looks inside an input value. It hands the
#   value to a caller-supplied extractor and works only with the
#   features that come back.
#
# ACCEPTED EXTRACTORS:
# --------------------
# - Any callable: value -> iterable of hashable features
# - A FeatureExtractor subclass implementing extract(value)
#
# CLASSES:
# --------
# - FeatureExtractor (ABC)  → Strategy object with one method, extract()
# - IdentityExtractor       → The value already IS the feature sequence
#
# FUNCTION:
# ---------
# - resolve_extractor(extractor) -> Callable
#     Validate what the caller passed and return a plain callable.
#
# ==============================================

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterable, List


class FeatureExtractor(ABC):
    """
    Turns one input value into the features the model counts.

    Implementations must be deterministic: the same value must always
    produce the same features, or classification stops being repeatable.
    """

    @abstractmethod
    def extract(self, value: Any) -> Iterable[Hashable]:
        """Return the features of ``value``."""

    def __call__(self, value: Any) -> List[Hashable]:
        return list(self.extract(value))


class IdentityExtractor(FeatureExtractor):
    """Use each input value, which must be iterable, as its own features."""

    def extract(self, value: Iterable[Hashable]) -> Iterable[Hashable]:
        return value


def resolve_extractor(extractor: Any) -> Callable[[Any], Iterable[Hashable]]:
    """
    Validate an extractor supplied at construction time.

    Args:
        extractor: A callable or a FeatureExtractor instance

    Returns:
        A callable mapping a value to its features

    Raises:
        TypeError: If ``extractor`` cannot be called
    """
    if isinstance(extractor, FeatureExtractor):
        return extractor
    if not callable(extractor):
        raise TypeError(
            f"Feature extractor must be callable or a FeatureExtractor, "
            f"got {type(extractor).__name__}"
        )
    return extractor
