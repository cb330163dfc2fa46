# ==============================================
# Errors
# ==============================================
#
# - NaiveBayesError          → Base class for everything raised here
# - ModelNotTrainedError     → classify() called before any training
# - InvalidExampleError      → Training example is not a (label, value) pair
#
# Failures raised by a caller's feature extractor are NOT wrapped;
# they reach the caller unchanged.
#
# ==============================================


class NaiveBayesError(Exception):
    """Base class for classifier errors."""


class ModelNotTrainedError(NaiveBayesError):
    """Raised when classifying with a model that has no labels yet."""

    def __init__(self, message: str = "Model has not been trained; no labels are known."):
        super().__init__(message)


class InvalidExampleError(NaiveBayesError, ValueError):
    """Raised when a training example cannot be unpacked into (label, value)."""

    def __init__(self, index: int, example):
        self.index = index
        self.example = example
        super().__init__(
            f"Training example at position {index} must be a (label, value) pair, "
            f"got {example!r}"
        )
