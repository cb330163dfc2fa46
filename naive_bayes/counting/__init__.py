# ==============================================
# TOPIC 1: COUNTING (Frequency Store)
# ==============================================
#
# This package holds the evidence a model learns while training:
# label counts and per-feature label counts.
#
# Modules:
# --------
# - histogram.py       → Multiset counter with a running total
# - frequency_store.py → Label table + feature-conditional tables
#
# ==============================================

from .histogram import Histogram
from .frequency_store import FrequencyStore

__all__ = ["Histogram", "FrequencyStore"]
