"""
Package core.tokenization - Word frequency pipeline.

Modules:
- scanner: Tach text thanh word tokens (finite-state machine)
- counter: FrequencyMap + count/merge logic
- batch: Parallel/batch processing
"""

from core.tokenization.scanner import TokenStream, tokenize
from core.tokenization.counter import (
    FrequencyMap,
    count,
    count_words,
    merge,
    merge_all,
)

__all__ = [
    "TokenStream",
    "tokenize",
    "FrequencyMap",
    "count",
    "count_words",
    "merge",
    "merge_all",
]
