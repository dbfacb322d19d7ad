"""Utility functions for ROC evaluation.

This module provides input validation, mathematical computation, and input
coercion utilities used across the rankroc package.
"""

from .validation import validate_scores, validate_labels, validate_population
from .computation import compute_auc, rank_auc
from .decorator import as_numpy_array

__all__ = [
    # Validation functions
    "validate_scores",
    "validate_labels",
    "validate_population",
    # Computation functions
    "compute_auc",
    "rank_auc",
    # Input coercion
    "as_numpy_array",
]
