"""Input validation utilities for ROC evaluation."""

import numbers

import numpy as np


def validate_scores(scores: np.ndarray, name: str = "scores") -> np.ndarray:
    """Ensure scores are valid 1D array."""
    scores = np.asarray(scores)
    if scores.ndim != 1:
        raise ValueError(f"{name} must be 1D array, got shape {scores.shape}")
    if len(scores) == 0:
        raise ValueError(f"{name} cannot be empty")
    if not np.isfinite(scores).all():
        raise ValueError(f"{name} contains non-finite values")
    return scores


def validate_labels(labels: np.ndarray, name: str = "labels") -> np.ndarray:
    """Ensure labels are a 1D binary array and return them as bool."""
    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise ValueError(f"{name} must be 1D array, got shape {labels.shape}")
    if len(labels) == 0:
        raise ValueError(f"{name} cannot be empty")
    if labels.dtype != bool and not np.isin(labels, [0, 1]).all():
        raise ValueError(f"{name} must be binary (0/1 or bool)")
    return labels.astype(bool)


def validate_population(size: int, n_positives: int) -> int:
    """
    Check population counts and return the number of negatives.

    Raises
    ------
    ValueError
        If ``size`` is not a positive integer, the positive set is empty,
        or the positive set covers the entire population.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ValueError(f"size must be an integer, got {type(size).__name__}")
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    if n_positives == 0:
        raise ValueError("positive set empty")
    if n_positives >= size:
        raise ValueError(
            f"positive set covers entire population ({n_positives} of {size})"
        )
    return int(size) - n_positives
