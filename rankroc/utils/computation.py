"""Mathematical computation utilities for ROC evaluation."""

import numpy as np
from scipy.stats import mannwhitneyu

from .validation import validate_scores, validate_labels


def compute_auc(x: np.ndarray, y: np.ndarray) -> float:
    """Compute area under curve using trapezoidal rule."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    # Sort by x values for proper integration
    idx = np.argsort(x, kind="stable")
    return float(np.trapezoid(y[idx], x[idx]))


def rank_auc(scores: np.ndarray, labels: np.ndarray) -> float:
    """
    Compute the AUC as the normalized Mann-Whitney U statistic.

    This is the probability that a random positive scores higher than a
    random negative, with ties counting one half. It equals the area under
    the tie-merged ROC curve and serves as an independent cross-check of
    the curve-based computation.

    Parameters
    ----------
    scores : array-like of shape (n_samples,)
        Scores where higher values rank first.
    labels : array-like of shape (n_samples,)
        Binary ground truth, 1/True for positives.

    Returns
    -------
    float
        AUC in [0, 1].

    Examples
    --------
    >>> rank_auc([0.9, 0.8, 0.3, 0.1], [1, 1, 0, 0])
    1.0
    """
    scores = validate_scores(scores)
    labels = validate_labels(labels)

    if len(scores) != len(labels):
        raise ValueError(
            f"Length mismatch: {len(scores)} scores vs {len(labels)} labels"
        )

    pos = scores[labels]
    neg = scores[~labels]
    if len(pos) == 0 or len(neg) == 0:
        raise ValueError("Both classes must be present to compute an AUC")

    u_stat, _ = mannwhitneyu(pos, neg, alternative="two-sided")
    return float(u_stat / (len(pos) * len(neg)))
