"""ROC evaluation of score vectors against binary labels."""

import numpy as np

from rankroc.metrics.roc import compute_roc_auc, materialize_roc
from rankroc.utils.decorator import as_numpy_array
from rankroc.utils.validation import validate_labels, validate_scores


@as_numpy_array("scores", "labels")
def roc_curve_from_scores(
    scores: np.ndarray,
    labels: np.ndarray,
    ascending: bool = False,
) -> np.ndarray:
    """
    Compute the ROC curve of a score vector.

    Samples are identified by position and ranked by score with a stable
    sort. Samples sharing a score are tied and contribute a single segment.

    Parameters
    ----------
    scores : array-like of shape (n_samples,)
        Scores; by default higher values rank first. pandas and polars
        Series or single-column DataFrames are accepted.
    labels : array-like of shape (n_samples,)
        Binary ground truth, 1/True for the positive class.
    ascending : bool, default=False
        If True, lower scores rank first (e.g. distances or log-likelihoods).

    Returns
    -------
    np.ndarray of shape (n_points, 2)
        Read-only (false positive rate, true positive rate) curve.
    """
    scores = validate_scores(scores)
    labels = validate_labels(labels)

    if len(scores) != len(labels):
        raise ValueError(
            f"Length mismatch: {len(scores)} scores vs {len(labels)} labels"
        )

    # Reverse instead of negating, which wraps unsigned and rejects bool scores
    order = np.argsort(scores, kind="stable")
    if not ascending:
        order = order[::-1]
    positives = set(np.flatnonzero(labels).tolist())
    ranked = zip(scores[order].tolist(), order.tolist())

    return materialize_roc(len(scores), positives, ranked)


def roc_auc_from_scores(
    scores: np.ndarray,
    labels: np.ndarray,
    ascending: bool = False,
) -> float:
    """
    Compute the ROC AUC of a score vector.

    Examples
    --------
    >>> roc_auc_from_scores([0.9, 0.7, 0.7, 0.1], [1, 1, 0, 0])
    0.875
    """
    return compute_roc_auc(roc_curve_from_scores(scores, labels, ascending=ascending))
