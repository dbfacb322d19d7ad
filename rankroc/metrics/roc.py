"""Receiver Operating Characteristic (ROC) curves for rankings.

A ROC curve plots the true positive rate (y-axis) against the false positive
rate (x-axis) over all thresholds of a ranking. A random ranking achieves an
area under the curve of about 0.5, a perfect separation 1.0 (all positives
first) or 0.0 (all negatives first). A score well below 0.5 usually means
the ranking was used the wrong way around.

The curve is materialized from a ranking that is already sorted: items with
an identical rank key are treated as one block and contribute a single
straight segment, and collinear points along vertical, horizontal and
diagonal runs are removed.
"""

import warnings
from typing import (
    AbstractSet,
    Any,
    Callable,
    Hashable,
    Iterable,
    Mapping,
    Optional,
    Tuple,
)

import numpy as np

from rankroc.metrics.adapters import (
    DistanceResultAdapter,
    OutlierScoreAdapter,
    SimpleAdapter,
)
from rankroc.utils.validation import validate_population

# Heuristic threshold for merging diagonal segments, scaled by 1 / size**2.
DIAGONAL_TOLERANCE = 0.01

Compare = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the natural ordering of the keys."""
    return (a > b) - (a < b)


def ensure_set(positives: Any) -> AbstractSet[Hashable]:
    """Return the positive identifiers as a set with O(1) membership."""
    # Cluster-like objects carry their members in an ``ids`` attribute
    if hasattr(positives, "ids"):
        positives = positives.ids
    if isinstance(positives, (set, frozenset)):
        return positives
    return frozenset(positives)


class ROCCurveBuilder:
    """
    Sequential builder for a simplified ROC curve.

    The builder is fed one ranked item at a time via :meth:`push`. The curve
    point for an item is only emitted when the next item with a different
    rank key arrives, so that tied items are merged. :meth:`finish` closes
    the curve in the top right corner and returns it.

    Parameters
    ----------
    size : int
        Total population size.
    positives : set
        Identifiers of the positive class. Should support efficient
        membership tests.
    compare : callable, optional
        Three-way comparison ``compare(a, b) -> int`` of rank keys; two keys
        are tied when it returns 0. Defaults to :func:`natural_compare`.
    tolerance : float, default=DIAGONAL_TOLERANCE
        Diagonal simplification tolerance, divided by ``size**2``.

    Raises
    ------
    ValueError
        If the positive set is empty or covers the entire population.
    """

    def __init__(
        self,
        size: int,
        positives: Iterable[Hashable],
        compare: Optional[Compare] = None,
        tolerance: float = DIAGONAL_TOLERANCE,
    ):
        self.positives = ensure_set(positives)
        self.postot = len(self.positives)
        self.negtot = validate_population(size, self.postot)
        self.size = int(size)
        self.compare = compare if compare is not None else natural_compare
        self.delta = tolerance / (self.size * self.size)

        self.poscnt = 0
        self.negcnt = 0
        self.points = [(0.0, 0.0)]
        self._prev_key = None
        self._has_prev = False
        self._finished = False

    def push(self, rank_key: Any, identifier: Hashable) -> None:
        """Consume the next ranked item."""
        if self._finished:
            raise ValueError("Cannot push to a finished ROC curve builder")

        # Rates before this item, i.e. the point for the previous item
        curpos = self.poscnt / self.postot
        curneg = self.negcnt / self.negtot

        if identifier in self.positives:
            self.poscnt += 1
        else:
            self.negcnt += 1

        # Defer ties
        if self._has_prev and self.compare(self._prev_key, rank_key) == 0:
            return

        self._simplify(curneg, curpos)
        self.points.append((curneg, curpos))
        self._prev_key = rank_key
        self._has_prev = True

    def _simplify(self, x: float, y: float) -> None:
        """Drop the last point if it lies on a run continued by (x, y)."""
        if len(self.points) < 2:
            return
        x1, y1 = self.points[-2]
        x2, y2 = self.points[-1]
        if x1 == x2 and x2 == x:
            # vertical
            self.points.pop()
        elif y1 == y2 and y2 == y:
            # horizontal
            self.points.pop()
        elif (
            abs((x2 - x1) - (x - x2)) < self.delta
            and abs((y2 - y1) - (y - y2)) < self.delta
        ):
            # diagonal
            self.points.pop()

    def finish(self) -> np.ndarray:
        """
        Close the curve and return it.

        Returns
        -------
        np.ndarray of shape (n_points, 2)
            Read-only array of (false positive rate, true positive rate)
            points. An empty ranking yields the single point (0, 0).
        """
        self._finished = True
        if self._has_prev:
            x, y = self.points[-1]
            # Ensure we end up in the top right corner
            if x < 1.0 or y < 1.0:
                self.points.append((1.0, 1.0))

        curve = np.array(self.points, dtype=np.float64).reshape(-1, 2)
        curve.flags.writeable = False
        return curve


def materialize_roc(
    size: int,
    positives: Iterable[Hashable],
    ranked: Iterable[Tuple[Any, Hashable]],
    compare: Optional[Compare] = None,
    tolerance: float = DIAGONAL_TOLERANCE,
) -> np.ndarray:
    """
    Compute a ROC curve from a sorted ranking.

    Parameters
    ----------
    size : int
        Total population size.
    positives : iterable of hashable
        Identifiers of the positive class.
    ranked : iterable of (rank_key, identifier) pairs
        Items sorted by rank key in a single direction. The rank key is only
        used to detect ties between neighboring items.
    compare : callable, optional
        Three-way comparison of rank keys, see :class:`ROCCurveBuilder`.
    tolerance : float, default=DIAGONAL_TOLERANCE
        Diagonal simplification tolerance.

    Returns
    -------
    np.ndarray of shape (n_points, 2)
        Read-only curve of (false positive rate, true positive rate) points
        from (0, 0) to (1, 1).

    Examples
    --------
    >>> materialize_roc(4, {"a", "b"}, [(4, "a"), (3, "b"), (2, "c"), (1, "d")])
    array([[0. , 0. ],
           [0. , 1. ],
           [0.5, 1. ],
           [1. , 1. ]])
    """
    builder = ROCCurveBuilder(size, positives, compare=compare, tolerance=tolerance)
    for rank_key, identifier in ranked:
        builder.push(rank_key, identifier)
    return builder.finish()


def compute_roc_auc(curve: Any) -> float:
    """
    Compute the area under a curve given as an ordered sequence of points.

    Points are integrated in the given order with the trapezoidal rule;
    they do not need to be evenly spaced.

    Parameters
    ----------
    curve : array-like of shape (n_points, 2)
        Ordered (x, y) points.

    Returns
    -------
    float
        Area under the curve, or NaN if there are fewer than two points.
    """
    points = np.asarray(curve, dtype=np.float64)
    # There is no area under a curve without at least one segment
    if len(points) < 2:
        warnings.warn(
            "Area under curve is undefined for fewer than two points",
            RuntimeWarning,
            stacklevel=2,
        )
        return float("nan")
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"curve must have shape (n_points, 2), got {points.shape}")

    return float(np.trapezoid(points[:, 1], points[:, 0]))


def roc_auc(
    size: int,
    positives: Iterable[Hashable],
    ranked: Iterable[Tuple[Any, Hashable]],
    compare: Optional[Compare] = None,
) -> float:
    """Compute the ROC AUC of a sorted ``(rank_key, identifier)`` ranking."""
    return compute_roc_auc(materialize_roc(size, positives, ranked, compare=compare))


def roc_auc_simple(
    size: int, positives: Iterable[Hashable], ids: Iterable[Hashable]
) -> float:
    """Compute the ROC AUC of a ranking given as identifiers only."""
    return compute_roc_auc(materialize_roc(size, positives, SimpleAdapter(ids)))


def roc_auc_distance_result(
    size: int, positives: Any, neighbors: Iterable[Any]
) -> float:
    """
    Compute the ROC AUC of a distance query result.

    Parameters
    ----------
    size : int
        Database size.
    positives : iterable of hashable, or object with an ``ids`` attribute
        Positive identifiers, e.g. the members of a cluster.
    neighbors : iterable
        ``(distance, identifier)`` pairs, nearest first.
    """
    return compute_roc_auc(
        materialize_roc(size, positives, DistanceResultAdapter(neighbors))
    )


def roc_auc_outlier_scores(
    positives: Iterable[Hashable],
    scores: Mapping[Hashable, float],
    ordering: Optional[Iterable[Hashable]] = None,
    ascending: bool = False,
    size: Optional[int] = None,
) -> float:
    """
    Compute the ROC AUC of an outlier scoring result.

    Parameters
    ----------
    positives : iterable of hashable
        Identifiers of the true outliers.
    scores : mapping
        Identifier to outlier score.
    ordering : iterable of hashable, optional
        Externally determined ranking of the identifiers. If None, the
        identifiers are ranked by score.
    ascending : bool, default=False
        Rank lower scores first when no ordering is given.
    size : int, optional
        Population size. Defaults to the number of scored identifiers.
    """
    if size is None:
        size = len(scores)
    adapter = OutlierScoreAdapter(scores, ordering=ordering, ascending=ascending)
    return compute_roc_auc(materialize_roc(size, positives, adapter))
