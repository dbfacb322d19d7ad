"""Abstract base class for ranking evaluation metrics."""

from abc import ABC, abstractmethod
from typing import Dict, Any, Hashable, Iterable, Optional

from rankroc.metrics.roc import (
    DIAGONAL_TOLERANCE,
    Compare,
    compute_roc_auc,
    ensure_set,
    materialize_roc,
)


class RankingMetric(ABC):
    """
    Abstract base class for metrics evaluating a ranking against ground truth.

    This class provides a common interface for ranking metrics, ensuring
    consistent fit/score behavior across different metric types.
    """

    def __init__(self):
        self.results_ = None

    @abstractmethod
    def compute(
        self, size: int, positives: Iterable[Hashable], ranked: Iterable, **kwargs
    ) -> Dict[str, Any]:
        """
        Compute the metric.

        Parameters
        ----------
        size : int
            Total population size.
        positives : iterable of hashable
            Identifiers of the positive class.
        ranked : iterable of (rank_key, identifier) pairs
            Sorted ranking to evaluate.
        **kwargs : dict
            Additional parameters specific to the metric.

        Returns
        -------
        dict
            Dictionary containing metric results.
        """
        pass

    def fit(
        self, size: int, positives: Iterable[Hashable], ranked: Iterable, **kwargs
    ) -> "RankingMetric":
        """
        Compute and store the metric results.

        Returns
        -------
        self
        """
        self.results_ = self.compute(size, positives, ranked, **kwargs)
        return self

    def score(self) -> float:
        """
        Get the primary metric score.

        Returns
        -------
        float
            Primary metric score.
        """
        if self.results_ is None:
            raise ValueError("Must call fit() first")
        return self._get_primary_score()

    @abstractmethod
    def _get_primary_score(self) -> float:
        pass

    def get_results(self) -> Dict[str, Any]:
        """
        Get all metric results.

        Returns
        -------
        dict
            Dictionary containing all metric results.
        """
        if self.results_ is None:
            raise ValueError("Must call fit() first")
        return self.results_


class ROCAUC(RankingMetric):
    """
    Area under the ROC curve of a ranking.

    Parameters
    ----------
    compare : callable, optional
        Three-way comparison of rank keys used to detect ties.
    tolerance : float, default=DIAGONAL_TOLERANCE
        Diagonal simplification tolerance of the curve.

    Examples
    --------
    >>> metric = ROCAUC().fit(4, {"a", "b"}, [(4, "a"), (3, "b"), (2, "c"), (1, "d")])
    >>> metric.score()
    1.0
    """

    def __init__(
        self, compare: Optional[Compare] = None, tolerance: float = DIAGONAL_TOLERANCE
    ):
        super().__init__()
        self.compare = compare
        self.tolerance = tolerance

    def compute(
        self, size: int, positives: Iterable[Hashable], ranked: Iterable, **kwargs
    ) -> Dict[str, Any]:
        positives = ensure_set(positives)
        curve = materialize_roc(
            size, positives, ranked, compare=self.compare, tolerance=self.tolerance
        )
        return {
            "curve": curve,
            "auc": compute_roc_auc(curve),
            "n_positives": len(positives),
            "n_negatives": size - len(positives),
        }

    def _get_primary_score(self) -> float:
        return self.results_["auc"]
