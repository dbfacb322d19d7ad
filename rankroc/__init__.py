"""ROC Evaluation for Rankings.

This package computes Receiver Operating Characteristic curves and the area
under them for rankings evaluated against a set of known positives:
- ROC curves: Tie-aware, simplified curves from sorted (rank, id) pairs
- ROC AUC: Trapezoidal area under the curve
- Ranking adapters: Identifier lists, distance query results, outlier scores
- Score vectors: AUC of numpy/pandas/polars scores against binary labels

Rankings must already be sorted; only the relative order of items matters.
"""

from rankroc.metrics import (
    materialize_roc,
    compute_roc_auc,
    roc_auc,
    roc_auc_simple,
    roc_auc_distance_result,
    roc_auc_outlier_scores,
    roc_curve_from_scores,
    roc_auc_from_scores,
    ROCCurveBuilder,
    SimpleAdapter,
    DistanceResultAdapter,
    OutlierScoreAdapter,
    UnsupportedOperationError,
)
from .base import RankingMetric, ROCAUC
from .utils import validate_scores, validate_labels, compute_auc, rank_auc

__version__ = "0.0.1"

__all__ = [
    # Core metrics
    "materialize_roc",
    "compute_roc_auc",
    "roc_auc",
    "roc_auc_simple",
    "roc_auc_distance_result",
    "roc_auc_outlier_scores",
    "roc_curve_from_scores",
    "roc_auc_from_scores",
    "ROCAUC",
    "RankingMetric",
    # Ranking adapters
    "ROCCurveBuilder",
    "SimpleAdapter",
    "DistanceResultAdapter",
    "OutlierScoreAdapter",
    "UnsupportedOperationError",
    # Utilities
    "validate_scores",
    "validate_labels",
    "compute_auc",
    "rank_auc",
]
