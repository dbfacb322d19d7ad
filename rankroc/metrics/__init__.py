"""ROC evaluation metrics for rankings."""

from .adapters import (
    RankingCursor,
    SimpleAdapter,
    DistanceResultAdapter,
    OutlierScoreAdapter,
    UnsupportedOperationError,
)
from .roc import (
    DIAGONAL_TOLERANCE,
    ROCCurveBuilder,
    materialize_roc,
    compute_roc_auc,
    roc_auc,
    roc_auc_simple,
    roc_auc_distance_result,
    roc_auc_outlier_scores,
)
from .scores import roc_curve_from_scores, roc_auc_from_scores

__all__ = [
    "RankingCursor",
    "SimpleAdapter",
    "DistanceResultAdapter",
    "OutlierScoreAdapter",
    "UnsupportedOperationError",
    "DIAGONAL_TOLERANCE",
    "ROCCurveBuilder",
    "materialize_roc",
    "compute_roc_auc",
    "roc_auc",
    "roc_auc_simple",
    "roc_auc_distance_result",
    "roc_auc_outlier_scores",
    "roc_curve_from_scores",
    "roc_auc_from_scores",
]
