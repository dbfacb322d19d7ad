"""Basic usage example of ROC evaluation for rankings."""
import numpy as np
from sklearn.ensemble import IsolationForest
from sklearn.datasets import make_blobs

import rankroc


def main():
    # Generate synthetic data
    print("Generating synthetic data...")
    X_normal, blob_labels = make_blobs(n_samples=800, centers=3, n_features=2, random_state=42)

    # Add some anomalies
    rng = np.random.default_rng(42)
    X_anomalies = rng.uniform(-8, 8, size=(50, 2))
    X = np.vstack([X_normal, X_anomalies])
    y = np.hstack([np.zeros(len(X_normal)), np.ones(len(X_anomalies))])

    print(f"Dataset: {X.shape[0]} samples, {int(y.sum())} anomalies")

    # Train anomaly detector
    print("\nTraining Isolation Forest...")
    detector = IsolationForest(contamination=0.1, random_state=42)
    detector.fit(X)

    # Convert to positive scores (higher = more anomalous)
    scores = -detector.score_samples(X)

    # Evaluate the score vector directly
    print("\n=== ROC AUC from scores ===")
    auc = rankroc.roc_auc_from_scores(scores, y)
    print(f"ROC AUC: {auc:.4f} (higher is better, 0.5 is chance)")

    # Same evaluation through an outlier scoring result
    print("\n=== ROC AUC from outlier scores ===")
    score_map = dict(enumerate(scores.tolist()))
    outliers = set(np.flatnonzero(y).tolist())
    print(f"ROC AUC: {rankroc.roc_auc_outlier_scores(outliers, score_map):.4f}")

    # Inspect the simplified curve
    print("\n=== ROC curve ===")
    curve = rankroc.roc_curve_from_scores(scores, y)
    print(f"{len(curve)} curve points after simplification")
    for fpr, tpr in curve[:: max(1, len(curve) // 10)]:
        print(f"  FPR={fpr:.3f}  TPR={tpr:.3f}")

    # Rank-statistic cross-check
    print("\n=== Mann-Whitney cross-check ===")
    print(f"Rank AUC: {rankroc.rank_auc(scores, y):.4f}")

    # Neighbor ranking of a query point against its own cluster
    print("\n=== Neighbor query ===")
    query = X_normal[0]
    distances = np.linalg.norm(X_normal - query, axis=1)
    neighbors = sorted(zip(distances.tolist(), range(len(X_normal))))
    cluster = set(np.flatnonzero(blob_labels == blob_labels[0]).tolist())
    auc = rankroc.roc_auc_distance_result(len(X_normal), cluster, neighbors)
    print(f"Cluster ROC AUC of the query's neighbors: {auc:.4f}")


if __name__ == "__main__":
    main()
