import numpy as np
import pytest
from rankroc.base import ROCAUC, RankingMetric
from rankroc.metrics.adapters import SimpleAdapter


class TestROCAUCMetric:
    """Test suite for the fit/score metric interface."""

    def test_fit_score(self):
        metric = ROCAUC()
        result = metric.fit(4, {"A", "B"}, [(4, "A"), (3, "B"), (2, "C"), (1, "D")])

        assert result is metric
        assert metric.score() == 1.0

        results = metric.get_results()
        assert set(results.keys()) == {"curve", "auc", "n_positives", "n_negatives"}
        assert results["n_positives"] == 2
        assert results["n_negatives"] == 2
        np.testing.assert_array_equal(results["curve"][-1], [1.0, 1.0])

    def test_cursor_input(self):
        metric = ROCAUC().fit(4, ["A", "B"], SimpleAdapter(["D", "C", "B", "A"]))
        assert metric.score() == 0.0

    def test_compare_parameter(self):
        def same_sign(a, b):
            return (a > 0) - (b > 0)

        ranked = [(2, "A"), (1, "C"), (-1, "B"), (-2, "D")]
        assert ROCAUC().fit(4, {"A", "B"}, ranked).score() == pytest.approx(0.75)
        # Only the sign separates items: two tie blocks of one positive each
        assert ROCAUC(compare=same_sign).fit(4, {"A", "B"}, ranked).score() == pytest.approx(0.5)

    def test_not_fitted(self):
        metric = ROCAUC()
        with pytest.raises(ValueError, match="fit"):
            metric.score()
        with pytest.raises(ValueError, match="fit"):
            metric.get_results()

    def test_abstract(self):
        with pytest.raises(TypeError):
            RankingMetric()
