"""Tests for the SampleStatistics summary object."""

import math
import random
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pandas as pd
import pytest

from cheapstats.sample_statistics import SampleStatistics

SAMPLES = [7.0, 4.0, 1.0, 5.0, 3.0, 10.0, 6.0, 2.0, 8.0, 9.0]


@pytest.fixture
def stats():
    return SampleStatistics(SAMPLES)


class TestReferenceSample:
    """Reference values for the ten-element sample 1..10 in shuffled order."""

    def test_total(self, stats):
        assert stats.total() == 55.0

    def test_mean(self, stats):
        assert stats.mean() == 5.5
        assert stats.average() == 5.5

    def test_min_max(self, stats):
        assert stats.min() == 1.0
        assert stats.max() == 10.0

    def test_quartiles(self, stats):
        assert stats.q1() == 3.0
        assert stats.q3() == 8.0
        assert stats.iqr() == 5.0

    def test_median(self, stats):
        assert stats.median() == 5.5

    def test_std_uses_population_divisor(self, stats):
        assert math.isclose(stats.std(), 2.87228132327, abs_tol=1e-5)
        assert stats.sigma() == stats.std()
        assert math.isclose(stats.variance(), 8.25)
        # sample (n - 1) divisor would give ~3.02765
        assert not math.isclose(stats.std(), float(np.std(SAMPLES, ddof=1)))

    def test_cdf(self, stats):
        assert stats.cdf(1.0) == 0.0
        assert stats.cdf(5.5) == 0.4
        assert stats.cdf(10.0) == 0.9
        assert stats.cdf(10.1) == 1.0

    def test_cdf_below_minimum(self, stats):
        assert stats.cdf(-100) == 0.0


class TestConstruction:
    def test_samples_keep_input_order(self, stats):
        assert list(stats.samples) == SAMPLES
        assert list(stats.sorted_samples) == sorted(SAMPLES)
        assert len(stats) == 10
        assert stats.count == 10

    def test_arrays_are_read_only(self, stats):
        with pytest.raises(ValueError):
            stats.samples[0] = 100.0
        with pytest.raises(ValueError):
            stats.sorted_samples[0] = 100.0

    def test_input_is_copied(self):
        data = np.array([3.0, 1.0, 2.0])
        stats = SampleStatistics(data)
        data[0] = 99.0
        assert stats.max() == 3.0
        assert list(stats.samples) == [3.0, 1.0, 2.0]

    def test_accepts_ints_numpy_and_pandas(self):
        assert SampleStatistics([1, 2, 3]).mean() == 2.0
        assert SampleStatistics(np.arange(1, 4)).mean() == 2.0
        assert SampleStatistics(pd.Series([1.0, 2.0, 3.0])).mean() == 2.0
        assert SampleStatistics((x for x in [1, 2, 3])).total() == 6.0

    def test_non_numeric_raises_type_error(self):
        with pytest.raises(TypeError, match="must be numeric"):
            SampleStatistics([1.0, "2.0", 3.0])
        with pytest.raises(TypeError, match="must be numeric"):
            SampleStatistics([1.0, None])
        with pytest.raises(TypeError, match="must be numeric"):
            SampleStatistics([True, 2.0])
        with pytest.raises(TypeError, match="must be numeric"):
            SampleStatistics(np.array(["a", "b"]))

    def test_string_input_raises_type_error(self):
        with pytest.raises(TypeError):
            SampleStatistics("12345")

    def test_non_finite_raises_value_error(self):
        with pytest.raises(ValueError, match="finite"):
            SampleStatistics([1.0, math.nan])
        with pytest.raises(ValueError, match="finite"):
            SampleStatistics([1.0, math.inf])

    def test_multi_dimensional_raises_value_error(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            SampleStatistics(np.ones((2, 2)))
        with pytest.raises(ValueError, match="one-dimensional"):
            SampleStatistics([[1, 2], [3, 4]])
        with pytest.raises(ValueError, match="one-dimensional"):
            SampleStatistics([1.0, (2.0, 3.0)])

    def test_accepts_values_convertible_to_float(self):
        stats = SampleStatistics([Decimal("1.5"), Fraction(1, 2), np.float32(2.0)])
        assert stats.total() == 4.0
        assert stats.min() == 0.5
        with pytest.raises(TypeError, match="must be numeric"):
            SampleStatistics([1.0, 2 + 3j])


class TestEmptySample:
    def test_construction_succeeds(self):
        stats = SampleStatistics([])
        assert len(stats) == 0
        assert stats.total() == 0.0
        assert repr(stats) == "SampleStatistics(n=0)"

    @pytest.mark.parametrize(
        "accessor",
        ["mean", "min", "max", "q1", "q3", "median", "std", "variance", "skewness"],
    )
    def test_accessors_raise(self, accessor):
        stats = SampleStatistics([])
        with pytest.raises(ValueError, match="at least one sample"):
            getattr(stats, accessor)()

    def test_cdf_raises(self):
        with pytest.raises(ValueError, match="at least one sample"):
            SampleStatistics([]).cdf(0.0)


class TestQuartileConvention:
    def test_odd_count_excludes_middle(self):
        # halves are [1, 2, 3] and [5, 6, 7]
        stats = SampleStatistics([7, 1, 4, 2, 6, 3, 5])
        assert stats.q1() == 2.0
        assert stats.q3() == 6.0
        assert stats.median() == 4.0

    def test_even_halves_average_middle_pair(self):
        # halves are [1, 2, 3, 4] and [5, 6, 7, 8]
        stats = SampleStatistics(range(1, 9))
        assert stats.q1() == 2.5
        assert stats.q3() == 6.5

    def test_single_sample(self):
        stats = SampleStatistics([4.2])
        assert stats.q1() == 4.2
        assert stats.q3() == 4.2
        assert stats.median() == 4.2
        assert stats.std() == 0.0

    def test_two_samples(self):
        stats = SampleStatistics([3.0, 1.0])
        assert stats.q1() == 1.0
        assert stats.q3() == 3.0


class TestCdfTies:
    def test_equal_values_not_counted(self):
        stats = SampleStatistics([1, 2, 2, 2, 3])
        assert stats.cdf(2) == 0.2
        assert stats.cdf(2.5) == 0.2
        assert stats.cdf(3) == 0.8
        assert stats.cdf(3.5) == 1.0

    def test_between_samples_holds_lower_level(self, stats):
        assert stats.cdf(5.5) == stats.cdf(5.0) == 0.4
        assert stats.cdf(2.5) == 0.1
        assert stats.cdf(7.5) == 0.6
        assert stats.cdf(9.99) == 0.8
        assert stats.cdf(0.5) == 0.0

    def test_accepts_decimal_x(self, stats):
        assert stats.cdf(Decimal("5.5")) == 0.4

    def test_rejects_non_numeric_x(self, stats):
        with pytest.raises(TypeError):
            stats.cdf("5")
        with pytest.raises(ValueError, match="NaN"):
            stats.cdf(math.nan)


class TestGeneralProperties:
    @pytest.mark.parametrize(
        "data",
        [
            [5, 1, 9, 3],
            [2, 2, 2, 100],
            [-3.5, 0.0, 12.25, 7.0, 1.5],
            list(range(50)),
        ],
    )
    def test_ordering_invariants(self, data):
        stats = SampleStatistics(data)
        assert stats.min() <= stats.mean() <= stats.max()
        assert stats.q1() <= stats.q3()
        assert stats.cdf(stats.min()) == 0.0
        assert stats.cdf(stats.max() + 1.0) == 1.0
        assert stats.std() >= 0.0

    def test_constant_sample_has_zero_std(self):
        assert SampleStatistics([3, 3, 3]).std() == 0.0
        assert SampleStatistics([3, 3, 4]).std() > 0.0

    @pytest.mark.parametrize(
        "value, n",
        [(0.6864838541790798, 29), (0.1, 3), (0.7, 10), (1e-300, 7), (123456.789, 13)],
    )
    def test_constant_float_sample_mean_stays_on_value(self, value, n):
        stats = SampleStatistics([value] * n)
        assert stats.min() <= stats.mean() <= stats.max()
        assert stats.mean() == value
        assert stats.std() == 0.0
        with pytest.raises(ValueError, match="zero standard deviation"):
            stats.z_score(value)
        with pytest.raises(ValueError):
            stats.normal_pdf(value)

    def test_random_constant_samples_have_zero_std(self):
        rng = random.Random(11)
        for _ in range(200):
            value = rng.uniform(-1e3, 1e3)
            stats = SampleStatistics([value] * rng.randint(1, 60))
            assert stats.std() == 0.0
            assert stats.min() <= stats.mean() <= stats.max()

    def test_shuffled_random_floats_keep_mean_in_range(self):
        rng = random.Random(3)
        for _ in range(200):
            data = [rng.uniform(-50.0, 50.0) for _ in range(rng.randint(1, 40))]
            rng.shuffle(data)
            stats = SampleStatistics(data)
            assert stats.min() <= stats.mean() <= stats.max()
            assert stats.q1() <= stats.q3()
            assert stats.std() >= 0.0
            assert stats.cdf(stats.min()) == 0.0
            assert stats.cdf(stats.max() + 1.0) == 1.0

    def test_permutation_invariance(self):
        data = [0.1 * i for i in range(37)]
        shuffled = list(data)
        random.Random(7).shuffle(shuffled)
        a = SampleStatistics(data)
        b = SampleStatistics(shuffled)
        for name in ("total", "mean", "min", "max", "q1", "q3", "median", "std"):
            assert getattr(a, name)() == getattr(b, name)()
        assert a.cdf(1.05) == b.cdf(1.05)

    def test_idempotence(self, stats):
        first = (stats.mean(), stats.std(), stats.q1(), stats.cdf(4.0))
        second = (stats.mean(), stats.std(), stats.q1(), stats.cdf(4.0))
        assert first == second
        assert list(stats.samples) == SAMPLES


def test_repr_shows_count_mean_and_std(stats):
    text = repr(stats)
    assert "n=10" in text
    assert "mean=5.5" in text
