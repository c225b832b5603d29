# tests/test_distributions.py
import numpy as np
import pytest

from twisterkit import (
    RandomTwister,
    discrete_uniformity_pvalue,
    mean_zscore,
    normality_pvalue,
    uniformity_pvalue,
)

# p-values below this would be a 1-in-10^4 fluke for a correct sampler
P_MIN = 1e-4


@pytest.mark.parametrize("low, high", [(0.0, 1.0), (-5.0, 5.0), (99.0, 100.0)])
def test_uniform_real_is_uniform(low, high):
    rng = RandomTwister(12345)
    x = rng.uniform_real(low, high, size=20000)
    p = uniformity_pvalue(x, low, high)
    assert p > P_MIN, f"KS p-value {p:.2e} for U({low}, {high})"


def test_uniform_real_uniform_in_value_not_representation():
    """
    [0, 1] and [99, 100] inside U(0, 100) are hit equally often, even though
    doubles are far denser near 0.
    """
    x = RandomTwister(2).uniform_real(0.0, 100.0, size=200000)
    near_zero = np.count_nonzero(x <= 1.0)
    near_hundred = np.count_nonzero(x >= 99.0)
    # each expected ~2000, sd ~45
    assert abs(near_zero - near_hundred) < 400
    assert 1700 < near_zero < 2300


def test_uniform_int_die_is_fair():
    rng = RandomTwister(42)
    rolls = [rng.uniform_int(1, 6) for _ in range(12000)]
    p = discrete_uniformity_pvalue(rolls, 1, 6)
    assert p > P_MIN, f"chi2 p-value {p:.2e} for a d6"


def test_uniform_int_batch_is_fair():
    rolls = RandomTwister(43).uniform_int(-3, 3, size=14000)
    assert discrete_uniformity_pvalue(rolls, -3, 3) > P_MIN


def test_standard_normal_mean_converges():
    x = RandomTwister(123).normal_real(0.0, 1.0, size=50000)
    assert abs(float(np.mean(x))) < 0.03
    z = mean_zscore(x, 0.0, 1.0)
    assert abs(z) < 4.0, f"sample mean z-score {z:.2f}"


@pytest.mark.parametrize("mean, sigma", [(0.0, 1.0), (10.0, 3.0), (-2.5, 0.1)])
def test_normal_real_matches_parameters(mean, sigma):
    x = RandomTwister(321).normal_real(mean, sigma, size=20000)
    assert normality_pvalue(x, mean, sigma) > P_MIN
    assert abs(float(np.std(x)) - sigma) < 0.05 * sigma


def test_normal_real_defaults_are_standard():
    rng = RandomTwister(5)
    x = np.array([rng.normal_real() for _ in range(5000)])
    assert normality_pvalue(x) > P_MIN


# --- diagnostics themselves -------------------------------------------------


def test_uniformity_pvalue_flags_skewed_samples():
    x = RandomTwister(1).uniform_real(0.0, 0.5, size=2000)
    assert uniformity_pvalue(x, 0.0, 1.0) < 1e-10


def test_normality_pvalue_flags_wrong_mean():
    x = RandomTwister(1).normal_real(0.5, 1.0, size=5000)
    assert normality_pvalue(x, 0.0, 1.0) < 1e-10


def test_discrete_uniformity_flags_loaded_die():
    rolls = [6] * 500 + list(range(1, 7)) * 100
    assert discrete_uniformity_pvalue(rolls, 1, 6) < 1e-10


def test_discrete_uniformity_rejects_out_of_range():
    with pytest.raises(ValueError):
        discrete_uniformity_pvalue([1, 2, 7], 1, 6)


def test_discrete_uniformity_rejects_fractional_samples():
    with pytest.raises(ValueError):
        discrete_uniformity_pvalue([1.5, 2.7, 3.0], 1, 6)


def test_discrete_uniformity_accepts_whole_floats():
    rolls = [float(v) for v in range(1, 7)] * 50
    assert discrete_uniformity_pvalue(rolls, 1, 6) > 0.99


def test_mean_zscore_value():
    assert mean_zscore([1.0, 3.0, 2.0, 2.0], 1.0, 2.0) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "fn",
    [
        lambda: uniformity_pvalue([], 0.0, 1.0),
        lambda: discrete_uniformity_pvalue([], 1, 6),
        lambda: normality_pvalue([]),
        lambda: mean_zscore([], 0.0, 1.0),
    ],
)
def test_diagnostics_reject_empty(fn):
    with pytest.raises(ValueError):
        fn()
