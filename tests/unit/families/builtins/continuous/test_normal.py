"""
Tests for Normal Distribution

This module tests the normal distribution used as the log-scale building block
of the log-normal distribution: parameterizations, characteristics and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_lognormal.distributions import ContinuousSupport, ParameterizedDistribution
from pysatl_lognormal.errors import DimensionMismatchError, NullArgumentError, OutOfRangeError
from pysatl_lognormal.families import NormalDistribution
from pysatl_lognormal.families.builtins.continuous.normal import MeanPrec, MeanStd
from pysatl_lognormal.types import (
    CharacteristicName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestNormalDistribution(BaseDistributionTest):
    """Test suite for Normal distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_dist_example = NormalDistribution(mu=2.0, sigma=1.5)

    def test_basic_properties(self):
        """Test basic properties of normal distribution."""
        dist = self.normal_dist_example

        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.name == "meanStd"
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert isinstance(dist, ParameterizedDistribution)
        assert repr(dist) == "NormalDistribution(mu=2.0, sigma=1.5)"

    def test_default_is_standard(self):
        dist = NormalDistribution()
        assert (dist.mu, dist.sigma) == (0.0, 1.0)

    def test_mean_prec_parametrization_creation(self):
        """Test creation of distribution with mean-precision parametrization."""
        dist = NormalDistribution.from_precision(mu=2.0, tau=0.25)

        assert dist.mu == 2.0
        assert abs(dist.sigma - 2.0) < self.CALCULATION_PRECISION

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        # Sigma must be positive
        with pytest.raises(OutOfRangeError, match="sigma > 0"):
            NormalDistribution(mu=0, sigma=-1.0)

        with pytest.raises(OutOfRangeError, match="sigma > 0"):
            NormalDistribution(mu=0, sigma=0.0)

        # Tau must be positive
        with pytest.raises(OutOfRangeError, match="tau > 0"):
            NormalDistribution.from_precision(mu=0, tau=-1.0)

    @pytest.mark.parametrize(
        "params, expected_mu, expected_sigma",
        [
            (MeanStd(mu=2.0, sigma=1.5), 2.0, 1.5),  # type: ignore[call-arg]
            (MeanPrec(mu=2.0, tau=0.25), 2.0, math.sqrt(1 / 0.25)),  # type: ignore[call-arg]
        ],
    )
    def test_parametrization_conversions(self, params, expected_mu, expected_sigma):
        """Test conversions between different parameterizations."""
        base_params = params.transform_to_base_parametrization()

        assert isinstance(base_params, MeanStd)
        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "char_getter, expected",
        [
            (lambda distr: distr.mean, 2.0),
            (lambda distr: distr.median, 2.0),
            (lambda distr: distr.variance, 2.25),
            (lambda distr: distr.standard_deviation, 1.5),
            (lambda distr: distr.skewness, 0.0),
            (lambda distr: distr.calculate_characteristic(CharacteristicName.VAR), 2.25),
        ],
    )
    def test_moments(self, char_getter, expected):
        """Test moment calculations using parameterized tests."""
        actual = char_getter(self.normal_dist_example)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_kurtosis_calculation(self):
        """Test kurtosis calculation with excess parameter."""
        dist = self.normal_dist_example

        assert abs(dist.kurtosis() - 3.0) < self.CALCULATION_PRECISION
        assert abs(dist.kurtosis(excess=True) - 0.0) < self.CALCULATION_PRECISION
        assert abs(dist.kurtosis(excess=False) - 3.0) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 1.0), (1, 2.0), (2, 6.25), (3, 21.5), (4, 85.1875)],
    )
    def test_raw_moments(self, n, expected):
        """Raw moments follow the Gaussian recurrence."""
        assert abs(self.normal_dist_example.moment(n) - expected) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "n, expected",
        [(0, 1.0), (1, 0.0), (2, 2.25), (3, 0.0), (4, 3 * 1.5**4), (6, 15 * 1.5**6)],
    )
    def test_central_moments(self, n, expected):
        """Central moments are sigma^n (n-1)!! for even n and vanish for odd n."""
        actual = self.normal_dist_example.central_moment(n)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_negative_moment_order(self):
        with pytest.raises(OutOfRangeError):
            self.normal_dist_example.moment(-1)
        with pytest.raises(OutOfRangeError):
            self.normal_dist_example.central_moment(-2)

    @pytest.mark.parametrize(
        "method_name, test_data, scipy_func",
        [
            ("pdf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            ("cdf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            ("sf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.sf),
            ("ppf", [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999], norm.ppf),
            ("isf", [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999], norm.isf),
        ],
    )
    def test_array_input_for_characteristics(self, method_name, test_data, scipy_func):
        """Test that characteristics support array inputs."""
        dist = self.normal_dist_example
        char_func = getattr(dist, method_name)

        input_array = np.array(test_data)
        result_array = char_func(input_array)

        assert isinstance(result_array, np.ndarray)
        assert result_array.shape == input_array.shape

        expected_array = scipy_func(input_array, loc=2.0, scale=1.5)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_scalar_input_gives_float(self):
        dist = self.normal_dist_example
        for value in (dist.pdf(2.0), dist.cdf(2.0), dist.sf(2.0), dist.ppf(0.5), dist.isf(0.5)):
            assert isinstance(value, float)
        assert dist.cdf(2.0) == 0.5

    def test_far_upper_tail_survival(self):
        """sf keeps relative accuracy where 1 - cdf underflows to zero."""
        x = 2.0 + 1.5 * 12.0
        assert self.normal_dist_example.cdf(x) == 1.0
        self.assert_relatively_close(self.normal_dist_example.sf(x), norm.sf(12.0), rtol=1e-12)

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        dist = self.normal_dist_example

        assert isinstance(dist.support, ContinuousSupport)

        assert dist.support.left == float("-inf")
        assert dist.support.right == float("inf")
        assert not dist.support.left_closed
        assert not dist.support.right_closed

        assert dist.support.contains(0) is True
        assert dist.support.contains(float("inf")) is False

        test_points = np.array([-500, 0, 5])
        assert np.all(dist.support.contains(test_points))

        assert -1e300 in dist.support

    def test_sampling(self, rng):
        dist = self.normal_dist_example
        sample = dist.sample_many(4000, rng)

        assert sample.shape == (4000, 1)
        assert float(np.mean(sample.array)) == pytest.approx(2.0, abs=0.1)
        assert float(np.std(sample.array)) == pytest.approx(1.5, abs=0.1)

    def test_sample_requires_generator(self):
        with pytest.raises(NullArgumentError):
            self.normal_dist_example.sample(None)  # type: ignore[arg-type]


class TestNormalParameters(BaseDistributionTest):
    """Parameter vector access."""

    def setup_method(self):
        self.dist = NormalDistribution(mu=-1.0, sigma=0.5)

    def test_get_parameters(self):
        params = self.dist.get_parameters()
        assert isinstance(params, np.ndarray)
        np.testing.assert_array_equal(params, [-1.0, 0.5])

    def test_get_parameters_returns_a_copy(self):
        params = self.dist.get_parameters()
        params[0] = 100.0
        assert self.dist.mu == -1.0

    def test_set_parameters(self):
        self.dist.set_parameters([3.0, 2.0])
        assert (self.dist.mu, self.dist.sigma) == (3.0, 2.0)
        assert abs(self.dist.cdf(3.0) - 0.5) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "params, error",
        [
            (None, NullArgumentError),
            ([1.0], DimensionMismatchError),
            ([1.0, 2.0, 3.0], DimensionMismatchError),
            ([1.0, 0.0], OutOfRangeError),
            ([1.0, -2.0], OutOfRangeError),
        ],
    )
    def test_set_parameters_rejects(self, params, error):
        with pytest.raises(error):
            self.dist.set_parameters(params)
        np.testing.assert_array_equal(self.dist.get_parameters(), [-1.0, 0.5])


class TestNormalEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        dist = NormalDistribution(mu=2.0, sigma=1.5)

        # Test boundaries
        assert dist.ppf(0.0) == float("-inf")
        assert dist.ppf(1.0) == float("inf")
        assert dist.isf(0.0) == float("inf")

        # Test invalid probabilities
        with pytest.raises(OutOfRangeError):
            dist.ppf(-0.1)
        with pytest.raises(OutOfRangeError):
            dist.ppf(1.1)
        with pytest.raises(ValueError):
            dist.isf(np.array([0.5, 2.0]))
