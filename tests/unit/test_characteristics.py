"""
Tests for Pareto characteristic evaluators

This module checks the PDF, CDF, quantile and MGF factories against their
closed forms, against ``scipy.stats.pareto`` and against direct numerical
integration.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from scipy import special
from scipy.integrate import quad
from scipy.stats import pareto

from pysatl_pareto.characteristics import (
    ParetoCDF,
    ParetoMGF,
    ParetoPDF,
    ParetoQuantile,
    make_cdf,
    make_mgf,
    make_pdf,
    make_quantile,
)
from pysatl_pareto.types import CharacteristicName

from .base import BaseDistributionTest

PARAMETERS = [(2.0, 3.0), (0.5, 1.0), (1.0, 1.0), (4.5, 0.25), (10.0, 2.0)]
PARAMETER_IDS = ["a=2,b=3", "a=0.5,b=1", "a=1,b=1", "a=4.5,b=0.25", "a=10,b=2"]


class TestFactories:
    @pytest.mark.parametrize(
        "factory, cls, target",
        [
            (make_pdf, ParetoPDF, CharacteristicName.PDF),
            (make_cdf, ParetoCDF, CharacteristicName.CDF),
            (make_quantile, ParetoQuantile, CharacteristicName.PPF),
            (make_mgf, ParetoMGF, CharacteristicName.MGF),
        ],
        ids=["pdf", "cdf", "quantile", "mgf"],
    )
    def test_factory_binds_parameters(self, factory, cls, target):
        evaluator = factory(2.0, 3.0)

        assert isinstance(evaluator, cls)
        assert evaluator.shape == 2.0
        assert evaluator.scale == 3.0
        assert evaluator.target == target

    def test_evaluators_are_immutable(self):
        pdf = make_pdf(2.0, 3.0)
        with pytest.raises(FrozenInstanceError):
            pdf.shape = 5.0  # type: ignore[misc]

    def test_evaluate_matches_call(self):
        cdf = make_cdf(2.0, 3.0)
        assert cdf.evaluate(6.0) == cdf(6.0)

    def test_equal_parameters_give_equal_evaluators(self):
        assert make_pdf(2.0, 3.0) == make_pdf(2.0, 3.0)
        assert make_pdf(2.0, 3.0) != make_pdf(2.0, 4.0)


class TestPDF(BaseDistributionTest):
    def test_concrete_values(self):
        pdf = make_pdf(2.0, 3.0)

        assert abs(pdf(3.0) - 2.0 / 3.0) < self.CALCULATION_PRECISION
        assert pdf(1.0) == 0.0

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_zero_below_scale(self, a, b):
        pdf = make_pdf(a, b)
        for x in (-10.0, 0.0, b / 2, b - 1e-9):
            assert pdf(x) == 0.0

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_closed_form_from_scale(self, a, b):
        pdf = make_pdf(a, b)
        for x in (b, 1.5 * b, 4 * b, 100 * b):
            expected = a * b**a / x ** (a + 1)
            assert math.isclose(pdf(x), expected, rel_tol=1e-12)

    def test_boundary_is_nonzero(self):
        pdf = make_pdf(3.0, 2.0)
        assert pdf(2.0) == pytest.approx(3.0 / 2.0)

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_matches_scipy(self, a, b):
        pdf = make_pdf(a, b)
        points = np.array([0.5 * b, b, 1.3 * b, 2 * b, 7 * b])

        actual = np.array([pdf(x) for x in points])
        expected = pareto.pdf(points, a, scale=b)

        self.assert_arrays_almost_equal(actual, expected)

    def test_infinite_argument(self):
        assert make_pdf(2.0, 1.0)(math.inf) == 0.0

    def test_large_shape_at_boundary(self):
        assert make_pdf(400.0, 10.0)(10.0) == pytest.approx(40.0, rel=1e-12)

    def test_large_shape_stays_finite(self):
        pdf = make_pdf(400.0, 10.0)
        for x in (10.0, 10.01, 11.0, 20.0, 1e6):
            value = pdf(x)
            assert math.isfinite(value)
            assert value >= 0.0

    def test_nan_is_outside_support(self):
        assert make_pdf(2.0, 3.0)(math.nan) == 0.0

    def test_accepts_numpy_scalars(self):
        pdf = make_pdf(2.0, 3.0)
        assert pdf(np.float32(3.0)) == pytest.approx(2.0 / 3.0)
        assert pdf(np.int64(6)) == pytest.approx(2.0 * 9.0 / 216.0)


class TestCDF(BaseDistributionTest):
    def test_concrete_values(self):
        cdf = make_cdf(2.0, 3.0)

        assert abs(cdf(6.0) - 0.75) < self.CALCULATION_PRECISION
        assert cdf(1.0) == 0.0

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_zero_up_to_scale(self, a, b):
        cdf = make_cdf(a, b)
        for x in (-1.0, 0.0, b / 3):
            assert cdf(x) == 0.0
        assert cdf(b) == 0.0

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_within_unit_interval(self, a, b):
        cdf = make_cdf(a, b)
        for x in (b, 1.01 * b, 2 * b, 5 * b):
            value = cdf(x)
            assert 0.0 <= value < 1.0
            assert math.isclose(value, 1 - (b / x) ** a, rel_tol=1e-12, abs_tol=1e-15)

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_matches_scipy(self, a, b):
        cdf = make_cdf(a, b)
        points = np.array([0.5 * b, b, 1.3 * b, 2 * b, 7 * b])

        actual = np.array([cdf(x) for x in points])
        expected = pareto.cdf(points, a, scale=b)

        self.assert_arrays_almost_equal(actual, expected)

    def test_monotone(self):
        cdf = make_cdf(1.5, 2.0)
        values = [cdf(x) for x in np.linspace(0.0, 40.0, 201)]
        assert all(v2 >= v1 for v1, v2 in zip(values, values[1:], strict=False))

    def test_nan_is_outside_support(self):
        assert make_cdf(2.0, 3.0)(math.nan) == 0.0

    def test_large_shape(self):
        cdf = make_cdf(400.0, 10.0)
        assert cdf(10.0) == 0.0
        assert cdf(20.0) == pytest.approx(1.0)


class TestQuantile(BaseDistributionTest):
    def test_concrete_values(self):
        q = make_quantile(2.0, 3.0)

        assert abs(q(0.75) - 6.0) < self.CALCULATION_PRECISION
        assert q(0.0) == 3.0

    @pytest.mark.parametrize(
        "p",
        [1.0, 1.5, -0.1, -1.0, math.inf, -math.inf, math.nan],
        ids=["one", "above_one", "slightly_negative", "minus_one", "+inf", "-inf", "nan"],
    )
    def test_undefined_outside_unit_interval(self, p):
        assert math.isnan(make_quantile(2.0, 3.0)(p))

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_round_trip_with_cdf(self, a, b):
        q = make_quantile(a, b)
        cdf = make_cdf(a, b)
        for p in (0.0, 0.001, 0.1, 0.25, 0.5, 0.75, 0.9, 0.999):
            assert cdf(q(p)) == pytest.approx(p, abs=1e-9)

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_matches_scipy(self, a, b):
        q = make_quantile(a, b)
        probabilities = np.array([0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9])

        actual = np.array([q(p) for p in probabilities])
        expected = pareto.ppf(probabilities, a, scale=b)

        np.testing.assert_allclose(actual, expected, rtol=1e-10)


class TestMGF(BaseDistributionTest):
    @staticmethod
    def _mgf_by_integration(a: float, b: float, t: float) -> float:
        value, _ = quad(
            lambda x: math.exp(t * x) * a * b**a / x ** (a + 1),
            b,
            math.inf,
            epsabs=1e-13,
            epsrel=1e-11,
            limit=200,
        )
        return value

    @pytest.mark.parametrize("a, b", PARAMETERS, ids=PARAMETER_IDS)
    def test_one_at_origin(self, a, b):
        assert make_mgf(a, b)(0.0) == 1.0
        assert make_mgf(a, b)(0) == 1.0

    @pytest.mark.parametrize("t", [1e-9, 0.5, 1.0, 100.0, math.inf, math.nan])
    def test_undefined_for_positive_argument(self, t):
        assert math.isnan(make_mgf(2.0, 3.0)(t))

    @pytest.mark.parametrize(
        "a, b, t",
        [
            (2.0, 1.0, -1.0),
            (3.0, 1.0, -0.5),
            (2.5, 2.0, -1.0),
            (0.5, 1.0, -2.0),
            (1.0, 3.0, -0.2),
            (4.7, 0.5, -3.0),
        ],
        ids=[
            "integer_shape",
            "integer_shape_3",
            "half_integer",
            "small_shape",
            "unit_shape",
            "a=4.7",
        ],
    )
    def test_matches_numerical_integration(self, a, b, t):
        actual = make_mgf(a, b)(t)
        expected = self._mgf_by_integration(a, b, t)

        assert actual == pytest.approx(expected, rel=1e-6, abs=0)

    def test_known_value(self):
        # a=2, b=1, t=-1 reduces to 2 * E_3(1)
        assert make_mgf(2.0, 1.0)(-1.0) == pytest.approx(0.2193839343955203, rel=1e-9)

    def test_bounded_by_one_for_negative_argument(self):
        mgf = make_mgf(3.0, 2.0)
        for t in (-0.01, -0.1, -1.0, -5.0, -50.0, -100.0):
            assert 0.0 < mgf(t) < 1.0

    @pytest.mark.parametrize(
        "a, b, t",
        [(30.0, 10.0, -5.0), (20.0, 1.0, -100.0), (10.0, 1.0, -50.0), (15.0, 1.0, -40.0)],
        ids=["a=30,b=10,t=-5", "a=20,t=-100", "a=10,t=-50", "a=15,t=-40"],
    )
    def test_far_tail_integer_shape(self, a, b, t):
        # for integer a the MGF reduces to a * E_{a+1}(-b t)
        expected = a * special.expn(int(a) + 1, -b * t)
        assert make_mgf(a, b)(t) == pytest.approx(expected, rel=1e-9, abs=0)

    @pytest.mark.parametrize(
        "a, b, t", [(15.5, 1.0, -40.0), (22.3, 2.0, -30.0)], ids=["a=15.5", "a=22.3"]
    )
    def test_far_tail_non_integer_shape(self, a, b, t):
        # the integrand falls by e^-50 over [b, b + 50 / |t|]
        expected, _ = quad(
            lambda x: math.exp(t * x) * a * b**a / x ** (a + 1),
            b,
            b + 50.0 / -t,
            epsabs=0,
            epsrel=1e-12,
            limit=200,
        )
        assert make_mgf(a, b)(t) == pytest.approx(expected, rel=1e-8, abs=0)
