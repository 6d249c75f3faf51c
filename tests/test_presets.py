"""
Tests for curve configuration and presets.

Run with: pytest tests/test_presets.py -v
"""

import json
import logging

import numpy as np
import pytest

from transform_curves import (
    CURVE_PRESETS,
    CurveConfig,
    CurveConfigError,
    CurveFamily,
    TransformError,
    UnknownCurveError,
    apply_curve,
    apply_curve_to_range,
    get_curve,
    list_curves,
    normalized_bezier,
    smooth_start,
    smooth_step_x,
    smooth_stop,
)


class TestCurveConfig:
    """Declarative curve descriptions."""

    def test_defaults(self):
        config = CurveConfig()
        assert config.family == "smooth_step"
        assert config.power == 2.0
        assert config.controls == []

    def test_enum_family_is_normalized(self):
        config = CurveConfig(family=CurveFamily.ARCH, power=1)
        assert config.family == "arch"

    def test_evaluate_power_family(self):
        config = CurveConfig("smooth_step", 2.5)
        assert config.evaluate(0.3) == smooth_step_x(0.3, 2.5)

    def test_evaluate_linear(self):
        assert CurveConfig("linear").evaluate(0.42) == 0.42

    def test_evaluate_bezier(self):
        config = CurveConfig("bezier", controls=[0.1, 0.9])
        assert config.evaluate(0.3) == normalized_bezier(0.3, [0.1, 0.9])

    def test_controls_coerced_to_float(self):
        config = CurveConfig("bezier", controls=np.array([0, 1]))
        assert config.controls == [0.0, 1.0]
        assert all(isinstance(v, float) for v in config.controls)

    def test_unknown_family_rejected(self):
        with pytest.raises(CurveConfigError) as exc_info:
            CurveConfig(family="wobble")
        assert exc_info.value.details["field"] == "family"
        assert "wobble" in str(exc_info.value)

    def test_negative_power_rejected(self):
        with pytest.raises(CurveConfigError):
            CurveConfig(family="smooth_start", power=-1.0)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            CurveConfig(family="wobble")


class TestSampling:
    """Evenly spaced sampling over 0-1."""

    def test_sample_length_and_endpoints(self):
        samples = CurveConfig("smooth_stop", 3).sample(11)
        assert isinstance(samples, np.ndarray)
        assert len(samples) == 11
        assert samples[0] == 0.0
        assert samples[-1] == 1.0

    def test_sample_matches_evaluate(self):
        config = CurveConfig("arch", 1.5)
        ts = np.linspace(0.0, 1.0, 9)
        np.testing.assert_allclose(config.sample(9), [config.evaluate(t) for t in ts])

    def test_bezier_sample_matches_evaluate(self):
        config = CurveConfig("bezier", controls=[0.0, 1.0, 1.4])
        ts = np.linspace(0.0, 1.0, 9)
        np.testing.assert_allclose(
            config.sample(9), [config.evaluate(t) for t in ts], atol=1e-12
        )


class TestSerialization:
    """Plain dict conversion."""

    def test_to_dict_is_json_serializable(self):
        config = CurveConfig("bezier", controls=[0.25, 0.75])
        data = config.to_dict()
        assert json.loads(json.dumps(data)) == data

    def test_from_dict(self):
        config = CurveConfig.from_dict({"family": "smooth_start", "power": 3.5})
        assert config == CurveConfig("smooth_start", 3.5)

    def test_from_dict_defaults(self):
        assert CurveConfig.from_dict({}) == CurveConfig()

    def test_from_dict_validates(self):
        with pytest.raises(CurveConfigError):
            CurveConfig.from_dict({"family": "smooth_start", "power": -2})

    def test_round_trip(self):
        config = CurveConfig("arch", 2.25)
        assert CurveConfig.from_dict(config.to_dict()) == config


class TestPresets:
    """Named curve presets."""

    def test_list_curves_sorted(self):
        names = list_curves()
        assert names == sorted(CURVE_PRESETS)
        assert "easeInOutCubic" in names

    def test_get_curve(self):
        assert get_curve("easeIn") == CurveConfig("smooth_start", 2)

    def test_get_unknown_curve(self):
        with pytest.raises(UnknownCurveError) as exc_info:
            get_curve("nope")
        assert exc_info.value.details["name"] == "nope"
        assert str(exc_info.value) == "Unknown curve preset: nope (name='nope')"

    def test_unknown_curve_error_hierarchy(self):
        with pytest.raises(KeyError):
            get_curve("nope")
        with pytest.raises(TransformError):
            get_curve("nope")

    def test_apply_curve(self):
        assert apply_curve(0.5, "easeIn") == smooth_start(0.5, 2)
        assert apply_curve(0.5, "easeOutCubic") == smooth_stop(0.5, 3)

    def test_apply_unknown_curve_falls_back_to_linear(self, caplog):
        with caplog.at_level(logging.WARNING, logger="transform_curves.presets"):
            assert apply_curve(0.3, "nope") == 0.3
        assert "nope" in caplog.text

    def test_apply_curve_to_range(self):
        assert apply_curve_to_range(0.5, 10.0, 20.0, "easeIn") == 12.5
        assert apply_curve_to_range(0.5, 10.0, 20.0) == 15.0

    @pytest.mark.parametrize("name", sorted(CURVE_PRESETS))
    def test_presets_start_at_zero(self, name):
        assert apply_curve(0.0, name) == pytest.approx(0.0)

    @pytest.mark.parametrize("name", sorted(CURVE_PRESETS))
    def test_presets_end_at_zero_or_one(self, name):
        expected = 0.0 if CURVE_PRESETS[name].family == "arch" else 1.0
        assert apply_curve(1.0, name) == pytest.approx(expected)
