"""core.easing をテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from sketchkit.core import easing
from sketchkit.core.runtime_config import set_config_path


@pytest.mark.parametrize("name", easing.easing_names())
def test_named_easings_fix_endpoints(name: str) -> None:
    f = easing.easing_by_name(name)
    assert f(0.0) == pytest.approx(0.0, abs=1e-9)
    assert f(1.0) == pytest.approx(1.0, abs=1e-9)


def test_easing_names_cover_every_direction_and_curve() -> None:
    names = easing.easing_names()
    assert names[0] == "linear"
    assert len(names) == 1 + len(easing.EaseDirection) * len(easing.EaseCurve)
    assert "in_out_cubic" in names
    assert "out_in_back" in names


def test_known_values() -> None:
    assert easing.in_quad(0.5) == pytest.approx(0.25)
    assert easing.out_quad(0.5) == pytest.approx(0.75)
    assert easing.in_cubic(0.5) == pytest.approx(0.125)
    assert easing.out_cubic(0.5) == pytest.approx(0.875)
    assert easing.in_quart(0.5) == pytest.approx(0.0625)
    assert easing.in_expo(0.5) == pytest.approx(2.0**-5)
    assert easing.in_out_quad(0.5) == pytest.approx(0.5)
    assert easing.in_out_quad(0.25) == pytest.approx(0.125)


def test_back_overshoots() -> None:
    in_back = easing.create_in_back()
    out_back = easing.create_out_back()
    assert in_back(0.3) < 0.0
    assert out_back(0.7) > 1.0


def test_back_coefficient_defaults_to_config(tmp_path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("easing:\n  back_coefficient: 0.0\n", encoding="utf-8")
    set_config_path(cfg)

    # 係数 0 の in_back は in_cubic と一致する。
    f = easing.create_in_back()
    assert f(0.5) == pytest.approx(easing.in_cubic(0.5))


def test_integrate_scales_halves() -> None:
    f = easing.integrate(easing.linear, easing.linear, 0.25)
    assert f(0.25) == pytest.approx(0.25)
    assert f(0.125) == pytest.approx(0.125)
    assert f(0.625) == pytest.approx(0.625)


def test_concatenate_does_not_normalize() -> None:
    f = easing.concatenate(easing.linear, easing.linear)
    assert f(0.25) == pytest.approx(0.5)
    assert f(0.5) == pytest.approx(0.0)
    assert f(0.75) == pytest.approx(0.5)


def test_get_easing_lookup() -> None:
    assert easing.get_easing("quad", "in") is easing.in_quad
    assert easing.get_easing(easing.EaseCurve.EXPO, easing.EaseDirection.OUT_IN) is easing.out_in_expo
    f = easing.get_easing("back", "in", coefficient=0.0)
    assert f(0.5) == pytest.approx(0.125)


@pytest.mark.parametrize(("curve", "direction"), [("sine", "in"), ("quad", "sideways")])
def test_get_easing_rejects_unknown(curve: str, direction: str) -> None:
    with pytest.raises(ValueError):
        easing.get_easing(curve, direction)


def test_easing_by_name_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        easing.easing_by_name("bounce")


def test_sample_easing() -> None:
    samples = easing.sample_easing(easing.in_quad, 5)
    assert samples.shape == (5, 2)
    np.testing.assert_allclose(samples[:, 0], [0.0, 0.25, 0.5, 0.75, 1.0])
    np.testing.assert_allclose(samples[:, 1], samples[:, 0] ** 2)
