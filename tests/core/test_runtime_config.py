from pathlib import Path

import pytest

from sketchkit.core.runtime_config import output_root_dir, runtime_config, set_config_path


def test_packaged_defaults() -> None:
    assert output_root_dir() == Path("data") / "output"
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.ellipse_detail == 64
    assert cfg.back_coefficient == pytest.approx(1.70158)
    assert cfg.pixel_density == 1
    assert cfg.svg_decimals == 3


def test_runtime_config_is_cached() -> None:
    assert runtime_config() is runtime_config()


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path) -> None:
    discovered = tmp_path / ".sketchkit" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text('paths:\n  output_dir: "./out_discovered"\n', encoding="utf-8")

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.output_dir == Path("out_discovered")
    # トップレベル単位の上書きなので、他のセクションは同梱値のまま。
    assert cfg.ellipse_detail == 64


def test_home_config_is_discovered(tmp_path: Path) -> None:
    home_cfg = tmp_path / ".config" / "sketchkit" / "config.yaml"
    home_cfg.parent.mkdir(parents=True, exist_ok=True)
    home_cfg.write_text("shapes:\n  ellipse_detail: 12\n", encoding="utf-8")

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.ellipse_detail == 12


def test_explicit_config_overrides_discovered_config(tmp_path: Path) -> None:
    discovered = tmp_path / ".sketchkit" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text('paths:\n  output_dir: "./out_discovered"\n', encoding="utf-8")

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text('paths:\n  output_dir: "./out_explicit"\n', encoding="utf-8")

    set_config_path(explicit)
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.output_dir == Path("out_explicit")


def test_set_config_path_invalidates_cache(tmp_path: Path) -> None:
    first = runtime_config()
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("pixels:\n  density: 2\n", encoding="utf-8")

    set_config_path(explicit)
    second = runtime_config()
    assert second is not first
    assert second.pixel_density == 2


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    set_config_path(tmp_path / "missing.yaml")
    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "- a\n- b\n",
        "shapes: [1, 2]\n",
        "shapes:\n  ellipse_detail: many\n",
        "shapes:\n  ellipse_detail: true\n",
        "easing:\n  back_coefficient: steep\n",
        "paths:\n  output_dir: ''\n",
        "key: [unclosed\n",
    ],
)
def test_invalid_config_raises_runtime_error(tmp_path: Path, text: str) -> None:
    explicit = tmp_path / "bad.yaml"
    explicit.write_text(text, encoding="utf-8")
    set_config_path(explicit)
    with pytest.raises(RuntimeError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "shapes:\n  ellipse_detail: 2\n",
        "pixels:\n  density: 0\n",
        "export:\n  svg:\n    decimals: -1\n",
    ],
)
def test_out_of_range_config_raises_value_error(tmp_path: Path, text: str) -> None:
    explicit = tmp_path / "bad.yaml"
    explicit.write_text(text, encoding="utf-8")
    set_config_path(explicit)
    with pytest.raises(ValueError):
        runtime_config()
