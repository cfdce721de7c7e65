# どこで: `src/sketchkit/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 出力先や既定の分割数などを、コードを書き換えずにユーザーが指定できるようにするため。

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """sketchkit の実行時設定。

    Attributes
    ----------
    config_path:
        採用されたユーザー設定ファイルのパス。同梱デフォルトのみなら None。
    output_dir:
        SVG などの出力先ディレクトリ。
    ellipse_detail:
        楕円 1 周あたりの既定分割数。
    back_coefficient:
        back 系イージングの既定係数。
    pixel_density:
        PixelBuffer の既定ピクセル密度。
    svg_decimals:
        SVG 出力時の小数桁数。
    """

    config_path: Path | None
    output_dir: Path
    ellipse_detail: int
    back_coefficient: float
    pixel_density: int
    svg_decimals: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    いずれの場合もキャッシュを破棄する。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".sketchkit" / "config.yaml",
        home / ".config" / "sketchkit" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml  # type: ignore[import-untyped]

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("sketchkit")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="sketchkit/resource/default_config.yaml")


def _required(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    読み込み元の優先順位（後勝ち）:
    1) 同梱 `sketchkit/resource/default_config.yaml`
    2) `./.sketchkit/config.yaml` / `~/.config/sketchkit/config.yaml`（先に見つかった 1 つ）
    3) `set_config_path()` で明示指定された `config.yaml`

    ユーザー設定の適用はトップレベルの浅い上書きである（ネストの部分マージはしない）。
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _logger.debug("config を適用します: %s", discovered_path)
        payload.update(_load_yaml_config(discovered_path))
    if explicit_path is not None:
        _logger.debug("明示 config を適用します: %s", explicit_path)
        payload.update(_load_yaml_config(explicit_path))

    version = _required(payload.get("version"), key="version")
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _required(_as_optional_path(paths.get("output_dir")), key="paths.output_dir")

    shapes = _as_mapping(payload.get("shapes"), key="shapes")
    ellipse_detail = _required(
        _as_int(shapes.get("ellipse_detail"), key="shapes.ellipse_detail"),
        key="shapes.ellipse_detail",
    )
    if ellipse_detail < 3:
        raise ValueError(f"shapes.ellipse_detail は 3 以上である必要があります: got={ellipse_detail}")

    easing = _as_mapping(payload.get("easing"), key="easing")
    back_coefficient = _required(
        _as_float(easing.get("back_coefficient"), key="easing.back_coefficient"),
        key="easing.back_coefficient",
    )

    pixels = _as_mapping(payload.get("pixels"), key="pixels")
    pixel_density = _required(
        _as_int(pixels.get("density"), key="pixels.density"),
        key="pixels.density",
    )
    if pixel_density < 1:
        raise ValueError(f"pixels.density は 1 以上である必要があります: got={pixel_density}")

    export = _as_mapping(payload.get("export"), key="export")
    svg = _as_mapping(export.get("svg"), key="export.svg")
    svg_decimals = _required(
        _as_int(svg.get("decimals"), key="export.svg.decimals"),
        key="export.svg.decimals",
    )
    if svg_decimals < 0:
        raise ValueError(f"export.svg.decimals は 0 以上である必要があります: got={svg_decimals}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        ellipse_detail=int(ellipse_detail),
        back_coefficient=float(back_coefficient),
        pixel_density=int(pixel_density),
        svg_decimals=int(svg_decimals),
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    cfg = runtime_config()
    return Path(cfg.output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
