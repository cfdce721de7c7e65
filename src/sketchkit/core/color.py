"""
どこで: `src/sketchkit/core/color.py`。
何を: RGBA255 の色値と、その解釈・アルファ差し替え・反転・補間を提供する。
なぜ: カラーコード文字列とタプルを同じ `Color` に揃えて、ピクセル操作や SVG 出力で共有するため。
"""

from __future__ import annotations

from typing import Any, NamedTuple, Union


class Color(NamedTuple):
    """RGBA（各 0..255 の int）。"""

    r: int
    g: int
    b: int
    a: int = 255

    def to_hex(self, *, with_alpha: bool = False) -> str:
        """`#rrggbb`（`with_alpha=True` なら `#rrggbbaa`）を返す。"""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if with_alpha:
            text += f"{self.a:02x}"
        return text


ColorLike = Union[Color, str, tuple, list]


def _clamp255(v: Any) -> int:
    iv = int(round(float(v)))
    return 0 if iv < 0 else 255 if iv > 255 else iv


def _parse_hex(text: str) -> Color:
    body = text[1:]
    if len(body) in (3, 4):
        body = "".join(ch * 2 for ch in body)
    if len(body) not in (6, 8):
        raise ValueError(f"カラーコードは #RGB / #RRGGBB / #RRGGBBAA のいずれかです: {text!r}")
    try:
        channels = [int(body[i : i + 2], 16) for i in range(0, len(body), 2)]
    except ValueError as exc:
        raise ValueError(f"カラーコードに 16 進数以外の文字が含まれています: {text!r}") from exc
    return Color(*channels)


def parse_color(value: ColorLike) -> Color:
    """色指定を `Color` に正規化して返す。

    Parameters
    ----------
    value : Color | str | tuple | list
        `Color`、`"#RGB"` / `"#RGBA"` / `"#RRGGBB"` / `"#RRGGBBAA"`、
        または 3/4 要素の数値シーケンス（0..255、範囲外は clamp）。

    Returns
    -------
    Color
        正規化済みの色。アルファ省略時は 255。

    Raises
    ------
    ValueError
        解釈できない値の場合。
    """

    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text.startswith("#"):
            raise ValueError(f"カラーコードは '#' で始まる必要があります: {value!r}")
        return _parse_hex(text)
    try:
        channels = list(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ValueError(f"色として解釈できません: {value!r}") from exc
    if len(channels) not in (3, 4):
        raise ValueError(f"色は 3 または 4 要素である必要があります: {value!r}")
    try:
        return Color(*(_clamp255(c) for c in channels))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"色の要素は数値である必要があります: {value!r}") from exc


def color_with_alpha(value: ColorLike, alpha: float) -> Color:
    """RGB はそのままにアルファだけを `alpha` に差し替えた色を返す。"""
    c = parse_color(value)
    return c._replace(a=_clamp255(alpha))


def reverse_color(value: ColorLike) -> Color:
    """RGB を反転（255 - v）した色を返す。アルファは保持する。"""
    c = parse_color(value)
    return Color(255 - c.r, 255 - c.g, 255 - c.b, c.a)


def lerp_color(from_color: ColorLike, to_color: ColorLike, t: float) -> Color:
    """2 色を RGBA 各成分で線形補間する。`t` は [0, 1] に clamp する。"""
    a = parse_color(from_color)
    b = parse_color(to_color)
    tt = min(max(float(t), 0.0), 1.0)
    return Color(*(_clamp255(ca + (cb - ca) * tt) for ca, cb in zip(a, b)))


__all__ = ["Color", "ColorLike", "color_with_alpha", "lerp_color", "parse_color", "reverse_color"]
