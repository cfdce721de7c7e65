# src/sketchkit/core/realized_geometry.py
# トリム済みパスなどの出力である RealizedGeometry 配列のモデルと検証ロジック。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class RealizedGeometry:
    """2D ポリライン集合の実体配列を表現する。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で返す。
    offsets と coords の整合性はコンストラクタ内で検証する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords)
        offsets = np.asarray(self.offsets)

        if coords.ndim == 1 and coords.size == 0:
            coords = coords.reshape(0, 2)

        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")

        # 書き込み不可フラグは元配列に伝播させないため常にコピーする。
        coords = np.array(coords, dtype=np.float64, copy=True)

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")

        offsets = np.array(offsets, dtype=np.int32, copy=True)

        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")

        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")

        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")

        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @property
    def n_lines(self) -> int:
        """ポリライン本数を返す。"""
        return int(self.offsets.size) - 1

    def line(self, index: int) -> np.ndarray:
        """`index` 番目のポリライン（shape (K,2) のビュー）を返す。"""
        start = int(self.offsets[index])
        end = int(self.offsets[index + 1])
        return self.coords[start:end]

    def lines(self) -> list[np.ndarray]:
        """全ポリラインを順に並べた list を返す。"""
        return [self.line(i) for i in range(self.n_lines)]


def empty_geometry() -> RealizedGeometry:
    """ポリラインを 1 本も含まない RealizedGeometry を返す。"""
    coords = np.zeros((0, 2), dtype=np.float64)
    offsets = np.zeros((1,), dtype=np.int32)
    return RealizedGeometry(coords=coords, offsets=offsets)


def geometry_from_lines(lines: list[np.ndarray]) -> RealizedGeometry:
    """shape (K,2) の配列列から RealizedGeometry を組み立てる。"""
    if not lines:
        return empty_geometry()

    offsets = np.zeros((len(lines) + 1,), dtype=np.int32)
    cursor = 0
    for i, line in enumerate(lines):
        cursor += int(np.asarray(line).shape[0])
        offsets[i + 1] = cursor

    coords = np.concatenate(
        [np.asarray(line, dtype=np.float64).reshape(-1, 2) for line in lines],
        axis=0,
    )
    return RealizedGeometry(coords=coords, offsets=offsets)


def concat_realized_geometries(*geometries: RealizedGeometry) -> RealizedGeometry:
    """複数の RealizedGeometry を連結して 1 つにまとめる。

    Parameters
    ----------
    geometries : RealizedGeometry
        連結対象のジオメトリ列。

    Returns
    -------
    RealizedGeometry
        結合後の実体ジオメトリ。
    """
    if not geometries:
        return empty_geometry()

    total_coords = np.concatenate([g.coords for g in geometries], axis=0)

    new_offsets: list[int] = [0]
    offset_base = 0
    for g in geometries:
        # 先頭 0 を除いた差分部分だけをシフトして足し込む。
        shifted = g.offsets[1:].astype(np.int64) + offset_base
        new_offsets.extend(shifted.tolist())
        offset_base += int(g.offsets[-1])

    return RealizedGeometry(
        coords=total_coords,
        offsets=np.asarray(new_offsets, dtype=np.int32),
    )


__all__ = [
    "RealizedGeometry",
    "concat_realized_geometries",
    "empty_geometry",
    "geometry_from_lines",
]
