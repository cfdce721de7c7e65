"""2 つのシーケンスの全組み合わせ、および 1 つのシーケンス内の全ペアを走査する。"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def nested_loop_join(items_a: Sequence[A], items_b: Sequence[B], callback: Callable[[A, B], object]) -> None:
    """`items_a × items_b` の各組について `callback(a, b)` を呼ぶ（a が外側）。

    走査中にシーケンスを変更してはならない。
    """
    for a in items_a:
        for b in items_b:
            callback(a, b)


def round_robin(items: Sequence[A], callback: Callable[[A, A], object]) -> None:
    """`i < k` を満たす全ペア `(items[i], items[k])` について `callback` を呼ぶ。"""
    n = len(items)
    for i in range(n - 1):
        for k in range(i + 1, n):
            callback(items[i], items[k])


__all__ = ["nested_loop_join", "round_robin"]
