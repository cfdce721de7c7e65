"""
どこで: `src/sketchkit/core/timer.py`。
何を: 呼ばれるたびに進行率 0 → 1 を通知し、完了後は何もしなくなるフレームタイマー。
なぜ: フレームごとに進める短いアニメーションを、状態管理なしで並べて走らせるため。
"""

from __future__ import annotations

from typing import Callable, Iterable


class Timer:
    """`duration` 回の進行ののち停止するタイマー。

    Parameters
    ----------
    duration : int
        進行率が 1 に達するまでの呼び出し回数（1 以上）。
    on_progress : Callable[[float], None]
        呼び出しごとに進行率 `count / duration` を受け取る関数。

    Notes
    -----
    `duration=4` なら 0, 0.25, 0.5, 0.75, 1 の 5 回通知する。
    進行率 1 を通知した呼び出しは False を返し、以降の呼び出しは何もせず False を返す。
    """

    __slots__ = ("_duration", "_on_progress", "_count", "_completed")

    def __init__(self, duration: int, on_progress: Callable[[float], None]) -> None:
        if int(duration) < 1:
            raise ValueError(f"duration は 1 以上である必要があります: got={duration!r}")
        self._duration = int(duration)
        self._on_progress = on_progress
        self._count = 0
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def __call__(self) -> bool:
        if self._completed:
            return False
        ratio = self._count / self._duration
        self._on_progress(ratio)
        if ratio >= 1.0:
            self._completed = True
            return False
        self._count += 1
        return True


def step_timers(timers: Iterable[Timer]) -> list[Timer]:
    """全タイマーを 1 回ずつ進め、まだ動いているものだけを返す。"""
    return [timer for timer in timers if timer()]


__all__ = ["Timer", "step_timers"]
