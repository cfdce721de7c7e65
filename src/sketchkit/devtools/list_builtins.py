"""
どこで: `src/sketchkit/devtools/list_builtins.py`。
何を: 組み込みのイージング名 / 図形生成関数名を CLI 用に列挙する。
なぜ: `easing_by_name()` などに渡せる名前の探索コストを下げるため。
"""

from __future__ import annotations

import argparse
import sys

from sketchkit.api.shapes import shape_names
from sketchkit.core.easing import easing_names


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="python -m sketchkit list")
    p.add_argument(
        "target",
        nargs="?",
        default="all",
        choices=("easings", "shapes", "all"),
        help="一覧対象（省略時: all）",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)
    target = str(args.target)

    if target == "easings":
        for name in easing_names():
            print(name)
        return 0

    if target == "shapes":
        for name in shape_names():
            print(name)
        return 0

    if target == "all":
        print("easings:")
        for name in easing_names():
            print(name)
        print("")
        print("shapes:")
        for name in shape_names():
            print(name)
        return 0

    raise AssertionError(f"unknown target: {target!r}")
