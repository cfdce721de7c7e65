# どこで: `src/sketchkit/__main__.py`。
# 何を: `python -m sketchkit ...` の CLI エントリポイントを提供する。
# なぜ: 一覧表示やトリム結果の確認を短い導線で実行できるようにするため。

from __future__ import annotations

import argparse
import sys


def _strip_separator(rest: list[str]) -> list[str]:
    sub_argv = list(rest)
    if sub_argv and sub_argv[0] == "--":
        sub_argv = sub_argv[1:]
    return sub_argv


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="python -m sketchkit")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser(
        "list",
        help="組み込みのイージング / 図形を一覧表示する",
        add_help=False,
    )
    sub.add_parser(
        "trim",
        help="閉多角形を比率区間でトリムした点列を表示する",
        add_help=False,
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "list":
        from sketchkit.devtools import list_builtins

        return int(list_builtins.main(_strip_separator(rest)))

    if args.cmd == "trim":
        from sketchkit.devtools import trim_path

        return int(trim_path.main(_strip_separator(rest)))

    raise AssertionError(f"unknown cmd: {args.cmd!r}")


if __name__ == "__main__":
    raise SystemExit(main())
