from __future__ import annotations

from pathlib import Path

import pytest

from sketchkit.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    # ユーザー環境の config.yaml を拾わないよう、探索起点を tmp_path に寄せる。
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)
