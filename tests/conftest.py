"""共通フィクスチャ。

- ランプのメモ化キャッシュと設定を各テスト前後でリセット
- CLI が変更する `ramp` ロガーのレベルを復元
- 代表的な seed/背景色
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from common import settings
from ramp import api


@pytest.fixture(autouse=True)
def fresh_ramp_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """環境変数由来の設定を既定に戻し、キャッシュを空にする。"""
    for name in ("RAMP_CACHE_ENABLED", "RAMP_CACHE_MAXSIZE", "RAMP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    api.clear_cache()
    yield
    api.clear_cache()


@pytest.fixture(autouse=True)
def restore_ramp_log_level() -> Iterator[None]:
    """`setup_default_logging` が設定した `ramp` ロガーのレベルを元に戻す。"""
    logger = logging.getLogger("ramp")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture()
def blue_seed() -> str:
    """antd の既定 primary。"""
    return "#1677ff"


@pytest.fixture()
def dark_background() -> str:
    """ダークテーマの既定背景色。"""
    return "#141414"
