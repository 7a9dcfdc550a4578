"""
どこで: `common.logging`。
何を: ランプ CLI 向けのロギング初期化（レベル解決と stderr ハンドラの導入）。
なぜ: CLI の出力（stdout の色一覧）とログを分け、`RAMP_LOG_LEVEL` で詳細度を切り替えるため。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する（`ramp.api` など）。
- レベルは引数 → 設定（`RAMP_LOG_LEVEL`）→ INFO の順に解決する。
- ルートロガーにハンドラが既にあれば追加しない（アプリ側の設定を尊重）。
  その場合もレベルは `ramp` パッケージのロガーへ反映する。
"""

from __future__ import annotations

import logging
import sys

from . import settings

PACKAGE_LOGGER = "ramp"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """ログレベルを数値に解決する。未知の名前は INFO。"""
    if level is None:
        level = settings.get().RAMP_LOG_LEVEL
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).strip().upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def setup_default_logging(level: int | str | None = None) -> bool:
    """`ramp` のロギングを初期化する。

    Returns
    -------
    bool
        ルートロガーへ stderr ハンドラを新たに追加した場合 True。
    """
    lvl = resolve_level(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(lvl)

    root = logging.getLogger()
    if root.handlers:
        return False
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(lvl)
    return True


__all__ = ["PACKAGE_LOGGER", "LOG_FORMAT", "resolve_level", "setup_default_logging"]
