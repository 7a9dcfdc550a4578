"""
どこで: `common` パッケージ。
何を: ramp パッケージと CLI が共有する設定/ロギングの軽量基盤。
なぜ: ドメイン層から環境変数やハンドラ設定の詳細を切り離すため。
"""

from . import settings
from .logging import setup_default_logging

__all__ = [
    "settings",
    "setup_default_logging",
]
