"""
どこで: `common.settings`
何を: ランプ生成まわりの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # generate_ramp のメモ化
    RAMP_CACHE_ENABLED: bool = True
    RAMP_CACHE_MAXSIZE: int = 256

    # CLI
    RAMP_LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - キャッシュサイズは 0 を下限に丸める。
    - キャッシュ自体の作り直しは `ramp.api.clear_cache()` 側の責務。
    """
    _settings.RAMP_CACHE_ENABLED = env_bool("RAMP_CACHE_ENABLED", True)
    _settings.RAMP_CACHE_MAXSIZE = env_int("RAMP_CACHE_MAXSIZE", 256, min_value=0) or 0
    _settings.RAMP_LOG_LEVEL = env_str("RAMP_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
