"""
どこで: `common.settings`
何を: t12n の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: 文字列表現の桁数やログレベルの既定値を 1 箇所に集め、テストから差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str

# 任意の 10 進リテラルが往復できる最大の有効桁数
DEFAULT_FORMAT_PRECISION = 15


@dataclass
class _Settings:
    # 文字列表現（Operation2D.description）
    FORMAT_PRECISION: int = DEFAULT_FORMAT_PRECISION

    # Logging
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `T12N_FORMAT_PRECISION`: 有効桁数。1 未満は 1 に丸める。
    - `T12N_LOG_LEVEL`: `setup_default_logging()` の既定レベル。
    """
    _settings.FORMAT_PRECISION = (
        env_int("T12N_FORMAT_PRECISION", DEFAULT_FORMAT_PRECISION, min_value=1)
        or DEFAULT_FORMAT_PRECISION
    )
    _settings.LOG_LEVEL = env_str("T12N_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "DEFAULT_FORMAT_PRECISION"]
