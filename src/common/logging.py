"""
どこで: `common.logging`
何を: `t12n` パッケージのログ出力レベルを設定層 (`T12N_LOG_LEVEL`) から適用するヘルパ。
なぜ: ライブラリ側の各モジュールは `logging.getLogger(__name__)` でロガーを取るだけで設定しない。
      アプリ側の設定が無い場合の最小構成と、既存設定下でも `t12n.*` の DEBUG 行
      （例: 特異な `Matrix` ステップの逆行列失敗）を見えるようにする手段を 1 箇所にまとめるため。
"""

from __future__ import annotations

import logging

from . import settings

PACKAGE_LOGGER = "t12n"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> logging.Logger:
    """`t12n` パッケージロガーのレベルを設定し、必要ならルートに最小構成を 1 度だけ適用する。

    - `level` 省略時は `settings.get().LOG_LEVEL` を使う（未知のレベル名は INFO）
    - `t12n` ロガーのレベルは常に設定する（ルートより詳細な DEBUG も通す）
    - ルートロガーにハンドラが既にあれば `basicConfig` は呼ばない
    - 上位のアプリ/スクリプトから呼び出す想定

    Returns
    -------
    logging.Logger
        レベル設定済みの `t12n` ロガー。
    """
    lvl = _resolve_level(level)
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(lvl)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=lvl,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    return pkg


__all__ = ["PACKAGE_LOGGER", "setup_default_logging"]
