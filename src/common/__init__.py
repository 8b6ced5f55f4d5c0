"""
どこで: `common` パッケージ。
何を: t12n 全体で使う軽量ユーティリティ（型エイリアス・環境変数・設定・ロギング）。
なぜ: 変換モデル本体から横断的関心事を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .types import Vec2

__all__ = [
    "Vec2",
    "setup_default_logging",
]
