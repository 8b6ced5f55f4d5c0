"""
どこで: `t12n` 入口（公開 API）。
何を: `Angle`・`Operation2D` の各バリアントと単軸ファクトリ・`Transform2D` を再輸出。
なぜ: 利用者が単一名前空間から「ステップを並べる→適用/逆変換/行列化/文字列化」まで完結できるようにするため。

Usage:
    from t12n import Angle, Transform2D, Translate, Scale, Rotate, Skew

    t = Transform2D([
        Translate(10, 20),
        Scale(1.1, 1.2),
        Rotate(Angle.from_degrees(15)),
        Skew(Angle.from_degrees(5), Angle.from_degrees(7)),
    ])
    t.apply((-1.0, 4.0))     # 点
    t.inverted().matrix      # affine.Affine
    str(t)                   # "translate(10, 20) scale(1.1, 1.2) rotate(15) skew(5, 7)"
"""

from .angle import Angle, degrees, radians
from .operation import (
    Matrix,
    Operation2D,
    Rotate,
    Scale,
    Skew,
    Translate,
    scale_x,
    scale_y,
    skew_x,
    skew_y,
    translate_x,
    translate_y,
)
from .transform import Transform2D

__all__ = [
    # 値型
    "Angle",
    "degrees",
    "radians",
    # ステップ
    "Operation2D",
    "Translate",
    "Scale",
    "Rotate",
    "Skew",
    "Matrix",
    "translate_x",
    "translate_y",
    "scale_x",
    "scale_y",
    "skew_x",
    "skew_y",
    # 合成
    "Transform2D",
]

__version__ = "2026.10"
