"""
どこで: `t12n.affine_ops`
何を: CoreGraphics/CSS 流の係数名 `(a, b, c, d, tx, ty)` と `affine.Affine` の橋渡し。
なぜ: モデル側は `x' = a·x + c·y + tx`, `y' = b·x + d·y + ty` の表記で式を書き、
      行列の合成/逆行列は実績のある `affine` パッケージに任せるため。

係数の対応（左: 本モジュール, 右: `affine.Affine`）:

    a  -> Affine.a      c  -> Affine.b      tx -> Affine.c
    b  -> Affine.d      d  -> Affine.e      ty -> Affine.f
"""

from __future__ import annotations

from affine import Affine

from common.types import Vec2

Coefficients = tuple[float, float, float, float, float, float]


def from_coefficients(
    a: float, b: float, c: float, d: float, tx: float, ty: float
) -> Affine:
    """CoreGraphics 流の 6 係数から `Affine` を作る。"""
    return Affine(a, c, tx, b, d, ty)


def coefficients(m: Affine) -> Coefficients:
    """`Affine` を CoreGraphics 流の `(a, b, c, d, tx, ty)` に展開する。"""
    return (m.a, m.d, m.b, m.e, m.c, m.f)


def identity() -> Affine:
    return Affine.identity()


def translation(tx: float, ty: float) -> Affine:
    return from_coefficients(1.0, 0.0, 0.0, 1.0, tx, ty)


def scaling(sx: float, sy: float) -> Affine:
    return from_coefficients(sx, 0.0, 0.0, sy, 0.0, 0.0)


def concatenate(first: Affine, then: Affine) -> Affine:
    """`first` を適用した後に `then` を適用する合成行列を返す。"""
    return then @ first


def invert(m: Affine) -> Affine:
    """逆行列。特異行列では `affine.TransformNotInvertibleError` がそのまま送出される。"""
    return ~m


def apply_point(m: Affine, point: Vec2) -> Vec2:
    a, b, c, d, tx, ty = coefficients(m)
    x, y = point
    return (a * x + c * y + tx, b * x + d * y + ty)


def apply_vector(m: Affine, vector: Vec2) -> Vec2:
    """平行移動成分を無視して線形部分だけを適用する。"""
    a, b, c, d, _tx, _ty = coefficients(m)
    dx, dy = vector
    return (a * dx + c * dy, b * dx + d * dy)


__all__ = [
    "Coefficients",
    "from_coefficients",
    "coefficients",
    "identity",
    "translation",
    "scaling",
    "concatenate",
    "invert",
    "apply_point",
    "apply_vector",
]
