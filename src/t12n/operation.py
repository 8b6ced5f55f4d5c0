"""
どこで: `t12n.operation`
何を: 2D 変換の 1 ステップ `Operation2D` と、その閉じたバリアント群
      （`Translate` / `Scale` / `Rotate` / `Skew` / `Matrix`）。
なぜ: ステップごとの逆変換・点/ベクトルへの適用・アフィン行列化・文字列化を
      バリアント単位で厳密に定義し、`Transform2D` はそれらを畳み込むだけにするため。

方針:
- 各バリアントは不変（frozen dataclass）で、同じ値なら等価かつハッシュ可能。
- Translate/Scale の点適用は行列を経由せず直接計算する。
- 数値的な破綻（0 スケール、NaN/Inf 角度）は例外にせず IEEE の inf/NaN として伝播させる。
  Python の float 除算や `math.cos(inf)` は例外を送出するため、該当箇所は numpy で計算する。
- 特異行列の逆行列だけは `affine` パッケージ側の `TransformNotInvertibleError` をそのまま送出する。

文字列表現（CSS `transform` 風、書き出し専用）:

    Translate(10, 0)             -> "translateX(10)"
    Translate(0, 10)             -> "translateY(10)"
    Translate(10, 20)            -> "translate(10, 20)"
    Scale(2, 1) / Scale(1, 2)    -> "scaleX(2)" / "scaleY(2)"
    Rotate(15°)                  -> "rotate(15)"
    Skew(15°, 0) / Skew(0, 15°)  -> "skewX(15)" / "skewY(15)"
    Matrix(identity)             -> "matrix([1, 0, 0], [0, 1, 0])"
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from affine import Affine, TransformNotInvertibleError

from common import settings
from common.types import Vec2

from . import affine_ops
from .angle import Angle

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """数値を一般形式で文字列化する（桁埋め・桁区切りなし、末尾の `.0` なし）。

    有効桁数は `settings.FORMAT_PRECISION`（既定 15）。出力はその桁数に丸められるため、
    任意の float が往復できるわけではない（例: `1/3` は `0.333333333333333` となり、
    読み戻しても `1/3` には一致しない）。`0.1` や `1.1` のような 10 進リテラルは往復する。
    """
    return format(float(value), f".{settings.get().FORMAT_PRECISION}g")


def _trig(fn: np.ufunc, theta: float) -> float:
    # Inf/NaN 角度は NaN を返す（例外・警告なし）
    with np.errstate(invalid="ignore"):
        return float(fn(np.float64(theta)))


class Operation2D(ABC):
    """2D 変換の 1 ステップ（抽象基底）。

    サブクラスは `Translate` / `Scale` / `Rotate` / `Skew` / `Matrix` の 5 種で閉じている。

    - `inverse`: 逆ステップ
    - `apply(point)` / `apply_vector(vector)`: 点/ベクトルへの適用
    - `matrix`: 等価なアフィン行列（`affine.Affine`）
    - `description` / `str()`: 正準文字列表現
    """

    __slots__ = ()

    @property
    @abstractmethod
    def inverse(self) -> "Operation2D": ...

    @abstractmethod
    def apply(self, point: Vec2) -> Vec2: ...

    @abstractmethod
    def apply_vector(self, vector: Vec2) -> Vec2: ...

    @property
    @abstractmethod
    def matrix(self) -> Affine: ...

    @property
    @abstractmethod
    def description(self) -> str: ...

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class Translate(Operation2D):
    """平行移動 `(dx, dy)`。"""

    dx: float
    dy: float

    @property
    def inverse(self) -> "Translate":
        return Translate(-self.dx, -self.dy)

    def apply(self, point: Vec2) -> Vec2:
        x, y = point
        return (x + self.dx, y + self.dy)

    def apply_vector(self, vector: Vec2) -> Vec2:
        # 自由ベクトルは平行移動の影響を受けない
        return (vector[0], vector[1])

    @property
    def matrix(self) -> Affine:
        return affine_ops.translation(self.dx, self.dy)

    @property
    def description(self) -> str:
        if self.dy == 0:
            return f"translateX({format_number(self.dx)})"
        if self.dx == 0:
            return f"translateY({format_number(self.dy)})"
        return f"translate({format_number(self.dx)}, {format_number(self.dy)})"


@dataclass(frozen=True, slots=True)
class Scale(Operation2D):
    """軸ごとのスケール `(sx, sy)`。"""

    sx: float
    sy: float

    @property
    def inverse(self) -> "Scale":
        # 0 スケールの逆数は ±inf（呼び出し側の責務、ここでは捕捉しない）
        with np.errstate(divide="ignore", invalid="ignore"):
            inv = 1.0 / np.array([self.sx, self.sy], dtype=np.float64)
        return Scale(float(inv[0]), float(inv[1]))

    def apply(self, point: Vec2) -> Vec2:
        x, y = point
        return (x * self.sx, y * self.sy)

    def apply_vector(self, vector: Vec2) -> Vec2:
        dx, dy = vector
        return (dx * self.sx, dy * self.sy)

    @property
    def matrix(self) -> Affine:
        return affine_ops.scaling(self.sx, self.sy)

    @property
    def description(self) -> str:
        if self.sy == 1:
            return f"scaleX({format_number(self.sx)})"
        if self.sx == 1:
            return f"scaleY({format_number(self.sy)})"
        return f"scale({format_number(self.sx)}, {format_number(self.sy)})"


@dataclass(frozen=True, slots=True)
class Rotate(Operation2D):
    """回転。正の角度は y 上向きの座標系で反時計回り。"""

    angle: Angle

    @property
    def inverse(self) -> "Rotate":
        return Rotate(-self.angle)

    def apply(self, point: Vec2) -> Vec2:
        return affine_ops.apply_point(self.matrix, point)

    def apply_vector(self, vector: Vec2) -> Vec2:
        return affine_ops.apply_vector(self.matrix, vector)

    @property
    def matrix(self) -> Affine:
        cos = _trig(np.cos, self.angle.radians)
        sin = _trig(np.sin, self.angle.radians)
        return affine_ops.from_coefficients(cos, sin, -sin, cos, 0.0, 0.0)

    @property
    def description(self) -> str:
        return f"rotate({format_number(self.angle.degrees)})"


@dataclass(frozen=True, slots=True)
class Skew(Operation2D):
    """スキュー（シアー）。`ax` は Y に比例する X 方向のずれ、`ay` は X に比例する Y 方向のずれ。

    Notes
    -----
    `inverse` は角度を反転した `Skew(-ax, -ay)` を返す。これはシアー行列の厳密な逆行列ではなく
    （両角度が非 0 のとき `apply(inverse.apply(p)) != p`）、CSS 変換リストの慣習に合わせた定義。
    厳密な逆が必要な場合は `Matrix(skew.matrix).inverse` を使う。
    """

    ax: Angle
    ay: Angle

    @property
    def inverse(self) -> "Skew":
        return Skew(-self.ax, -self.ay)

    def apply(self, point: Vec2) -> Vec2:
        return affine_ops.apply_point(self.matrix, point)

    def apply_vector(self, vector: Vec2) -> Vec2:
        return affine_ops.apply_vector(self.matrix, vector)

    @property
    def matrix(self) -> Affine:
        c = _trig(np.tan, self.ax.radians)
        b = _trig(np.tan, self.ay.radians)
        return affine_ops.from_coefficients(1.0, b, c, 1.0, 0.0, 0.0)

    @property
    def description(self) -> str:
        if self.ay.radians == 0:
            return f"skewX({format_number(self.ax.degrees)})"
        if self.ax.radians == 0:
            return f"skewY({format_number(self.ay.degrees)})"
        return f"skew({format_number(self.ax.degrees)}, {format_number(self.ay.degrees)})"


@dataclass(frozen=True, slots=True)
class Matrix(Operation2D):
    """任意のアフィン変換（合成済み/外部由来の変換の受け皿）。"""

    affine: Affine

    @classmethod
    def from_coefficients(
        cls, a: float, b: float, c: float, d: float, tx: float, ty: float
    ) -> "Matrix":
        """`x' = a·x + c·y + tx`, `y' = b·x + d·y + ty` の係数から生成する。"""
        return cls(affine_ops.from_coefficients(a, b, c, d, tx, ty))

    @property
    def inverse(self) -> "Matrix":
        try:
            return Matrix(affine_ops.invert(self.affine))
        except TransformNotInvertibleError:
            logger.debug("matrix step is not invertible: %s", self.description)
            raise

    def apply(self, point: Vec2) -> Vec2:
        return affine_ops.apply_point(self.affine, point)

    def apply_vector(self, vector: Vec2) -> Vec2:
        return affine_ops.apply_vector(self.affine, vector)

    @property
    def matrix(self) -> Affine:
        return self.affine

    @property
    def description(self) -> str:
        a, b, c, d, tx, ty = (format_number(v) for v in affine_ops.coefficients(self.affine))
        return f"matrix([{a}, {b}, {tx}], [{c}, {d}, {ty}])"


# ── 単軸ファクトリ（一般形と等価） ────────
def translate_x(x: float) -> Translate:
    return Translate(x, 0)


def translate_y(y: float) -> Translate:
    return Translate(0, y)


def scale_x(x: float) -> Scale:
    return Scale(x, 1)


def scale_y(y: float) -> Scale:
    return Scale(1, y)


def skew_x(angle: Angle) -> Skew:
    """X 方向のみのスキュー。"""
    return Skew(angle, Angle(0.0))


def skew_y(angle: Angle) -> Skew:
    """Y 方向のみのスキュー。"""
    return Skew(Angle(0.0), angle)


__all__ = [
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
    "format_number",
]
