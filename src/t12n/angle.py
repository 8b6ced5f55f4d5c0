"""
どこで: `t12n.angle`
何を: 回転/スキューに使う角度の値型 `Angle`（内部表現はラジアン）。
なぜ: 度とラジアンの取り違えを型で防ぎ、演算を正準単位（ラジアン）だけで定義するため。

不変条件:
- `Angle(r).radians == r`（格納単位の往復は厳密）。
- `degrees = radians * 180 / π`。度⇔ラジアンの往復は浮動小数の丸め誤差の範囲で一致。
- 等価性/ハッシュは `radians` のみで定義。
- 値は不変。`a += b` は呼び出し側の変数を新しい値へ束縛し直すだけで、共有インスタンスは変化しない。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

_DEG_PER_RAD = 180.0


@dataclass(frozen=True, slots=True)
class Angle:
    """角度（ラジアン格納）。

    Parameters
    ----------
    radians : float
        角度 [rad]。NaN/Inf も検証せずに受け付ける。

    Examples
    --------
    >>> Angle(0.5) + Angle(1.0) == Angle(1.5)
    True
    >>> a = Angle(1.0)
    >>> a += Angle(0.5)
    >>> a.radians
    1.5
    """

    radians: float

    PI: ClassVar["Angle"]

    # ── ファクトリ ───────────────────
    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees * math.pi / _DEG_PER_RAD)

    # ── 派生ビュー ───────────────────
    @property
    def degrees(self) -> float:
        """角度 [deg]（`radians` から都度算出）。"""
        return self.radians * _DEG_PER_RAD / math.pi

    def with_degrees(self, degrees: float) -> "Angle":
        """度で指定した新しい `Angle` を返す（self は変更しない）。"""
        return Angle.from_degrees(degrees)

    # ── 演算（すべて正準単位で計算） ────────
    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        if isinstance(divisor, Angle):
            return NotImplemented
        # 0 除算は例外ではなく ±inf/NaN として伝播させる
        with np.errstate(divide="ignore", invalid="ignore"):
            return Angle(float(np.float64(self.radians) / np.float64(divisor)))

    def __str__(self) -> str:
        return f"{self.degrees} degrees"


Angle.PI = Angle(math.pi)


def degrees(value: float) -> Angle:
    """`Angle.from_degrees` の短縮形。"""
    return Angle.from_degrees(value)


def radians(value: float) -> Angle:
    """`Angle.from_radians` の短縮形。"""
    return Angle.from_radians(value)


__all__ = ["Angle", "degrees", "radians"]
