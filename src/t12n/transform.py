"""
どこで: `t12n.transform`
何を: `Operation2D` の順序付き列としての 2D 変換 `Transform2D`。
なぜ: CSS の `transform` リストと同じ合成規則（先頭ステップが最後に作用する）を 1 箇所で保証するため。

合成規則（重要）:
- `steps = [s0, s1, ..., s(n-1)]` は合成 `s0 ∘ s1 ∘ ... ∘ s(n-1)` を表す。
- 点/ベクトルへの適用は逆順に畳み込む（末尾 `s(n-1)` が入力に最初に作用し、`s0` が最後）。
- `matrix` も同じ逆順で恒等行列に積み上げるため、`matrix` を点に適用した結果は
  `apply(point)` と結合則の丸め誤差の範囲で一致する。
- `inverted()` は列を反転しつつ各ステップを逆にする（`(f∘g)⁻¹ = g⁻¹∘f⁻¹`）。
- `description` だけは宣言順（順方向）で連結する。空列は `"identity"`。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np
from affine import Affine

from common.types import Vec2

from . import affine_ops
from .operation import Operation2D


@dataclass(frozen=True, slots=True, init=False)
class Transform2D:
    """2D 変換（`Operation2D` の不変な列）。

    Parameters
    ----------
    steps : Iterable[Operation2D], optional
        変換ステップ。省略時は恒等変換。

    Examples
    --------
    >>> from t12n import Angle, Rotate, Translate
    >>> t = Transform2D([Translate(10, 20), Rotate(Angle.from_degrees(15))])
    >>> t.description
    'translate(10, 20) rotate(15)'
    """

    steps: tuple[Operation2D, ...]

    def __init__(self, steps: Iterable[Operation2D] = ()) -> None:
        object.__setattr__(self, "steps", tuple(steps))

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls) -> "Transform2D":
        return cls(())

    @classmethod
    def of(cls, *steps: Operation2D) -> "Transform2D":
        """可変長引数で生成（`Transform2D.of(a, b)` == `Transform2D([a, b])`）。"""
        return cls(steps)

    def appending(self, *steps: Operation2D) -> "Transform2D":
        """末尾にステップを追加した新しい変換を返す（self は変更しない）。"""
        return Transform2D(self.steps + steps)

    # ── 列としての振る舞い ────────────
    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Operation2D]:
        return iter(self.steps)

    def __bool__(self) -> bool:
        return bool(self.steps)

    # ── 変換 ─────────────────────
    def inverted(self) -> "Transform2D":
        """逆変換（列を反転し、各ステップを逆にする）。"""
        return Transform2D(step.inverse for step in reversed(self.steps))

    def apply(self, point: Vec2) -> Vec2:
        """点に適用する（末尾のステップから順に作用）。"""
        for step in reversed(self.steps):
            point = step.apply(point)
        return point

    def apply_vector(self, vector: Vec2) -> Vec2:
        """ベクトルに適用する（平行移動は無視される）。"""
        for step in reversed(self.steps):
            vector = step.apply_vector(vector)
        return vector

    @property
    def matrix(self) -> Affine:
        """等価な単一のアフィン行列。"""
        m = affine_ops.identity()
        for step in reversed(self.steps):
            m = affine_ops.concatenate(m, step.matrix)
        return m

    def apply_array(self, coords: np.ndarray, *, vectors: bool = False) -> np.ndarray:
        """座標配列にまとめて適用する（`matrix` 経由のベクトル化版）。

        Parameters
        ----------
        coords : np.ndarray
            形状 `(N, 2)` または `(N, 3)`。3 列目（Z）はそのまま通す。
        vectors : bool, default False
            True のとき各行を自由ベクトルとして扱い、平行移動を無視する。

        Returns
        -------
        np.ndarray
            float64 の新しい配列（入力は変更しない）。

        Raises
        ------
        ValueError
            形状が `(N, 2)` / `(N, 3)` でない場合。
        """
        arr = np.array(coords, dtype=np.float64, copy=True)
        if arr.ndim != 2 or arr.shape[1] not in (2, 3):
            raise ValueError(f"coords は形状 (N, 2) または (N, 3) である必要があります: {arr.shape}")
        if arr.shape[0] == 0:
            return arr

        a, b, c, d, tx, ty = affine_ops.coefficients(self.matrix)
        x = arr[:, 0].copy()
        y = arr[:, 1].copy()
        arr[:, 0] = a * x + c * y
        arr[:, 1] = b * x + d * y
        if not vectors:
            arr[:, 0] += tx
            arr[:, 1] += ty
        return arr

    # ── 文字列化 ──────────────────
    @property
    def description(self) -> str:
        if not self.steps:
            return "identity"
        return " ".join(step.description for step in self.steps)

    def __str__(self) -> str:
        return self.description


__all__ = ["Transform2D"]
