"""
どこで: `common` の型定義。
何を: 点/ベクトル用の軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。

点とベクトルは同じ `(x, y)` タプルで表し、区別は呼び出す API
（`apply` / `apply_vector`）で行う。
"""

Vec2 = tuple[float, float]

__all__ = ["Vec2"]
