"""共通フィクスチャ。

- 乱数シード固定
- 設定（環境変数）の差し替えと復元
- 代表的な Transform2D 試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from t12n import Angle, Rotate, Scale, Skew, Transform2D, Translate


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を差し替えたテストの後で、元の環境から設定を読み直す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def full_transform() -> Transform2D:
    """translate → scale → rotate → skew の 4 ステップ。"""
    return Transform2D(
        [
            Translate(10, 20),
            Scale(1.1, 1.2),
            Rotate(Angle.from_degrees(15)),
            Skew(Angle.from_degrees(5), Angle.from_degrees(7)),
        ]
    )


@pytest.fixture()
def invertible_transform() -> Transform2D:
    """厳密に逆変換できるステップ（translate/scale/rotate）だけの変換。"""
    return Transform2D(
        [
            Translate(10, 20),
            Scale(1.1, 1.2),
            Rotate(Angle.from_degrees(15)),
        ]
    )
