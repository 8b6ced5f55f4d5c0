from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import pytest
from affine import TransformNotInvertibleError

from common.logging import PACKAGE_LOGGER, setup_default_logging
from t12n import Matrix


@contextmanager
def _bare_root() -> Iterator[None]:
    """ルートロガーのハンドラを一時的に空にする（pytest のキャプチャハンドラも含む）。"""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        yield
    finally:
        root.handlers[:] = saved


@pytest.fixture(autouse=True)
def _restore_package_level() -> Iterator[None]:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    saved = pkg.level
    try:
        yield
    finally:
        pkg.setLevel(saved)


@pytest.fixture()
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_noop_when_root_has_handlers(basic_config_calls) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_default_logging("DEBUG")
    finally:
        root.removeHandler(handler)
    assert basic_config_calls == []


def test_configures_with_given_level(basic_config_calls) -> None:
    with _bare_root():
        setup_default_logging("warning")
        setup_default_logging(logging.ERROR)
    assert [c["level"] for c in basic_config_calls] == [logging.WARNING, logging.ERROR]
    assert "%(name)s" in basic_config_calls[0]["format"]


def test_unknown_level_name_falls_back_to_info(basic_config_calls) -> None:
    with _bare_root():
        setup_default_logging("chatty")
    assert basic_config_calls[0]["level"] == logging.INFO


def test_level_defaults_to_settings(settings_env, basic_config_calls) -> None:
    from common import settings

    settings_env.setenv("T12N_LOG_LEVEL", "DEBUG")
    settings.reload_from_env()
    with _bare_root():
        setup_default_logging()
    assert basic_config_calls[0]["level"] == logging.DEBUG


def test_sets_package_level_even_when_root_is_configured(basic_config_calls) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        pkg = setup_default_logging("DEBUG")
    finally:
        root.removeHandler(handler)
    assert basic_config_calls == []
    assert pkg is logging.getLogger(PACKAGE_LOGGER)
    assert logging.getLogger("t12n.operation").getEffectiveLevel() == logging.DEBUG


def test_package_debug_lines_reach_existing_handlers(caplog) -> None:
    root = logging.getLogger()
    saved = root.level
    root.setLevel(logging.WARNING)
    try:
        setup_default_logging("DEBUG")
        with pytest.raises(TransformNotInvertibleError):
            Matrix.from_coefficients(1, 2, 2, 4, 0, 0).inverse
    finally:
        root.setLevel(saved)
    assert any(
        r.name == "t12n.operation" and "not invertible" in r.getMessage()
        for r in caplog.records
    )
