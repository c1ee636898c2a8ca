"""Unit tests for Taichi runtime initialisation."""

import pytest

import pynoisy as pn
from pynoisy import backend


@pytest.mark.unit
def test_unknown_arch_rejected():
    with pytest.raises(ValueError, match="arch"):
        pn.init("metal")


@pytest.mark.unit
def test_init_marks_backend_ready():
    pn.init("cpu")
    assert backend._initialized
    # Already initialised, must not raise or reset
    pn.ensure_init()
    assert backend._initialized


@pytest.mark.unit
def test_ensure_init_skips_after_init(monkeypatch):
    pn.init("cpu")

    def fail_init(*args, **kwargs):
        raise AssertionError("ti.init called again")

    monkeypatch.setattr(backend.ti, "init", fail_init)
    pn.ensure_init()


@pytest.mark.unit
def test_ensure_init_ignores_bare_taichi_init(monkeypatch):
    # Only pynoisy's own init is tracked, a bare ti.init() is not
    calls = []
    monkeypatch.setattr(backend, "_initialized", False)
    monkeypatch.setattr(backend.ti, "init", lambda **kwargs: calls.append(kwargs))

    pn.ensure_init()

    assert len(calls) == 1
    assert calls[0]["default_fp"] == pn.constants.FLOAT_TYPE_TI
    assert calls[0]["fast_math"] is False
    assert backend._initialized
