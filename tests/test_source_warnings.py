"""Every module compiles without syntax or deprecation warnings."""

import importlib
import warnings
from pathlib import Path

import pytest

import quickpos
from quickpos.api.middleware import error_handler
from quickpos.core.exceptions import EmptyCartError

PACKAGE_ROOT = Path(quickpos.__file__).parent
SOURCES = sorted(PACKAGE_ROOT.rglob("*.py"))


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: str(p.relative_to(PACKAGE_ROOT)))
def test_compiles_without_warnings(path: Path):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        compile(path.read_text(encoding="utf-8"), str(path), "exec")


def test_error_handler_imports_without_deprecations():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        module = importlib.reload(error_handler)

    assert module.status_for(EmptyCartError()) == 422
