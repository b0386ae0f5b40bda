import ast
import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_resolves_relative_imports():
    guard = _load_guard()
    node = ast.parse("from ..cli import main").body[0]
    assert guard.absolute_module(node) == "halberd.cli"
    assert guard.is_forbidden(guard.absolute_module(node))

    node = ast.parse("from .link import Link").body[0]
    assert guard.absolute_module(node) == "halberd.core.link"
