#!/usr/bin/env python3
"""
Fail if the core model imports the command-line layer or process I/O modules.
Checks all Python files under src/halberd/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "halberd" / "core"
CORE_PACKAGE = "halberd.core"

FORBIDDEN_PREFIXES = (
    "argparse",
    "subprocess",
    "halberd.cli",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def absolute_module(node: ast.ImportFrom) -> str:
    if not node.level:
        return node.module or ""
    parts = CORE_PACKAGE.split(".")
    base = parts[: len(parts) - (node.level - 1)]
    return ".".join(base + ([node.module] if node.module else []))


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = absolute_module(node)
            if mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
            # "from .. import cli"
            for alias in node.names:
                if is_forbidden(f"{mod}.{alias.name}"):
                    errors.append(f"{path}: forbidden import '{mod}.{alias.name}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
