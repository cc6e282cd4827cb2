"""Tests for architecture import boundaries.

These tests ensure that the layer boundaries are maintained:
- The domain imports nothing from application, infrastructure or CLI
- The application layer does not import infrastructure or CLI
- Nothing outside the CLI imports the CLI
"""

from __future__ import annotations

import ast
import re
from pathlib import Path

import pytest


# Root of the classilist package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "classilist"


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively.

    Args:
        directory: Directory to search

    Returns:
        List of Python file paths
    """
    return list(directory.rglob("*.py"))


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract all imported module names from a Python file.

    Relative imports are reported without their leading dots.

    Args:
        file_path: Path to Python file

    Returns:
        List of import strings (module names)
    """
    imports = []
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.append(node.module)
    return imports


def find_violations(directory: Path, forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    violations = []
    for py_file in get_python_files(directory):
        forbidden = [
            imp for imp in extract_imports_from_file(py_file) if pattern.search(imp)
        ]
        if forbidden:
            rel_path = py_file.relative_to(PACKAGE_ROOT.parent)
            violations.append(f"{rel_path}: {forbidden}")
    return violations


class TestLayerBoundaries:
    """The CLI is the outermost layer, the domain the innermost."""

    def test_package_root_exists(self):
        assert PACKAGE_ROOT.is_dir()

    def test_domain_is_self_contained(self):
        violations = find_violations(
            PACKAGE_ROOT / "domain", r"(^|\.)(application|infrastructure|cli)(\.|$)"
        )
        assert not violations, "Domain imports outer layers:\n" + "\n".join(
            violations
        )

    def test_application_does_not_import_adapters(self):
        violations = find_violations(
            PACKAGE_ROOT / "application", r"(^|\.)(infrastructure|cli)(\.|$)"
        )
        assert not violations, "Application imports adapters:\n" + "\n".join(
            violations
        )

    def test_infrastructure_does_not_import_cli(self):
        violations = find_violations(
            PACKAGE_ROOT / "infrastructure", r"(^|\.)cli(\.|$)"
        )
        assert not violations, (
            "Infrastructure layer imports CLI modules:\n" + "\n".join(violations)
        )

    @pytest.mark.parametrize("module", ["config.py", "constants.py"])
    def test_top_level_modules_do_not_import_cli(self, module):
        imports = extract_imports_from_file(PACKAGE_ROOT / module)
        assert not [imp for imp in imports if re.search(r"(^|\.)cli(\.|$)", imp)]
