#!/usr/bin/env python3
"""Check the layering of the warden package.

Rules:
- domain/ and config/ import no other warden layer and none of the
  service stack (structlog, pydantic); they are plain Python
- application/ may import domain/ and config/
- infrastructure/ may import domain/ and application/
- bootstrap/ wires everything together and may import any layer

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE_NAME = "warden"

# Lower number = further inside
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "config": 0,
    "application": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": set(),
    "application": {"domain", "config"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "config", "application", "infrastructure"},
}

# Third-party distributions a layer must not depend on
FORBIDDEN_LIBRARIES: dict[str, set[str]] = {
    "domain": {"structlog", "pydantic"},
    "config": {"structlog", "pydantic"},
}

Violation = tuple[str, int, str]


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Return the imported module name, or None for relative imports."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if node.names:
        return node.names[0].name
    return None


def _layer_of(py_file: Path, package_dir: Path) -> str | None:
    """Return the layer a module belongs to, or None outside any layer."""
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if len(parts) < 2 or parts[0] not in LAYER_HIERARCHY:
        return None
    return parts[0]


def _parse(py_file: Path) -> ast.Module | None:
    try:
        return ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: skipping {py_file}: {e}", file=sys.stderr)
        return None


def _violation(module: str, layer: str) -> str | None:
    """Return the rule an import of ``module`` from ``layer`` breaks, if any."""
    top_level = module.split(".")[0]
    if top_level in FORBIDDEN_LIBRARIES.get(layer, set()):
        return f"{layer} layer cannot depend on {top_level}"

    if top_level != PACKAGE_NAME:
        return None
    parts = module.split(".")
    if len(parts) < 2:
        return None
    target = parts[1]
    if target not in LAYER_HIERARCHY or target == layer:
        return None
    if target not in ALLOWED_IMPORTS[layer]:
        return f"{layer} layer cannot import from {target}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Return (path, line, message) for every violating import in a module."""
    layer = _layer_of(py_file, package_dir)
    if layer is None:
        return []
    tree = _parse(py_file)
    if tree is None:
        return []

    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        module = get_import_module(node)
        message = _violation(module, layer) if module else None
        if message:
            violations.append((str(py_file), node.lineno, message))
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every module of the package."""
    if not package_dir.exists():
        print(f"Error: package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    if not violations:
        return ""
    lines = ["Import boundary violations found:", ""]
    lines += [f"  {path}:{line}: {message}" for path, line, message in sorted(violations)]
    lines += ["", f"Total: {len(violations)} violation(s)"]
    return "\n".join(lines)


def main() -> int:
    package_dir = (
        Path(sys.argv[1])
        if len(sys.argv) > 1
        else Path(__file__).parent.parent / PACKAGE_NAME
    )
    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
