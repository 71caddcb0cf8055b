"""Unit tests for the import boundary checking script.

Tests verify that the layering rules of the warden package are enforced:
- domain/ and config/ import nothing from other warden layers and
  nothing from structlog or pydantic
- application/ imports from domain/ and config/
- infrastructure/ imports from domain/ and application/
- bootstrap/ may import from every layer
"""

import ast
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (  # noqa: E402
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    get_import_module,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "warden"


class TestLayerRules:
    """The declared hierarchy and import rules."""

    def test_inner_layers(self) -> None:
        assert LAYER_HIERARCHY["domain"] == 0
        assert LAYER_HIERARCHY["config"] == 0

    def test_bootstrap_is_outermost(self) -> None:
        assert LAYER_HIERARCHY["bootstrap"] == max(LAYER_HIERARCHY.values())

    def test_inner_layers_import_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == set()
        assert ALLOWED_IMPORTS["config"] == set()

    def test_application_imports(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain", "config"}

    def test_infrastructure_imports(self) -> None:
        """Infrastructure implements ports but never reads config directly."""
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application"}

    def test_bootstrap_imports_everything(self) -> None:
        assert ALLOWED_IMPORTS["bootstrap"] == set(LAYER_HIERARCHY) - {"bootstrap"}


class TestGetImportModule:
    """Test the get_import_module helper function."""

    def test_import_from_statement(self) -> None:
        node = ast.parse("from warden.domain.models import Organization").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) == "warden.domain.models"

    def test_import_statement(self) -> None:
        node = ast.parse("import warden.domain.models").body[0]
        assert isinstance(node, ast.Import)
        assert get_import_module(node) == "warden.domain.models"

    def test_none_for_relative_import(self) -> None:
        node = ast.parse("from . import something").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) is None


class TestCheckFileImports:
    """Test check_file_imports against a temporary package."""

    @pytest.fixture
    def package_dir(self, tmp_path: Path) -> Iterator[Path]:
        """Create a temporary warden package with every layer."""
        package_dir = tmp_path / "warden"
        package_dir.mkdir()
        for layer in LAYER_HIERARCHY:
            (package_dir / layer).mkdir()
            (package_dir / layer / "__init__.py").write_text("")
        yield package_dir

    @pytest.mark.parametrize(
        ("layer", "source"),
        [
            ("domain", "import os\nfrom uuid import UUID"),
            ("domain", "from warden.domain.errors import WardenNotFoundError"),
            ("application", "from warden.domain.models import Organization"),
            ("application", "from warden.config import OrganizationConfig"),
            ("infrastructure", "from warden.application.ports import IterationHistoryProtocol"),
            ("bootstrap", "from warden.infrastructure.stubs import IterationHistoryStub"),
            ("bootstrap", "import structlog"),
            ("application", "from pydantic import BaseModel"),
        ],
    )
    def test_allowed_imports(self, package_dir: Path, layer: str, source: str) -> None:
        module = package_dir / layer / "module.py"
        module.write_text(source)

        assert check_file_imports(module, package_dir) == []

    @pytest.mark.parametrize(
        ("layer", "source", "message"),
        [
            (
                "domain",
                "from warden.application.dtos import OrganizationDto",
                "domain layer cannot import from application",
            ),
            (
                "config",
                "from warden.domain.models import Organization",
                "config layer cannot import from domain",
            ),
            (
                "application",
                "from warden.infrastructure.stubs import UserRepositoryStub",
                "application layer cannot import from infrastructure",
            ),
            (
                "infrastructure",
                "import warden.bootstrap.organization",
                "infrastructure layer cannot import from bootstrap",
            ),
            (
                "domain",
                "import structlog",
                "domain layer cannot depend on structlog",
            ),
            (
                "config",
                "from pydantic import BaseModel",
                "config layer cannot depend on pydantic",
            ),
        ],
    )
    def test_violations(
        self, package_dir: Path, layer: str, source: str, message: str
    ) -> None:
        module = package_dir / layer / "bad_module.py"
        module.write_text(f"import os\n{source}")

        violations = check_file_imports(module, package_dir)

        assert violations == [(str(module), 2, message)]

    def test_nested_modules_use_top_level_layer(self, package_dir: Path) -> None:
        nested = package_dir / "domain" / "models"
        nested.mkdir()
        module = nested / "organization.py"
        module.write_text("from warden.infrastructure import stubs")

        assert len(check_file_imports(module, package_dir)) == 1

    def test_package_root_files_are_ignored(self, package_dir: Path) -> None:
        module = package_dir / "__init__.py"
        module.write_text("from warden.infrastructure import stubs")

        assert check_file_imports(module, package_dir) == []

    def test_unparseable_file_is_skipped(self, package_dir: Path) -> None:
        module = package_dir / "domain" / "broken.py"
        module.write_text("def broken(:\n")

        assert check_file_imports(module, package_dir) == []


class TestCheckImportBoundaries:
    """Whole-package checks."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert check_import_boundaries(tmp_path / "missing") == []

    def test_warden_package_is_clean(self) -> None:
        violations = check_import_boundaries(PACKAGE_DIR)

        assert violations == [], format_violations(violations)

    def test_format_violations(self) -> None:
        output = format_violations(
            [("warden/domain/x.py", 3, "domain layer cannot import from bootstrap")]
        )

        assert "warden/domain/x.py:3: domain layer cannot import from bootstrap" in output
        assert "Total: 1 violation(s)" in output

    def test_format_no_violations(self) -> None:
        assert format_violations([]) == ""
