"""Boundary tests for traversal module dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_traversal_core_does_not_import_validator_or_identifier_libraries() -> None:
    traversal_dir = _project_root() / "src" / "objectid_schema" / "traversal"
    forbidden_import_fragments = ("import jsonschema", "from jsonschema", "bson")

    for module_path in sorted(traversal_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"


def test_every_schema_operation_goes_through_the_shared_fold() -> None:
    traversal_dir = _project_root() / "src" / "objectid_schema" / "traversal"

    for name in ("identifier_paths.py", "json_schema_rewriter.py", "document_walker.py"):
        text = (traversal_dir / name).read_text(encoding="utf-8")
        assert "fold_schema(" in text, f"{name} does not use fold_schema"
