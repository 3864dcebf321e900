"""Schema loader — build a graphql-core schema from SDL files."""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import GraphQLError, GraphQLSchema, build_schema

from gqlnaming.config import SCHEMA_SUFFIXES
from gqlnaming.errors import SchemaLoadError

logger = logging.getLogger(__name__)


def _schema_files(path: Path) -> list[Path]:
    if path.is_file():
        return [path]
    return sorted(
        p for p in path.rglob("*") if p.is_file() and p.suffix in SCHEMA_SUFFIXES
    )


def load_schema(path: Path) -> GraphQLSchema:
    """Load an SDL file, or every SDL file under a directory, into one schema."""
    if not path.exists():
        raise SchemaLoadError(f"Schema path not found: {path}")

    files = _schema_files(path)
    if not files:
        raise SchemaLoadError(f"No schema files ({', '.join(sorted(SCHEMA_SUFFIXES))}) under {path}")

    sources: list[str] = []
    for schema_file in files:
        try:
            sources.append(schema_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaLoadError(f"Cannot read schema file {schema_file}: {e}") from e

    try:
        schema = build_schema("\n".join(sources))
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Cannot build schema from {path}: {e}") from e

    logger.debug("Loaded schema from %d file(s) under %s", len(files), path)
    return schema
