"""gqlnaming configuration: path constants and the `.gqlnaming.yaml` model."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from gqlnaming.errors import ConfigError

# Directories that carry no meaning for a name prefix. When the immediate
# parent directory is one of these, the prefix comes from one level up.
DEFAULT_SKIP_DIRS: tuple[str, ...] = (
    "components",
    "[id]",
    "queries",
    "mutations",
    "fragments",
    "subscriptions",
    "graphql",
    "gql",
    "src",
)

CONFIG_FILENAME = ".gqlnaming.yaml"

# Files parsed as a whole GraphQL document
GRAPHQL_SUFFIXES = frozenset({".graphql", ".gql"})
# Files whose gql`...` template literals are linted
EMBEDDED_SUFFIXES = frozenset({".js", ".jsx", ".ts", ".tsx", ".vue"})
# Files picked up when loading a schema directory
SCHEMA_SUFFIXES = frozenset({".graphql", ".graphqls", ".gql"})

DEFAULT_EXCLUDE = ["*/node_modules/*"]

LOG_LEVEL_ENV = "GQLNAMING_LOG_LEVEL"

Severity = Literal["error", "warn", "off"]


class RuleSettings(BaseModel):
    """Per-rule options, one block under `rules:`."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    severity: Severity = "error"
    skip_dirs: list[str] | None = Field(default=None, alias="skipDirs")

    @property
    def enabled(self) -> bool:
        return self.severity != "off"


class RulesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fragment: RuleSettings = Field(default_factory=RuleSettings)
    operation: RuleSettings = Field(default_factory=RuleSettings)
    mutation: RuleSettings = Field(default_factory=RuleSettings)

    def for_rule(self, name: str) -> RuleSettings:
        return getattr(self, name)


class NamingConfig(BaseModel):
    """Top-level configuration for a lint run."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_path: str | None = Field(default=None, alias="schema")
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    rules: RulesConfig = Field(default_factory=RulesConfig)

    # Directory the config was loaded from; relative schema paths resolve here
    _base_dir: Path | None = PrivateAttr(default=None)

    @classmethod
    def from_yaml(cls, path: Path) -> NamingConfig:
        """Load a config file. Raises ConfigError on unreadable or invalid input."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}:\n{e}") from e
        config._base_dir = path.resolve().parent
        return config

    def resolved_schema_path(self) -> Path | None:
        if self.schema_path is None:
            return None
        schema = Path(self.schema_path)
        if not schema.is_absolute() and self._base_dir is not None:
            schema = self._base_dir / schema
        return schema


def load_config(path: Path | None = None, search_dir: Path | None = None) -> NamingConfig:
    """Load an explicit config file, or `.gqlnaming.yaml` from *search_dir*.

    Falls back to defaults when no file is given and none is found.
    """
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        return NamingConfig.from_yaml(path)

    candidate = (search_dir or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return NamingConfig.from_yaml(candidate)
    return NamingConfig()
