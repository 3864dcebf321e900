"""Naming scanner — check GraphQL definitions in files against naming rules."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from graphql import (
    SKIP,
    FragmentDefinitionNode,
    GraphQLError,
    GraphQLSchema,
    OperationDefinitionNode,
    Visitor,
    parse,
    visit,
)

from gqlnaming.config import EMBEDDED_SUFFIXES, GRAPHQL_SUFFIXES, NamingConfig
from gqlnaming.lint.extract import extract_documents
from gqlnaming.lint.models import NamingViolation, ScanResult
from gqlnaming.lint.rules import RULES, NamingRule, RuleContext
from gqlnaming.naming.paths import PathOptions
from gqlnaming.schema.types import GraphQLSchemaCapability, TypeCapability

logger = logging.getLogger(__name__)


class _Visitor(Visitor):
    """GraphQL AST visitor that runs the active naming rules on each definition."""

    def __init__(self, rules: list[tuple[NamingRule, RuleContext]]) -> None:
        super().__init__()
        self.rules = rules
        self.violations: list[NamingViolation] = []

    def enter_fragment_definition(self, node: FragmentDefinitionNode, *_args: Any) -> Any:
        self._check(node)
        return SKIP

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args: Any) -> Any:
        self._check(node)
        return SKIP

    def _check(self, node: FragmentDefinitionNode | OperationDefinitionNode) -> None:
        for rule, context in self.rules:
            violation = rule.check(node, context)
            if violation is not None:
                self.violations.append(violation)


def _as_capability(schema: GraphQLSchema | TypeCapability | None) -> TypeCapability | None:
    if isinstance(schema, GraphQLSchema):
        return GraphQLSchemaCapability(schema)
    return schema


def active_rules(config: NamingConfig, has_schema: bool) -> list[NamingRule]:
    """Rules that are switched on and have what they need to run."""
    rules = []
    for name, rule in RULES.items():
        if not config.rules.for_rule(name).enabled:
            continue
        if rule.requires_schema and not has_schema:
            logger.debug("Rule %s needs a schema; skipping", name)
            continue
        rules.append(rule)
    return rules


def scan_source(
    text: str,
    path: str,
    *,
    config: NamingConfig | None = None,
    schema: GraphQLSchema | TypeCapability | None = None,
) -> list[NamingViolation]:
    """Check every GraphQL definition in *text*, the contents of file *path*."""
    config = config or NamingConfig()
    capability = _as_capability(schema)
    rules = active_rules(config, capability is not None)

    violations: list[NamingViolation] = []
    for document in extract_documents(text, Path(path).suffix):
        try:
            tree = parse(document.body)
        except GraphQLError as e:
            offset = document.offset + (e.positions[0] if e.positions else 0)
            line, column = RuleContext(path=path, text=text).position(offset)
            logger.debug("Cannot parse GraphQL in %s:%d: %s", path, line, e.message)
            violations.append(NamingViolation(
                file=path, line=line, column=column,
                rule="syntax_error", message=f"Cannot parse: {e.message}",
            ))
            continue

        bound = []
        for rule in rules:
            settings = config.rules.for_rule(rule.name)
            bound.append((rule, RuleContext(
                path=path,
                text=text,
                offset=document.offset,
                schema=capability,
                options=PathOptions(skip_dirs=settings.skip_dirs),
                severity=settings.severity,
            )))
        visitor = _Visitor(bound)
        visit(tree, visitor)
        violations.extend(visitor.violations)

    return violations


def scan_file(
    path: Path,
    *,
    config: NamingConfig | None = None,
    schema: GraphQLSchema | TypeCapability | None = None,
) -> list[NamingViolation]:
    """Scan a single file. Unreadable files become a single read_error violation."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        return [NamingViolation(
            file=str(path), line=0, column=0,
            rule="read_error", message=f"Cannot read: {e}",
        )]
    return scan_source(text, str(path), config=config, schema=schema)


def _is_excluded(path: Path, patterns: list[str]) -> bool:
    posix = path.as_posix()
    return any(fnmatch.fnmatch(posix, pattern) for pattern in patterns)


def iter_files(paths: Iterable[Path], exclude: list[str]) -> Iterator[Path]:
    """Yield lintable files: explicit files as given, directories walked in order."""
    suffixes = GRAPHQL_SUFFIXES | EMBEDDED_SUFFIXES
    for path in paths:
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if (
                    candidate.is_file()
                    and candidate.suffix in suffixes
                    and not _is_excluded(candidate, exclude)
                ):
                    yield candidate
        else:
            yield path


def scan_paths(
    paths: Iterable[Path],
    *,
    config: NamingConfig | None = None,
    schema: GraphQLSchema | TypeCapability | None = None,
) -> ScanResult:
    """Scan files and directories."""
    config = config or NamingConfig()
    capability = _as_capability(schema)
    result = ScanResult()
    for file_path in iter_files(paths, config.exclude):
        result.files_scanned += 1
        result.violations.extend(scan_file(file_path, config=config, schema=capability))
    logger.info(
        "Scanned %d file(s), %d violation(s)", result.files_scanned, len(result.violations),
    )
    return result


def apply_fixes(text: str, violations: Iterable[NamingViolation]) -> str:
    """Return *text* with every non-overlapping fix applied."""
    fixes = sorted(
        (v.fix for v in violations if v.fix is not None),
        key=lambda f: f.start,
        reverse=True,
    )
    boundary = len(text)
    for fix in fixes:
        if fix.end > boundary:
            continue
        text = text[:fix.start] + fix.text + text[fix.end:]
        boundary = fix.start
    return text


def format_report(result: ScanResult) -> str:
    """Format scan result as a markdown report."""
    lines = ["# Naming Scan Report\n"]
    lines.append(f"Files scanned: {result.files_scanned}")
    lines.append(f"Errors: {result.error_count}")
    lines.append(f"Warnings: {result.warning_count}")
    lines.append(f"Status: {'PASSED' if result.ok else 'FAILED'}\n")

    if result.violations:
        lines.append("## Violations\n")
        for v in result.violations:
            lines.append(f"- **{v.file}:{v.line}:{v.column}** [{v.rule}] {v.detail}")

    lines.append("")
    return "\n".join(lines)
