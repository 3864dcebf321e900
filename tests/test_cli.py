"""Tests for the gqlnaming CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gqlnaming import __version__
from gqlnaming.cli import app

runner = CliRunner()

SDL = "type User { id: ID! }\ntype Query { user: User }\n"


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    (tmp_path / "schema.graphql").write_text(SDL)
    users = tmp_path / "features" / "users" / "components"
    users.mkdir(parents=True)
    (users / "UserCard.graphql").write_text(
        "fragment UserCard on User { id }\nquery GetUser { user { id } }\n"
    )
    return tmp_path


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestExpected:
    def test_expected_name(self) -> None:
        result = runner.invoke(
            app, ["expected", "/path/to/features/users/components/UserCard.vue", "Order"],
        )
        assert result.exit_code == 0
        assert "UsersUserCardOrder" in result.output

    def test_empty_prefix(self) -> None:
        result = runner.invoke(
            app, ["expected", "/path/to/src/queries/AssignmentMessages.gql", "AssignmentMessage"],
        )
        assert result.exit_code == 0
        assert "(empty)" in result.output

    def test_skip_dir_option(self) -> None:
        result = runner.invoke(
            app, ["expected", "/app/users/pages/UserPage.vue", "Order", "--skip-dir", "pages"],
        )
        assert "UsersUserPageOrder" in result.output


class TestCheck:
    def test_reports_violations(self, project: Path) -> None:
        result = runner.invoke(
            app,
            ["check", str(project / "features"), "--schema", str(project / "schema.graphql"),
             "--markdown"],
        )
        assert result.exit_code == 1
        assert "[fragment]" in result.output
        assert "[operation]" in result.output
        assert "Errors: 2" in result.output

    def test_table_output(self, project: Path) -> None:
        result = runner.invoke(app, ["check", str(project / "features")])
        assert result.exit_code == 1
        assert "Naming Violations" in result.output

    def test_clean(self, tmp_path: Path) -> None:
        (tmp_path / "users").mkdir()
        (tmp_path / "users" / "Users.graphql").write_text("fragment User on User { id }\n")
        result = runner.invoke(app, ["check", str(tmp_path)])
        assert result.exit_code == 0
        assert "No naming violations" in result.output

    def test_undecodable_file_reported(self, tmp_path: Path) -> None:
        (tmp_path / "users").mkdir()
        (tmp_path / "users" / "legacy.ts").write_bytes(b"const s = \xff\xfe\n")
        result = runner.invoke(app, ["check", str(tmp_path), "--markdown"])
        assert result.exit_code == 1
        assert "[read_error] Cannot read" in result.output

    def test_config_file(self, project: Path) -> None:
        config = project / "naming.yaml"
        config.write_text("schema: schema.graphql\nrules:\n  fragment:\n    severity: warn\n")
        result = runner.invoke(
            app, ["check", str(project / "features"), "--config", str(config), "--markdown"],
        )
        assert result.exit_code == 1
        assert "Errors: 1" in result.output
        assert "Warnings: 1" in result.output

    def test_bad_schema(self, project: Path) -> None:
        result = runner.invoke(
            app, ["check", str(project), "--schema", str(project / "missing.graphql")],
        )
        assert result.exit_code == 2
        assert "Schema path not found" in result.output

    def test_bad_config(self, project: Path) -> None:
        config = project / "naming.yaml"
        config.write_text("rules:\n  nope: {}\n")
        result = runner.invoke(app, ["check", str(project), "--config", str(config)])
        assert result.exit_code == 2


class TestFix:
    def test_prints_fixed_file(self, project: Path) -> None:
        target = project / "features" / "users" / "components" / "UserCard.graphql"
        result = runner.invoke(
            app, ["fix", str(target), "--schema", str(project / "schema.graphql")],
        )
        assert result.exit_code == 0
        assert result.output == (
            "fragment UsersUser on User { id }\nquery UsersUser { user { id } }\n"
        )
        # never writes the file
        assert "GetUser" in target.read_text()

    def test_undecodable_file(self, tmp_path: Path) -> None:
        target = tmp_path / "users" / "legacy.ts"
        target.parent.mkdir()
        target.write_bytes(b"const s = \xff\xfe\n")
        result = runner.invoke(app, ["fix", str(target)])
        assert result.exit_code == 2
        assert "Cannot read" in result.output

