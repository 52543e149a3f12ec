"""Tests for the blogger CLI."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from blogger.presentation.cli.app import app

runner = CliRunner()


class TestSecretsGenerate:
    def test_prints_required_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "AUTH_SECRET=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output

    def test_secrets_differ_between_runs(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestDatabaseCommands:
    def test_init_creates_tables(self):
        with patch(
            "blogger.presentation.cli.app.create_tables",
            new_callable=AsyncMock,
        ) as create_tables:
            result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        create_tables.assert_awaited_once()
        assert "initialized" in result.output

    def test_drop_aborts_without_confirmation(self):
        with patch(
            "blogger.presentation.cli.app.drop_tables",
            new_callable=AsyncMock,
        ) as drop_tables:
            result = runner.invoke(app, ["db", "drop"], input="n\n")

        assert result.exit_code == 1
        drop_tables.assert_not_awaited()

    def test_drop_with_force(self):
        with patch(
            "blogger.presentation.cli.app.drop_tables",
            new_callable=AsyncMock,
        ) as drop_tables:
            result = runner.invoke(app, ["db", "drop", "--force"])

        assert result.exit_code == 0
        drop_tables.assert_awaited_once()
