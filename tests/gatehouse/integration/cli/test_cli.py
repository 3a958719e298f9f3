"""Integration tests for the gatehouse CLI."""

from typer.testing import CliRunner

from gatehouse.presentation.cli.app import app
from gatehouse_config import clear_settings_cache

runner = CliRunner()


class TestSecretsGenerate:
    def test_prints_fresh_secrets(self):
        first = runner.invoke(app, ["secrets", "generate"])
        second = runner.invoke(app, ["secrets", "generate"])

        assert first.exit_code == 0
        assert "JWT_SECRET_KEY" in first.stdout
        assert "POSTGRES_PASSWORD" in first.stdout
        assert first.stdout != second.stdout

    def test_rejects_short_jwt_key(self):
        result = runner.invoke(app, ["secrets", "generate", "--jwt-bytes", "8"])

        assert result.exit_code != 0


class TestDbInit:
    def test_creates_sqlite_database(self, tmp_path, monkeypatch):
        # Arrange
        db_path = tmp_path / "nested" / "gatehouse.db"
        monkeypatch.setenv("DATABASE_BACKEND", "sqlite")
        monkeypatch.setenv("SQLITE_PATH", str(db_path))
        clear_settings_cache()

        # Act
        result = runner.invoke(app, ["db", "init"])

        # Assert
        assert result.exit_code == 0, result.stdout
        assert "Database ready" in result.stdout
        assert db_path.exists()

    def test_is_idempotent(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SQLITE_PATH", str(tmp_path / "gatehouse.db"))
        clear_settings_cache()

        assert runner.invoke(app, ["db", "init"]).exit_code == 0
        assert runner.invoke(app, ["db", "init"]).exit_code == 0


class TestHelp:
    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "secrets" in result.stdout
        assert "serve" in result.stdout
