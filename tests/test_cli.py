"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cercania.cli import main
from cercania.models import Affirmation, PartyProfile


@pytest.fixture
def runner(engine):
    """CLI runner whose commands use the test database."""
    with patch("cercania.cli.get_engine", return_value=engine):
        yield CliRunner()


class TestLoad:
    """Test bulk loading from JSON files."""

    def test_load_profiles(self, runner, tmp_path, db_session):
        data = tmp_path / "profiles.json"
        data.write_text(
            json.dumps(
                [
                    {"party_key": "PD", "display_name": "Partido Demócrata"},
                    {"party_key": "FA", "display_name": "Frente Amplio"},
                ]
            ),
            encoding="utf-8",
        )

        result = runner.invoke(main, ["load", "profiles", "--file", str(data)])

        assert result.exit_code == 0, result.output
        assert "Loaded 2 profiles" in result.output
        assert db_session.query(PartyProfile).count() == 2

    def test_load_rejects_unsupported_test_type(self, runner, tmp_path, db_session):
        data = tmp_path / "affirmations.json"
        data.write_text(
            json.dumps(
                [{"test_type": 3, "axis": "x", "criterion": "c", "question_text": "q"}]
            )
        )

        result = runner.invoke(main, ["load", "affirmations", "--file", str(data)])

        assert result.exit_code == 1
        assert "unsupported test_type" in result.output
        assert db_session.query(Affirmation).count() == 0

    def test_load_rejects_unknown_fields(self, runner, tmp_path):
        data = tmp_path / "parties.json"
        data.write_text(json.dumps([{"partido": "PD"}]))

        result = runner.invoke(main, ["load", "parties", "--file", str(data)])

        assert result.exit_code == 1
        assert "Invalid record for parties" in result.output

    def test_load_rejects_missing_required_field(self, runner, tmp_path, db_session):
        """A profile without display_name fails cleanly and loads nothing."""
        data = tmp_path / "profiles.json"
        data.write_text(json.dumps([{"party_key": "X"}]))

        result = runner.invoke(main, ["load", "profiles", "--file", str(data)])

        assert result.exit_code == 1
        assert "❌ Invalid record for profiles" in result.output
        assert "NOT NULL" in result.output
        assert db_session.query(PartyProfile).count() == 0

    def test_load_rejects_non_object_records(self, runner, tmp_path, db_session):
        data = tmp_path / "affirmations.json"
        data.write_text(json.dumps(["not a record"]))

        result = runner.invoke(main, ["load", "affirmations", "--file", str(data)])

        assert result.exit_code == 1
        assert "must be a JSON object" in result.output
        assert db_session.query(Affirmation).count() == 0

    def test_load_requires_array(self, runner, tmp_path):
        data = tmp_path / "parties.json"
        data.write_text(json.dumps({"name": "PD"}))

        result = runner.invoke(main, ["load", "parties", "--file", str(data)])

        assert result.exit_code == 1
        assert "JSON array" in result.output


class TestAffirmationsList:
    """Test the affirmations list command."""

    def test_lists_in_order(self, runner, sample_affirmations):
        result = runner.invoke(main, ["affirmations", "list", "--test-type", "1"])

        assert result.exit_code == 0, result.output
        rows = [line for line in result.output.splitlines() if line.startswith("[")]
        assert len(rows) == 3
        assert rows[0].startswith("[1] y / Familia")
        assert "3 affirmations" in result.output

    def test_invalid_test_type(self, runner):
        result = runner.invoke(main, ["affirmations", "list", "--test-type", "7"])

        assert result.exit_code == 1
        assert "Tipo de test no soportado: 7" in result.output


class TestDbCreate:
    """Test schema creation."""

    def test_create_is_idempotent(self, runner):
        result = runner.invoke(main, ["db", "create"])
        assert result.exit_code == 0
        assert "Tables created" in result.output


class TestServe:
    """Test the serve command."""

    def test_serve_runs_uvicorn(self, runner):
        with patch("cercania.cli.uvicorn.run") as mock_run:
            result = runner.invoke(main, ["serve", "--port", "9000"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            "cercania.api:app", host="0.0.0.0", port=9000, reload=False, log_level="info"
        )
