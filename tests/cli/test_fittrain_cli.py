"""Tests for the fittrain CLI commands."""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from cli.cli import app
from fittrain.config.settings import settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def library_file(tmp_path, exercise_library):
    path = tmp_path / "exercises.json"
    path.write_text(
        json.dumps([exercise.model_dump(mode="json", by_alias=True) for exercise in exercise_library]),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(
        json.dumps({"id": 3, "fitnessLevel": "Beginner", "goals": ["weight_loss"], "preferredTrainingDays": ["Tuesday", "Friday"]}),
        encoding="utf-8",
    )
    return path


def test_recommend_json(library_file, profile_file):
    result = runner.invoke(app, ["recommend", "-e", str(library_file), "-p", str(profile_file), "--json", "-n", "3"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert len(payload) == 3
    assert payload[0]["exercise"]["name"] == "Jumping Jacks"
    assert payload[0]["score"] == 21
    assert set(payload[0]) == {"exercise", "score", "matchReason", "tags"}
    assert "muscleGroup" in payload[0]["exercise"]


def test_recommend_defaults_to_view_count(library_file):
    result = runner.invoke(app, ["recommend", "-e", str(library_file), "--json"])

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == settings.ui_recommendation_count


def test_recommend_table(library_file, profile_file):
    result = runner.invoke(app, ["recommend", "-e", str(library_file), "-p", str(profile_file)])

    assert result.exit_code == 0
    assert "Recommendations" in result.stdout
    assert "Jumping" in result.stdout


def test_daily_json_by_weekday_name(library_file):
    result = runner.invoke(app, ["daily", "-e", str(library_file), "--day", "Monday", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["day"] == 1
    assert list(payload["workout"]) == ["warmup", "main", "finisher", "cooldown"]
    assert [rec["exercise"]["id"] for rec in payload["workout"]["main"]] == [4, 7, 5, 14]


def test_week_json_uses_training_days(library_file, profile_file):
    result = runner.invoke(app, ["week", "-e", str(library_file), "-p", str(profile_file), "--json"])

    assert result.exit_code == 0
    assert list(json.loads(result.stdout)) == ["2", "5"]


@pytest.mark.parametrize("day", ["7", "someday"])
def test_daily_rejects_bad_day(library_file, day):
    result = runner.invoke(app, ["daily", "-e", str(library_file), "--day", day])
    assert result.exit_code == 2


def test_missing_library_fails(tmp_path):
    result = runner.invoke(app, ["recommend", "-e", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "LIBRARY_NOT_FOUND" in result.stdout


def test_no_library_configured_fails(monkeypatch):
    monkeypatch.setattr(settings, "exercise_library_path", None)
    result = runner.invoke(app, ["recommend"])

    assert result.exit_code == 1
    assert "No exercise library given" in result.stdout


def test_invalid_profile_fails(library_file, tmp_path):
    profile = tmp_path / "bad_profile.json"
    profile.write_text(json.dumps({"fitnessLevel": "expert"}), encoding="utf-8")

    result = runner.invoke(app, ["recommend", "-e", str(library_file), "-p", str(profile)])

    assert result.exit_code == 1
    assert "Invalid profile" in result.stdout


def test_empty_library_prints_message(tmp_path):
    library = tmp_path / "empty.json"
    library.write_text("[]", encoding="utf-8")

    result = runner.invoke(app, ["recommend", "-e", str(library)])

    assert result.exit_code == 0
    assert "No matching exercises" in result.stdout


def test_non_utf8_library_fails_cleanly(tmp_path):
    library = tmp_path / "latin1.json"
    library.write_bytes(b'[{"id": 1, "name": "\xff\xfe"}]')

    result = runner.invoke(app, ["recommend", "-e", str(library)])

    assert result.exit_code == 1
    assert "LIBRARY_INVALID_JSON" in result.stdout


def test_non_utf8_profile_fails_cleanly(library_file, tmp_path):
    profile = tmp_path / "profile.json"
    profile.write_bytes(b'{"goals": ["\xff"]}')

    result = runner.invoke(app, ["recommend", "-e", str(library_file), "-p", str(profile)])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.stdout
