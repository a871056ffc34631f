# Standard library imports
import json
import re
from pathlib import Path

# Third-party imports
import pytest
from typer.testing import CliRunner

# Local application imports
from quickcache.cli.main import app
from quickcache.flashcard_list import QuickCache
from quickcache.storage import JsonQuickCacheStorage


runner = CliRunner()


def strip_ansi(text: str) -> str:
    """
    Remove ANSI escape sequences (color and control codes) from text.
    """
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


def normalize_output(text: str) -> str:
    """
    Strip ANSI codes and collapse all whitespace into single spaces, so that
    assertions do not depend on the terminal width used by rich.
    """
    text = strip_ansi(text)
    return re.sub(r"\s+", " ", text).strip()


@pytest.fixture
def paths(tmp_path: Path):
    """
    Returns:
        tuple: (prefs_file, data_file) inside tmp_path; neither exists yet.
    """
    return tmp_path / "preferences.json", tmp_path / "data" / "quickcache.json"


@pytest.fixture
def seeded_paths(paths, sample_cards):
    """
    Same as ``paths`` but with the three sample cards already stored.
    """
    prefs_file, data_file = paths
    JsonQuickCacheStorage(data_file).save_quickcache(QuickCache(sample_cards))
    return prefs_file, data_file


def invoke(paths, *args, **kwargs):
    prefs_file, data_file = paths
    return runner.invoke(
        app, ["--prefs", str(prefs_file), "--data", str(data_file), *args], **kwargs
    )


# ---------------------------------------------------------------------------
# exec
# ---------------------------------------------------------------------------


def test_exec_list_shows_flashcards(seeded_paths):
    result = invoke(seeded_paths, "exec", "list")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    assert "Listed all flashcards" in output
    assert "OOP" in output
    assert "stable?" in output


def test_exec_add_persists(seeded_paths):
    _, data_file = seeded_paths
    result = invoke(seeded_paths, "exec", "add q/What is a heap? a/A tree t/ds")
    assert result.exit_code == 0, result.output
    assert "New flashcard added" in normalize_output(result.output)

    document = json.loads(data_file.read_text(encoding="utf-8"))
    assert document["flashcards"][-1]["question"] == "What is a heap?"
    assert document["flashcards"][-1]["tags"] == ["ds"]


def test_exec_without_data_file_uses_sample_data(paths):
    _, data_file = paths
    result = invoke(paths, "exec", "list")
    assert result.exit_code == 0, result.output
    assert data_file.exists()
    assert len(json.loads(data_file.read_text(encoding="utf-8"))["flashcards"]) == 4


def test_exec_unknown_command_fails(seeded_paths):
    result = invoke(seeded_paths, "exec", "frobnicate")
    assert result.exit_code == 1
    assert "Unknown command" in normalize_output(result.output)


def test_exec_invalid_format_fails(seeded_paths):
    result = invoke(seeded_paths, "exec", "add q/Only a question")
    assert result.exit_code == 1
    assert "Invalid command format!" in normalize_output(result.output)


def test_exec_command_error_fails(seeded_paths):
    result = invoke(seeded_paths, "exec", "open 42")
    assert result.exit_code == 1
    assert "The flashcard index provided is invalid" in normalize_output(result.output)


def test_exec_open_hides_answer(seeded_paths):
    result = invoke(seeded_paths, "exec", "open 2")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    assert "Opened flashcard 2" in output
    assert "1. Quick sort" in output
    assert "3. Heap sort" in output
    assert "Answer" not in output


def test_exec_test_reports_result(seeded_paths):
    result = invoke(seeded_paths, "exec", "test 2 o/2")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    assert "Correct! The answer is: Merge sort" in output
    assert "Times Tested" in output


def test_exec_help_lists_commands(seeded_paths):
    result = invoke(seeded_paths, "exec", "help")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    for word in ("addmcq", "clearstats", "export", "import"):
        assert word in output


def test_envvars_select_files(seeded_paths, monkeypatch):
    prefs_file, data_file = seeded_paths
    monkeypatch.setenv("QUICKCACHE_PREFS", str(prefs_file))
    monkeypatch.setenv("QUICKCACHE_DATA", str(data_file))
    result = runner.invoke(app, ["exec", "find t/sorting"])
    assert result.exit_code == 0, result.output
    assert "1 flashcards listed!" in normalize_output(result.output)
    assert prefs_file.exists()


def test_prefs_file_path_is_used_without_data_option(tmp_path, sample_cards):
    data_file = tmp_path / "elsewhere" / "cards.json"
    JsonQuickCacheStorage(data_file).save_quickcache(QuickCache(sample_cards[:1]))
    prefs_file = tmp_path / "prefs.json"
    prefs_file.write_text(
        json.dumps({"quickcache_file_path": str(data_file)}), encoding="utf-8"
    )
    result = runner.invoke(app, ["--prefs", str(prefs_file), "exec", "stats"])
    assert result.exit_code == 0, result.output
    assert "Statistics for 1 displayed flashcards" in normalize_output(result.output)


def test_log_level_option(seeded_paths):
    prefs_file, data_file = seeded_paths
    result = runner.invoke(
        app,
        ["--prefs", str(prefs_file), "--data", str(data_file), "--log-level", "LOUD", "exec", "list"],
    )
    assert result.exit_code == 1
    assert "unknown log level" in normalize_output(result.output)


# ---------------------------------------------------------------------------
# Interactive session
# ---------------------------------------------------------------------------


def test_run_session_until_exit(seeded_paths):
    result = invoke(seeded_paths, "run", input="list\nopen 1\nexit\nlist\n")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    assert "Welcome to QuickCache!" in output
    assert "Opened flashcard 1" in output
    assert "Exiting QuickCache as requested" in output
    # nothing after exit is executed
    assert output.count("Listed all flashcards") == 1


def test_session_is_default_command(seeded_paths):
    result = invoke(seeded_paths, input="stats\n")
    assert result.exit_code == 0, result.output
    assert "Statistics for 3 displayed flashcards" in normalize_output(result.output)


def test_session_reports_errors_and_continues(seeded_paths):
    _, data_file = seeded_paths
    result = invoke(seeded_paths, "run", input="\nnonsense\ndelete 1\n")
    assert result.exit_code == 0, result.output
    output = normalize_output(result.output)
    assert "Unknown command" in output
    assert "Deleted Flashcard" in output
    assert len(json.loads(data_file.read_text(encoding="utf-8"))["flashcards"]) == 2
