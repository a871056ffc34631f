import json
from pathlib import Path

import pytest
import yaml

from quickcache.commands import ExportCommand, ImportCommand
from quickcache.exceptions import CommandError
from quickcache.flashcard_list import QuickCache
from quickcache.models import Difficulty, Flashcard
from quickcache.predicates import FlashcardContainsTagPredicate
from quickcache.storage import JsonQuickCacheStorage


@pytest.fixture
def data_dir(model) -> Path:
    return model.quickcache_file_path.parent


class TestExportCommand:
    def test_exports_displayed_flashcards(self, model, data_dir, mcq_card, tested_card):
        model.update_filtered_flashcard_list(FlashcardContainsTagPredicate(["algorithms"]))
        result = ExportCommand("algorithms.json").execute(model)

        target = data_dir / "algorithms.json"
        assert result.feedback_to_user == f"Exported 2 flashcard(s) to {target}"
        exported = JsonQuickCacheStorage(target).read_quickcache()
        assert exported == QuickCache([mcq_card, tested_card])

    def test_export_writes_json(self, model, data_dir):
        ExportCommand("all.json").execute(model)
        document = json.loads((data_dir / "all.json").read_text(encoding="utf-8"))
        assert len(document["flashcards"]) == 3

    def test_export_failure(self, model, data_dir):
        # A directory where the file should go makes the write fail.
        (data_dir / "taken.json").mkdir(parents=True)
        with pytest.raises(CommandError) as excinfo:
            ExportCommand("taken.json").execute(model)
        assert str(excinfo.value).startswith("Could not export to")


class TestImportCommand:
    def test_missing_file(self, model, data_dir):
        with pytest.raises(CommandError) as excinfo:
            ImportCommand("absent.json").execute(model)
        assert str(excinfo.value) == f"File {data_dir / 'absent.json'} does not exist"

    def test_import_json_skips_duplicates(self, model, data_dir, open_ended_card):
        new_card = Flashcard(question="What is a stack?", answer="LIFO", tags={"ds"})
        JsonQuickCacheStorage(data_dir / "shared.json").save_quickcache(
            QuickCache([open_ended_card, new_card])
        )

        result = ImportCommand("shared.json").execute(model)

        assert result.feedback_to_user == "Imported 1 flashcard(s), skipped 1 duplicate(s)"
        assert result.show_list
        assert model.quickcache.flashcards[-1] == new_card
        assert len(model.filtered_flashcards) == 4

    def test_import_yaml_deck(self, model, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        deck = {
            "deck": "Data Structures",
            "tags": ["ds"],
            "cards": [
                {"q": "What is a queue?", "a": "FIFO"},
                {
                    "q": "Which is LIFO?",
                    "a": 2,
                    "choices": ["Queue", "Stack"],
                    "difficulty": "high",
                },
                {"q": "Missing answer"},
            ],
        }
        (data_dir / "deck.yaml").write_text(yaml.safe_dump(deck), encoding="utf-8")

        result = ImportCommand("deck.yaml").execute(model)

        assert result.feedback_to_user.startswith(
            "Imported 2 flashcard(s), skipped 0 duplicate(s)\n1 card(s) could not be read:"
        )
        assert "deck.yaml, card 3: Card validation failed" in result.feedback_to_user
        mcq = model.quickcache.flashcards[-1]
        assert mcq.answer == "Stack"
        assert mcq.difficulty == Difficulty.HIGH
        assert mcq.tags == frozenset({"ds"})

    def test_import_invalid_json(self, model, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(CommandError) as excinfo:
            ImportCommand("broken.json").execute(model)
        assert str(excinfo.value).startswith("Could not import")
        assert len(model.quickcache) == 3

    def test_import_invalid_yaml(self, model, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "broken.yml").write_text("deck: [unclosed", encoding="utf-8")
        with pytest.raises(CommandError) as excinfo:
            ImportCommand("broken.yml").execute(model)
        assert "Invalid YAML syntax" in str(excinfo.value)

    def test_import_non_utf8_file(self, model, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "binary.json").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(CommandError) as excinfo:
            ImportCommand("binary.json").execute(model)
        assert "is not valid UTF-8 text" in str(excinfo.value)
        assert len(model.quickcache) == 3

    def test_import_non_utf8_deck(self, model, data_dir):
        data_dir.mkdir(parents=True, exist_ok=True)
        (data_dir / "binary.yaml").write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(CommandError) as excinfo:
            ImportCommand("binary.yaml").execute(model)
        assert "is not valid UTF-8 text" in str(excinfo.value)
