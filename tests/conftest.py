from pathlib import Path
from typing import List

import pytest

from quickcache.flashcard_list import QuickCache
from quickcache.model_manager import ModelManager
from quickcache.models import Difficulty, Flashcard, Statistics
from quickcache.prefs import UserPrefs
from quickcache.storage import StorageManager


# each test runs with its temp dir as the working directory
@pytest.fixture(autouse=True)
def go_to_tmpdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Change the working directory to the test's tmp_path for the duration of
    the test, so that default relative paths (preferences.json, data/) never
    touch the repository.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("QUICKCACHE_PREFS", raising=False)
    monkeypatch.delenv("QUICKCACHE_DATA", raising=False)
    yield


# --- Flashcard Fixtures ---
@pytest.fixture
def open_ended_card() -> Flashcard:
    """
    An open-ended flashcard tagged "programming" with LOW difficulty.
    """
    return Flashcard(
        question="What does OOP stand for?",
        answer="Object Oriented Programming",
        tags={"programming"},
        difficulty=Difficulty.LOW,
    )


@pytest.fixture
def mcq_card() -> Flashcard:
    """
    A multiple-choice flashcard whose answer is its second choice.
    """
    return Flashcard(
        question="Which sort is stable?",
        answer="Merge sort",
        choices=("Quick sort", "Merge sort", "Heap sort"),
        tags={"algorithms", "sorting"},
        difficulty=Difficulty.MEDIUM,
    )


@pytest.fixture
def tested_card() -> Flashcard:
    """
    An open-ended flashcard that has been tested 4 times, 3 of them correctly.
    """
    return Flashcard(
        question="What is the time complexity of binary search?",
        answer="O(log n)",
        tags={"algorithms"},
        statistics=Statistics(times_tested=4, times_tested_correct=3),
    )


@pytest.fixture
def sample_cards(
    open_ended_card: Flashcard, mcq_card: Flashcard, tested_card: Flashcard
) -> List[Flashcard]:
    return [open_ended_card, mcq_card, tested_card]


@pytest.fixture
def quickcache(sample_cards: List[Flashcard]) -> QuickCache:
    return QuickCache(sample_cards)


@pytest.fixture
def model(quickcache: QuickCache, tmp_path: Path) -> ModelManager:
    """
    A model holding the three sample cards whose data file lives in tmp_path.
    """
    prefs = UserPrefs(quickcache_file_path=tmp_path / "data" / "quickcache.json")
    return ModelManager(quickcache, prefs)


@pytest.fixture
def empty_model(tmp_path: Path) -> ModelManager:
    prefs = UserPrefs(quickcache_file_path=tmp_path / "data" / "quickcache.json")
    return ModelManager(QuickCache(), prefs)


# --- Storage Fixtures ---
@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "quickcache.json"


@pytest.fixture
def prefs_file(tmp_path: Path) -> Path:
    return tmp_path / "preferences.json"


@pytest.fixture
def storage(data_file: Path, prefs_file: Path) -> StorageManager:
    return StorageManager.from_paths(data_file, prefs_file)
