"""
Flashcards used to populate a QuickCache on first launch.
"""

from typing import List

from .flashcard_list import QuickCache
from .models import Difficulty, Flashcard


def get_sample_flashcards() -> List[Flashcard]:
    return [
        Flashcard(
            question="What does OOP stand for?",
            answer="Object Oriented Programming",
            tags={"programming"},
            difficulty=Difficulty.LOW,
        ),
        Flashcard(
            question="Which sorting algorithm has a worst case of O(n log n)?",
            answer="Merge sort",
            choices=("Quick sort", "Merge sort", "Bubble sort", "Insertion sort"),
            tags={"algorithms", "year-one"},
            difficulty=Difficulty.MEDIUM,
        ),
        Flashcard(
            question="What is the time complexity of binary search?",
            answer="O(log n)",
            tags={"algorithms"},
        ),
        Flashcard(
            question="Which layer parses user commands?",
            answer="Logic",
            choices=("UI", "Logic", "Model", "Storage"),
            tags={"architecture"},
            difficulty=Difficulty.HIGH,
        ),
    ]


def get_sample_quickcache() -> QuickCache:
    return QuickCache(get_sample_flashcards())
