"""
Splits command arguments of the form ``PREAMBLE p/VALUE p/VALUE ...`` into
a preamble and prefixed values.
"""

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Prefix:
    """An argument marker such as ``q/``."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_QUESTION = Prefix("q/")
PREFIX_ANSWER = Prefix("a/")
PREFIX_CHOICE = Prefix("c/")
PREFIX_TAG = Prefix("t/")
PREFIX_DIFFICULTY = Prefix("d/")
PREFIX_OPTION = Prefix("o/")

# The preamble is stored under an empty prefix.
_PREAMBLE = Prefix("")


class ArgumentMultimap:
    """
    Maps each prefix to every value given for it, in input order.
    """

    def __init__(self) -> None:
        self._values: Dict[Prefix, List[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Return the last value of ``prefix``, or None if it is absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> List[str]:
        """Return a copy of all values of ``prefix`` (empty if absent)."""
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.get_value(_PREAMBLE) or ""

    def are_prefixes_present(self, *prefixes: Prefix) -> bool:
        return all(self.get_value(prefix) is not None for prefix in prefixes)


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenize ``args_string`` into an ArgumentMultimap.

    A prefix is only recognised when it is preceded by whitespace, so
    ``q/a/b`` inside a value stays part of that value. Values are trimmed.

    Parameters:
        args_string (str): Arguments, usually starting with a space.
        prefixes (Prefix): Prefixes to recognise.

    Returns:
        ArgumentMultimap: The preamble (text before the first prefix) and the
        values of each prefix.
    """
    positions = []
    for prefix in prefixes:
        pattern = re.compile(r"(?<=\s)" + re.escape(prefix.prefix))
        positions.extend(
            (match.start(), prefix) for match in pattern.finditer(args_string)
        )
    positions.sort(key=lambda position: position[0])

    multimap = ArgumentMultimap()
    first_start = positions[0][0] if positions else len(args_string)
    multimap.put(_PREAMBLE, args_string[:first_start].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args_string)
        value = args_string[start + len(prefix.prefix):end]
        multimap.put(prefix, value.strip())
    return multimap
