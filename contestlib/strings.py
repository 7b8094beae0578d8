"""String algorithms: prefix and Z functions, borders, periods, matching, tries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


def prefix_function(s: Sequence) -> list[int]:
    """Length of the longest proper border of every prefix of ``s``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def z_function(s: Sequence) -> list[int]:
    """Length of the longest common prefix of ``s`` and each of its suffixes."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = 0
    for i in range(1, n):
        z[i] = max(0, min(z[i - left], right - i + 1))
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            left = i
            right = i + z[i]
            z[i] += 1
    return z


def find_borders(s: str) -> list[int]:
    """Lengths of all proper non-empty borders of ``s``, in increasing order."""
    if not s:
        return []
    pi = prefix_function(s)
    borders = []
    length = pi[-1]
    while length > 0:
        borders.append(length)
        length = pi[length - 1]
    return sorted(borders)


def find_periods(s: str) -> list[int]:
    """All period lengths of ``s`` in increasing order, ending with ``len(s)``."""
    n = len(s)
    z = z_function(s)
    return [i for i in range(1, n) if z[i] + i == n] + [n]


def count_occurrences(text: str, pattern: str) -> int:
    """Number of positions at which ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    # None never equals a character, so it separates pattern from text.
    combined = [*pattern, None, *text]
    pi = prefix_function(combined)
    return sum(1 for value in pi[len(pattern) + 1 :] if value == len(pattern))


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    ends: int = 0


class Trie:
    """Prefix tree counting how many times each word was inserted."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.ends += 1

    def count(self, word: str) -> int:
        """How many times ``word`` was inserted."""
        node = self._root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return 0
        return node.ends