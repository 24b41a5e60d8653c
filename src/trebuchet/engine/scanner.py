"""
Scanner: one line of text → stream of digit tokens.

Walks the line left to right, asking the trie for a match at every
character offset. After a match the cursor moves forward by ONE character,
not by the match length, so spelled digits sharing letters are all found:
"eightwo" yields 8 then 2, "twone" yields 2 then 1.

Characters that start no token (punctuation, uppercase, non-ASCII) are
skipped silently.
"""

from dataclasses import dataclass
from typing import Iterator

from trebuchet.core.token_trie import TokenTrie


@dataclass
class ScanMatch:
    position: int
    value: int
    text: str


class Scanner:
    """Find digit tokens in a line."""

    def __init__(self, trie: TokenTrie):
        self.trie = trie

    def matches(self, line: str) -> Iterator[ScanMatch]:
        """Yield every digit token in left-to-right order.

        Args:
            line: A single line of text, without its terminator.

        Yields:
            ScanMatch records with the character offset of the token start.
        """
        position = 0
        while position < len(line):
            match = self.trie.match_at(line, position)
            if match is not None:
                yield ScanMatch(position, match.value,
                                line[position:position + match.length])
            # Overlapping tokens share characters: always step by one
            position += 1

    def digits(self, line: str) -> Iterator[int]:
        """Yield the digit value of every token in the line."""
        return (match.value for match in self.matches(line))


def scan_digits(line, trie):
    """Digit values found in line, as a list."""
    return list(Scanner(trie).digits(line))
