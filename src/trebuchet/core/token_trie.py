"""Token trie — character-indexed tree of recognized digit tokens.

Each edge is a single character. A node carries a digit value (1-9) when
the path from the root spells a complete key. The built-in vocabulary holds
the ASCII digits and their lowercase English spellings.

Lookups return the FIRST terminal met while descending (earliest-terminal),
not the longest match. No built-in key is a prefix of another, so for the
built-in vocabulary the two agree.
"""

from dataclasses import dataclass, field


# Built-in vocabulary: key → digit value
DIGIT_VOCABULARY = {
    "1": 1, "one": 1,
    "2": 2, "two": 2,
    "3": 3, "three": 3,
    "4": 4, "four": 4,
    "5": 5, "five": 5,
    "6": 6, "six": 6,
    "7": 7, "seven": 7,
    "8": 8, "eight": 8,
    "9": 9, "nine": 9,
}

MIN_DIGIT = 1
MAX_DIGIT = 9


@dataclass
class TrieNode:
    children: dict = field(default_factory=dict)  # char -> TrieNode
    value: int | None = None


@dataclass(frozen=True)
class DigitMatch:
    value: int
    length: int


class TokenTrie:
    """Trie mapping token strings to digit values.

    Built once, then frozen and shared read-only.
    """

    def __init__(self):
        self.root = TrieNode()
        self._frozen = False

    @classmethod
    def with_digits(cls):
        """Frozen trie holding the built-in digit vocabulary."""
        return cls.from_mapping(DIGIT_VOCABULARY)

    @classmethod
    def from_mapping(cls, mapping):
        """Build and freeze a trie from a key → digit mapping."""
        trie = cls()
        for key, value in mapping.items():
            trie.insert(key, value)
        trie.freeze()
        return trie

    @property
    def frozen(self):
        return self._frozen

    def freeze(self):
        self._frozen = True

    def insert(self, key: str, value: int):
        """Register key with a digit value, overwriting any previous value.

        Raises:
            RuntimeError: if the trie has been frozen
            ValueError: on an empty key or a value outside 1-9
        """
        if self._frozen:
            raise RuntimeError("Cannot insert into a frozen trie")
        if not key:
            raise ValueError("Key must be a non-empty string")
        if (isinstance(value, bool) or not isinstance(value, int)
                or not MIN_DIGIT <= value <= MAX_DIGIT):
            raise ValueError(f"Digit value out of range: {value!r}")

        node = self.root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child
        node.value = value

    def match_at(self, line: str, position: int) -> DigitMatch | None:
        """Match a token starting at line[position].

        Descends one character at a time and stops at the first terminal
        node. Returns None when descent fails or the line runs out first.
        """
        if position < 0:
            raise ValueError(f"Negative position: {position}")

        node = self.root
        for i in range(position, len(line)):
            node = node.children.get(line[i])
            if node is None:
                return None
            if node.value is not None:
                return DigitMatch(node.value, i - position + 1)
        return None

    def node_count(self) -> int:
        """Number of nodes, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def keys(self) -> list[tuple[str, int]]:
        """All (key, value) pairs stored in the trie, sorted by key."""
        pairs = []
        stack = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if node.value is not None:
                pairs.append((prefix, node.value))
            for ch, child in node.children.items():
                stack.append((prefix + ch, child))
        return sorted(pairs)

    def __eq__(self, other):
        if not isinstance(other, TokenTrie):
            return NotImplemented
        return self.root == other.root

    def __repr__(self):
        return f"TokenTrie(keys={len(self.keys())}, nodes={self.node_count()})"
