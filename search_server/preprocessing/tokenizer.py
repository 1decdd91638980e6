from typing import FrozenSet, Iterable, List

WORD_DELIMITER = ' '


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on the single space character.

    Consecutive, leading and trailing spaces never produce empty words.
    Tabs, newlines and punctuation are kept as part of the words.

    Args:
        text: Raw text

    Returns:
        Words in their original order and case
    """
    if not text:
        return []
    return [word for word in text.split(WORD_DELIMITER) if word]


class Tokenizer:
    """Splits text into words and removes configured stop words."""

    def __init__(self, stop_words: Iterable[str] = ()):
        """
        Initialize tokenizer with a fixed stop-word set.

        Args:
            stop_words: Words excluded from indexing and query matching
        """
        self._stop_words: FrozenSet[str] = frozenset(
            word for word in stop_words if word
        )

    @classmethod
    def from_text(cls, stop_words_text: str) -> 'Tokenizer':
        """Create a tokenizer from one space-delimited stop-word line."""
        return cls(split_into_words(stop_words_text))

    @property
    def stop_words(self) -> FrozenSet[str]:
        return self._stop_words

    def split(self, text: str) -> List[str]:
        return split_into_words(text)

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def filter_stop_words(self, tokens: Iterable[str]) -> List[str]:
        """Remove stop words, preserving the order of the remaining tokens."""
        return [token for token in tokens if not self.is_stop_word(token)]

    def tokenize(self, text: str) -> List[str]:
        """Split text and drop stop words."""
        return self.filter_stop_words(self.split(text))
