import logging
from dataclasses import dataclass, field
from typing import FrozenSet

from ..preprocessing.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

MINUS_PREFIX = '-'


@dataclass(frozen=True)
class Query:
    """
    Parsed free-text query.

    Attributes:
        plus: Terms that add to a document's relevance
        minus: Terms whose presence excludes a document
    """
    plus: FrozenSet[str] = field(default_factory=frozenset)
    minus: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.plus and not self.minus


class QueryParser:
    """
    Parse raw query strings into plus and minus term sets.
    A word prefixed with '-' is a minus term.
    """

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer

    def parse(self, raw_query: str) -> Query:
        """
        Parse a query string.

        Stop words are removed first. A minus word is dropped when nothing
        follows the prefix or when the remainder is itself a stop word.

        Args:
            raw_query: Query string (e.g., "fluffy cat -collar")

        Returns:
            Query with duplicate terms collapsed
        """
        plus = set()
        minus = set()

        for word in self.tokenizer.tokenize(raw_query):
            if not word.startswith(MINUS_PREFIX):
                plus.add(word)
                continue

            term = word[len(MINUS_PREFIX):]
            if not term:
                logger.debug("Ignoring bare minus prefix in query")
            elif self.tokenizer.is_stop_word(term):
                logger.debug(f"Ignoring minus stop word '{term}'")
            else:
                minus.add(term)

        return Query(plus=frozenset(plus), minus=frozenset(minus))
