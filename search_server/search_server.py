"""
SearchServer: builds the inverted index from a corpus and answers
free-text queries with TF-IDF ranking.

Lifecycle:
    config -> add_document() x N -> finalize() -> find_top_documents() x M

SearchServer.build() runs the whole build step at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from .exceptions import (
    ConfigurationError,
    InconsistentDocumentCountError,
    IndexNotReadyError,
)
from .preprocessing.tokenizer import Tokenizer, split_into_words
from .selfindex import (
    MAX_RESULT_DOCUMENT_COUNT,
    DocumentAtATimeProcessor,
    InvertedIndex,
    QueryProcessor,
    QueryResult,
    TermAtATimeProcessor,
)
from .utils.query_parser import QueryParser

logger = logging.getLogger(__name__)

QUERY_PROCESSORS = {
    'TERMatat': TermAtATimeProcessor,
    'DOCatat': DocumentAtATimeProcessor,
}


@dataclass(frozen=True)
class SearchServerConfig:
    """
    Immutable search server configuration.

    Attributes:
        stop_words: Words excluded from indexing and queries
        max_results: Maximum number of results per query
        query_proc: Query processing strategy (TERMatat or DOCatat)
        expected_document_count: Declared corpus size, checked at finalize
    """
    stop_words: FrozenSet[str] = field(default_factory=frozenset)
    max_results: int = MAX_RESULT_DOCUMENT_COUNT
    query_proc: str = 'TERMatat'
    expected_document_count: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.stop_words, str):
            object.__setattr__(self, 'stop_words', frozenset(split_into_words(self.stop_words)))
        else:
            object.__setattr__(self, 'stop_words', frozenset(self.stop_words))

        if self.max_results <= 0:
            raise ConfigurationError(f"max_results must be positive, got {self.max_results}")
        if self.query_proc not in QUERY_PROCESSORS:
            raise ConfigurationError(
                f"Unknown query_proc '{self.query_proc}', "
                f"expected one of {sorted(QUERY_PROCESSORS)}"
            )
        if self.expected_document_count is not None and self.expected_document_count < 0:
            raise ConfigurationError(
                f"expected_document_count must be non-negative, got {self.expected_document_count}"
            )

    @classmethod
    def from_config(cls, config, stop_words: str = '',
                    declared_document_count: Optional[int] = None) -> 'SearchServerConfig':
        """
        Create from a Hydra configuration object.

        Args:
            config: Hydra config with preprocessing and search sections
            stop_words: Stop-word line of the corpus, merged with configured ones
            declared_document_count: Document count from the corpus header

        Returns:
            SearchServerConfig
        """
        words = set(split_into_words(stop_words))
        words.update(split_into_words(config.preprocessing.get('stop_words') or ''))

        strict = config.search.get('strict_document_count', True)

        return cls(
            stop_words=frozenset(words),
            max_results=int(config.search.max_results),
            query_proc=str(config.search.get('query_proc', 'TERMatat')),
            expected_document_count=declared_document_count if strict else None
        )


class SearchServer:
    """In-memory full-text search over a fixed corpus."""

    def __init__(self, config: Optional[SearchServerConfig] = None):
        """
        Initialize an empty search server.

        Args:
            config: Search server configuration (defaults if omitted)
        """
        self.config = config or SearchServerConfig()
        self.tokenizer = Tokenizer(self.config.stop_words)
        self.query_parser = QueryParser(self.tokenizer)
        self.index = InvertedIndex()
        self._query_processor: Optional[QueryProcessor] = None

    @classmethod
    def build(cls, config: SearchServerConfig, documents: Iterable[str]) -> 'SearchServer':
        """
        Build a finalized search server from raw document texts.
        Document IDs are assigned 0, 1, 2, ... in iteration order.

        Args:
            config: Search server configuration
            documents: Raw document texts

        Returns:
            SearchServer ready for queries
        """
        server = cls(config)
        for doc_id, text in enumerate(documents):
            server.add_document(doc_id, text)
        server.finalize()
        return server

    @property
    def document_count(self) -> int:
        return self.index.num_documents

    @property
    def is_ready(self) -> bool:
        return self._query_processor is not None

    def add_document(self, doc_id: int, text: str):
        """
        Tokenize a document, drop stop words and add it to the index.

        Args:
            doc_id: Next document ID in sequence
            text: Raw document text
        """
        self.index.add_document(doc_id, self.tokenizer.tokenize(text))

    def finalize(self):
        """
        Validate the declared document count and freeze the index.
        """
        expected = self.config.expected_document_count
        if expected is not None and expected != self.index.num_documents:
            raise InconsistentDocumentCountError(
                f"Declared {expected} documents but indexed {self.index.num_documents}"
            )

        self.index.finalize()
        self._query_processor = QUERY_PROCESSORS[self.config.query_proc](self.index)

    def find_top_documents(self, raw_query: str) -> List[QueryResult]:
        """
        Find the most relevant documents for a query.

        Args:
            raw_query: Query string, '-' marks excluded terms

        Returns:
            At most max_results results, by relevance descending then ID ascending
        """
        if self._query_processor is None:
            raise IndexNotReadyError("Search server must be finalized before querying")

        query = self.query_parser.parse(raw_query)
        logger.debug(f"Parsed query: plus={sorted(query.plus)} minus={sorted(query.minus)}")

        if not query.plus:
            return []

        return self._query_processor.process_query(query, self.config.max_results)

    def get_statistics(self) -> Dict[str, Any]:
        stats = self.index.get_statistics()
        stats['stop_words'] = len(self.config.stop_words)
        stats['query_proc'] = self.config.query_proc
        stats['max_results'] = self.config.max_results
        return stats
