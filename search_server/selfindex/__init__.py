"""
SelfIndex - in-memory inverted index with TF-IDF ranking.
"""

from .postings import PostingEntry, PostingsList
from .inverted_index import InvertedIndex, CollectionStatistics
from .scoring import term_frequency, inverse_document_frequency
from .query_processor import (
    MAX_RESULT_DOCUMENT_COUNT,
    QueryResult,
    QueryProcessor,
    TermAtATimeProcessor,
    DocumentAtATimeProcessor,
    rank_results
)

__all__ = [
    'PostingEntry',
    'PostingsList',
    'InvertedIndex',
    'CollectionStatistics',

    'term_frequency',
    'inverse_document_frequency',
    'MAX_RESULT_DOCUMENT_COUNT',
    'QueryResult',
    'QueryProcessor',
    'TermAtATimeProcessor',
    'DocumentAtATimeProcessor',
    'rank_results',
]
