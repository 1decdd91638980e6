"""
search_server - minimal full-text search engine with TF-IDF ranking.
"""

from .search_server import SearchServer, SearchServerConfig
from .selfindex import QueryResult, MAX_RESULT_DOCUMENT_COUNT
from .exceptions import (
    SearchServerError,
    InvalidTermFrequencyInput,
    InconsistentDocumentCountError,
    DegenerateIDFError,
    DocumentIdError,
    IndexFrozenError,
    IndexNotReadyError,
    CorpusFormatError,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    'SearchServer',
    'SearchServerConfig',
    'QueryResult',
    'MAX_RESULT_DOCUMENT_COUNT',
    'SearchServerError',
    'InvalidTermFrequencyInput',
    'InconsistentDocumentCountError',
    'DegenerateIDFError',
    'DocumentIdError',
    'IndexFrozenError',
    'IndexNotReadyError',
    'CorpusFormatError',
    'ConfigurationError',
]
