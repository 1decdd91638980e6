"""
Error taxonomy for the search server.
"""


class SearchServerError(Exception):
    """Base error for the search server."""


class InvalidTermFrequencyInput(SearchServerError, ValueError):
    """Raised when a term frequency would be computed from an invalid document length."""


class InconsistentDocumentCountError(SearchServerError, ValueError):
    """Raised when the declared document count does not match the indexed documents."""


class DegenerateIDFError(SearchServerError, ArithmeticError):
    """Raised when an IDF logarithm argument falls outside its domain."""


class DocumentIdError(SearchServerError, ValueError):
    """Raised when a document id breaks the dense ascending id sequence."""


class IndexFrozenError(SearchServerError, RuntimeError):
    """Raised when a finalized index is mutated."""


class IndexNotReadyError(SearchServerError, RuntimeError):
    """Raised when an index is queried before it is finalized."""


class CorpusFormatError(SearchServerError, ValueError):
    """Raised when corpus input does not follow the line format."""


class ConfigurationError(SearchServerError, ValueError):
    """Raised for invalid search server configuration values."""
