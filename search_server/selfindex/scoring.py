"""
Checked TF and IDF computations.

Both functions validate their inputs and raise instead of returning
NaN, infinity or negative weights.
"""

import math

from ..exceptions import DegenerateIDFError, InvalidTermFrequencyInput


def term_frequency(occurrences: int, document_length: int) -> float:
    """
    Calculate normalized term frequency.

    TF = occurrences / document_length

    Args:
        occurrences: Times the term appears in the document
        document_length: Number of tokens in the document after stop-word removal

    Returns:
        Term frequency in (0, 1]
    """
    if document_length <= 0:
        raise InvalidTermFrequencyInput(
            f"Document length must be positive, got {document_length}"
        )
    if occurrences <= 0 or occurrences > document_length:
        raise InvalidTermFrequencyInput(
            f"Occurrences must be in [1, {document_length}], got {occurrences}"
        )
    return occurrences / document_length


def inverse_document_frequency(document_count: int, document_frequency: int) -> float:
    """
    Calculate IDF (Inverse Document Frequency) for a term.

    IDF = ln(N / df)
    where N is total documents and df is document frequency

    Args:
        document_count: Number of indexed documents
        document_frequency: Number of documents containing the term

    Returns:
        Non-negative IDF score
    """
    if document_count <= 0:
        raise DegenerateIDFError(
            f"Document count must be positive, got {document_count}"
        )
    if document_frequency <= 0 or document_frequency > document_count:
        raise DegenerateIDFError(
            f"Document frequency {document_frequency} is outside [1, {document_count}]"
        )
    return math.log(document_count / document_frequency)
