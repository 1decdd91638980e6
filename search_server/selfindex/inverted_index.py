"""
Core inverted index data structure.
"""

from typing import Dict, List, Optional, Set
from collections import Counter
import logging

from .postings import PostingsList
from .scoring import inverse_document_frequency, term_frequency
from ..exceptions import DocumentIdError, IndexFrozenError

logger = logging.getLogger(__name__)


class CollectionStatistics:
    """
    Collection-level statistics for ranking.
    The document count used for IDF is the number of documents added here.
    Read-only once the index is finalized.
    """

    def __init__(self):
        self.num_documents = 0
        self.empty_documents = 0
        self.total_tokens = 0

    @property
    def avg_document_length(self) -> float:
        return self.total_tokens / self.num_documents if self.num_documents > 0 else 0.0

    def add_document(self, doc_length: int):
        """
        Add document statistics.

        Args:
            doc_length: Number of tokens in document after stop-word removal
        """
        self.num_documents += 1
        self.total_tokens += doc_length
        if doc_length == 0:
            self.empty_documents += 1

    def calculate_idf(self, document_frequency: int) -> float:
        """
        Calculate IDF for a term from its document frequency.

        Args:
            document_frequency: Number of documents containing the term

        Returns:
            IDF score
        """
        return inverse_document_frequency(self.num_documents, document_frequency)


class InvertedIndex:
    """
    Core inverted index structure.
    Maps terms to postings lists of normalized term frequencies.
    Built once, then frozen by finalize().
    """

    def __init__(self):
        # Term -> PostingsList mapping
        self.dictionary: Dict[str, PostingsList] = {}
        self.statistics = CollectionStatistics()

        self._finalized = False

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    @property
    def num_documents(self) -> int:
        return self.statistics.num_documents

    def add_document(self, doc_id: int, tokens: List[str]):
        """
        Add a document to the index.

        A term occurring k times among the L tokens gets term frequency k / L.
        A document without tokens is counted but gets no postings.

        Args:
            doc_id: Document identifier, must be the next id in sequence
            tokens: Stop-word filtered tokens of the document
        """
        if self._finalized:
            raise IndexFrozenError(f"Cannot add document {doc_id} to a finalized index")
        if doc_id != self.num_documents:
            raise DocumentIdError(
                f"Expected document id {self.num_documents}, got {doc_id}"
            )

        document_length = len(tokens)
        if document_length == 0:
            logger.warning(f"Document {doc_id} has no indexable terms and will never match")

        for term, occurrences in Counter(tokens).items():
            if term not in self.dictionary:
                self.dictionary[term] = PostingsList()

            self.dictionary[term].add_posting(
                doc_id,
                term_frequency(occurrences, document_length),
                occurrences
            )

        self.statistics.add_document(document_length)

    def get_postings(self, term: str) -> Optional[PostingsList]:
        """
        Get postings list for a term.

        Args:
            term: The term to look up

        Returns:
            PostingsList if term exists, None otherwise
        """
        return self.dictionary.get(term)

    def get_document_frequency(self, term: str) -> int:
        """Get number of documents containing term."""
        postings = self.get_postings(term)
        return postings.document_frequency() if postings else 0

    def get_term_frequency(self, term: str, doc_id: int) -> float:
        """Get normalized term frequency of term in a document."""
        postings = self.get_postings(term)
        return postings.get_term_frequency(doc_id) if postings else 0.0

    def get_idf(self, term: str) -> float:
        """Get IDF of a term present in the index."""
        return self.statistics.calculate_idf(self.get_document_frequency(term))

    def contains_term(self, term: str) -> bool:
        """Check if term exists in vocabulary."""
        return term in self.dictionary

    def get_vocabulary(self) -> Set[str]:
        return set(self.dictionary.keys())

    def get_vocabulary_size(self) -> int:
        return len(self.dictionary)

    def finalize(self):
        """Freeze the index after all documents are added."""
        self._finalized = True
        logger.info(
            f"Index finalized: {self.num_documents} documents, "
            f"{self.get_vocabulary_size()} terms"
        )

    def get_statistics(self) -> Dict:
        """Get index statistics."""
        avg_postings_length = (
            sum(len(postings) for postings in self.dictionary.values()) / len(self.dictionary)
            if self.dictionary else 0
        )

        return {
            'num_documents': self.statistics.num_documents,
            'empty_documents': self.statistics.empty_documents,
            'vocabulary_size': len(self.dictionary),
            'total_tokens': self.statistics.total_tokens,
            'avg_document_length': self.statistics.avg_document_length,
            'avg_postings_length': avg_postings_length
        }
