"""
Query processing engines: Term-at-a-time and Document-at-a-time.

Both score plus terms by TF-IDF, drop documents that contain a minus
term and keep the top-k results. Ties on relevance are broken by
ascending document ID.
"""

from typing import Dict, List, Set
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from .inverted_index import InvertedIndex
from ..utils.query_parser import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5


@dataclass(frozen=True)
class QueryResult:
    """Container for a ranked document and its relevance."""
    doc_id: int
    relevance: float

    def __lt__(self, other):
        # Sorts by relevance descending, then doc_id ascending
        return (-self.relevance, self.doc_id) < (-other.relevance, other.doc_id)

    def to_dict(self) -> dict:
        return {'document_id': self.doc_id, 'relevance': self.relevance}

    def format(self) -> str:
        return f"{{ document_id = {self.doc_id}, relevance = {self.relevance:g} }}"


def rank_results(scores: Dict[int, float], k: int = MAX_RESULT_DOCUMENT_COUNT) -> List[QueryResult]:
    """
    Sort accumulated scores and keep the first k.

    Args:
        scores: Document ID -> relevance
        k: Maximum number of results

    Returns:
        Sorted list of at most k QueryResult objects
    """
    results = [QueryResult(doc_id, relevance) for doc_id, relevance in scores.items()]
    results.sort()
    return results[:k]


class QueryProcessor(ABC):
    """Abstract base class for query processors."""

    def __init__(self, index: InvertedIndex):
        """
        Initialize query processor.

        Args:
            index: Finalized InvertedIndex to query
        """
        self.index = index
        self.stats = index.statistics

    def process_query(self, query: Query, k: int = MAX_RESULT_DOCUMENT_COUNT) -> List[QueryResult]:
        """
        Process a query and return top-k results.

        Args:
            query: Parsed query
            k: Number of results to return

        Returns:
            List of QueryResult objects sorted by relevance
        """
        scores = self.find_all_documents(query)
        logger.debug(f"Query matched {len(scores)} documents")
        return rank_results(scores, k)

    @abstractmethod
    def find_all_documents(self, query: Query) -> Dict[int, float]:
        """Score every document matching the query."""

    def excluded_documents(self, query: Query) -> Set[int]:
        """Get IDs of all documents containing any minus term."""
        excluded: Set[int] = set()
        for term in query.minus:
            postings = self.index.get_postings(term)
            if postings:
                excluded |= postings.get_doc_id_set()
        return excluded


class TermAtATimeProcessor(QueryProcessor):
    """
    Term-at-a-time query processing.
    Processes one term at a time, accumulating scores.
    """

    def find_all_documents(self, query: Query) -> Dict[int, float]:
        """
        Algorithm:
        1. For each plus term (sorted):
            a. Get postings list and IDF
            b. Add IDF * TF to each document's score
        2. Remove documents containing a minus term
        """
        scores: Dict[int, float] = {}

        for term in sorted(query.plus):
            postings = self.index.get_postings(term)

            if not postings:
                continue

            idf = self.stats.calculate_idf(postings.document_frequency())

            for posting in postings:
                term_score = idf * posting.term_freq
                if posting.doc_id in scores:
                    scores[posting.doc_id] += term_score
                else:
                    scores[posting.doc_id] = term_score

        for doc_id in self.excluded_documents(query):
            scores.pop(doc_id, None)

        return scores


class DocumentAtATimeProcessor(QueryProcessor):
    """
    Document-at-a-time query processing.
    Processes all terms for one document at a time.
    """

    def find_all_documents(self, query: Query) -> Dict[int, float]:
        """
        Algorithm:
        1. Collect postings lists and IDFs of plus terms
        2. Candidates = union of postings minus excluded documents
        3. For each candidate (ascending ID), sum IDF * TF over terms
        """
        term_postings = []
        term_idfs = []

        for term in sorted(query.plus):
            postings = self.index.get_postings(term)
            if postings:
                term_postings.append(postings.term_frequencies())
                term_idfs.append(
                    self.stats.calculate_idf(postings.document_frequency())
                )

        if not term_postings:
            return {}

        candidates: Set[int] = set()
        for frequencies in term_postings:
            candidates.update(frequencies)
        candidates -= self.excluded_documents(query)

        scores: Dict[int, float] = {}
        for doc_id in sorted(candidates):
            doc_score = 0.0
            for frequencies, idf in zip(term_postings, term_idfs):
                tf = frequencies.get(doc_id)
                if tf is not None:
                    doc_score += idf * tf
            scores[doc_id] = doc_score

        return scores
