"""
Postings list data structures for the inverted index.
"""

from typing import Dict, Iterator, List, Optional, Set
from dataclasses import dataclass
import bisect


@dataclass
class PostingEntry:
    """
    Single posting entry for a term in a document.

    Attributes:
        doc_id: Document identifier
        term_freq: Normalized term frequency (occurrences / document length)
        occurrences: Number of times term appears in document
    """
    doc_id: int
    term_freq: float
    occurrences: int = 1

    def __lt__(self, other):
        """Compare by doc_id for sorting."""
        return self.doc_id < other.doc_id

class PostingsList:
    """
    Postings list for a single term.
    Keeps entries sorted by ascending document ID.
    """

    def __init__(self):
        self.postings: List[PostingEntry] = []
        self._doc_id_set: Optional[Set[int]] = None  # Cache for fast lookup

    def add_posting(self, doc_id: int, term_freq: float, occurrences: int = 1):
        """
        Add the posting of a term in a document.

        Args:
            doc_id: Document identifier, greater than any already present
            term_freq: Normalized term frequency
            occurrences: Raw occurrence count
        """
        if self.postings and self.postings[-1].doc_id >= doc_id:
            raise ValueError(
                f"Postings must be added in ascending doc_id order: "
                f"{doc_id} after {self.postings[-1].doc_id}"
            )

        self.postings.append(
            PostingEntry(doc_id=doc_id, term_freq=term_freq, occurrences=occurrences)
        )

        # Invalidate cache
        self._doc_id_set = None

    def get_doc_ids(self) -> List[int]:
        """Get list of all document IDs containing this term."""
        return [p.doc_id for p in self.postings]

    def get_doc_id_set(self) -> Set[int]:
        """Get set of document IDs for fast membership testing."""
        if self._doc_id_set is None:
            self._doc_id_set = {p.doc_id for p in self.postings}
        return self._doc_id_set

    def get_posting(self, doc_id: int) -> Optional[PostingEntry]:
        """
        Get posting entry for a specific document.

        Args:
            doc_id: Document identifier

        Returns:
            PostingEntry if found, None otherwise
        """
        idx = bisect.bisect_left(self.postings, PostingEntry(doc_id=doc_id, term_freq=0.0))
        if idx < len(self.postings) and self.postings[idx].doc_id == doc_id:
            return self.postings[idx]
        return None

    def get_term_frequency(self, doc_id: int) -> float:
        """Get normalized term frequency in a specific document."""
        posting = self.get_posting(doc_id)
        return posting.term_freq if posting else 0.0

    def document_frequency(self) -> int:
        """Get number of documents containing this term."""
        return len(self.postings)

    def term_frequencies(self) -> Dict[int, float]:
        """Map each document ID to its term frequency."""
        return {p.doc_id: p.term_freq for p in self.postings}

    def __len__(self) -> int:
        return len(self.postings)

    def __iter__(self) -> Iterator[PostingEntry]:
        return iter(self.postings)

