"""
Unit tests for tokenizer, scoring and core index data structures.
Run with: pytest tests/test_data_structures.py -v
"""

import math
import pytest
import sys
from pathlib import Path

# Add repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from search_server.preprocessing.tokenizer import Tokenizer, split_into_words
from search_server.selfindex.postings import PostingEntry, PostingsList
from search_server.selfindex.inverted_index import InvertedIndex, CollectionStatistics
from search_server.selfindex.scoring import term_frequency, inverse_document_frequency
from search_server.exceptions import (
    DegenerateIDFError,
    DocumentIdError,
    IndexFrozenError,
    InvalidTermFrequencyInput,
)


class TestSplitIntoWords:
    """Test whitespace splitting."""

    def test_empty_string(self):
        """Empty text has no words."""
        assert split_into_words("") == []

    def test_only_spaces(self):
        """Spaces alone produce no words."""
        assert split_into_words("    ") == []

    def test_consecutive_and_edge_spaces(self):
        """Repeated, leading and trailing spaces are skipped."""
        assert split_into_words("  cat   sat  ") == ["cat", "sat"]

    def test_preserves_case_and_order(self):
        """Words keep their case and order."""
        assert split_into_words("Cat cat CAT") == ["Cat", "cat", "CAT"]

    def test_space_is_only_delimiter(self):
        """Tabs, newlines and punctuation stay inside words."""
        assert split_into_words("cat\tdog bird,\nfish") == ["cat\tdog", "bird,\nfish"]


class TestTokenizer:
    """Test stop-word handling."""

    def setup_method(self):
        self.tokenizer = Tokenizer.from_text("a an in on")

    def test_stop_words_from_text(self):
        """Stop words are read from one space-delimited line."""
        assert self.tokenizer.stop_words == frozenset({"a", "an", "in", "on"})

    def test_is_stop_word(self):
        """Membership is exact, without case folding."""
        assert self.tokenizer.is_stop_word("in")
        assert not self.tokenizer.is_stop_word("In")
        assert not self.tokenizer.is_stop_word("cat")

    def test_filter_preserves_order(self):
        """Filtering keeps the relative order of the remaining tokens."""
        tokens = ["the", "cat", "sat", "on", "a", "mat"]
        assert self.tokenizer.filter_stop_words(tokens) == ["the", "cat", "sat", "mat"]

    def test_tokenize_only_stop_words(self):
        """A text of stop words tokenizes to nothing."""
        assert self.tokenizer.tokenize("a an  in on") == []

    def test_no_stop_words(self):
        """Default tokenizer keeps every word."""
        assert Tokenizer().tokenize("a b a") == ["a", "b", "a"]


class TestScoring:
    """Test checked TF and IDF functions."""

    def test_term_frequency(self):
        """TF is occurrences divided by document length."""
        assert term_frequency(1, 4) == pytest.approx(0.25)
        assert term_frequency(3, 3) == 1.0

    def test_term_frequency_zero_length(self):
        """Zero-length documents cannot produce a TF."""
        with pytest.raises(InvalidTermFrequencyInput):
            term_frequency(1, 0)

    def test_term_frequency_bad_occurrences(self):
        """Occurrences must be within [1, length]."""
        with pytest.raises(InvalidTermFrequencyInput):
            term_frequency(0, 5)
        with pytest.raises(InvalidTermFrequencyInput):
            term_frequency(6, 5)

    def test_idf(self):
        """IDF is ln(N / df)."""
        assert inverse_document_frequency(2, 1) == pytest.approx(math.log(2))
        assert inverse_document_frequency(5, 5) == 0.0

    def test_idf_zero_documents(self):
        """IDF over an empty collection is degenerate."""
        with pytest.raises(DegenerateIDFError):
            inverse_document_frequency(0, 0)

    def test_idf_document_frequency_out_of_range(self):
        """df must be within [1, N]."""
        with pytest.raises(DegenerateIDFError):
            inverse_document_frequency(3, 0)
        with pytest.raises(DegenerateIDFError):
            inverse_document_frequency(3, 4)

    def test_degenerate_idf_is_arithmetic_error(self):
        """IDF errors can be caught as ArithmeticError."""
        with pytest.raises(ArithmeticError):
            inverse_document_frequency(-1, 1)


class TestPostingsList:
    """Test PostingsList class."""

    def test_empty_postings_list(self):
        """Test creating an empty postings list."""
        pl = PostingsList()
        assert len(pl) == 0
        assert pl.document_frequency() == 0
        assert pl.get_posting(0) is None

    def test_add_postings(self):
        """Postings are kept in doc_id order."""
        pl = PostingsList()
        pl.add_posting(doc_id=0, term_freq=0.5, occurrences=2)
        pl.add_posting(doc_id=3, term_freq=0.25)

        assert pl.get_doc_ids() == [0, 3]
        assert pl.get_doc_id_set() == {0, 3}
        assert pl.document_frequency() == 2
        assert pl.get_term_frequency(0) == 0.5
        assert pl.get_term_frequency(1) == 0.0
        assert pl.get_posting(3) == PostingEntry(doc_id=3, term_freq=0.25, occurrences=1)

    def test_out_of_order_rejected(self):
        """Adding a lower or repeated doc_id fails."""
        pl = PostingsList()
        pl.add_posting(doc_id=2, term_freq=1.0)
        with pytest.raises(ValueError):
            pl.add_posting(doc_id=2, term_freq=1.0)
        with pytest.raises(ValueError):
            pl.add_posting(doc_id=1, term_freq=1.0)

    def test_doc_id_cache_invalidated(self):
        """Cached doc_id set reflects later additions."""
        pl = PostingsList()
        pl.add_posting(doc_id=0, term_freq=1.0)
        assert pl.get_doc_id_set() == {0}
        pl.add_posting(doc_id=1, term_freq=1.0)
        assert pl.get_doc_id_set() == {0, 1}


class TestInvertedIndex:
    """Test InvertedIndex class."""

    def setup_method(self):
        self.index = InvertedIndex()
        self.index.add_document(0, ["the", "cat", "sat", "mat"])
        self.index.add_document(1, ["the", "dog", "barked", "the", "yard"])

    def test_term_frequencies(self):
        """Repeated terms accumulate to k / L."""
        assert self.index.get_term_frequency("cat", 0) == pytest.approx(1 / 4)
        assert self.index.get_term_frequency("the", 1) == pytest.approx(2 / 5)
        assert self.index.get_term_frequency("cat", 1) == 0.0
        assert self.index.get_term_frequency("missing", 0) == 0.0

    def test_postings_only_for_present_terms(self):
        """A term lists only the documents it occurs in."""
        assert self.index.get_postings("the").get_doc_ids() == [0, 1]
        assert self.index.get_postings("dog").get_doc_ids() == [1]
        assert self.index.get_postings("fish") is None

    def test_document_frequency_and_idf(self):
        """IDF uses the number of indexed documents."""
        assert self.index.get_document_frequency("the") == 2
        assert self.index.get_idf("the") == 0.0
        assert self.index.get_idf("cat") == pytest.approx(math.log(2))

    def test_vocabulary(self):
        """Vocabulary collects every distinct term."""
        assert self.index.get_vocabulary() == {"the", "cat", "sat", "mat", "dog", "barked", "yard"}
        assert self.index.get_vocabulary_size() == 7
        assert self.index.contains_term("yard")

    def test_statistics(self):
        """Statistics report documents and tokens."""
        stats = self.index.get_statistics()
        assert stats['num_documents'] == 2
        assert stats['total_tokens'] == 9
        assert stats['empty_documents'] == 0
        assert stats['avg_document_length'] == pytest.approx(4.5)

    def test_empty_document(self):
        """An empty document is counted but has no postings."""
        self.index.add_document(2, [])
        assert self.index.num_documents == 3
        assert self.index.statistics.empty_documents == 1
        assert self.index.statistics.num_documents == 3
        assert all(2 not in p.get_doc_id_set() for p in self.index.dictionary.values())

    def test_document_ids_must_be_dense(self):
        """Skipping or repeating a document id fails."""
        with pytest.raises(DocumentIdError):
            self.index.add_document(5, ["cat"])
        with pytest.raises(DocumentIdError):
            self.index.add_document(1, ["cat"])

    def test_finalized_index_is_frozen(self):
        """No documents can be added after finalize."""
        self.index.finalize()
        assert self.index.is_finalized
        with pytest.raises(IndexFrozenError):
            self.index.add_document(2, ["cat"])


class TestCollectionStatistics:
    """Test CollectionStatistics class."""

    def test_add_documents(self):
        """Counts and average length track added documents."""
        stats = CollectionStatistics()
        stats.add_document(4)
        stats.add_document(0)
        assert stats.num_documents == 2
        assert stats.empty_documents == 1
        assert stats.total_tokens == 4
        assert stats.avg_document_length == 2.0

    def test_idf_follows_document_count(self):
        """IDF is recomputed from the current document count."""
        stats = CollectionStatistics()
        stats.add_document(1)
        stats.add_document(1)
        assert stats.calculate_idf(1) == pytest.approx(math.log(2))
        stats.add_document(1)
        assert stats.calculate_idf(1) == pytest.approx(math.log(3))

    def test_idf_on_empty_collection_raises(self):
        """With no documents the IDF is undefined."""
        stats = CollectionStatistics()
        with pytest.raises(DegenerateIDFError):
            stats.calculate_idf(1)

    def test_idf_rejects_frequency_outside_collection(self):
        """Document frequency must lie in 1..N."""
        stats = CollectionStatistics()
        stats.add_document(2)
        stats.add_document(3)
        with pytest.raises(DegenerateIDFError):
            stats.calculate_idf(3)
        with pytest.raises(DegenerateIDFError):
            stats.calculate_idf(0)
        assert stats.calculate_idf(2) == 0.0
