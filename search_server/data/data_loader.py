import sys
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO
from tqdm import tqdm

from ..exceptions import CorpusFormatError

logger = logging.getLogger(__name__)

STDIN_SOURCES = {'-', 'stdin'}


@dataclass
class Corpus:
    """
    Raw corpus in the line format.

    Attributes:
        stop_words: Space-delimited stop-word line
        declared_document_count: Count from the header line
        documents: Raw document texts in ID order
        query: Optional query line following the documents
    """
    stop_words: str
    declared_document_count: int
    documents: List[str] = field(default_factory=list)
    query: Optional[str] = None


class DataLoader:
    """
    Loads a corpus from a file or stdin.

    Format:
        line 1:      stop words
        line 2:      document count N
        next N lines: documents
        next line:   query (optional)
    """

    def __init__(self, config):
        """
        Initialize data loader.

        Args:
            config: Hydra configuration object
        """
        self.config = config

    def load_corpus(self, source: Optional[str] = None) -> Corpus:
        """
        Load corpus from the given source or the configured one.

        Args:
            source: File path, or '-'/'stdin' for standard input

        Returns:
            Parsed Corpus
        """
        if source is None:
            source = str(self.config.dataset.source_file)

        if source in STDIN_SOURCES:
            logger.info("Loading corpus from stdin")
            return self.parse_lines(sys.stdin)

        corpus_path = Path(source)
        if not corpus_path.exists():
            raise FileNotFoundError(f"Corpus file not found: {corpus_path}")

        logger.info(f"Loading corpus from: {corpus_path}")
        with open(corpus_path, 'r', encoding='utf-8') as f:
            return self.parse_lines(f)

    def parse_lines(self, lines: Iterable[str]) -> Corpus:
        """
        Parse corpus lines.

        Args:
            lines: Line iterable (file object, stdin or list of strings)

        Returns:
            Parsed Corpus
        """
        line_iter = (self._strip_line_end(line) for line in lines)

        stop_words = next(line_iter, None)
        if stop_words is None:
            raise CorpusFormatError("Corpus is empty: missing stop-word line")

        count_line = next(line_iter, None)
        if count_line is None:
            raise CorpusFormatError("Missing document count line")
        try:
            document_count = int(count_line.strip())
        except ValueError:
            raise CorpusFormatError(f"Invalid document count: {count_line!r}") from None
        if document_count < 0:
            raise CorpusFormatError(f"Document count must be non-negative, got {document_count}")

        logger.info(f"Loading {document_count} documents")

        documents = list(self._read_documents(line_iter, document_count))
        if len(documents) < document_count:
            raise CorpusFormatError(
                f"Expected {document_count} documents, found {len(documents)}"
            )

        query = next(line_iter, None)

        return Corpus(
            stop_words=stop_words,
            declared_document_count=document_count,
            documents=documents,
            query=query
        )

    def _read_documents(self, line_iter: Iterator[str], document_count: int) -> Iterator[str]:
        pbar = tqdm(
            total=document_count,
            desc="Loading documents",
            disable=not self.config.indexing.show_progress
        )
        with pbar:
            for _ in range(document_count):
                line = next(line_iter, None)
                if line is None:
                    break
                pbar.update(1)
                yield line

    @staticmethod
    def _strip_line_end(line: str) -> str:
        return line.rstrip('\r\n')


def read_query(stream: TextIO) -> str:
    """Read a single query line from a stream."""
    return DataLoader._strip_line_end(stream.readline())
