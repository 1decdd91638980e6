#!/usr/bin/env python
"""
Main entry point for the search server.
Uses Fire for CLI and Hydra for configuration management.
"""

import sys
import logging
import fire
from omegaconf import OmegaConf
from dotenv import load_dotenv

from search_server import ConfigurationError, SearchServer, SearchServerConfig, SearchServerError
from search_server.config import load_config
from search_server.data.data_loader import DataLoader, read_query

# Load .env variables
load_dotenv()

logger = logging.getLogger(__name__)

# Default for search(query=...). Fire turns the argument "None" into None.
_NO_QUERY = object()


class SearchServerCLI:
    """CLI for the search server."""

    def __init__(self, config_dir: str = None, config_name: str = "config"):
        """
        Initialize CLI with configuration.

        Args:
            config_dir: Path to config directory (default: conf/)
            config_name: Name of main config file
        """
        self.config_dir = config_dir
        self.config_name = config_name
        self.config = None

    def _init_config(self, overrides=None):
        """Initialize Hydra configuration and logging."""
        self.config = load_config(overrides, self.config_dir, self.config_name)

        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )

    def _build_server(self, corpus: str = None):
        """Load the corpus and build a finalized search server."""
        data_loader = DataLoader(self.config)
        loaded = data_loader.load_corpus(corpus)

        server_config = SearchServerConfig.from_config(
            self.config,
            stop_words=loaded.stop_words,
            declared_document_count=loaded.declared_document_count
        )
        server = SearchServer.build(server_config, loaded.documents)
        logger.info(f"Indexed {server.document_count} documents")
        return server, loaded

    def search(self, query: str = _NO_QUERY, corpus: str = None,
               max_results: int = None, query_proc: str = None):
        """
        Build the index from a corpus and print the top documents for a query.

        Args:
            query: Query text (default: the line after the documents, or stdin).
                Fire parses values such as `cat, dog` or `None`, so quote them.
            corpus: Corpus file path, or '-' for stdin
            max_results: Maximum number of results to print
            query_proc: Query processor (TERMatat or DOCatat)
        """
        if query is not _NO_QUERY and not isinstance(query, str):
            raise ConfigurationError(
                f"Query must be text, got {type(query).__name__} {query!r}. "
                "Quote it for the shell and for Fire, e.g. --query='\"cat, dog\"'"
            )

        overrides = []
        if max_results is not None:
            overrides.append(f"search.max_results={max_results}")
        if query_proc:
            overrides.append(f"search.query_proc={query_proc}")

        self._init_config(overrides)

        server, loaded = self._build_server(corpus)

        if query is _NO_QUERY:
            query = loaded.query if loaded.query is not None else read_query(sys.stdin)

        for result in server.find_top_documents(query):
            print(result.format())

    def stats(self, corpus: str = None):
        """
        Print index statistics for a corpus.

        Args:
            corpus: Corpus file path, or '-' for stdin
        """
        self._init_config()

        server, _ = self._build_server(corpus)
        for key, value in server.get_statistics().items():
            print(f"{key}: {value}")

    def show_config(self, max_results: int = None, query_proc: str = None):
        """
        Display current configuration.

        Args:
            max_results: Override for search.max_results
            query_proc: Override for search.query_proc
        """
        overrides = []
        if max_results is not None:
            overrides.append(f"search.max_results={max_results}")
        if query_proc:
            overrides.append(f"search.query_proc={query_proc}")

        self._init_config(overrides)
        print(OmegaConf.to_yaml(self.config))


def main():
    """Main entry point."""
    try:
        fire.Fire(SearchServerCLI)
    except (SearchServerError, FileNotFoundError) as e:
        logger.error(f"Search failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
