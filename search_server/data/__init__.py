"""Corpus loading."""

from .data_loader import Corpus, DataLoader

__all__ = ['Corpus', 'DataLoader']
