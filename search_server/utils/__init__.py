"""Utility functions."""

from .query_parser import Query, QueryParser, MINUS_PREFIX

__all__ = ['Query', 'QueryParser', 'MINUS_PREFIX']
