"""Text preprocessing."""

from .tokenizer import Tokenizer, split_into_words, WORD_DELIMITER

__all__ = ['Tokenizer', 'split_into_words', 'WORD_DELIMITER']
