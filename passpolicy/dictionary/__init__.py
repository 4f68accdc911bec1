"""Forbidden-word dictionaries for the dictionary-word rule."""

from .provider import (
    COMMON_WORDS,
    DictionaryProvider,
    get_default_provider,
    normalize_words,
)

__all__ = [
    "COMMON_WORDS",
    "DictionaryProvider",
    "get_default_provider",
    "normalize_words",
]
