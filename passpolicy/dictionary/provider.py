"""Dictionary word provider for the dictionary-word rule.

A provider builds its word set once, on first access, and serves the same
frozen set to every validation afterwards.
"""

import threading
from typing import Callable, FrozenSet, Iterable, Optional

from ..common.logger import get_logger

logger = get_logger("dictionary")


# Built-in fallback list of well-known weak passwords and words
COMMON_WORDS: FrozenSet[str] = frozenset({
    "password",
    "123456",
    "qwerty",
    "abc123",
    "letmein",
    "welcome",
    "admin",
    "monkey",
    "dragon",
    "baseball",
    "football",
    "master",
    "hello",
    "shadow",
})

WordLoader = Callable[[], Iterable[str]]


def normalize_words(words: Iterable[str]) -> FrozenSet[str]:
    """Lower-case and strip words, dropping blanks."""
    normalized = set()
    for word in words:
        word = word.strip().lower()
        if word:
            normalized.add(word)
    return frozenset(normalized)


class DictionaryProvider:
    """Lazily built, read-only set of forbidden words.

    The loader runs at most once. Concurrent first accesses wait on a lock
    and all observe the same fully built set. If the loader raises, the
    error propagates and the next access retries.
    """

    def __init__(self, loader: Optional[WordLoader] = None, name: str = "builtin"):
        """
        Initialize the provider.

        Args:
            loader: Zero-argument callable returning an iterable of words;
                defaults to the built-in COMMON_WORDS list
            name: Label used in log messages
        """
        self._loader: WordLoader = loader or (lambda: COMMON_WORDS)
        self._name = name
        self._words: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_words(cls, words: Iterable[str], name: str = "supplied") -> "DictionaryProvider":
        """Create a provider over an already available collection of words."""
        snapshot = tuple(words)
        return cls(loader=lambda: snapshot, name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_loaded(self) -> bool:
        return self._words is not None

    @property
    def words(self) -> FrozenSet[str]:
        """The word set, built on first access."""
        words = self._words
        if words is not None:
            return words

        with self._lock:
            if self._words is None:
                loaded = normalize_words(self._loader())
                logger.info(f"Loaded {len(loaded)} dictionary words from {self._name}")
                self._words = loaded
            return self._words

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self.words

    def __repr__(self) -> str:
        state = f"{len(self._words)} words" if self._words is not None else "unloaded"
        return f"DictionaryProvider(name={self._name!r}, {state})"


# Global default provider
_default_provider = DictionaryProvider()


def get_default_provider() -> DictionaryProvider:
    """Get the process-wide provider over the built-in word list.

    Returns:
        Global DictionaryProvider instance
    """
    return _default_provider
