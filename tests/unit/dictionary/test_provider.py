"""Tests for the dictionary word provider."""

import threading
import time

import pytest

from passpolicy.dictionary.provider import (
    COMMON_WORDS,
    DictionaryProvider,
    get_default_provider,
    normalize_words,
)


class TestNormalizeWords:
    """Tests for word normalization."""

    def test_lowercases_and_strips(self):
        """Test that words are lower-cased and stripped."""
        assert normalize_words([" Dragon ", "ADMIN"]) == frozenset({"dragon", "admin"})

    def test_drops_blanks(self):
        """Test that blank entries are removed."""
        assert normalize_words(["", "  ", "hello"]) == frozenset({"hello"})

    def test_deduplicates(self):
        """Test that case variants collapse to one entry."""
        assert normalize_words(["Hello", "hello", "HELLO"]) == frozenset({"hello"})


class TestDictionaryProvider:
    """Tests for DictionaryProvider."""

    def test_builtin_words(self):
        """Test that the default loader serves the built-in list."""
        provider = DictionaryProvider()
        assert provider.words == COMMON_WORDS
        assert "password" in provider

    def test_lazy_loading(self):
        """Test that the loader does not run until first access."""
        calls = []

        def loader():
            calls.append(1)
            return ["monkey"]

        provider = DictionaryProvider(loader=loader)
        assert not provider.is_loaded
        assert calls == []

        assert provider.words == frozenset({"monkey"})
        assert provider.is_loaded
        assert len(calls) == 1

    def test_loader_runs_once(self):
        """Test that repeated access reuses the built set."""
        calls = []

        def loader():
            calls.append(1)
            return ["monkey", "dragon"]

        provider = DictionaryProvider(loader=loader)
        first = provider.words
        second = provider.words

        assert first is second
        assert len(calls) == 1

    def test_words_are_frozen(self):
        """Test that the served set cannot be mutated."""
        provider = DictionaryProvider.from_words(["shadow"])
        with pytest.raises(AttributeError):
            provider.words.add("other")

    def test_from_words_snapshot(self):
        """Test that later changes to the source list are not observed."""
        source = ["shadow"]
        provider = DictionaryProvider.from_words(source)
        source.append("master")

        assert provider.words == frozenset({"shadow"})

    def test_contains_is_case_insensitive(self):
        """Test membership checks ignore case."""
        provider = DictionaryProvider.from_words(["Football"])
        assert "FOOTBALL" in provider
        assert "football" in provider
        assert 42 not in provider

    def test_len(self):
        """Test the number of distinct words."""
        assert len(DictionaryProvider.from_words(["a1b2", "A1B2", "c3d4"])) == 2

    def test_loader_failure_propagates(self):
        """Test that a failing loader raises and leaves the provider unloaded."""
        attempts = []

        def loader():
            attempts.append(1)
            if len(attempts) == 1:
                raise OSError("word list unavailable")
            return ["letmein"]

        provider = DictionaryProvider(loader=loader)
        with pytest.raises(OSError):
            _ = provider.words
        assert not provider.is_loaded

        assert provider.words == frozenset({"letmein"})

    def test_repr(self):
        """Test repr shows load state."""
        provider = DictionaryProvider.from_words(["hello"], name="custom")
        assert "unloaded" in repr(provider)
        _ = provider.words
        assert "1 words" in repr(provider)
        assert provider.name == "custom"


class TestConcurrentInitialization:
    """Tests for one-time initialization under concurrent access."""

    def test_concurrent_first_access_loads_once(self):
        """Test that racing threads trigger a single load."""
        calls = []
        start = threading.Barrier(16)

        def slow_loader():
            calls.append(1)
            time.sleep(0.05)
            return ["baseball", "football"]

        provider = DictionaryProvider(loader=slow_loader)
        results = []
        errors = []

        def read_words():
            try:
                start.wait()
                results.append(provider.words)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=read_words) for _ in range(16)]

        for t in threads:
            t.start()

        for t in threads:
            t.join()

        assert len(errors) == 0, f"Errors during concurrent access: {errors}"
        assert len(calls) == 1
        assert len(results) == 16
        assert all(r == frozenset({"baseball", "football"}) for r in results)
        assert all(r is results[0] for r in results)


def test_default_provider_is_shared():
    """Test that the process-wide provider is a single instance."""
    assert get_default_provider() is get_default_provider()
    assert get_default_provider().words == COMMON_WORDS
