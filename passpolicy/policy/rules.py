"""Password rule definitions for passpolicy.

Each rule is an independent check over a password and a PolicyConfig that
yields at most one violation message. DEFAULT_RULES lists them in the
fixed evaluation order that determines message ordering.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import AbstractSet, Optional, Tuple

from .options import PolicyConfig


class RuleType(str, Enum):
    """Types of password rules, in evaluation order."""

    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    SPECIAL_CHARS = "special_chars"
    DIGITS = "digits"
    CONSECUTIVE_REPEATS = "consecutive_repeats"
    SEQUENTIAL_CHARS = "sequential_chars"
    DICTIONARY_WORDS = "dictionary_words"
    EXCLUDED_CHARS = "excluded_chars"
    UNIQUE_CHARS = "unique_chars"
    ENTROPY = "entropy"


REQUIRED_MESSAGE = "Password is required."

# Reference sequences for sequential-run detection
ALPHABET_SEQUENCE = "abcdefghijklmnopqrstuvwxyz"
DIGIT_SEQUENCE = "0123456789"

# Dictionary words shorter than this never match
MIN_DICTIONARY_WORD_LENGTH = 4

# Heuristic alphabet sizes per character class
LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SPECIAL_POOL = 32


def _build_trigrams(*sequences: str) -> Tuple[str, ...]:
    grams = []
    for sequence in sequences:
        for i in range(len(sequence) - 2):
            gram = sequence[i:i + 3]
            grams.append(gram)
            grams.append(gram[::-1])
    return tuple(grams)


SEQUENTIAL_TRIGRAMS = _build_trigrams(ALPHABET_SEQUENCE, DIGIT_SEQUENCE)


def is_special_char(char: str) -> bool:
    """Special means neither a letter nor a decimal digit."""
    return not (char.isalpha() or char.isdecimal())


def count_special_chars(password: str) -> int:
    return sum(1 for c in password if is_special_char(c))


def count_digits(password: str) -> int:
    return sum(1 for c in password if c.isdecimal())


def has_consecutive_repeats(password: str, max_repeats: int) -> bool:
    """
    Check for a run of identical adjacent characters longer than max_repeats.

    Stops scanning at the first offending run.
    """
    run_length = 1
    for previous, current in zip(password, password[1:]):
        if current == previous:
            run_length += 1
            if run_length > max_repeats:
                return True
        else:
            run_length = 1
    return False


def has_sequential_chars(password: str) -> bool:
    """
    Check whether the password contains any 3-character run taken from the
    alphabet or the digits, ascending or descending.

    This is a substring test: "xx9abc" matches on "abc".
    """
    lowered = password.lower()
    return any(gram in lowered for gram in SEQUENTIAL_TRIGRAMS)


def contains_dictionary_word(password: str, dictionary: AbstractSet[str]) -> bool:
    """Check whether any dictionary word of length >= 4 appears in the password."""
    lowered = password.lower()
    return any(
        len(word) >= MIN_DICTIONARY_WORD_LENGTH and word in lowered
        for word in dictionary
    )


def estimate_entropy(password: str) -> float:
    """
    Estimate password entropy in bits as ``length * log2(pool)``.

    The pool is a fixed per-class heuristic (26 lower, 26 upper, 10 digits,
    32 special), not a count of the symbols actually used. An empty pool
    yields 0.0.
    """
    pool = 0
    if any(c.islower() for c in password):
        pool += LOWERCASE_POOL
    if any(c.isupper() for c in password):
        pool += UPPERCASE_POOL
    if any(c.isdecimal() for c in password):
        pool += DIGIT_POOL
    if any(is_special_char(c) for c in password):
        pool += SPECIAL_POOL

    if pool == 0:
        return 0.0
    return len(password) * math.log2(pool)


class PasswordRule(ABC):
    """
    A single password rule.

    Subclasses implement ``check`` and return a violation message, or
    None when the password satisfies the rule.
    """

    rule_type: RuleType

    def is_active(self, config: PolicyConfig) -> bool:
        """Whether the rule applies under this config."""
        return True

    @abstractmethod
    def check(
        self,
        password: str,
        config: PolicyConfig,
        dictionary: AbstractSet[str],
    ) -> Optional[str]:
        """Evaluate the rule against a non-empty password."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MinLengthRule(PasswordRule):
    rule_type = RuleType.MIN_LENGTH

    def check(self, password, config, dictionary):
        if len(password) < config.min_length:
            return f"Password must be at least {config.min_length} characters long."
        return None


class MaxLengthRule(PasswordRule):
    rule_type = RuleType.MAX_LENGTH

    def check(self, password, config, dictionary):
        if len(password) > config.max_length:
            return f"Password must not exceed {config.max_length} characters."
        return None


class UppercaseRule(PasswordRule):
    rule_type = RuleType.UPPERCASE

    def is_active(self, config):
        return config.require_uppercase

    def check(self, password, config, dictionary):
        if not any(c.isupper() for c in password):
            return "Password must contain at least one uppercase letter."
        return None


class LowercaseRule(PasswordRule):
    rule_type = RuleType.LOWERCASE

    def is_active(self, config):
        return config.require_lowercase

    def check(self, password, config, dictionary):
        if not any(c.islower() for c in password):
            return "Password must contain at least one lowercase letter."
        return None


class SpecialCharRule(PasswordRule):
    rule_type = RuleType.SPECIAL_CHARS

    def is_active(self, config):
        return config.special_chars.required

    def check(self, password, config, dictionary):
        requirement = config.special_chars
        if not requirement.is_satisfied_by(count_special_chars(password)):
            return (
                f"Password must contain at least {requirement.minimum} "
                "special character(s)."
            )
        return None


class DigitRule(PasswordRule):
    rule_type = RuleType.DIGITS

    def is_active(self, config):
        return config.digits.required

    def check(self, password, config, dictionary):
        requirement = config.digits
        if not requirement.is_satisfied_by(count_digits(password)):
            return (
                f"Password must contain at least {requirement.minimum} "
                "numeric digit(s)."
            )
        return None


class ConsecutiveRepeatRule(PasswordRule):
    rule_type = RuleType.CONSECUTIVE_REPEATS

    def is_active(self, config):
        return config.no_consecutive_repeated_chars

    def check(self, password, config, dictionary):
        if has_consecutive_repeats(password, config.max_consecutive_repeats):
            return (
                "Password must not contain more than "
                f"{config.max_consecutive_repeats} consecutive repeated characters."
            )
        return None


class SequentialCharRule(PasswordRule):
    rule_type = RuleType.SEQUENTIAL_CHARS

    def is_active(self, config):
        return config.no_sequential_chars

    def check(self, password, config, dictionary):
        if has_sequential_chars(password):
            return "Password must not contain sequential characters."
        return None


class DictionaryWordRule(PasswordRule):
    rule_type = RuleType.DICTIONARY_WORDS

    def is_active(self, config):
        return config.no_dictionary_words

    def check(self, password, config, dictionary):
        if contains_dictionary_word(password, dictionary):
            return "Password must not contain common dictionary words."
        return None


class ExcludedCharRule(PasswordRule):
    rule_type = RuleType.EXCLUDED_CHARS

    def is_active(self, config):
        return bool(config.excluded_chars)

    def check(self, password, config, dictionary):
        if any(c in config.excluded_chars for c in password):
            return (
                "Password must not contain any of the following characters: "
                f"{config.excluded_chars_display}"
            )
        return None


class UniqueCharRule(PasswordRule):
    rule_type = RuleType.UNIQUE_CHARS

    def check(self, password, config, dictionary):
        if len(set(password)) < config.minimum_unique_chars:
            return (
                f"Password must contain at least {config.minimum_unique_chars} "
                "unique characters."
            )
        return None


class EntropyRule(PasswordRule):
    rule_type = RuleType.ENTROPY

    def check(self, password, config, dictionary):
        if estimate_entropy(password) < config.minimum_entropy:
            return (
                "Password is not complex enough. Please use a more varied "
                "combination of characters."
            )
        return None


DEFAULT_RULES: Tuple[PasswordRule, ...] = (
    MinLengthRule(),
    MaxLengthRule(),
    UppercaseRule(),
    LowercaseRule(),
    SpecialCharRule(),
    DigitRule(),
    ConsecutiveRepeatRule(),
    SequentialCharRule(),
    DictionaryWordRule(),
    ExcludedCharRule(),
    UniqueCharRule(),
    EntropyRule(),
)
