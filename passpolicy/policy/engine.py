"""Password policy evaluation engine.

Runs every active rule against a password in a fixed order and collects
all violations into a single PolicyResult.
"""

from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..dictionary.provider import DictionaryProvider, get_default_provider, normalize_words
from .options import PolicyConfig
from .rules import DEFAULT_RULES, REQUIRED_MESSAGE, PasswordRule, RuleType

DictionarySource = Union[DictionaryProvider, AbstractSet[str]]


class PasswordPolicyViolation(ValueError):
    """Raised by PolicyResult.raise_for_violations for a rejected password."""

    def __init__(self, violations: Sequence[str], separator: str = " "):
        self.violations = tuple(violations)
        self.separator = separator
        super().__init__(separator.join(self.violations))


@dataclass(frozen=True)
class PolicyResult:
    """
    Result of evaluating a password against a policy.
    """
    violations: Tuple[str, ...] = ()
    failed_rules: Tuple[RuleType, ...] = ()
    separator: str = " "

    @property
    def is_valid(self) -> bool:
        """Check if all rules passed."""
        return len(self.violations) == 0

    @property
    def message(self) -> Optional[str]:
        """All violations joined by the configured separator, or None."""
        if self.is_valid:
            return None
        return self.separator.join(self.violations)

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_violations(self) -> None:
        """Raise PasswordPolicyViolation if any rule failed."""
        if not self.is_valid:
            raise PasswordPolicyViolation(self.violations, self.separator)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for structured consumers."""
        return {
            "valid": self.is_valid,
            "message": self.message,
            "violations": [
                {"rule_type": rule_type.value, "message": message}
                for rule_type, message in zip(self.failed_rules, self.violations)
            ],
        }


def _resolve_dictionary(dictionary: Optional[DictionarySource]) -> AbstractSet[str]:
    if dictionary is None:
        return get_default_provider().words
    if isinstance(dictionary, DictionaryProvider):
        return dictionary.words
    return dictionary


def _evaluate(
    password: Optional[str],
    config: PolicyConfig,
    rules: Sequence[PasswordRule],
    dictionary: Optional[DictionarySource],
) -> PolicyResult:
    if not isinstance(config, PolicyConfig):
        raise TypeError(
            f"config must be a PolicyConfig, got {type(config).__name__}"
        )
    if password is not None and not isinstance(password, str):
        raise TypeError(
            f"password must be a string or None, got {type(password).__name__}"
        )

    if not password:
        return PolicyResult(
            violations=(REQUIRED_MESSAGE,),
            failed_rules=(RuleType.REQUIRED,),
            separator=config.error_separator,
        )

    words = _resolve_dictionary(dictionary)
    violations: List[str] = []
    failed_rules: List[RuleType] = []

    for rule in rules:
        if not rule.is_active(config):
            continue
        message = rule.check(password, config, words)
        if message is not None:
            violations.append(message)
            failed_rules.append(rule.rule_type)

    return PolicyResult(
        violations=tuple(violations),
        failed_rules=tuple(failed_rules),
        separator=config.error_separator,
    )


def validate_password(
    password: Optional[str],
    config: PolicyConfig,
    dictionary: Optional[DictionarySource] = None,
) -> PolicyResult:
    """
    Validate a password against a policy using the default rule set.

    Args:
        password: Candidate password; None or "" fails as required
        config: Policy thresholds and switches
        dictionary: Lower-case forbidden words, or a DictionaryProvider;
            the built-in provider is used when omitted

    Returns:
        PolicyResult listing every violation in evaluation order

    Raises:
        TypeError: If config is not a PolicyConfig or password is not a string
    """
    return _evaluate(password, config, DEFAULT_RULES, dictionary)


class PasswordPolicyEngine:
    """
    Evaluates passwords against one policy.

    Holds an immutable config, an ordered rule set and a dictionary source,
    all shared read-only across calls. Evaluation is stateless, so one
    engine may serve concurrent callers.
    """

    def __init__(
        self,
        config: Optional[PolicyConfig] = None,
        rules: Optional[Iterable[PasswordRule]] = None,
        dictionary: Optional[Union[DictionarySource, Iterable[str]]] = None,
    ):
        """
        Initialize the policy engine.

        Args:
            config: Policy to enforce; defaults to PolicyConfig()
            rules: Ordered rules to run; defaults to DEFAULT_RULES
            dictionary: DictionaryProvider, or words to forbid; the
                built-in provider is used when omitted
        """
        self.config = config if config is not None else PolicyConfig()
        if not isinstance(self.config, PolicyConfig):
            raise TypeError(
                f"config must be a PolicyConfig, got {type(self.config).__name__}"
            )
        self.rules: Tuple[PasswordRule, ...] = (
            tuple(rules) if rules is not None else DEFAULT_RULES
        )
        if dictionary is None or isinstance(dictionary, DictionaryProvider):
            self.dictionary = dictionary
        else:
            self.dictionary = normalize_words(dictionary)

    def evaluate(self, password: Optional[str]) -> PolicyResult:
        """
        Evaluate a password.

        Args:
            password: Candidate password

        Returns:
            PolicyResult with every violation in rule order
        """
        return _evaluate(password, self.config, self.rules, self.dictionary)

    def evaluate_batch(self, passwords: Iterable[Optional[str]]) -> List[PolicyResult]:
        """
        Evaluate multiple passwords against the same policy.

        Args:
            passwords: Candidate passwords

        Returns:
            List of PolicyResults, in input order
        """
        return [self.evaluate(password) for password in passwords]

    def is_valid(self, password: Optional[str]) -> bool:
        return self.evaluate(password).is_valid

    def with_rules(self, *extra_rules: PasswordRule) -> "PasswordPolicyEngine":
        """Return an engine that runs extra rules after the current ones."""
        return PasswordPolicyEngine(
            config=self.config,
            rules=self.rules + tuple(extra_rules),
            dictionary=self.dictionary,
        )
