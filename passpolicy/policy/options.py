"""Password policy configuration.

A PolicyConfig is an immutable value describing which checks are active
and their thresholds. It is built once and shared by every validation.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, FrozenSet, Mapping, Optional


class PolicyConfigError(ValueError):
    """Raised when a policy configuration is internally inconsistent."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field = field_name


@dataclass(frozen=True)
class CharRequirement:
    """Requirement for one character class: off, or on with a minimum count."""

    required: bool = False
    minimum: int = 0

    @classmethod
    def none(cls) -> "CharRequirement":
        return cls(required=False, minimum=0)

    @classmethod
    def at_least(cls, count: int) -> "CharRequirement":
        return cls(required=True, minimum=count)

    def is_satisfied_by(self, count: int) -> bool:
        return not self.required or count >= self.minimum


_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})

_BOOL_FIELDS = (
    "require_uppercase",
    "require_lowercase",
    "no_consecutive_repeated_chars",
    "no_sequential_chars",
    "no_dictionary_words",
)
_INT_FIELDS = (
    "min_length",
    "max_length",
    "max_consecutive_repeats",
    "minimum_unique_chars",
)


def parse_bool(value: Any, field_name: str) -> bool:
    """Parse a boolean option, accepting the usual string spellings.

    Values expanded from environment variables always arrive as strings,
    so "false", "no", "off" and "0" must not read as true.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise PolicyConfigError(
        f"{field_name} must be a boolean, got {value!r}", field_name
    )


def parse_int(value: Any, field_name: str) -> int:
    """Parse an integer option from an int or a numeric string."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise PolicyConfigError(
        f"{field_name} must be an integer, got {value!r}", field_name
    )


def parse_float(value: Any, field_name: str) -> float:
    """Parse a numeric option from an int, a float or a numeric string."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise PolicyConfigError(
        f"{field_name} must be a number, got {value!r}", field_name
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PolicyConfig:
    """Thresholds and switches for every password rule."""

    min_length: int = 12
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    special_chars: CharRequirement = field(
        default_factory=lambda: CharRequirement.at_least(1)
    )
    digits: CharRequirement = field(
        default_factory=lambda: CharRequirement.at_least(1)
    )
    no_consecutive_repeated_chars: bool = True
    max_consecutive_repeats: int = 2
    no_sequential_chars: bool = True
    no_dictionary_words: bool = True
    excluded_chars: FrozenSet[str] = frozenset()
    minimum_unique_chars: int = 8
    minimum_entropy: float = 50.0
    error_separator: str = " "

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        if not isinstance(self.excluded_chars, frozenset):
            object.__setattr__(
                self, "excluded_chars", frozenset(self.excluded_chars or ())
            )
        self._validate()

    def _validate(self) -> None:
        self._validate_types()
        if self.min_length < 0:
            raise PolicyConfigError(
                f"min_length must be >= 0, got {self.min_length}", "min_length"
            )
        if self.max_length < self.min_length:
            raise PolicyConfigError(
                f"max_length ({self.max_length}) must be >= "
                f"min_length ({self.min_length})",
                "max_length",
            )
        if self.max_consecutive_repeats < 1:
            raise PolicyConfigError(
                "max_consecutive_repeats must be >= 1, "
                f"got {self.max_consecutive_repeats}",
                "max_consecutive_repeats",
            )
        if self.minimum_unique_chars < 0:
            raise PolicyConfigError(
                f"minimum_unique_chars must be >= 0, got {self.minimum_unique_chars}",
                "minimum_unique_chars",
            )
        if self.minimum_entropy < 0:
            raise PolicyConfigError(
                f"minimum_entropy must be >= 0, got {self.minimum_entropy}",
                "minimum_entropy",
            )
        for name in ("special_chars", "digits"):
            requirement = getattr(self, name)
            if not isinstance(requirement, CharRequirement):
                raise PolicyConfigError(
                    f"{name} must be a CharRequirement, "
                    f"got {type(requirement).__name__}",
                    name,
                )
            if not isinstance(requirement.required, bool) or not _is_int(
                requirement.minimum
            ):
                raise PolicyConfigError(
                    f"{name} must have a boolean flag and an integer minimum, "
                    f"got {requirement!r}",
                    name,
                )
            if requirement.minimum < 0:
                raise PolicyConfigError(
                    f"{name} minimum must be >= 0, got {requirement.minimum}", name
                )
        for char in self.excluded_chars:
            if not isinstance(char, str) or len(char) != 1:
                raise PolicyConfigError(
                    f"excluded_chars entries must be single characters, got {char!r}",
                    "excluded_chars",
                )

    def _validate_types(self) -> None:
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise PolicyConfigError(
                    f"{name} must be a boolean, got {value!r}", name
                )
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if not _is_int(value):
                raise PolicyConfigError(
                    f"{name} must be an integer, got {value!r}", name
                )
        if isinstance(self.minimum_entropy, bool) or not isinstance(
            self.minimum_entropy, (int, float)
        ):
            raise PolicyConfigError(
                f"minimum_entropy must be a number, got {self.minimum_entropy!r}",
                "minimum_entropy",
            )
        if not isinstance(self.error_separator, str):
            raise PolicyConfigError(
                f"error_separator must be a string, got {self.error_separator!r}",
                "error_separator",
            )

    # Flat accessors for the coupled flag/threshold pairs

    @property
    def require_special_char(self) -> bool:
        return self.special_chars.required

    @property
    def minimum_special_chars(self) -> int:
        return self.special_chars.minimum

    @property
    def require_digit(self) -> bool:
        return self.digits.required

    @property
    def minimum_digits(self) -> int:
        return self.digits.minimum

    @property
    def excluded_chars_display(self) -> str:
        """Excluded characters as a stable, sorted string."""
        return "".join(sorted(self.excluded_chars))

    def with_overrides(self, **changes: Any) -> "PolicyConfig":
        """Return a new validated config with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a plain dictionary for serialization."""
        return {
            "min_length": self.min_length,
            "max_length": self.max_length,
            "require_uppercase": self.require_uppercase,
            "require_lowercase": self.require_lowercase,
            "require_special_char": self.require_special_char,
            "minimum_special_chars": self.minimum_special_chars,
            "require_digit": self.require_digit,
            "minimum_digits": self.minimum_digits,
            "no_consecutive_repeated_chars": self.no_consecutive_repeated_chars,
            "max_consecutive_repeats": self.max_consecutive_repeats,
            "no_sequential_chars": self.no_sequential_chars,
            "no_dictionary_words": self.no_dictionary_words,
            "excluded_chars": self.excluded_chars_display,
            "minimum_unique_chars": self.minimum_unique_chars,
            "minimum_entropy": self.minimum_entropy,
            "error_separator": self.error_separator,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PolicyConfig":
        """Create a config from a mapping.

        Accepts the flat ``require_*`` / ``minimum_*`` keys for the special
        character and digit requirements. Missing keys keep their defaults.
        String values, such as those expanded from environment variables,
        are converted to each option's type.

        Raises:
            PolicyConfigError: On unknown keys, unconvertible values or
                inconsistent values
        """
        data = dict(data)
        kwargs: Dict[str, Any] = {}

        for prefix, name, default_min in (
            ("special_char", "special_chars", 1),
            ("digit", "digits", 1),
        ):
            require_key = f"require_{prefix}"
            minimum_key = f"minimum_{name}"
            if require_key in data or minimum_key in data:
                required = parse_bool(data.pop(require_key, True), require_key)
                minimum = parse_int(data.pop(minimum_key, default_min), minimum_key)
                kwargs[name] = (
                    CharRequirement.at_least(minimum)
                    if required
                    else CharRequirement.none()
                )

        known = {f.name for f in fields(cls)} - {"special_chars", "digits"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise PolicyConfigError(
                f"Unknown policy option(s): {', '.join(unknown)}", unknown[0]
            )

        for name in _BOOL_FIELDS:
            if name in data:
                data[name] = parse_bool(data[name], name)
        for name in _INT_FIELDS:
            if name in data:
                data[name] = parse_int(data[name], name)
        if "minimum_entropy" in data:
            data["minimum_entropy"] = parse_float(
                data["minimum_entropy"], "minimum_entropy"
            )

        kwargs.update(data)
        return cls(**kwargs)


DEFAULT_POLICY = PolicyConfig()
