"""passgen -- password generation and strength classification.

Core types and the two pure functions behind the CLI: a generator that
draws from the OS CSPRNG and guarantees every requested character class
appears, and a coarse strength classifier.
"""

import enum
import math
import re
import secrets
from collections.abc import Iterable
from dataclasses import dataclass

from passgen import config

__all__ = [
    "CharacterClass",
    "CoverageUnsatisfiable",
    "GenerationRequest",
    "InvalidRequest",
    "PassgenError",
    "StrengthTier",
    "classify",
    "generate",
    "generate_password",
    "missing_classes",
    "strength_report",
    "strength_score",
]


# ── Errors ─────────────────────────────────────────────────────────────────


class PassgenError(Exception):
    """Base class for errors raised by passgen."""


class InvalidRequest(PassgenError, ValueError):
    """The generation request is outside what the generator accepts."""


class CoverageUnsatisfiable(PassgenError, RuntimeError):
    """No candidate covering every requested class within the retry budget."""


# ── Character classes ──────────────────────────────────────────────────────


class CharacterClass(enum.Enum):
    """A named character category; the value is its fixed alphabet."""

    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    DIGIT = "0123456789"
    SYMBOL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

    @property
    def alphabet(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class GenerationRequest:
    """Length plus the set of enabled classes.

    Validated on construction, so an existing request is always one the
    generator accepts.
    """

    length: int
    classes: frozenset[CharacterClass]

    def __post_init__(self) -> None:
        try:
            classes = frozenset(self.classes)
        except TypeError:
            raise InvalidRequest(
                f"classes must be an iterable of CharacterClass, got {self.classes!r}"
            ) from None
        object.__setattr__(self, "classes", classes)

        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidRequest(
                f"Password length must be an integer, got {self.length!r}"
            )
        if not config.MIN_LENGTH <= self.length <= config.MAX_LENGTH:
            raise InvalidRequest(
                f"Password length must be between {config.MIN_LENGTH} "
                f"and {config.MAX_LENGTH}, got {self.length}"
            )
        if not classes:
            raise InvalidRequest("At least one character class must be enabled")
        foreign = [c for c in classes if not isinstance(c, CharacterClass)]
        if foreign:
            raise InvalidRequest(f"Unknown character class: {foreign[0]!r}")

    @property
    def alphabet(self) -> str:
        """Enabled alphabets concatenated in declaration order."""
        return "".join(c.alphabet for c in CharacterClass if c in self.classes)

    @property
    def entropy_bits(self) -> float:
        return round(self.length * math.log2(len(self.alphabet)), 1)


# ── Generation ─────────────────────────────────────────────────────────────


def _random_index(upper: int) -> int:
    """Return a uniform integer in ``[0, upper)`` from the OS CSPRNG.

    Draws just enough bits to cover *upper* and rejects values past it;
    reducing with ``%`` instead would favour the low indices.
    """
    bits = max((upper - 1).bit_length(), 1)
    while True:
        value = secrets.randbits(bits)
        if value < upper:
            return value


def missing_classes(
    password: str, classes: Iterable[CharacterClass],
) -> set[CharacterClass]:
    """Return the classes in *classes* with no character in *password*."""
    present = set(password)
    return {c for c in classes if present.isdisjoint(c.alphabet)}


def generate(request: GenerationRequest, *, max_attempts: int | None = None) -> str:
    """Generate a password satisfying *request*.

    Every character is drawn independently and uniformly from the enabled
    alphabets.  A candidate missing one of the enabled classes is thrown
    away whole and redrawn; patching it in place would skew which
    characters appear at which positions.

    Raises :class:`CoverageUnsatisfiable` once *max_attempts* candidates
    (default ``config.MAX_ATTEMPTS``) have all missed a class.
    """
    if max_attempts is None:
        max_attempts = config.MAX_ATTEMPTS
    if max_attempts < 1:
        raise InvalidRequest("max_attempts must be at least 1")

    alphabet = request.alphabet
    size = len(alphabet)

    for _ in range(max_attempts):
        candidate = "".join(
            alphabet[_random_index(size)] for _ in range(request.length)
        )
        if not missing_classes(candidate, request.classes):
            return candidate

    raise CoverageUnsatisfiable(
        f"No {request.length}-character candidate covered all "
        f"{len(request.classes)} classes in {max_attempts} attempts"
    )


def generate_password(
    length: int | None = None,
    classes: Iterable[CharacterClass] | None = None,
) -> str:
    """Generate a password of *length* from *classes*.

    ``classes=None`` enables all four classes; an empty iterable is an
    :class:`InvalidRequest` like any other bad request.
    """
    if length is None:
        length = config.DEFAULT_LENGTH
    if classes is None:
        classes = CharacterClass
    return generate(GenerationRequest(length, frozenset(classes)))


# ── Strength classification ────────────────────────────────────────────────


class StrengthTier(enum.Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


_CLASS_PATTERNS = {
    "uppercase": re.compile(r"[A-Z]"),
    "lowercase": re.compile(r"[a-z]"),
    "digit":     re.compile(r"[0-9]"),
    "symbol":    re.compile(r"[^A-Za-z0-9]"),
}

_CLASS_HINTS = {
    "uppercase": "Add uppercase letters",
    "lowercase": "Add lowercase letters",
    "digit":     "Add digits",
    "symbol":    "Add symbols",
}


def _char_classes(password: str) -> dict[str, bool]:
    return {
        label: bool(pattern.search(password))
        for label, pattern in _CLASS_PATTERNS.items()
    }


def strength_score(password: str) -> int:
    """Return the 0-6 point score behind :func:`classify`.

    One point each for length >= 8, length >= 12, and each of the four
    character checks.
    """
    score = (len(password) >= 8) + (len(password) >= 12)
    return score + sum(_char_classes(password).values())


def _tier_for(score: int) -> StrengthTier:
    if score <= 2:
        return StrengthTier.WEAK
    if score <= 4:
        return StrengthTier.MEDIUM
    return StrengthTier.STRONG


def classify(password: str) -> StrengthTier:
    """Map *password* to a strength tier.  Defined for any string."""
    return _tier_for(strength_score(password))


def strength_report(password: str) -> dict:
    """Return the classification together with what it was based on.

    Returns a dict with keys:
        length       -- int
        char_classes -- dict[str, bool]  (uppercase, lowercase, digit, symbol)
        score        -- int 0-6
        tier         -- StrengthTier
        suggestions  -- list[str], one per missed point
    """
    classes = _char_classes(password)
    suggestions: list[str] = []

    if len(password) < 8:
        suggestions.append("Use at least 8 characters")
    elif len(password) < 12:
        suggestions.append("Use 12 or more characters")

    for label, present in classes.items():
        if not present:
            suggestions.append(_CLASS_HINTS[label])

    score = strength_score(password)
    return {
        "length": len(password),
        "char_classes": classes,
        "score": score,
        "tier": _tier_for(score),
        "suggestions": suggestions,
    }
