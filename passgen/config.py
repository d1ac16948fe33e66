"""Generation limits.

Values can be overridden via environment variables, read once at import.
"""

import os

MIN_LENGTH = 4


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# Cap on requested length, keeps a single call's allocation bounded
MAX_LENGTH = _env_int("PASSGEN_MAX_LENGTH", 128)
DEFAULT_LENGTH = _env_int("PASSGEN_DEFAULT_LENGTH", 16)

# Candidates drawn before giving up on class coverage
MAX_ATTEMPTS = _env_int("PASSGEN_MAX_ATTEMPTS", 1000)

if MAX_LENGTH < MIN_LENGTH:
    raise ValueError(f"PASSGEN_MAX_LENGTH must be at least {MIN_LENGTH}")
if not MIN_LENGTH <= DEFAULT_LENGTH <= MAX_LENGTH:
    raise ValueError(
        f"PASSGEN_DEFAULT_LENGTH must be between {MIN_LENGTH} and {MAX_LENGTH}"
    )
if MAX_ATTEMPTS < 1:
    raise ValueError("PASSGEN_MAX_ATTEMPTS must be at least 1")
