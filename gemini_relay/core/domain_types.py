"""Domain Types — rich types that replace bare primitives across the relay.

Invariants:
    - Every fallible relay step returns Ok[T] | Err, never a bare None-or-value
    - Err always carries a RelayError (status + caller-facing message)
    - HTTP verbs compared via HttpMethod, not raw string literals

Design Decisions:
    - Frozen dataclasses for Ok/Err: structural pattern matching on isinstance,
      no third-party result library
    - NewType for the credential: zero runtime cost, type-checker support
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NewType, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from gemini_relay.core.errors import RelayError


# ─── Value Types ─────────────────────────────────────────────────

ApiKey = NewType("ApiKey", str)


# ─── Enums ───────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """HTTP verbs the relay distinguishes."""
    POST = "POST"
    OPTIONS = "OPTIONS"


# ─── Results ─────────────────────────────────────────────────────

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful step outcome."""
    value: T


@dataclass(frozen=True)
class Err:
    """Expected failure outcome — rendered directly as the HTTP response."""
    error: "RelayError"


Result = Ok[T] | Err
