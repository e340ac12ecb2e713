"""Retry policy configuration.

Bundles the attempt ceiling with a backoff function so a single validated,
immutable object can be handed to RetryScheduler.execute() or stored on a
client class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from futurekit.foundation.errors import InvalidPolicyError

from .backoff import ConstantBackoff, ExponentialBackoff, LinearBackoff

if TYPE_CHECKING:
    from futurekit.foundation.config import RetrySettings


class RetryPolicy(BaseModel):
    """Attempt ceiling plus backoff function.

    Attributes:
        max_attempts: Hard ceiling on supplier invocations (>= 1)
        backoff: Callable ``(attempt, error) -> delay`` (sync or async)

    Example:
        >>> policy = RetryPolicy(max_attempts=5, backoff=LinearBackoff(base=0.5))
        >>> value = await RetryScheduler().execute(fetch, policy)
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # backoff is any callable
        validate_default=True,
        extra="forbid",
    )

    max_attempts: Annotated[int, Field(ge=1, strict=True)] = 3
    backoff: Callable[..., object] = Field(default_factory=ExponentialBackoff, repr=False)

    @property
    def max_backoff_calls(self) -> int:
        """Upper bound on backoff invocations for one run."""
        return self.max_attempts - 1

    @classmethod
    def from_settings(cls, settings: RetrySettings | None = None) -> RetryPolicy:
        """Build a policy from RetrySettings (defaults to the cached global settings)."""
        if settings is None:
            from futurekit.foundation.config import get_settings
            settings = get_settings().retry
        match settings.strategy:
            case "constant":
                backoff: object = ConstantBackoff(settings.base_delay)
            case "linear":
                backoff = LinearBackoff(settings.base_delay, settings.multiplier, settings.max_delay)
            case _:
                backoff = ExponentialBackoff(settings.base_delay, settings.multiplier, settings.max_delay)
        return cls(max_attempts=settings.max_attempts, backoff=backoff)


def validate_max_attempts(max_attempts: object) -> int:
    """Check an attempt ceiling, raising InvalidPolicyError when it is not an int >= 1."""
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise InvalidPolicyError(f"max_attempts must be an int, got {type(max_attempts).__name__}")
    if max_attempts < 1:
        raise InvalidPolicyError(f"max_attempts must be >= 1, got {max_attempts}")
    return max_attempts


def build_policy(max_attempts: object, backoff: object) -> RetryPolicy:
    """Construct a RetryPolicy, reporting validation failures as InvalidPolicyError."""
    try:
        return RetryPolicy(max_attempts=validate_max_attempts(max_attempts), backoff=backoff)
    except ValidationError as e:
        raise InvalidPolicyError(f"Invalid retry policy: {e.errors()[0]['msg']}") from e
