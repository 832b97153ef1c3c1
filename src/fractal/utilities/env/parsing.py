import os
from collections.abc import Callable
from typing import TypeVar

NumberT = TypeVar("NumberT", int, float)


def _parse_env_number(
    env_var: str,
    value: str,
    parse: Callable[[str], NumberT],
    kind: str,
    minimum: NumberT | None,
) -> NumberT:
    """Parse ``value`` read from ``env_var``, naming the variable on failure."""

    try:
        parsed = parse(value.strip())
    except ValueError as exc:
        raise ValueError(f"{env_var} must be {kind}") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    value = os.environ.get(env_var)
    if value is None:
        return default
    return _parse_env_number(env_var, value, int, "an integer", minimum)


def _env_optional_int(env_var: str, *, minimum: int | None = None) -> int | None:
    """Return the integer value of ``env_var``, or ``None`` when unset or blank."""

    value = os.environ.get(env_var)
    if value is None or value.strip() == "":
        return None
    return _parse_env_number(env_var, value, int, "an integer", minimum)


def _env_float(env_var: str, *, default: float, minimum: float | None = None) -> float:
    value = os.environ.get(env_var)
    if value is None:
        return default
    return _parse_env_number(env_var, value, float, "a float", minimum)
