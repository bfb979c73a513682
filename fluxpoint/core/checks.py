"""Argument checks shared by the request builders."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class FluxpointError(RuntimeError):
    """Raised when the client is used in a state that cannot serve a request."""


def check(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def not_null(value: Any, name: str) -> None:
    check(value is not None, f"{name} may not be null.")


def not_empty(text: Optional[str], name: str) -> str:
    check(text is not None and text != "", f"{name} may not be null nor empty.")
    return text  # type: ignore[return-value]


def none_empty(texts: Iterable[Optional[str]], name: str) -> list[str]:
    items = list(texts)
    check(bool(items), f"{name} may not be empty.")
    for index, text in enumerate(items):
        check(text is not None, f"{name} may not contain null (index {index}).")
        check(text != "", f"{name} may not contain empty strings (index {index}).")
    return items  # type: ignore[return-value]


def at_least(value: int, minimum: int, name: str) -> int:
    check(value >= minimum, f"{name} may not be less than {minimum}.")
    return value


def in_range(value: int, minimum: int, maximum: int, name: str) -> int:
    check(
        minimum <= value <= maximum,
        f"{name} may not be less than {minimum} or larger than {maximum}.",
    )
    return value
