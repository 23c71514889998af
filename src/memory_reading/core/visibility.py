"""
Visibility - Two-state wrapper for UI features that may not be rendered.

A feature read from a snapshot is either ``Visible(value)`` or
``NOT_VISIBLE``. Use ``isinstance(x, Visible)`` or ``x.is_visible`` to
branch on it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Visible(Generic[T]):
    """The feature is currently rendered."""

    value: T

    @property
    def is_visible(self) -> bool:
        return True

    def value_or(self, default: object) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Visible[U]":
        return Visible(func(self.value))


class NotVisible:
    """The feature is not rendered in this snapshot."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_VISIBLE"

    def __reduce__(self):
        return (NotVisible, ())

    @property
    def is_visible(self) -> bool:
        return False

    def value_or(self, default: U) -> U:
        return default

    def map(self, func: Callable) -> "NotVisible":
        return self


NOT_VISIBLE = NotVisible()

Visibility = Union[Visible[T], NotVisible]
