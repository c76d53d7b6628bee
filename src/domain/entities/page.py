"""Paged list result."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of an upstream list endpoint.

    Attributes:
        items: Decoded items on this page.
        next_page_token: Continuation token (None on the last page).
    """

    items: list[T] = field(default_factory=list)
    next_page_token: str | None = None
