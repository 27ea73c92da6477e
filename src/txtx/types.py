"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

ItemType = Literal["tool", "category"]


@dataclass(slots=True, frozen=True)
class Category:
    """A named grouping of tools."""

    id: str
    name: str
    slug: str
    description: str
    icon: str


@dataclass(slots=True, frozen=True)
class SearchableItem:
    """Denormalized index entry with precomputed lowercase forms."""

    id: str
    type: ItemType
    name: str
    name_lower: str
    description: str
    description_lower: str
    slug: str
    category_slug: str | None = None
    category_name: str | None = None
    icon: str | None = None
    keywords: tuple[str, ...] = ()
    keywords_lower: tuple[str, ...] = ()


@dataclass(slots=True)
class SearchResult:
    """A ranked search hit."""

    id: str
    type: ItemType
    name: str
    description: str
    slug: str
    score: int
    category_slug: str | None = None
    category_name: str | None = None
    icon: str | None = None
    keywords: list[str] = field(default_factory=list)


@dataclass(slots=True)
class RateLimitEntry:
    """Request count for one key within its current window."""

    count: int
    reset_time: int


@dataclass(slots=True)
class RateLimitResult:
    """Outcome of a rate-limit check. `reset` is in epoch seconds."""

    success: bool
    remaining: int
    reset: int
    retry_after: int | None = None


@dataclass(slots=True)
class ToolTrace:
    """Trace record for an executed tool call."""

    name: str
    input_payload: dict[str, Any]
    output_preview: str
    latency_ms: float
