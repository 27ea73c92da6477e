"""Relevance-scored search over the tool and category registry."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Literal

from txtx.config import SearchConfig
from txtx.registry.registry import ToolRegistry
from txtx.types import SearchableItem, SearchResult

logger = logging.getLogger(__name__)

SearchType = Literal["tool", "category", "all"]


def score_item(item: SearchableItem, query_lower: str) -> int:
    """Score one indexed item against an already lowercased, stripped query.

    Name matches are tiered (exact 100, prefix 80, whole word 60, substring
    40; only the best tier applies). Keyword, description, multi-word and
    category bonuses add on top.
    """

    score = 0
    query_words = query_lower.split()

    if item.name_lower == query_lower:
        score += 100
    elif item.name_lower.startswith(query_lower):
        score += 80
    elif f" {query_lower}" in item.name_lower or f"{query_lower} " in item.name_lower:
        score += 60
    elif query_lower in item.name_lower:
        score += 40

    if query_lower in item.keywords_lower:
        score += 50

    for keyword in item.keywords_lower:
        if query_lower in keyword or keyword in query_lower:
            score += 20

    if query_lower in item.description_lower:
        score += 10

    if len(query_words) > 1:
        word_matches = sum(
            1
            for word in query_words
            if word in item.name_lower
            or any(word in keyword for keyword in item.keywords_lower)
            or word in item.description_lower
        )
        if word_matches == len(query_words):
            score += 30
        elif word_matches > 0:
            score += word_matches * 5

    if item.type == "tool" and item.category_name:
        if query_lower in item.category_name.lower():
            score += 15

    return score


class ToolSearchIndex:
    """Lazily built, process-resident index over a `ToolRegistry`.

    The index is built on first use and kept until `clear_index()`. Items are
    stored tools first, then categories, each in registry order; the stable
    sort in `search()` uses that order to break score ties.
    """

    def __init__(self, registry: ToolRegistry, config: SearchConfig | None = None) -> None:
        self.registry = registry
        self.config = config or SearchConfig()
        self._items: list[SearchableItem] | None = None
        self._build_lock = Lock()

    def ensure_index(self) -> list[SearchableItem]:
        items = self._items
        if items is not None:
            return items
        with self._build_lock:
            if self._items is None:
                self._items = self._build()
                logger.debug("Built search index with %d items", len(self._items))
            return self._items

    def clear_index(self) -> None:
        with self._build_lock:
            self._items = None

    def search(
        self,
        query: str,
        *,
        limit: int | None = None,
        category: str | None = None,
        item_type: SearchType = "all",
        threshold: float | None = None,
    ) -> list[SearchResult]:
        limit = self.config.default_limit if limit is None else limit
        threshold = self.config.default_threshold if threshold is None else threshold

        if not query or not query.strip() or limit <= 0:
            return []

        query_lower = query.lower().strip()
        results: list[SearchResult] = []

        for item in self.ensure_index():
            if item_type != "all" and item.type != item_type:
                continue
            if category and (item.type != "tool" or item.category_slug != category):
                continue

            score = score_item(item, query_lower)
            if score < threshold:
                continue

            results.append(
                SearchResult(
                    id=item.id,
                    type=item.type,
                    name=item.name,
                    description=item.description,
                    slug=item.slug,
                    score=score,
                    category_slug=item.category_slug,
                    category_name=item.category_name,
                    icon=item.icon,
                    keywords=list(item.keywords),
                )
            )

        results.sort(key=lambda result: result.score, reverse=True)
        return results[:limit]

    def search_tools(
        self,
        query: str,
        *,
        limit: int | None = None,
        category: str | None = None,
        threshold: float | None = None,
    ) -> list[SearchResult]:
        return self.search(
            query, limit=limit, category=category, item_type="tool", threshold=threshold
        )

    def search_categories(
        self,
        query: str,
        *,
        limit: int | None = None,
        threshold: float | None = None,
    ) -> list[SearchResult]:
        return self.search(query, limit=limit, item_type="category", threshold=threshold)

    def _build(self) -> list[SearchableItem]:
        items: list[SearchableItem] = []

        for tool in self.registry.all_tools():
            category = self.registry.get_category(tool.category_id)
            items.append(
                SearchableItem(
                    id=tool.id,
                    type="tool",
                    name=tool.name,
                    name_lower=tool.name.lower(),
                    description=tool.description,
                    description_lower=tool.description.lower(),
                    slug=tool.slug,
                    category_slug=tool.category_id,
                    category_name=category.name if category else None,
                    keywords=tuple(tool.keywords),
                    keywords_lower=tuple(keyword.lower() for keyword in tool.keywords),
                )
            )

        for category in self.registry.all_categories():
            items.append(
                SearchableItem(
                    id=category.id,
                    type="category",
                    name=category.name,
                    name_lower=category.name.lower(),
                    description=category.description,
                    description_lower=category.description.lower(),
                    slug=category.slug,
                    icon=category.icon,
                )
            )

        return items
