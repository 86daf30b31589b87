"""Page registration system for data-driven navigation.

Provides a decorator for registering pages with metadata so the layout can
build its navigation drawer from the registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, TypeAlias

from nicegui import ui

if TYPE_CHECKING:
    from collections.abc import Callable

PageCategory: TypeAlias = Literal["main", "hidden"]


@dataclass
class PageMeta:
    """Metadata for a registered page."""

    route: str
    title: str
    icon: str
    category: PageCategory = "main"
    order: int = field(default=100)


# Global registry of all pages
_page_registry: dict[str, PageMeta] = {}


def page_route(
    route: str,
    *,
    title: str,
    icon: str,
    category: PageCategory = "main",
    order: int = 100,
) -> Callable:
    """Decorator to register a page with navigation metadata.

    Usage:
        @page_route("/", title="Compose", icon="edit", order=10)
        async def composer_page():
            ...

    Args:
        route: URL path for the page.
        title: Display title in navigation.
        icon: Material icon name.
        category: Navigation section; hidden pages are not listed.
        order: Sort order within category (lower = higher).

    Returns:
        Decorated function registered with NiceGUI and the page registry.
    """

    def decorator(func: Callable) -> Callable:
        _page_registry[route] = PageMeta(
            route=route,
            title=title,
            icon=icon,
            category=category,
            order=order,
        )
        return ui.page(route)(func)

    return decorator


def get_visible_pages() -> list[PageMeta]:
    """Get pages shown in navigation, sorted by order."""
    visible = [meta for meta in _page_registry.values() if meta.category != "hidden"]
    visible.sort(key=lambda p: p.order)
    return visible
