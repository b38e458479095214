"""Page navigation links with ellipses between distant pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .component import Component
from .markup import Element

_PAGE_CSS = "border px-4 py-2 cursor-pointer inline-flex items-center text-sm font-medium transition-colors "
_PREV_CSS = "border px-4 py-2 rounded-l-md bg-scale-0 inline-flex items-center text-sm font-medium transition-colors"
_NEXT_CSS = "border rounded-r-md px-4 py-2 bg-scale-0 inline-flex items-center text-sm font-medium transition-colors"
_DISABLED_CSS = " opacity-50 cursor-not-allowed text-gray-400"
_ENABLED_CSS = " cursor-pointer hover:bg-scale-1"


@dataclass
class PaginationState:
    """Where a listing stands: the current page, the item count and the page size."""

    current_page: int = 0
    items_count: int = 0
    per_page: int = 0


@dataclass
class PaginationMod:
    pagination: PaginationState | None = None
    base_url: str = ""


@dataclass
class Pagination:
    """Previous/next arrows around links to the pages near the current one."""

    component: Component = field(default_factory=Component)

    def mod(self) -> PaginationMod:
        return PaginationMod()

    def h(self, mod: PaginationMod) -> Element | None:
        state = mod.pagination
        if state is None:
            raise ValueError("Invalid Mod: pagination is missing")
        if state.per_page < 1:
            raise ValueError("Invalid Mod: pagination per page cannot be lower than 1")
        if state.items_count <= state.per_page:
            return None

        last_page = (state.items_count - 1) // state.per_page + 1
        pages = self._pages(state.current_page, last_page)

        return self.component.cas(
            "nav",
            {"aria-label": "Pagination navigation", "role": "navigation"},
            self.component.ccs(
                "div",
                "flex -space-x-px text-scale-7",
                self._prev_arrow(mod),
                *self._items(mod, pages),
                self._next_arrow(mod, last_page),
            ),
        )

    @staticmethod
    def _pages(current: int, last_page: int) -> list[int]:
        candidates = [current]
        if current - 1 > 0:
            candidates.append(current - 1)
        if current + 1 <= last_page:
            candidates.append(current + 1)
        candidates.extend(range(1, min(3, last_page) + 1))
        candidates.extend(range(max(1, last_page - 2), last_page + 1))
        return sorted(set(candidates))

    def _items(self, mod: PaginationMod, pages: list[int]) -> list[Element]:
        items: list[Element] = []
        previous: int | None = None
        for page in pages:
            if previous is not None and page > previous + 1:
                items.append(self._ellipsis())
            items.append(self._page_button(mod, page))
            previous = page
        return items

    def _page_button(self, mod: PaginationMod, page: int) -> Element:
        href = self._change_page_value(mod, "set", page)
        attributes = {"href": href}
        if page == mod.pagination.current_page:
            attributes["class"] = _PAGE_CSS + "bg-blue-50 text-blue-600"
            attributes["aria-label"] = f"Current page {page}"
            attributes["aria-current"] = "page"
        else:
            attributes["class"] = _PAGE_CSS + "bg-scale-0 hover:bg-scale-1"
            attributes["aria-label"] = f"Go to page {page}"
        return self.component.cav("a", attributes, str(page))

    def _prev_arrow(self, mod: PaginationMod) -> Element:
        href = self._change_page_value(mod, "decrement", 0)
        if mod.pagination.current_page <= 1:
            return self.component.cav(
                "span",
                {
                    "class": _PREV_CSS + _DISABLED_CSS,
                    "aria-label": "Previous page (disabled)",
                    "aria-disabled": "true",
                },
                "‹",
            )
        return self.component.cav(
            "a",
            {"href": href, "class": _PREV_CSS + _ENABLED_CSS, "aria-label": "Go to previous page"},
            "‹",
        )

    def _next_arrow(self, mod: PaginationMod, last_page: int) -> Element:
        href = self._change_page_value(mod, "increment", last_page)
        if mod.pagination.current_page >= last_page:
            return self.component.cav(
                "span",
                {
                    "class": _NEXT_CSS + _DISABLED_CSS,
                    "aria-label": "Next page (disabled)",
                    "aria-disabled": "true",
                },
                "›",
            )
        return self.component.cav(
            "a",
            {"href": href, "class": _NEXT_CSS + _ENABLED_CSS, "aria-label": "Go to next page"},
            "›",
        )

    def _ellipsis(self) -> Element:
        return self.component.cav(
            "span",
            {
                "class": "border px-4 py-2 bg-scale-0 inline-flex items-center text-sm font-medium text-gray-500",
                "aria-hidden": "true",
            },
            "...",
        )

    @staticmethod
    def _change_page_value(mod: PaginationMod, operation: str, value: int) -> str:
        """Return the base URL with its ``page`` query parameter changed."""
        try:
            parts = urlsplit(mod.base_url)
        except ValueError as error:
            raise ValueError("Cannot parse base url") from error

        values: dict[str, list[str]] = {}
        for key, item in parse_qsl(parts.query, keep_blank_values=True):
            values.setdefault(key, []).append(item)

        current = 1
        page = values.get("page", [""])[0]
        if page:
            try:
                current = int(page)
            except ValueError:
                current = 0

        if operation == "set":
            current = value
        elif operation == "increment":
            current += 1
        elif operation == "decrement":
            current -= 1
        current = max(current, 1)
        if operation == "increment" and current > value:
            current = value

        values["page"] = [str(current)]
        query = urlencode([(key, item) for key in sorted(values) for item in values[key]])
        return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))