# Purpose: In-memory navigation registry used to build the sidebar/header menus.
# Modules contribute Sections through add()/add_when(); on render the tree is
# grouped by the 'group' attribute, filtered by runtime 'when' predicates,
# sorted by 'order' and transformed into the MenuItem shape the frontend consumes.

"""
Navigation registry and MenuItem presenter.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse

from flask import has_request_context, request

from core.config import (
    DEFAULT_NAV_GROUP,
    DEFAULT_NAV_ORDER,
    NAV_PASSTHROUGH_FIELDS,
)
from core.text_utils import slugify

logger = logging.getLogger(__name__)

Configure = Optional[Callable[["Section"], Any]]


class Always:
    """Visibility of an entry without a 'when' predicate."""

    def is_visible(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Always()"


class Predicate:
    """Visibility decided by a zero-argument callable at render time."""

    def __init__(self, fn: Callable[[], Any]):
        self.fn = fn

    def is_visible(self) -> bool:
        return bool(self.fn())

    def __repr__(self) -> str:
        return f"Predicate({self.fn!r})"


class Section:
    """One navigation entry. Children are Sections too, so any entry can nest."""

    def __init__(self, parent: Any, title: str = "", url: str = ""):
        self.parent = parent
        self.title = title
        self.url = url
        self.attributes: Dict[str, Any] = {}
        self.children: List["Section"] = []

    def add(
        self,
        title: str = "",
        url: str = "",
        configure: Configure = None,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> "Section":
        """Append a child entry and return this Section for chaining."""
        section = Section(self, title, url)

        if configure:
            configure(section)

        if attributes:
            section.set_attributes(attributes)

        self.children.append(section)
        return self

    def set_attributes(self, attributes: Dict[str, Any]) -> "Section":
        self.attributes.update(attributes)
        return self

    @property
    def visibility(self):
        when = self.attributes.get("when")
        # A 'when' that cannot be called does not hide the entry
        if when is None or not callable(when):
            return Always()
        return Predicate(when)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"Section(title={self.title!r}, url={self.url!r})"


def _request_url() -> str:
    """Return the URL of the current Flask request, or '' outside a request."""
    if not has_request_context():
        return ""
    return request.base_url


class Navigation:
    """
    Per-request navigation registry.

    Entries are registered with add()/add_when()/add_if() and read back with
    tree() (raw) or tree_grouped() (filtered, sorted, MenuItem shaped).
    """

    def __init__(
        self,
        current_url: Optional[Callable[[], str]] = None,
        default_group: str = DEFAULT_NAV_GROUP,
        default_order: int = DEFAULT_NAV_ORDER,
    ):
        self.children: List[Section] = []
        self.current_url = current_url or _request_url
        self.default_group = default_group
        self.default_order = default_order

    def __len__(self) -> int:
        return len(self.children)

    def add(self, title: str = "", url: str = "", configure: Configure = None) -> "Navigation":
        """Add a top-level navigation entry."""
        section = Section(self, title, url)

        if configure:
            configure(section)

        self.children.append(section)
        return self

    def add_when(
        self,
        condition: Callable[[], Any],
        title: str = "",
        url: str = "",
        configure: Configure = None,
    ) -> "Navigation":
        """
        Add an entry whose visibility is decided at render time.

        The condition is stored under the 'when' attribute and is called on
        every tree_grouped(), so it can depend on the current user or flags.
        """

        def _configure(section: Section) -> None:
            section.set_attributes({"when": condition})
            if configure:
                configure(section)

        return self.add(title, url, _configure)

    def add_if(
        self,
        condition: Any,
        title: str = "",
        url: str = "",
        configure: Configure = None,
    ) -> "Navigation":
        """Add an entry only if the condition holds now, at registration time."""
        if callable(condition):
            condition = condition()
        if condition:
            self.add(title, url, configure)
        return self

    def tree(self) -> List[Dict[str, Any]]:
        """Raw registered tree, unfiltered and in registration order."""
        return [section.to_dict() for section in self.children]

    def tree_grouped(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Return all entries grouped by their 'group' attribute as MenuItems.

        Example:
            {'main': [...], 'settings': [...], 'ungrouped': [...]}

        A group whose entries are all hidden is still present as [].
        """
        grouped = self.group_entries(self.children)

        for group, items in grouped.items():
            grouped[group] = self.transform_tree(self.filter_visible(items))

        return grouped

    def group_entries(self, entries: List[Section]) -> Dict[str, List[Section]]:
        """Partition top-level entries by 'group'; children stay with their parent."""
        grouped: Dict[str, List[Section]] = {}
        for entry in entries:
            group = entry.attributes.get("group")
            if group is None:
                group = self.default_group
            grouped.setdefault(group, []).append(entry)
        return grouped

    def filter_visible(self, entries: List[Section]) -> List[Section]:
        """
        Keep entries whose 'when' is absent or evaluates true, recursively.

        Returns shallow copies so the registered tree is never pruned.
        """
        visible = []
        for entry in entries:
            if not self._is_visible(entry):
                continue
            copy = Section(entry.parent, entry.title, entry.url)
            copy.attributes = entry.attributes
            copy.children = self.filter_visible(entry.children)
            visible.append(copy)
        return visible

    def _is_visible(self, entry: Section) -> bool:
        try:
            return entry.visibility.is_visible()
        except Exception as e:
            logger.error(f"Navigation 'when' check failed for '{entry.title}': {e}", exc_info=True)
            return False

    def sort_by_order(self, entries: List[Section]) -> List[Section]:
        # sorted() is stable, so equal ranks keep registration order
        return sorted(entries, key=self._rank)

    def _rank(self, entry: Section):
        order = entry.attributes.get("order")
        return self.default_order if order is None else order

    def transform_tree(self, entries: List[Section]) -> List[Dict[str, Any]]:
        return [self.transform_item(entry) for entry in self.sort_by_order(entries)]

    def transform_item(self, entry: Section) -> Dict[str, Any]:
        """
        Convert a Section into a MenuItem dict.

        Internal attributes (when, group, order) are dropped; 'slug' falls back
        to a slug of the title; 'url' and 'children' are omitted when empty.
        """
        attributes = entry.attributes

        menu_item: Dict[str, Any] = {
            "title": entry.title,
            "active": self.is_item_active(entry),
            "slug": attributes["slug"] if attributes.get("slug") is not None else slugify(entry.title),
        }

        if entry.url:
            menu_item["url"] = entry.url

        for field in NAV_PASSTHROUGH_FIELDS:
            if attributes.get(field) is not None:
                menu_item[field] = attributes[field]

        if entry.children:
            menu_item["children"] = self.transform_tree(entry.children)

        return menu_item

    def is_item_active(self, entry: Section) -> bool:
        """Exact path match against the current request; parents do not inherit."""
        if not entry.url:
            return False

        item_path = (urlparse(entry.url).path or "").rstrip("/")
        current_path = (urlparse(self.current_url() or "").path or "").rstrip("/")

        return item_path == current_path

    def load(self, loader=None) -> "Navigation":
        """Run the core and enabled module registration sources against this registry."""
        if loader is None:
            from core.navigation_loader import NavigationLoader

            loader = NavigationLoader()
        loader.load(self)
        return self
