"""Content filters and the registry that resolves them by name.

A filter is a named text transformation. It is instantiated once per
invocation with the rendering context's assigns and run over the captured
text with per-call options.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from markdown_it import MarkdownIt
from markupsafe import Markup

from quire.core.utils import slugify, truncate_words

logger = logging.getLogger(__name__)
__all__ = ["Filter", "FilterRegistry", "default_registry"]


class Filter(ABC):
    """Base class for content filters."""

    name: ClassVar[str]

    def __init__(self, assigns: Mapping[str, Any] | None = None) -> None:
        self.assigns = MappingProxyType(dict(assigns or {}))

    def setup(self) -> None:
        """Hook run once before :meth:`run`."""

    @abstractmethod
    def run(self, content: str, options: Mapping[str, Any]) -> str:
        """Return the transformed ``content``."""

    def setup_and_run(self, content: str, options: Mapping[str, Any] | None = None) -> str:
        self.setup()
        return self.run(content, options or {})


class FilterRegistry:
    """Maps filter names to filter classes.

    Example:
        >>> registry = FilterRegistry()
        >>> @registry.register
        ... class Upcase(Filter):
        ...     name = "upcase"
        ...     def run(self, content, options):
        ...         return content.upper()
        >>> registry.resolve("upcase") is Upcase
        True

    """

    def __init__(self) -> None:
        self._filters: dict[str, type[Filter]] = {}

    def register(
        self, filter_cls: type[Filter] | str
    ) -> type[Filter] | Callable[[type[Filter]], type[Filter]]:
        """Register a filter class under its ``name``.

        Passing a string registers the decorated class under that name instead.
        """
        if isinstance(filter_cls, str):
            alias = filter_cls

            def decorator(cls: type[Filter]) -> type[Filter]:
                self._add(alias, cls)
                return cls

            return decorator

        self._add(filter_cls.name, filter_cls)
        return filter_cls

    def _add(self, name: str, filter_cls: type[Filter]) -> None:
        if name in self._filters and self._filters[name] is not filter_cls:
            logger.warning("Filter %s is already registered; replacing %s", name, self._filters[name].__name__)
        self._filters[name] = filter_cls
        logger.debug("Registered filter: %s", name)

    def resolve(self, name: str) -> type[Filter] | None:
        return self._filters.get(str(name))

    def names(self) -> list[str]:
        return sorted(self._filters)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._filters

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


default_registry = FilterRegistry()

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@default_registry.register
class MarkdownFilter(Filter):
    """Renders Markdown to HTML.

    Options:
        html: allow raw HTML in the source (default True)
    """

    name = "markdown"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        md = MarkdownIt("commonmark", {"html": _as_bool(options.get("html", True))}).enable("table")
        return md.render(content)


@default_registry.register
class SlugifyFilter(Filter):
    name = "slugify"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        return slugify(content, max_len=int(options.get("max_len", 60)))


@default_registry.register
class StripHtmlFilter(Filter):
    name = "strip_html"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        return Markup(content).striptags()


@default_registry.register
class TruncateWordsFilter(Filter):
    name = "truncate_words"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        return truncate_words(
            content,
            count=int(options.get("count", 30)),
            suffix=str(options.get("suffix", "...")),
        )
