"""XML sitemaps for search engine crawlers (https://www.sitemaps.org)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime
from xml.etree.ElementTree import Element, SubElement, indent, tostring

from quire.core.context import RenderingContext
from quire.core.exceptions import MissingSiteConfigError
from quire.core.types import Item, ItemRep

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

RepSelect = Callable[[ItemRep], bool]


def format_iso8601_date(value: date | datetime) -> str:
    return value.strftime("%Y-%m-%d")


def xml_sitemap(
    context: RenderingContext,
    *,
    items: Iterable[Item] | None = None,
    rep_select: RepSelect | None = None,
) -> str:
    """Build an XML sitemap and return it.

    Items may set ``changefreq`` and ``priority`` as defined by the Sitemaps
    protocol, and ``mtime`` to produce a ``<lastmod>`` date. Each is left out
    of the entry when unset.

    The site configuration must set ``base_url`` without a trailing slash,
    e.g. ``http://example.com`` for a site at ``http://example.com/``.

    Args:
        context: Rendering context supplying the site items and configuration
        items: Items to include; defaults to every item not flagged hidden
        rep_select: Predicate a rep must satisfy to be included

    Returns:
        The sitemap document

    Raises:
        MissingSiteConfigError: If the configuration has no ``base_url``

    """
    base_url = context.config.base_url
    if base_url is None:
        raise MissingSiteConfigError("base_url")

    if items is None:
        items = [item for item in context.items if not item.hidden]

    urlset = Element("urlset", attrib={"xmlns": SITEMAP_NAMESPACE})

    for item in sorted(items, key=lambda i: i.identifier):
        reps = [rep for rep in item.reps if rep.is_written]
        if rep_select is not None:
            reps = [rep for rep in reps if rep_select(rep)]

        for rep in sorted(reps, key=lambda r: str(r.name)):
            if rep.path is None:
                logger.debug("Skipping rep %s of %s: no public path", rep.name, item.identifier)
                continue

            url_el = SubElement(urlset, "url")
            SubElement(url_el, "loc").text = base_url + rep.path
            if item.mtime is not None:
                SubElement(url_el, "lastmod").text = format_iso8601_date(item.mtime)
            if item.changefreq is not None:
                SubElement(url_el, "changefreq").text = str(item.changefreq)
            if item.priority is not None:
                SubElement(url_el, "priority").text = str(item.priority)

    indent(urlset, space="  ")
    return XML_DECLARATION + "\n" + tostring(urlset, encoding="unicode") + "\n"
