"""Sitemap Output Sink for writing sitemap.xml files."""

import logging
from collections.abc import Iterable
from pathlib import Path

from quire.core.context import RenderingContext
from quire.core.types import Item
from quire.helpers.xml_sitemap import RepSelect, xml_sitemap

logger = logging.getLogger(__name__)


class SitemapSink:
    """Publishes the site's sitemap as an XML file.

    Implements the OutputSink protocol by writing xml_sitemap() to a file.
    """

    def __init__(
        self,
        output_path: Path,
        items: Iterable[Item] | None = None,
        rep_select: RepSelect | None = None,
    ) -> None:
        """Initialize the sitemap output sink.

        Args:
            output_path: Path where the sitemap will be written
            items: Items to list instead of the context's non-hidden items
            rep_select: Predicate a rep must satisfy to be listed

        """
        self.output_path = Path(output_path)
        self.items = list(items) if items is not None else None
        self.rep_select = rep_select

    def publish(self, context: RenderingContext) -> None:
        """Render the sitemap and write it, creating parent directories.

        Overwrites existing file if present.
        """
        xml_output = xml_sitemap(context, items=self.items, rep_select=self.rep_select)

        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(xml_output, encoding="utf-8")
        logger.info("Wrote sitemap to %s", self.output_path)
