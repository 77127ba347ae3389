from typing import Protocol, runtime_checkable

from quire.core.context import RenderingContext


@runtime_checkable
class OutputSink(Protocol):
    """Final destination for generated site-wide documents (e.g. sitemap.xml)."""

    def publish(self, context: RenderingContext) -> None:
        """Writes the generated document to disk/storage."""
        ...
