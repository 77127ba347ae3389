"""Output sinks for site-wide generated documents."""

from quire.infra.sinks.sitemap import SitemapSink

__all__ = ["SitemapSink"]
