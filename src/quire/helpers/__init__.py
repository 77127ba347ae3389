"""Helpers called from templates while a page renders."""

from quire.helpers.capturing import capture
from quire.helpers.filtering import filter_block
from quire.helpers.xml_sitemap import SITEMAP_NAMESPACE, xml_sitemap

__all__ = ["SITEMAP_NAMESPACE", "capture", "filter_block", "xml_sitemap"]
