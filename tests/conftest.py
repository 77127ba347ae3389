"""Shared fixtures for the Quire test suite."""

from collections.abc import Mapping
from datetime import date
from typing import Any

import pytest

from quire.core.config import SiteConfig
from quire.core.context import RenderingContext
from quire.core.types import Item, ItemRep
from quire.engine.filters import Filter, FilterRegistry


class UpcaseFilter(Filter):
    name = "upcase"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        result = content.upper()
        if options.get("exclaim"):
            result += "!"
        return result


class ExplodingFilter(Filter):
    name = "explode"

    def run(self, content: str, options: Mapping[str, Any]) -> str:
        msg = "filter blew up"
        raise RuntimeError(msg)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep QUIRE_* variables from the developer's shell out of the tests."""
    for var in ("QUIRE_BASE_URL", "QUIRE_OUTPUT_DIR", "QUIRE_SITEMAP_PATH", "QUIRE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def registry() -> FilterRegistry:
    reg = FilterRegistry()
    reg.register(UpcaseFilter)
    reg.register(ExplodingFilter)
    return reg


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig(base_url="http://example.com")


@pytest.fixture
def items() -> list[Item]:
    return [
        Item(
            identifier="/b/",
            changefreq="weekly",
            priority=0.5,
            mtime=date(2024, 5, 1),
            reps=[ItemRep(name="x", path="/b/x.html", raw_path="output/b/x.html")],
        ),
        Item(
            identifier="/a/",
            reps=[ItemRep(name="y", path="/a/y.html", raw_path="output/a/y.html")],
        ),
        Item(
            identifier="/secret/",
            hidden=True,
            reps=[ItemRep(name="default", path="/secret/", raw_path="output/secret/index.html")],
        ),
    ]


@pytest.fixture
def context(site_config: SiteConfig, items: list[Item]) -> RenderingContext:
    item = items[1]
    return RenderingContext(config=site_config, item=item, rep=item.reps[0], items=items)
