from datetime import date

import pytest
from pydantic import ValidationError

from quire.core.types import Item, ItemRep


def test_item_lookup_prefers_declared_fields():
    item = Item(identifier="/a/", changefreq="daily", attributes={"title": "A"})

    assert item["changefreq"] == "daily"
    assert item["title"] == "A"
    assert item["missing"] is None


def test_rep_named():
    default = ItemRep(name="default", path="/a/")
    item = Item(identifier="/a/", reps=[default, ItemRep(name="json")])

    assert item.rep_named("default") is default
    assert item.rep_named("nope") is None


def test_rep_is_written_only_with_raw_path():
    assert ItemRep(raw_path="output/a.html").is_written
    assert not ItemRep(path="/a.html").is_written


def test_unknown_item_keys_are_rejected():
    with pytest.raises(ValidationError):
        Item.model_validate({"identifier": "/a/", "is_hidden": True})


def test_mtime_accepts_plain_dates():
    assert Item(identifier="/a/", mtime=date(2024, 1, 1)).mtime == date(2024, 1, 1)
