"""Core data types for Quire."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_FIELD_KEYS = frozenset({"hidden", "mtime", "changefreq", "priority"})


class ItemRep(BaseModel):
    """One rendered output form of an item."""

    name: str = "default"
    path: str | None = None
    raw_path: str | None = None

    @property
    def is_written(self) -> bool:
        return self.raw_path is not None


class Item(BaseModel):
    """A content unit that produces one or more representations."""

    model_config = ConfigDict(extra="forbid")

    identifier: str
    content: str = ""
    hidden: bool = False
    mtime: datetime | date | None = None
    changefreq: str | None = None
    priority: float | str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    reps: list[ItemRep] = Field(default_factory=list)

    def __getitem__(self, key: str) -> Any:
        if key in _FIELD_KEYS:
            return getattr(self, key)
        return self.attributes.get(key)

    def rep_named(self, name: str) -> ItemRep | None:
        for rep in self.reps:
            if rep.name == name:
                return rep
        return None


class Layout(BaseModel):
    identifier: str
    content: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
