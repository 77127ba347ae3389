"""Rendering context handed to helpers and filters.

Provides render-scoped state without using globals."""

from dataclasses import dataclass, field
from types import MappingProxyType

from quire.core.config import SiteConfig
from quire.core.notifications import NotificationCenter
from quire.core.types import Item, ItemRep, Layout


@dataclass(frozen=True)
class RenderingContext:
    """Read-only bag of references for the page currently being rendered.

    Attributes:
        item: Item being rendered (optional)
        rep: Representation of ``item`` being rendered (optional)
        items: Every item on the site
        layouts: Every layout on the site
        config: Site configuration
        content: Ambient content, e.g. the body passed into a layout
        notifications: Observer registry for rendering events
    """

    config: SiteConfig = field(default_factory=SiteConfig)
    item: Item | None = None
    rep: ItemRep | None = None
    items: tuple[Item, ...] = ()
    layouts: tuple[Layout, ...] = ()
    content: str | None = None
    notifications: NotificationCenter = field(default_factory=NotificationCenter)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "layouts", tuple(self.layouts))

    def assigns(self) -> MappingProxyType:
        """Return the read-only mapping given to filter instances."""
        return MappingProxyType(
            {
                "item": self.item,
                "rep": self.rep,
                "item_rep": self.rep,
                "items": self.items,
                "layouts": self.layouts,
                "config": self.config,
                "content": self.content,
            }
        )
