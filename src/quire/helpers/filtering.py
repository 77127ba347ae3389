"""Runs a named filter over part of an item or layout."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from quire.core.buffer import OutputBuffer
from quire.core.context import RenderingContext
from quire.core.exceptions import UnknownFilterError
from quire.core.notifications import NotificationEvent
from quire.engine.filters import FilterRegistry, default_registry
from quire.helpers.capturing import Block, capture

logger = logging.getLogger(__name__)


def filter_block(
    context: RenderingContext,
    buffer: OutputBuffer,
    filter_name: str,
    block: Block,
    options: Mapping[str, Any] | None = None,
    *,
    registry: FilterRegistry | None = None,
) -> None:
    """Filter the output of ``block`` and append it to ``buffer``.

    Nothing is returned; the filtered text is the only thing written to the
    buffer.

    Args:
        context: Rendering context of the page being rendered
        buffer: Output stream of the enclosing render call
        filter_name: Name of a registered filter
        block: Callable producing the content to filter (see :func:`capture`)
        options: Filter-specific options
        registry: Registry to resolve ``filter_name`` in (defaults to the built-in one)

    Raises:
        UnknownFilterError: If ``filter_name`` is not registered

    Example:
        >>> buf = OutputBuffer("<p>Lorem</p>")
        >>> filter_block(RenderingContext(), buf, "slugify", lambda _: "Consectetur Elit")
        >>> str(buf)
        '<p>Lorem</p>consectetur-elit'

    """
    data = capture(block)

    filter_cls = (registry or default_registry).resolve(filter_name)
    if filter_cls is None:
        raise UnknownFilterError(filter_name)

    filter_ = filter_cls(context.assigns())

    context.notifications.post(NotificationEvent.FILTERING_STARTED, context.rep, filter_name)
    filtered = filter_.setup_and_run(data, options or {})
    context.notifications.post(NotificationEvent.FILTERING_ENDED, context.rep, filter_name)

    logger.debug("Filtered %d chars through %s", len(data), filter_name)
    buffer.append(filtered)
