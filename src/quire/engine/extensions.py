"""Jinja2 extension exposing :func:`quire.helpers.filtering.filter_block` as a tag.

Usage::

    <p>Lorem ipsum dolor sit amet...</p>
    {% filter_block "markdown", html=False %}
    *Consectetur* adipisicing elit...
    {% endfilter_block %}

The rendering context is read from the ``quire_context`` template variable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from jinja2 import nodes
from jinja2.environment import Environment
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context
from markupsafe import Markup

from quire.core.buffer import OutputBuffer
from quire.core.context import RenderingContext
from quire.engine.filters import default_registry
from quire.helpers.filtering import filter_block

CONTEXT_VARIABLE = "quire_context"


class FilteringExtension(Extension):
    tags = {"filter_block"}

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        environment.extend(quire_filter_registry=default_registry)

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        filter_name = parser.parse_expression()

        pairs: list[nodes.Pair] = []
        while parser.stream.skip_if("comma"):
            key = parser.stream.expect("name")
            parser.stream.expect("assign")
            pairs.append(nodes.Pair(nodes.Const(key.value, lineno=key.lineno), parser.parse_expression()))

        body = parser.parse_statements(("name:endfilter_block",), drop_needle=True)
        call = self.call_method(
            "_filter_block",
            [nodes.ContextReference(), filter_name, nodes.Dict(pairs, lineno=lineno)],
            lineno=lineno,
        )
        return nodes.CallBlock(call, [], [], body, lineno=lineno)

    def _filter_block(
        self,
        template_context: Context,
        filter_name: str,
        options: dict[str, Any],
        caller: Callable[[], str],
    ) -> Markup:
        context = template_context.get(CONTEXT_VARIABLE) or RenderingContext()
        buffer = OutputBuffer()
        filter_block(
            context,
            buffer,
            filter_name,
            lambda _: caller(),
            options,
            registry=self.environment.quire_filter_registry,  # type: ignore[attr-defined]
        )
        return Markup(buffer.getvalue())
