import logging

import pytest

from quire.engine.filters import Filter, FilterRegistry, default_registry


class Reverse(Filter):
    name = "reverse"

    def run(self, content, options):
        return content[::-1]


def test_register_and_resolve():
    registry = FilterRegistry()
    registry.register(Reverse)

    assert registry.resolve("reverse") is Reverse
    assert "reverse" in registry
    assert registry.resolve("missing") is None


def test_register_under_alias():
    registry = FilterRegistry()

    @registry.register("backwards")
    class Backwards(Reverse):
        pass

    assert registry.resolve("backwards") is Backwards
    assert registry.resolve("reverse") is None


def test_reregistering_replaces_and_warns(caplog):
    registry = FilterRegistry()
    registry.register(Reverse)

    class Other(Reverse):
        pass

    with caplog.at_level(logging.WARNING, logger="quire.engine.filters"):
        registry.register(Other)

    assert registry.resolve("reverse") is Other
    assert "already registered" in caplog.text


def test_setup_runs_before_run():
    calls = []

    class Tracking(Filter):
        name = "tracking"

        def setup(self):
            calls.append("setup")

        def run(self, content, options):
            calls.append(("run", content, dict(options)))
            return content

    Tracking().setup_and_run("text", {"a": 1})

    assert calls == ["setup", ("run", "text", {"a": 1})]


def test_assigns_are_read_only():
    instance = Reverse({"item": None})

    with pytest.raises(TypeError):
        instance.assigns["item"] = "changed"


def test_builtin_filters_registered():
    assert {"markdown", "slugify", "strip_html", "truncate_words"} <= set(default_registry)


@pytest.mark.parametrize(
    ("name", "content", "options", "expected"),
    [
        ("markdown", "*hi*", {}, "<p><em>hi</em></p>\n"),
        ("markdown", "<b>raw</b>", {"html": False}, "<p>&lt;b&gt;raw&lt;/b&gt;</p>\n"),
        ("markdown", "<b>raw</b>", {"html": "false"}, "<p>&lt;b&gt;raw&lt;/b&gt;</p>\n"),
        ("slugify", "Hello World", {}, "hello-world"),
        ("slugify", "Hello World", {"max_len": "5"}, "hello"),
        ("strip_html", "<p>Hello <b>World</b></p>", {}, "Hello World"),
        ("truncate_words", "one two three", {"count": 2}, "one two..."),
    ],
)
def test_builtin_filter_output(name, content, options, expected):
    filter_cls = default_registry.resolve(name)

    assert filter_cls().setup_and_run(content, options) == expected


def test_markdown_renders_tables():
    table = "| a | b |\n|---|---|\n| 1 | 2 |\n"

    html = default_registry.resolve("markdown")().setup_and_run(table)

    assert "<table>" in html
