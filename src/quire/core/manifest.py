"""Loads site items from a YAML manifest.

Expected layout::

    items:
      - identifier: /about/
        mtime: 2024-05-01
        changefreq: monthly
        attributes:
          title: About us
        reps:
          - name: default
            path: /about/
            raw_path: output/about/index.html

Only the fields of :class:`~quire.core.types.Item` are accepted at item
level; any other key, such as ``title`` above, belongs under ``attributes``.
Items are hidden from the sitemap with ``hidden: true``.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from quire.core.exceptions import ManifestLoadError
from quire.core.types import Item


def load_items(path: Path) -> list[Item]:
    """Read and validate the items listed in ``path``."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ManifestLoadError(str(path), str(exc)) from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise ManifestLoadError(str(path), "expected a mapping with an 'items' list")

    entries = data.get("items") or []
    if not isinstance(entries, list):
        raise ManifestLoadError(str(path), "expected a mapping with an 'items' list")

    try:
        return [Item.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        raise ManifestLoadError(str(path), str(exc)) from exc
