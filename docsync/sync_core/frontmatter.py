#!/usr/bin/env python3
"""
sync_core/frontmatter.py - Frontmatter detection and generated page bodies.

Everything here is text in, text out; no filesystem access.
"""
from __future__ import annotations

import json
import os
import re

FRONTMATTER_MARKER = "---"
BOM = "\ufeff"

_SEPARATORS = re.compile(r"[-_]")
# Plain scalars YAML would reject or read as another type
_YAML_INDICATORS = tuple("-?:,[]{}#&*!|>'\"%@`")
_YAML_RESERVED = frozenset({"", "~", "null", "true", "false", "yes", "no", "on", "off", "y", "n"})
_YAML_NUMBER = re.compile(r"^[-+]?(\.?\d[\d._]*([eE][-+]?\d+)?|\.inf|\.nan|0x[0-9a-fA-F]+|0o[0-7]+)$")


def title_from_name(name: str, strip_extension: bool = True) -> str:
    """Human title from a file or directory name: ``getting-started.md`` -> ``getting started``."""
    if strip_extension:
        name = os.path.splitext(name)[0]
    return _SEPARATORS.sub(" ", name)


def yaml_scalar(value: str) -> str:
    """Emit value as a plain YAML scalar when that reads back as the same string."""
    if (
        value.lower() in _YAML_RESERVED
        or value != value.strip()
        or value.startswith(_YAML_INDICATORS)
        or ": " in value
        or " #" in value
        or value.endswith(":")
        or _YAML_NUMBER.match(value)
        or any(ch < " " for ch in value)
    ):
        # a JSON string is a valid YAML double-quoted scalar
        return json.dumps(value, ensure_ascii=False)
    return value


def has_frontmatter(content: str) -> bool:
    return content.lstrip().lstrip(BOM).lstrip().startswith(FRONTMATTER_MARKER)


def generate_frontmatter(file_name: str) -> str:
    title = title_from_name(file_name)
    return f"{FRONTMATTER_MARKER}\ntitle: {yaml_scalar(title)}\n{FRONTMATTER_MARKER}\n\n"


def ensure_frontmatter(content: str, file_name: str) -> str:
    """Prefix a synthesized block unless the content already carries one."""
    if has_frontmatter(content):
        return content
    return generate_frontmatter(file_name) + content


def render_index(dir_name: str) -> str:
    """Body of the index page created for a folder without one."""
    title = title_from_name(dir_name, strip_extension=False)
    return (
        f"{FRONTMATTER_MARKER}\n"
        f"title: {yaml_scalar(title)}\n"
        "sidebar_position: 1\n"
        f"{FRONTMATTER_MARKER}\n"
        "\n"
        f"# {title}\n"
        "\n"
        f'This folder contains documentation on "{title}".\n'
        "\n"
        "## Contents\n"
        "\n"
        "Pick a section from the sidebar.\n"
    )


def render_sidebars(sidebar_id: str = "mainSidebar") -> str:
    """sidebars.js with one group autogenerated from the whole docs directory."""
    return f"""/**
 * Generated by docsync.
 *
 * The sidebar is autogenerated from the structure of the docs directory.
 * This file is written only when missing, so manual edits are kept.
 */

// @ts-check

/** @type {{import('@docusaurus/plugin-content-docs').SidebarsConfig}} */
const sidebars = {{
  {sidebar_id}: [
    {{
      type: 'autogenerated',
      dirName: '.',
    }},
  ],
}};

module.exports = sidebars;
"""


__all__ = [
    "FRONTMATTER_MARKER",
    "title_from_name",
    "has_frontmatter",
    "yaml_scalar",
    "generate_frontmatter",
    "ensure_frontmatter",
    "render_index",
    "render_sidebars",
]
