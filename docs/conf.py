"""Sphinx configuration for flags-openfeature documentation."""

from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

from flags_openfeature import __version__  # noqa: E402

project = "flags-openfeature"
copyright = "flags-openfeature contributors"  # noqa: A001
author = "flags-openfeature contributors"
release = version = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx_copybutton",
    "sphinx_autodoc_typehints",
    "myst_parser",
]

exclude_patterns = ["_build"]
source_suffix = {".md": "markdown"}

# optional extras used by the contrib modules
autodoc_mock_imports = ["litestar", "anyio", "structlog"]
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "litestar": ("https://docs.litestar.dev/latest/", None),
}

# cross-references into the mocked integrations cannot resolve
suppress_warnings = ["ref.python"]

html_theme = "shibuya"
html_title = "flags-openfeature"
