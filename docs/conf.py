# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
from pathlib import Path

# autodoc imports phq from the source tree when it is not installed.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'phq'
copyright = '2026, PhQ contributors'
author = 'PhQ contributors'
html_title = 'PhQ Docs'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "top_of_page_buttons": ["view"],

    # Unit tables are wide; keep the brand colours readable in both modes.
    "light_css_variables": {
        "color-brand-primary": "#2f6f4f",
        "color-brand-content": "#1d4a33",
    },
    "dark_css_variables": {
        "color-brand-primary": "#7fc8a1",
        "color-brand-content": "#b6e3c9",
    },
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
