"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Lines with 4+ leading spaces render as code blocks, so every line is
    dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def status_label(message: str, color: str) -> str:
    """Render a colored status line."""
    return html_block(f"""
        <p class="parking-status" style="color: {color}; font-weight: 600; margin: 8px 0;">
            {escape(message)}
        </p>
    """)
