"""Utilities for preparing HTML snippets before rendering in Streamlit."""
import html
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks. We dedent and strip leading whitespace on each line.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def escape_html(value: object) -> str:
    """Escape user-submitted text before embedding it in markup."""
    return html.escape("" if value is None else str(value), quote=True)


def stat_card(label: str, value: object) -> str:
    """Render a dashboard stat card."""
    return html_block(
        f"""
        <div class="stat-card">
            <div class="stat-value">{escape_html(value)}</div>
            <div class="stat-label">{escape_html(label)}</div>
        </div>
        """
    )
