"""Telegram Markdown (v1) helpers."""

import re

_BOLD = re.compile(r"<(strong|b)>(.*?)</\1>", re.IGNORECASE | re.DOTALL)
_ITALIC = re.compile(r"<(em|i)>(.*?)</\1>", re.IGNORECASE | re.DOTALL)
_PARAGRAPH_END = re.compile(r"</p>\s*", re.IGNORECASE)
_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]*>")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def html_to_markdown(html: str) -> str:
    """Convert simple HTML to Telegram Markdown v1.

    ``<strong>``/``<b>`` become ``*bold*``, ``<em>``/``<i>`` become
    ``_italic_``, ``</p>`` ends a paragraph, ``<br>`` is a newline and every
    other tag is stripped.

    Example:
        html_to_markdown("<p>Hello <b>world</b></p>")  # "Hello *world*"
    """
    text = _BOLD.sub(r"*\2*", html)
    text = _ITALIC.sub(r"_\2_", text)
    text = _PARAGRAPH_END.sub("\n\n", text)
    text = _LINE_BREAK.sub("\n", text)
    text = _ANY_TAG.sub("", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def escape_markdown(text: str) -> str:
    """Backslash-escape the Markdown v1 control characters ``_ * ` [``."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)
