"""
utils/text.py — Article text helpers: read time, excerpt, images, sanitizing.

Article bodies are HTML produced by the admin editor. These helpers work on
the raw string with regular expressions; they are display aids, not an HTML
parser.

Usage:
    read_time(article.content)          # "3 phút đọc"
    excerpt(article.content, 150)       # "Thủ tục công chứng hợp đồng..."
    sanitize_html(article.content)      # strips <script>, on* handlers, javascript:
"""

from __future__ import annotations

import math
import re

from notary_shared.time_utils import format_time_ago

__all__ = [
    "excerpt",
    "first_image",
    "format_time_ago",
    "placeholder_image",
    "read_time",
    "sanitize_html",
    "strip_tags",
]

WORDS_PER_MINUTE = 200

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")
_IMG_RE = re.compile(r'<img[^>]+src="([^">]+)"')
_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_HANDLER_QUOTED_RE = re.compile(r"""\s*on\w+\s*=\s*["'][^"']*["']""", re.IGNORECASE)
_HANDLER_BARE_RE = re.compile(r"\s*on\w+\s*=\s*[^\s>]*", re.IGNORECASE)
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)

_DEFAULT_PLACEHOLDER = "https://images.unsplash.com/photo-1557200134-90327ee9fafa?w=800&h=600&fit=crop"
_PLACEHOLDERS: dict[str, str] = {
    "Công chứng BĐS": "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=800&h=600&fit=crop",
    "Công chứng DN": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=800&h=600&fit=crop",
    "Thừa kế": "https://images.unsplash.com/photo-1589829545856-d10d557cf95f?w=800&h=600&fit=crop",
    "Chứng thực": "https://images.unsplash.com/photo-1450101499163-c8848c66ca85?w=800&h=600&fit=crop",
    "Hợp đồng": "https://images.unsplash.com/photo-1589829545856-d10d557cf95f?w=800&h=600&fit=crop",
    "Pháp luật": "https://images.unsplash.com/photo-1589994965851-a8f479c573a9?w=800&h=600&fit=crop",
}


def strip_tags(html: str) -> str:
    return _TAG_RE.sub("", html or "")


def read_time(html: str) -> str:
    words = strip_tags(html).split()
    return f"{math.ceil(len(words) / WORDS_PER_MINUTE)} phút đọc"


def first_image(html: str) -> str | None:
    match = _IMG_RE.search(html or "")
    return match.group(1) if match else None


def excerpt(html: str, max_length: int = 150) -> str:
    """Plain text, whitespace collapsed, cut at the last word boundary before max_length."""
    text = _WS_RE.sub(" ", strip_tags(html)).strip()
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    cut = truncated.rfind(" ")
    # a single overlong word is cut mid-word
    return (truncated[:cut] if cut > 0 else truncated) + "..."


def placeholder_image(category_name: str | None = None) -> str:
    return _PLACEHOLDERS.get(category_name or "", _DEFAULT_PLACEHOLDER)


def sanitize_html(html: str) -> str:
    sanitized = _SCRIPT_RE.sub("", html or "")
    sanitized = _STYLE_RE.sub("", sanitized)
    sanitized = _HANDLER_QUOTED_RE.sub("", sanitized)
    sanitized = _HANDLER_BARE_RE.sub("", sanitized)
    return _JS_PROTOCOL_RE.sub("", sanitized)
