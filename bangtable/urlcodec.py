"""Percent-encoding helpers for text sent over the network."""

from urllib.parse import quote, unquote_plus


def url_encode(text: str) -> str:
    """Percent-encode everything but unreserved characters, using UTF-8."""
    return quote(text, safe="", encoding="utf-8")


def url_decode(text: str) -> str:
    """Undo percent-encoding; '+' is read as a space."""
    return unquote_plus(text, encoding="utf-8")