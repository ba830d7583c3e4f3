"""URL and path string helpers."""

from urllib.parse import unquote


def unescape(raw: str) -> str:
    """Percent-decode a string once.

    Invalid escape sequences are left untouched and ``+`` is not treated as
    a space, since it is a legal character in media file names. When the
    escapes decode to invalid UTF-8 the input is returned unchanged.
    """
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError:
        return raw


def transfer_slash(path: str) -> str:
    """Convert Windows backslashes to forward slashes."""
    return path.replace("\\", "/")
