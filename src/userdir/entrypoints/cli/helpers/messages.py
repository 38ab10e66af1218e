"""Terminal message helpers for the USERDIR CLI.

Status lines go to stderr so stdout stays machine-readable. Each line starts
with an emoji glyph, or an ASCII fallback when stderr cannot encode it.
"""

import click

_GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
}

_COLORS = {"warn": "yellow", "success": "green"}


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on the current stderr stream."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for `kind` ("warn" or "success")."""
    emoji, fallback = _GLYPHS[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    click.secho(f"{glyph(kind)}  {msg}", fg=_COLORS[kind], bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  Created user Alice.``
    """
    _emit("success", msg)
