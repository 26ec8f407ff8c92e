"""Terminal styling and the warning and success lines shown to the learner."""

from __future__ import annotations

import os
import sys

_COLORS = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
}
_RESET = "\x1b[0m"


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def paint(text: object, color: str | None = None, *, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI codes for ``color`` and boldness when colours are on."""
    text = str(text)
    if not _colors_enabled():
        return text
    codes = []
    if color is not None:
        codes.append(_COLORS[color])
    if bold:
        codes.append("1")
    if not codes:
        return text
    return "".join(f"\x1b[{code}m" for code in codes) + text + _RESET


def bold(text: object) -> str:
    """Return ``text`` styled in bold."""
    return paint(text, bold=True)


def warn(message: str) -> str:
    """Print a red warning line and return it."""
    prefix = "!" if _no_emoji() else "⚠️ "
    line = f"{paint(prefix, 'red')} {paint(message, 'red')}"
    print(line)
    return line


def success(message: str) -> str:
    """Print a green success line and return it."""
    prefix = "✓" if _no_emoji() else "✅"
    line = f"{paint(prefix, 'green')} {paint(message, 'green')}"
    print(line)
    return line