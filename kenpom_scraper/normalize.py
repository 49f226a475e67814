"""Shared cleanup of decorated KenPom cell text.

Team cells on ratings-style pages carry the NCAA tournament seed appended to
the name (``Duke 1``), and arena cells carry the capacity in parentheses
(``Cameron Indoor Stadium (9314)``).  These helpers split such cells apart
without ever raising; text that does not match is passed through.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

_DIGITS_RE = re.compile(r"\d+")
_CAPACITY_RE = re.compile(r"^(.+?)\s*\((\d+)\)$")
_PARENTHETICAL_RE = re.compile(r"^(.+?)\s*\((.+)\)$")


def strip_seed(team: Optional[str]) -> str:
    """Remove the tournament seed from a team cell.

    Examples::

        >>> strip_seed("Duke 1")
        'Duke'
        >>> strip_seed("North Carolina")
        'North Carolina'
        >>> strip_seed(None)
        ''
    """
    if not team:
        return ""
    return _DIGITS_RE.sub("", team).strip()


def extract_seed(team: Optional[str]) -> Optional[str]:
    """Return the first run of digits in a team cell, or ``None``.

    Examples::

        >>> extract_seed("Duke 16")
        '16'
        >>> extract_seed("Duke") is None
        True
    """
    if not team:
        return None
    match = _DIGITS_RE.search(team)
    return match.group(0) if match else None


def split_team_seed(row: Dict[str, str], key: str = "Team") -> Dict[str, str]:
    """Copy of ``row`` with ``key`` seed-stripped and a ``Seed`` column added."""
    out = dict(row)
    seed = extract_seed(row.get(key))
    out[key] = strip_seed(row.get(key))
    out["Seed"] = seed or ""
    return out


def split_capacity(text: Optional[str]) -> Tuple[str, str]:
    """Split ``"Name (1234)"`` into ``("Name", "1234")``.

    Text without a trailing numeric capacity comes back unchanged with an
    empty capacity.
    """
    raw = text or ""
    match = _CAPACITY_RE.match(raw)
    if not match:
        return raw, ""
    return match.group(1).strip(), match.group(2)


def split_parenthetical(text: Optional[str]) -> Tuple[str, str]:
    """Split ``"Durham (Cameron Indoor)"`` into ``("Durham", "Cameron Indoor")``."""
    raw = text or ""
    match = _PARENTHETICAL_RE.match(raw)
    if not match:
        return raw, ""
    return match.group(1).strip(), match.group(2)
