# topmark:header:start
#
#   project      : DocForge
#   file         : version.py
#   file_relpath : src/docforge/utils/version.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Version utilities for DocForge: dotted version ordering and the update check."""

from __future__ import annotations

import re
from typing import Any, Final

import requests

from docforge.config.logging import DocforgeLogger, get_logger
from docforge.constants import UPDATE_CHECK_TIMEOUT

logger: DocforgeLogger = get_logger(__name__)

# Segments are separated by ".", "-", "_" or "+"; a leading "v" is ignored.
_SEGMENT_SPLIT_RE: re.Pattern[str] = re.compile(r"[.\-_+]")

# A pre-release segment: a label with an optional number ("rc2", "beta").
_LABEL_RE: re.Pattern[str] = re.compile(r"([a-z]+)(\d*)")

# Rank of well-known pre-release labels; unknown labels sort before all of them.
_LABEL_RANK: Final[dict[str, int]] = {
    "dev": 1,
    "alpha": 2,
    "a": 2,
    "beta": 3,
    "b": 3,
    "rc": 4,
}


def _split_version(version: str) -> list[str]:
    text: str = version.strip().lower()
    if text.startswith("v"):
        text = text[1:]
    return [seg for seg in _SEGMENT_SPLIT_RE.split(text) if seg]


def _label_key(segment: str) -> tuple[int, str, int]:
    match = _LABEL_RE.fullmatch(segment)
    if match is None:
        return (0, segment, 0)
    name, number = match.groups()
    return (_LABEL_RANK.get(name, 0), name, int(number or 0))


def _compare_segments(left: str | None, right: str | None) -> int:
    """Compare two segments at the same position (None means absent).

    Ordering: non-numeric label < absent < number. An absent segment counts as
    ``0`` against a number, so ``2.2`` equals ``2.2.0``.
    """
    if left is None and right is None:
        return 0
    if left is not None and left.isdigit() and right is not None and right.isdigit():
        return (int(left) > int(right)) - (int(left) < int(right))
    if left is None or right is None:
        present: str = left if left is not None else right  # type: ignore[assignment]
        sign: int = 1 if left is not None else -1
        if present.isdigit():
            return sign if int(present) > 0 else 0
        return -sign
    if left.isdigit():
        return 1
    if right.isdigit():
        return -1
    left_key = _label_key(left)
    right_key = _label_key(right)
    return (left_key > right_key) - (left_key < right_key)


def compare_versions(left: str, right: str) -> int:
    """Compare two dotted version strings.

    Numeric segments are compared as integers, left to right; the first
    differing segment decides. Missing trailing segments count as zero.
    A non-numeric segment (``beta``, ``rc1``) sorts before an absent segment
    and before any number, so ``2.2.0-beta`` < ``2.2.0`` < ``2.2.0.1``.
    Known pre-release labels order as ``dev`` < ``alpha`` < ``beta`` < ``rc``.

    Returns:
        int: ``-1`` if ``left < right``, ``0`` if equal, ``1`` if ``left > right``.
    """
    lhs: list[str] = _split_version(left)
    rhs: list[str] = _split_version(right)
    for index in range(max(len(lhs), len(rhs))):
        result: int = _compare_segments(
            lhs[index] if index < len(lhs) else None,
            rhs[index] if index < len(rhs) else None,
        )
        if result:
            return result
    return 0


def is_newer_version(candidate: str, current: str) -> bool:
    """Return True if ``candidate`` sorts strictly after ``current``."""
    return compare_versions(candidate, current) > 0


def fetch_latest_version(url: str, *, timeout: float = UPDATE_CHECK_TIMEOUT) -> str | None:
    """Fetch the latest published version string.

    Accepts either a PyPI-style JSON document (``{"info": {"version": ...}}``)
    or a plain-text body holding just the version.

    Args:
        url (str): Endpoint to query.
        timeout (float): Connect and read timeout in seconds.

    Returns:
        str | None: The version string, or None on any failure (network errors,
            HTTP errors, unexpected payloads). Failures are logged, never raised.
    """
    if not url:
        return None
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content_type: str = response.headers.get("Content-Type", "")
        if "json" in content_type:
            payload: Any = response.json()
            version: Any = payload.get("info", {}).get("version") if isinstance(payload, dict) else None
        else:
            version = response.text
    except (requests.RequestException, ValueError, AttributeError) as exc:
        logger.debug("Update check against %s failed: %s", url, exc)
        return None
    if not isinstance(version, str) or not version.strip():
        logger.debug("Update check against %s returned no version", url)
        return None
    return version.strip()


def check_for_update(
    current: str, url: str, *, timeout: float = UPDATE_CHECK_TIMEOUT
) -> str | None:
    """Return the latest version if it is newer than ``current``, else None."""
    latest: str | None = fetch_latest_version(url, timeout=timeout)
    if latest is None:
        return None
    logger.debug("Latest published version: %s (running %s)", latest, current)
    return latest if is_newer_version(latest, current) else None
