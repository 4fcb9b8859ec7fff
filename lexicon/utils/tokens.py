"""Stable tokens identifying a (source, domain, locale) lookup."""

from __future__ import annotations

import hashlib


def _encode(*parts: str) -> str:
    # Length prefixes keep ("a_b", "c") and ("a", "b_c") apart.
    return "".join(f"{len(part)}:{part}" for part in parts)


def translation_token(source: str, domain: str, locale: str) -> str:
    """Return the 32-char MD5 hex digest of the length-prefixed triple."""

    payload = _encode(source, domain, locale)
    return hashlib.md5(payload.encode("utf-8"), usedforsecurity=False).hexdigest()


__all__ = ["translation_token"]
