"""
Hashing utilities for catalog fingerprints.
"""

from __future__ import annotations

import hashlib


def sha256_hash(content: str | bytes) -> str:
    """Return the SHA-256 hex digest of the given content."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def fingerprint(version: str, content: str | bytes, length: int = 12) -> str:
    """Version label plus a short content digest, e.g. '2025.1+3f9a0c1d2e4b'."""
    return f"{version}+{sha256_hash(content)[:length]}"
