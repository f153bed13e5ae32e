# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thread-safe accumulator of canonical license keys."""

from __future__ import annotations

import threading
from collections.abc import Iterable


class KeySetBuilder:
    """Collect canonical keys from concurrent producers for a single run."""

    def __init__(self) -> None:
        self._keys: set[str] = set()
        self._lock = threading.Lock()

    def add(self, key: str) -> None:
        """Insert ``key``; inserting an existing key is a no-op.

        Args:
            key: Canonical license key discovered for an artifact.
        """

        with self._lock:
            self._keys.add(key)

    def update(self, keys: Iterable[str]) -> None:
        """Insert every key from ``keys``.

        Args:
            keys: Canonical license keys to add.
        """

        batch = list(keys)
        with self._lock:
            self._keys.update(batch)

    def sorted_keys(self) -> list[str]:
        """Return a lexicographically sorted snapshot of the collected keys.

        Returns:
            list[str]: Deduplicated keys in sorted order.
        """

        with self._lock:
            return sorted(self._keys)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)


__all__ = ["KeySetBuilder"]
