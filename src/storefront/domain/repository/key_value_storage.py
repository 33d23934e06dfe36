"""Abstract key-value storage.

Models browser-style storage: string keys mapped to string values.
Defined in the domain layer so the cart and checkout never depend on a
concrete backend.  Implementations raise ``StorageError`` on any
failure (quota, unavailable, I/O).
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*; no-op if absent."""
