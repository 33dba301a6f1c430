"""Key-value repository protocol for locally persisted documents."""

from typing import Optional, Protocol


class KeyValueRepository(Protocol):
    """Opaque synchronous get/set store for serialized documents."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key was never written."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value under ``key``."""
        ...
