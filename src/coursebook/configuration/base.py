"""Protocol definitions for configuration objects.

Storage configurations are structural: any frozen dataclass with a matching
``build_stores`` satisfies ``StorageConfig`` without inheriting from it.
The stores themselves are ABCs (see ``coursebook.stores.base``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from coursebook.stores import ChapterStore, UserStore


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_stores(self) -> tuple[ChapterStore, UserStore]: ...
    """

    def build_stores(self) -> tuple[ChapterStore, UserStore]:
        """Build the chapter store and the user store."""
        ...
