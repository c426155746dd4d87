"""매장 레포지토리.

Store Repository — Generic CRUD for stores.
"""

from backoffice.models.store import Store
from backoffice.repositories.base import BaseRepository


class StoreRepository(BaseRepository[Store]):
    """매장 레포지토리 (Store repository)."""

    def __init__(self) -> None:
        super().__init__(Store)


# 싱글턴 인스턴스 — Singleton instance
store_repository: StoreRepository = StoreRepository()
