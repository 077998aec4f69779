# backend/app/db/deps.py

"""
ルーターから Store を受け取るための依存関数。

テストでは app.dependency_overrides[get_store] で差し替えられる。
"""

from fastapi import Request

from app.errors import DatabaseError

from .store import Store


def get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise DatabaseError("Database is not initialised.")
    return store
