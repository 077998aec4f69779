# backend/tests/test_notifications_service.py

import asyncio
import logging

import pytest

from app.db.schema import bootstrap
from app.db.store import Store
from app.errors import NotFoundError
from app.notifications.schemas import NotificationIn
from app.notifications.service import NotificationService


def test_notification_service_create_and_mark_read(db_settings) -> None:
    """
    NotificationService を Store に直接つないで、作成→既読化の流れを確認する。
    """

    async def scenario():
        store = Store(db_settings)
        await store.connect()
        try:
            await bootstrap(store)
            service = NotificationService(store)
            created = await service.create_notification(NotificationIn(message="hi", user_id="1"))
            read_once = await service.mark_read(created.id)
            read_twice = await service.mark_read(created.id)
            listed = await service.list_notifications()
            return created, read_once, read_twice, listed
        finally:
            await store.close()

    created, read_once, read_twice, listed = asyncio.run(scenario())

    assert created.read is False
    assert read_once.read is True
    assert read_twice == read_once
    assert listed == [read_once]


def test_mark_read_missing_logs_warning(db_settings, caplog) -> None:
    """
    存在しない ID の既読化は NotFoundError になり、WARNING ログが出ることを確認。
    """

    async def scenario():
        store = Store(db_settings)
        await store.connect()
        try:
            await bootstrap(store)
            await NotificationService(store).mark_read(404)
        finally:
            await store.close()

    with caplog.at_level(logging.WARNING, logger="app.notifications.service"):
        with pytest.raises(NotFoundError):
            asyncio.run(scenario())

    warn_records = [
        r for r in caplog.records if r.levelno == logging.WARNING and "404" in r.getMessage()
    ]
    assert warn_records, "WARNING log should mention the missing id"
