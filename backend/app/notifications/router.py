# backend/app/notifications/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store

from .schemas import Notification, NotificationIn
from .service import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def get_notification_service(store: Store = Depends(get_store)) -> NotificationService:
    return NotificationService(store)


@router.get("", response_model=List[Notification], summary="通知一覧")
async def list_notifications(
    service: NotificationService = Depends(get_notification_service),
) -> List[Notification]:
    return await service.list_notifications()


@router.post("", response_model=Notification, summary="通知作成")
async def create_notification(
    body: NotificationIn,
    service: NotificationService = Depends(get_notification_service),
) -> Notification:
    return await service.create_notification(body)


@router.put("/{notification_id}", response_model=Notification, summary="通知を既読にする")
async def mark_notification_read(
    notification_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> Notification:
    """ボディは不要。既に既読でも 200 を返す。"""
    return await service.mark_read(notification_id)
