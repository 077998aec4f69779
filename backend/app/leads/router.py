# backend/app/leads/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store
from app.schemas import MessageResponse

from .schemas import InteractionIn, Lead, LeadIn
from .service import LeadService

router = APIRouter(prefix="/api/leads", tags=["leads"])


def get_lead_service(store: Store = Depends(get_store)) -> LeadService:
    return LeadService(store)


@router.get("", response_model=List[Lead], summary="リード一覧")
async def list_leads(service: LeadService = Depends(get_lead_service)) -> List[Lead]:
    return await service.list_leads()


@router.post("", response_model=Lead, summary="リード作成")
async def create_lead(
    body: LeadIn,
    service: LeadService = Depends(get_lead_service),
) -> Lead:
    return await service.create_lead(body)


@router.put("/{lead_id}", response_model=Lead, summary="リード更新（全項目置き換え、createdAt は保持）")
async def update_lead(
    lead_id: int,
    body: LeadIn,
    service: LeadService = Depends(get_lead_service),
) -> Lead:
    return await service.update_lead(lead_id, body)


@router.delete("/{lead_id}", response_model=MessageResponse, summary="リード削除")
async def delete_lead(
    lead_id: int,
    service: LeadService = Depends(get_lead_service),
) -> MessageResponse:
    await service.delete_lead(lead_id)
    return MessageResponse(message="Lead deleted")


@router.post(
    "/{lead_id}/interactions",
    response_model=Lead,
    summary="リードにインタラクションを追加",
)
async def add_interaction(
    lead_id: int,
    body: InteractionIn,
    service: LeadService = Depends(get_lead_service),
) -> Lead:
    """
    interactions の末尾に {id, text, user: "admin", timestamp} を追加する。

    - 存在しないリード ID → 404
    - text が空 → 400
    """
    return await service.add_interaction(lead_id, body.text)
