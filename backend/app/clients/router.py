# backend/app/clients/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store
from app.schemas import MessageResponse

from .schemas import Client, ClientIn
from .service import ClientService

router = APIRouter(prefix="/api/clients", tags=["clients"])


def get_client_service(store: Store = Depends(get_store)) -> ClientService:
    return ClientService(store)


@router.get("", response_model=List[Client], summary="クライアント一覧")
async def list_clients(service: ClientService = Depends(get_client_service)) -> List[Client]:
    return await service.list_clients()


@router.post("", response_model=Client, summary="クライアント作成")
async def create_client(
    body: ClientIn,
    service: ClientService = Depends(get_client_service),
) -> Client:
    return await service.create_client(body)


@router.put("/{client_id}", response_model=Client, summary="クライアント更新（全項目置き換え）")
async def update_client(
    client_id: int,
    body: ClientIn,
    service: ClientService = Depends(get_client_service),
) -> Client:
    return await service.update_client(client_id, body)


@router.delete("/{client_id}", response_model=MessageResponse, summary="クライアント削除（プロジェクトも削除）")
async def delete_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> MessageResponse:
    """
    クライアントを削除し、そのクライアントに紐づくプロジェクトも同じトランザクションで削除する。

    - 存在しない ID → 404
    """
    await service.delete_client(client_id)
    return MessageResponse(message="Client deleted")
