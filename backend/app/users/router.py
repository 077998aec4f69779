# backend/app/users/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store

from .schemas import User, UserRegisterRequest, UserRegisterResponse
from .service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_service(store: Store = Depends(get_store)) -> UserService:
    return UserService(store)


@router.get("", response_model=List[User], summary="ユーザー一覧")
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    return await service.list_users()


@router.post("/register", response_model=UserRegisterResponse, summary="ユーザー登録")
async def register_user(
    body: UserRegisterRequest,
    service: UserService = Depends(get_user_service),
) -> UserRegisterResponse:
    """
    新しいユーザーを登録する。

    - 同じ username が既に存在する → 400 (conflict)
    - 必須項目の不足 → 400 (validation_error)
    """
    return await service.register_user(body)
