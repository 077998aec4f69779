# backend/app/projects/router.py

from typing import List

from fastapi import APIRouter, Depends

from app.db.deps import get_store
from app.db.store import Store
from app.schemas import MessageResponse

from .schemas import Project, ProjectIn
from .service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


def get_project_service(store: Store = Depends(get_store)) -> ProjectService:
    return ProjectService(store)


@router.get("", response_model=List[Project], summary="プロジェクト一覧")
async def list_projects(service: ProjectService = Depends(get_project_service)) -> List[Project]:
    return await service.list_projects()


@router.post("", response_model=Project, summary="プロジェクト作成")
async def create_project(
    body: ProjectIn,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    return await service.create_project(body)


@router.put("/{project_id}", response_model=Project, summary="プロジェクト更新（全項目置き換え）")
async def update_project(
    project_id: int,
    body: ProjectIn,
    service: ProjectService = Depends(get_project_service),
) -> Project:
    return await service.update_project(project_id, body)


@router.delete("/{project_id}", response_model=MessageResponse, summary="プロジェクト削除（タスクも削除）")
async def delete_project(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
) -> MessageResponse:
    await service.delete_project(project_id)
    return MessageResponse(message="Project deleted")
