# backend/app/leads/service.py

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from app.db.codec import decode_records, encode_records
from app.db.store import Executor, Row, Store
from app.errors import DatabaseError, NotFoundError
from app.utils.clock import new_id, utc_now_iso

from .schemas import INTERACTION_USER, Interaction, Lead, LeadIn

logger = logging.getLogger(__name__)


def lead_from_row(row: Row) -> Lead:
    data: Dict[str, Any] = dict(row)
    data["interactions"] = decode_records(row.get("interactions"), Interaction, field="interactions")
    return Lead.model_validate(data)


def _to_real(value: Optional[Decimal]) -> Optional[float]:
    # sqlite3 は Decimal をバインドできない
    return float(value) if value is not None else None


def _lead_params(data: LeadIn) -> Tuple[Any, ...]:
    return (
        data.name,
        data.email,
        data.phone,
        data.classification,
        data.status,
        data.responsible,
        data.source,
        _to_real(data.estimated_value),
        data.reminder,
        encode_records(data.interactions),
    )


class LeadService:
    """
    leads テーブルの CRUD とインタラクション追加。

    インタラクション追加は read-modify-write なので、読み出しから書き戻しまでを
    1 トランザクションで行う（同時リクエストによる更新の取りこぼしを防ぐ）。
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    async def _get(self, executor: Executor, lead_id: int) -> Lead:
        row = await executor.fetch_one("SELECT * FROM leads WHERE id = ?", (lead_id,))
        if row is None:
            raise NotFoundError("Lead", lead_id)
        return lead_from_row(row)

    async def list_leads(self) -> List[Lead]:
        rows = await self._store.fetch_all("SELECT * FROM leads ORDER BY id")
        return [lead_from_row(row) for row in rows]

    async def create_lead(self, data: LeadIn) -> Lead:
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "INSERT INTO leads (name, email, phone, classification, status, responsible, source, "
                "estimatedValue, reminder, interactions, createdAt) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                _lead_params(data) + (utc_now_iso(),),
            )
            if result.last_id is None:
                raise DatabaseError("Insert into leads did not return an id.")
            lead = await self._get(tx, result.last_id)

        logger.info("Created lead %s.", lead.id)
        return lead

    async def update_lead(self, lead_id: int, data: LeadIn) -> Lead:
        """createdAt 以外の全項目を置き換える。返り値の createdAt は保存済みの値。"""
        async with self._store.transaction() as tx:
            result = await tx.execute(
                "UPDATE leads SET name = ?, email = ?, phone = ?, classification = ?, status = ?, "
                "responsible = ?, source = ?, estimatedValue = ?, reminder = ?, interactions = ? WHERE id = ?",
                _lead_params(data) + (lead_id,),
            )
            if result.rowcount == 0:
                logger.warning("Update of missing lead %s.", lead_id)
                raise NotFoundError("Lead", lead_id)
            return await self._get(tx, lead_id)

    async def delete_lead(self, lead_id: int) -> None:
        async with self._store.transaction() as tx:
            result = await tx.execute("DELETE FROM leads WHERE id = ?", (lead_id,))
            if result.rowcount == 0:
                logger.warning("Delete of missing lead %s.", lead_id)
                raise NotFoundError("Lead", lead_id)
        logger.info("Deleted lead %s.", lead_id)

    async def add_interaction(self, lead_id: int, text: str) -> Lead:
        """
        リードの interactions 末尾に 1 件追加して、更新後のリードを返す。

        存在しないリード ID の場合は NotFoundError。
        """
        interaction = Interaction(
            id=new_id(),
            text=text,
            user=INTERACTION_USER,
            timestamp=utc_now_iso(),
        )

        async with self._store.transaction() as tx:
            row = await tx.fetch_one("SELECT interactions FROM leads WHERE id = ?", (lead_id,))
            if row is None:
                logger.warning("Interaction for missing lead %s.", lead_id)
                raise NotFoundError("Lead", lead_id)

            interactions = decode_records(row["interactions"], Interaction, field="interactions")
            interactions.append(interaction)
            await tx.execute(
                "UPDATE leads SET interactions = ? WHERE id = ?",
                (encode_records(interactions), lead_id),
            )
            lead = await self._get(tx, lead_id)

        logger.info("Added interaction %s to lead %s.", interaction.id, lead_id)
        return lead
