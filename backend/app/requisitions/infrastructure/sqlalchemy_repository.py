import uuid
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.requisitions.application.ports import PurchaseRequisitionRepository
from app.requisitions.domain.models import (
    ApprovalAction,
    ApprovalRecord,
    PurchaseRequisition,
    RequisitionItem,
    RequisitionStatus,
)
from database import (
    ApprovalRecord as ApprovalRecordModel,
    PurchaseRequisition as PurchaseRequisitionModel,
    PurchaseRequisitionItem as PurchaseRequisitionItemModel,
)


class SqlAlchemyPurchaseRequisitionRepository(PurchaseRequisitionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, requisition_id: str) -> Optional[PurchaseRequisition]:
        result = await self._session.execute(
            select(PurchaseRequisitionModel).where(
                PurchaseRequisitionModel.id == requisition_id
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return (await self._hydrate([row]))[0]

    async def get_for_update(self, requisition_id: str) -> Optional[PurchaseRequisition]:
        result = await self._session.execute(
            select(PurchaseRequisitionModel)
            .where(PurchaseRequisitionModel.id == requisition_id)
            .with_for_update()
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return (await self._hydrate([row]))[0]

    async def add(self, requisition: PurchaseRequisition) -> None:
        self._session.add(
            PurchaseRequisitionModel(
                id=requisition.id,
                requested_by=requisition.requested_by,
                department=requisition.department,
                total_estimated_cost=requisition.total_estimated_cost,
                justification=requisition.justification,
                status=requisition.status.value,
                created_at=requisition.created_at,
                updated_at=requisition.updated_at,
            )
        )
        # Parent row must exist before its items reference it
        await self._session.flush()
        self._add_items(requisition.id, requisition.items)

    async def update(self, requisition: PurchaseRequisition) -> None:
        await self._session.execute(
            update(PurchaseRequisitionModel)
            .where(PurchaseRequisitionModel.id == requisition.id)
            .values(
                status=requisition.status.value,
                total_estimated_cost=requisition.total_estimated_cost,
                justification=requisition.justification,
                updated_at=requisition.updated_at,
            )
        )

    async def replace_items(
        self, requisition_id: str, items: Sequence[RequisitionItem]
    ) -> None:
        await self._session.execute(
            delete(PurchaseRequisitionItemModel).where(
                PurchaseRequisitionItemModel.requisition_id == requisition_id
            )
        )
        self._add_items(requisition_id, items)

    async def append_approval_record(
        self, requisition_id: str, sequence: int, record: ApprovalRecord
    ) -> None:
        self._session.add(
            ApprovalRecordModel(
                id=str(uuid.uuid4()),
                requisition_id=requisition_id,
                sequence=sequence,
                action=record.action.value,
                approver_name=record.approver_name,
                comments=record.comments,
                timestamp=record.timestamp,
            )
        )

    async def delete(self, requisition_id: str) -> None:
        await self._session.execute(
            delete(ApprovalRecordModel).where(
                ApprovalRecordModel.requisition_id == requisition_id
            )
        )
        await self._session.execute(
            delete(PurchaseRequisitionItemModel).where(
                PurchaseRequisitionItemModel.requisition_id == requisition_id
            )
        )
        await self._session.execute(
            delete(PurchaseRequisitionModel).where(
                PurchaseRequisitionModel.id == requisition_id
            )
        )

    async def list(
        self, status: Optional[RequisitionStatus] = None
    ) -> Sequence[PurchaseRequisition]:
        query = select(PurchaseRequisitionModel)
        if status is not None:
            query = query.where(PurchaseRequisitionModel.status == status.value)
        query = query.order_by(
            desc(PurchaseRequisitionModel.created_at), PurchaseRequisitionModel.id
        )

        result = await self._session.execute(query)
        return await self._hydrate(result.scalars().all())

    async def commit(self) -> None:
        await self._session.commit()

    def _add_items(self, requisition_id: str, items: Sequence[RequisitionItem]) -> None:
        for index, item in enumerate(items):
            self._session.add(
                PurchaseRequisitionItemModel(
                    id=str(uuid.uuid4()),
                    requisition_id=requisition_id,
                    description=item.description,
                    quantity=item.quantity,
                    estimated_cost=item.estimated_cost,
                    item_index=index,
                )
            )

    async def _hydrate(
        self, rows: Sequence[PurchaseRequisitionModel]
    ) -> List[PurchaseRequisition]:
        requisition_ids = [row.id for row in rows]
        items_by_requisition: Dict[str, List[RequisitionItem]] = {}
        records_by_requisition: Dict[str, List[ApprovalRecord]] = {}

        if requisition_ids:
            items_result = await self._session.execute(
                select(PurchaseRequisitionItemModel)
                .where(PurchaseRequisitionItemModel.requisition_id.in_(requisition_ids))
                .order_by(
                    PurchaseRequisitionItemModel.requisition_id,
                    PurchaseRequisitionItemModel.item_index,
                )
            )
            for item in items_result.scalars().all():
                items_by_requisition.setdefault(item.requisition_id, []).append(
                    RequisitionItem(
                        description=item.description,
                        quantity=item.quantity,
                        estimated_cost=item.estimated_cost,
                    )
                )

            records_result = await self._session.execute(
                select(ApprovalRecordModel)
                .where(ApprovalRecordModel.requisition_id.in_(requisition_ids))
                .order_by(ApprovalRecordModel.requisition_id, ApprovalRecordModel.sequence)
            )
            for record in records_result.scalars().all():
                records_by_requisition.setdefault(record.requisition_id, []).append(
                    ApprovalRecord(
                        action=ApprovalAction(record.action),
                        approver_name=record.approver_name,
                        comments=record.comments or "",
                        timestamp=record.timestamp,
                    )
                )

        return [
            PurchaseRequisition(
                id=row.id,
                requested_by=row.requested_by,
                department=row.department,
                total_estimated_cost=row.total_estimated_cost,
                justification=row.justification,
                status=RequisitionStatus(row.status),
                created_at=row.created_at,
                updated_at=row.updated_at,
                items=tuple(items_by_requisition.get(row.id, [])),
                approval_history=tuple(records_by_requisition.get(row.id, [])),
            )
            for row in rows
        ]
