from typing import Optional, Protocol, Sequence

from app.requisitions.domain.models import (
    ApprovalRecord,
    PurchaseRequisition,
    RequisitionItem,
    RequisitionStatus,
)


class PurchaseRequisitionRepository(Protocol):
    async def get(self, requisition_id: str) -> Optional[PurchaseRequisition]:
        ...

    async def get_for_update(self, requisition_id: str) -> Optional[PurchaseRequisition]:
        """Load a requisition and lock it until the transaction ends."""
        ...

    async def add(self, requisition: PurchaseRequisition) -> None:
        ...

    async def update(self, requisition: PurchaseRequisition) -> None:
        """Write status, total, justification and update timestamp."""
        ...

    async def replace_items(
        self, requisition_id: str, items: Sequence[RequisitionItem]
    ) -> None:
        ...

    async def append_approval_record(
        self, requisition_id: str, sequence: int, record: ApprovalRecord
    ) -> None:
        ...

    async def delete(self, requisition_id: str) -> None:
        ...

    async def list(
        self, status: Optional[RequisitionStatus] = None
    ) -> Sequence[PurchaseRequisition]:
        ...

    async def commit(self) -> None:
        ...
