import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from app.common.clock import Clock, IdGenerator
from app.common.errors import NotFoundError, ValidationError
from app.common.validation import require_text
from app.requisitions.application.ports import PurchaseRequisitionRepository
from app.requisitions.domain.models import (
    ApprovalAction,
    PurchaseRequisition,
    RequisitionItem,
    RequisitionStatus,
)
from app.requisitions.domain.workflow import (
    apply_action,
    ensure_draft,
    total_matches_items,
    validate_items,
    validate_total,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequisitionItemInput:
    description: str
    quantity: int
    estimated_cost: float


@dataclass(frozen=True)
class CreateRequisitionCommand:
    requested_by: str
    department: str
    items: Sequence[RequisitionItemInput]
    total_estimated_cost: float
    justification: str


@dataclass(frozen=True)
class UpdateRequisitionCommand:
    requisition_id: str
    items: Sequence[RequisitionItemInput]
    total_estimated_cost: float
    justification: str


@dataclass(frozen=True)
class ApprovalDecisionCommand:
    requisition_id: str
    approver_name: str
    comments: str = ""


def _to_items(items: Sequence[RequisitionItemInput]) -> Sequence[RequisitionItem]:
    return validate_items(
        [
            RequisitionItem(
                description=item.description,
                quantity=item.quantity,
                estimated_cost=item.estimated_cost,
            )
            for item in items
        ]
    )


def _check_total(
    items: Sequence[RequisitionItem], total_estimated_cost: float, enforce: bool
) -> float:
    total = validate_total(total_estimated_cost)
    if not total_matches_items(items, total):
        expected = sum(item.line_total for item in items)
        if enforce:
            raise ValidationError(
                f"Total estimated cost {total:.2f} does not match the item total {expected:.2f}"
            )
        logger.warning(
            f"Requisition total {total:.2f} differs from item total {expected:.2f}; "
            "keeping the supplied value"
        )
    return total


async def _load_for_update(
    repository: PurchaseRequisitionRepository, requisition_id: str
) -> PurchaseRequisition:
    requisition = await repository.get_for_update(requisition_id)
    if requisition is None:
        raise NotFoundError(f"Purchase requisition {requisition_id} not found")
    return requisition


class CreatePurchaseRequisitionUseCase:
    def __init__(
        self,
        repository: PurchaseRequisitionRepository,
        id_generator: IdGenerator,
        clock: Clock,
        enforce_totals: bool = False,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock
        self._enforce_totals = enforce_totals

    async def execute(self, command: CreateRequisitionCommand) -> PurchaseRequisition:
        requested_by = require_text(command.requested_by, "Requester name")
        department = require_text(command.department, "Department")
        justification = require_text(command.justification, "Justification")
        items = _to_items(command.items)
        total = _check_total(items, command.total_estimated_cost, self._enforce_totals)

        now = self._clock()
        requisition = PurchaseRequisition(
            id=self._id_generator(),
            requested_by=requested_by,
            department=department,
            total_estimated_cost=total,
            justification=justification,
            status=RequisitionStatus.DRAFT,
            created_at=now,
            updated_at=now,
            items=items,
            approval_history=(),
        )

        await self._repository.add(requisition)
        await self._repository.commit()

        logger.info(f"Created purchase requisition {requisition.id} for {department}")
        return requisition


class UpdatePurchaseRequisitionUseCase:
    def __init__(
        self,
        repository: PurchaseRequisitionRepository,
        clock: Clock,
        enforce_totals: bool = False,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._enforce_totals = enforce_totals

    async def execute(self, command: UpdateRequisitionCommand) -> PurchaseRequisition:
        justification = require_text(command.justification, "Justification")
        items = _to_items(command.items)
        total = _check_total(items, command.total_estimated_cost, self._enforce_totals)

        requisition = await _load_for_update(self._repository, command.requisition_id)
        ensure_draft(requisition, "edit")

        updated = replace(
            requisition,
            items=items,
            total_estimated_cost=total,
            justification=justification,
            updated_at=self._clock(),
        )
        await self._repository.update(updated)
        await self._repository.replace_items(updated.id, updated.items)
        await self._repository.commit()

        logger.info(f"Updated purchase requisition {updated.id}")
        return updated


class DeletePurchaseRequisitionUseCase:
    def __init__(self, repository: PurchaseRequisitionRepository) -> None:
        self._repository = repository

    async def execute(self, requisition_id: str) -> None:
        requisition = await _load_for_update(self._repository, requisition_id)
        ensure_draft(requisition, "delete")

        await self._repository.delete(requisition_id)
        await self._repository.commit()

        logger.info(f"Deleted purchase requisition {requisition_id}")


class _TransitionUseCase:
    action: ApprovalAction

    def __init__(self, repository: PurchaseRequisitionRepository, clock: Clock) -> None:
        self._repository = repository
        self._clock = clock

    async def _transition(
        self, requisition: PurchaseRequisition, approver_name: str, comments: str
    ) -> PurchaseRequisition:
        updated = apply_action(
            requisition, self.action, approver_name, comments, self._clock()
        )
        await self._repository.update(updated)
        await self._repository.append_approval_record(
            updated.id, len(updated.approval_history) - 1, updated.approval_history[-1]
        )
        await self._repository.commit()

        logger.info(
            f"Purchase requisition {updated.id} {self.action.value} by {approver_name}: "
            f"{requisition.status.value} -> {updated.status.value}"
        )
        return updated


class SubmitForApprovalUseCase(_TransitionUseCase):
    action = ApprovalAction.SUBMITTED

    async def execute(self, requisition_id: str) -> PurchaseRequisition:
        requisition = await _load_for_update(self._repository, requisition_id)
        return await self._transition(requisition, requisition.requested_by or "system", "")


class ApprovePurchaseRequisitionUseCase(_TransitionUseCase):
    action = ApprovalAction.APPROVED

    async def execute(self, command: ApprovalDecisionCommand) -> PurchaseRequisition:
        approver_name = require_text(command.approver_name, "Approver name")
        comments = (command.comments or "").strip()

        requisition = await _load_for_update(self._repository, command.requisition_id)
        return await self._transition(requisition, approver_name, comments)


class RejectPurchaseRequisitionUseCase(_TransitionUseCase):
    action = ApprovalAction.REJECTED

    async def execute(self, command: ApprovalDecisionCommand) -> PurchaseRequisition:
        approver_name = require_text(command.approver_name, "Approver name")
        comments = require_text(command.comments, "A rejection reason")

        requisition = await _load_for_update(self._repository, command.requisition_id)
        return await self._transition(requisition, approver_name, comments)


class GetPurchaseRequisitionUseCase:
    def __init__(self, repository: PurchaseRequisitionRepository) -> None:
        self._repository = repository

    async def execute(self, requisition_id: str) -> Optional[PurchaseRequisition]:
        return await self._repository.get(requisition_id)


class ListPurchaseRequisitionsUseCase:
    def __init__(self, repository: PurchaseRequisitionRepository) -> None:
        self._repository = repository

    async def execute(
        self, status: Optional[RequisitionStatus] = None
    ) -> Sequence[PurchaseRequisition]:
        return await self._repository.list(status)


class ListPendingRequisitionsUseCase(ListPurchaseRequisitionsUseCase):
    async def execute(self) -> Sequence[PurchaseRequisition]:
        return await super().execute(RequisitionStatus.PENDING_APPROVAL)
