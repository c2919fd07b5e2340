"""
Purchase requisition lifecycle.

    draft --submitted--> pending_approval --approved--> approved
                                         `--rejected--> rejected

Every transition yields a new requisition with the next status, the bumped
update timestamp and exactly one appended approval record.
"""
from dataclasses import replace
from typing import Mapping, Sequence, Tuple

from app.common.errors import InvalidStateError, ValidationError
from app.common.validation import require_non_negative, require_positive_int, require_text
from app.requisitions.domain.models import (
    STATUS_LABELS,
    ApprovalAction,
    ApprovalRecord,
    PurchaseRequisition,
    RequisitionItem,
    RequisitionStatus,
)

TRANSITIONS: Mapping[Tuple[RequisitionStatus, ApprovalAction], RequisitionStatus] = {
    (RequisitionStatus.DRAFT, ApprovalAction.SUBMITTED): RequisitionStatus.PENDING_APPROVAL,
    (RequisitionStatus.PENDING_APPROVAL, ApprovalAction.APPROVED): RequisitionStatus.APPROVED,
    (RequisitionStatus.PENDING_APPROVAL, ApprovalAction.REJECTED): RequisitionStatus.REJECTED,
}

_ACTION_VERBS: Mapping[ApprovalAction, str] = {
    ApprovalAction.SUBMITTED: "submit",
    ApprovalAction.APPROVED: "approve",
    ApprovalAction.REJECTED: "reject",
}

TOTAL_TOLERANCE = 0.005


def validate_items(items: Sequence[RequisitionItem]) -> Tuple[RequisitionItem, ...]:
    if not items:
        raise ValidationError("At least one item is required")

    return tuple(
        RequisitionItem(
            description=require_text(item.description, f"Description of item {position}"),
            quantity=require_positive_int(item.quantity, f"Quantity of item {position}"),
            estimated_cost=require_non_negative(
                item.estimated_cost, f"Estimated cost of item {position}"
            ),
        )
        for position, item in enumerate(items, start=1)
    )


def validate_total(total_estimated_cost: float) -> float:
    return require_non_negative(total_estimated_cost, "Total estimated cost")


def total_matches_items(items: Sequence[RequisitionItem], total_estimated_cost: float) -> bool:
    expected = sum(item.line_total for item in items)
    return abs(expected - total_estimated_cost) <= TOTAL_TOLERANCE


def ensure_draft(requisition: PurchaseRequisition, operation: str) -> None:
    if requisition.status is not RequisitionStatus.DRAFT:
        raise InvalidStateError(
            f"Cannot {operation} a requisition that is "
            f"{STATUS_LABELS[requisition.status].lower()}; only drafts can be changed"
        )


def apply_action(
    requisition: PurchaseRequisition,
    action: ApprovalAction,
    approver_name: str,
    comments: str,
    now: int,
) -> PurchaseRequisition:
    next_status = TRANSITIONS.get((requisition.status, action))
    if next_status is None:
        raise InvalidStateError(
            f"Cannot {_ACTION_VERBS[action]} a requisition that is "
            f"{STATUS_LABELS[requisition.status].lower()}"
        )

    record = ApprovalRecord(
        action=action,
        approver_name=approver_name,
        comments=comments,
        timestamp=now,
    )
    return replace(
        requisition,
        status=next_status,
        updated_at=now,
        approval_history=(*requisition.approval_history, record),
    )
