import enum
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence


class RequisitionStatus(str, enum.Enum):
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"


class ApprovalAction(str, enum.Enum):
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


STATUS_LABELS: Mapping[RequisitionStatus, str] = {
    RequisitionStatus.DRAFT: "Draft",
    RequisitionStatus.PENDING_APPROVAL: "Pending Approval",
    RequisitionStatus.APPROVED: "Approved",
    RequisitionStatus.REJECTED: "Rejected",
}

TERMINAL_STATUSES = frozenset({RequisitionStatus.APPROVED, RequisitionStatus.REJECTED})


@dataclass(frozen=True)
class RequisitionItem:
    description: str
    quantity: int
    estimated_cost: float

    @property
    def line_total(self) -> float:
        return self.quantity * self.estimated_cost


@dataclass(frozen=True)
class ApprovalRecord:
    action: ApprovalAction
    approver_name: str
    comments: str
    timestamp: int


@dataclass(frozen=True)
class PurchaseRequisition:
    id: str
    requested_by: str
    department: str
    total_estimated_cost: float
    justification: str
    status: RequisitionStatus
    created_at: int
    updated_at: int
    items: Sequence[RequisitionItem] = field(default_factory=tuple)
    approval_history: Sequence[ApprovalRecord] = field(default_factory=tuple)

    @property
    def last_record(self) -> Optional[ApprovalRecord]:
        return self.approval_history[-1] if self.approval_history else None
