"""
PostgreSQL Purchase Requisition Routes
Requisition lifecycle: draft -> pending approval -> approved / rejected
"""
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Optional, List
import uuid

from app.common.clock import now_ns
from app.common.errors import DomainError
from app.common.settings import app_settings
from app.requisitions.application.ports import PurchaseRequisitionRepository
from app.requisitions.application.use_cases import (
    ApprovalDecisionCommand,
    ApprovePurchaseRequisitionUseCase,
    CreatePurchaseRequisitionUseCase,
    CreateRequisitionCommand,
    DeletePurchaseRequisitionUseCase,
    GetPurchaseRequisitionUseCase,
    ListPendingRequisitionsUseCase,
    ListPurchaseRequisitionsUseCase,
    RejectPurchaseRequisitionUseCase,
    RequisitionItemInput,
    SubmitForApprovalUseCase,
    UpdatePurchaseRequisitionUseCase,
    UpdateRequisitionCommand,
)
from app.requisitions.domain.models import RequisitionStatus
from app.requisitions.presentation.response_mapper import purchase_requisition_to_response
from routes.dependencies import get_requisition_repository
from routes.errors import to_http_exception

# Create router
pg_requisitions_router = APIRouter(prefix="/api/pg", tags=["PostgreSQL Purchase Requisitions"])


# ==================== PYDANTIC MODELS ====================

class RequisitionItemCreate(BaseModel):
    description: str
    quantity: int
    estimated_cost: float


class RequisitionCreate(BaseModel):
    requested_by: str
    department: str
    items: List[RequisitionItemCreate]
    total_estimated_cost: float
    justification: str


class RequisitionUpdate(BaseModel):
    items: List[RequisitionItemCreate]
    total_estimated_cost: float
    justification: str


class ApprovalDecision(BaseModel):
    approver_name: str
    comments: str = ""


# ==================== HELPER FUNCTIONS ====================

def to_item_inputs(items: List[RequisitionItemCreate]) -> List[RequisitionItemInput]:
    return [
        RequisitionItemInput(
            description=item.description,
            quantity=item.quantity,
            estimated_cost=item.estimated_cost,
        )
        for item in items
    ]


# ==================== PURCHASE REQUISITION ROUTES ====================

@pg_requisitions_router.post("/requisitions")
async def create_purchase_requisition(
    data: RequisitionCreate,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Create a new purchase requisition in draft"""
    use_case = CreatePurchaseRequisitionUseCase(
        repository=repository,
        id_generator=lambda: str(uuid.uuid4()),
        clock=now_ns,
        enforce_totals=app_settings.enforce_requisition_totals,
    )
    command = CreateRequisitionCommand(
        requested_by=data.requested_by,
        department=data.department,
        items=to_item_inputs(data.items),
        total_estimated_cost=data.total_estimated_cost,
        justification=data.justification,
    )

    try:
        requisition = await use_case.execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return purchase_requisition_to_response(requisition)


@pg_requisitions_router.get("/requisitions")
async def get_purchase_requisitions(
    status: Optional[RequisitionStatus] = None,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Get purchase requisitions, optionally filtered by status"""
    requisitions = await ListPurchaseRequisitionsUseCase(repository).execute(status)
    return [purchase_requisition_to_response(req) for req in requisitions]


@pg_requisitions_router.get("/requisitions/pending")
async def get_pending_purchase_requisitions(
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Get requisitions waiting for an approval decision"""
    requisitions = await ListPendingRequisitionsUseCase(repository).execute()
    return [purchase_requisition_to_response(req) for req in requisitions]


@pg_requisitions_router.get("/requisitions/{requisition_id}")
async def get_purchase_requisition(
    requisition_id: str,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Get a single purchase requisition"""
    requisition = await GetPurchaseRequisitionUseCase(repository).execute(requisition_id)
    if requisition is None:
        raise HTTPException(status_code=404, detail="Purchase requisition not found")

    return purchase_requisition_to_response(requisition)


@pg_requisitions_router.put("/requisitions/{requisition_id}")
async def update_purchase_requisition(
    requisition_id: str,
    data: RequisitionUpdate,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Edit items, total and justification - draft only"""
    use_case = UpdatePurchaseRequisitionUseCase(
        repository=repository,
        clock=now_ns,
        enforce_totals=app_settings.enforce_requisition_totals,
    )
    command = UpdateRequisitionCommand(
        requisition_id=requisition_id,
        items=to_item_inputs(data.items),
        total_estimated_cost=data.total_estimated_cost,
        justification=data.justification,
    )

    try:
        requisition = await use_case.execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return purchase_requisition_to_response(requisition)


@pg_requisitions_router.delete("/requisitions/{requisition_id}")
async def delete_purchase_requisition(
    requisition_id: str,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Delete a purchase requisition - draft only"""
    try:
        await DeletePurchaseRequisitionUseCase(repository).execute(requisition_id)
    except DomainError as exc:
        raise to_http_exception(exc)

    return {"message": "Purchase requisition deleted", "id": requisition_id}


@pg_requisitions_router.post("/requisitions/{requisition_id}/submit")
async def submit_purchase_requisition(
    requisition_id: str,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Submit a draft for approval"""
    try:
        requisition = await SubmitForApprovalUseCase(repository, now_ns).execute(requisition_id)
    except DomainError as exc:
        raise to_http_exception(exc)

    return purchase_requisition_to_response(requisition)


@pg_requisitions_router.post("/requisitions/{requisition_id}/approve")
async def approve_purchase_requisition(
    requisition_id: str,
    decision: ApprovalDecision,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Approve a requisition pending approval"""
    command = ApprovalDecisionCommand(
        requisition_id=requisition_id,
        approver_name=decision.approver_name,
        comments=decision.comments,
    )

    try:
        requisition = await ApprovePurchaseRequisitionUseCase(repository, now_ns).execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return purchase_requisition_to_response(requisition)


@pg_requisitions_router.post("/requisitions/{requisition_id}/reject")
async def reject_purchase_requisition(
    requisition_id: str,
    decision: ApprovalDecision,
    repository: PurchaseRequisitionRepository = Depends(get_requisition_repository),
):
    """Reject a requisition pending approval - comments are required"""
    command = ApprovalDecisionCommand(
        requisition_id=requisition_id,
        approver_name=decision.approver_name,
        comments=decision.comments,
    )

    try:
        requisition = await RejectPurchaseRequisitionUseCase(repository, now_ns).execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return purchase_requisition_to_response(requisition)
