"""
PostgreSQL Quotation Routes
Quotation requests and the vendor quotations submitted against them
"""
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Optional
import uuid

from app.common.clock import now_ns
from app.common.errors import DomainError
from app.quotations.application.ports import QuotationRepository
from app.quotations.application.use_cases import (
    CreateQuotationRequestCommand,
    CreateQuotationRequestUseCase,
    GetQuotationRequestUseCase,
    GetQuotationUseCase,
    ListQuotationRequestsUseCase,
    ListQuotationsForRequestUseCase,
    SubmitQuotationCommand,
    SubmitQuotationUseCase,
    UpdateQuotationRequestStatusUseCase,
    UpdateQuotationStatusUseCase,
)
from app.quotations.domain.models import QuotationStatus, RequestStatus
from app.quotations.presentation.response_mapper import (
    quotation_request_to_response,
    quotation_to_response,
)
from routes.dependencies import get_quotation_repository
from routes.errors import to_http_exception

pg_quotations_router = APIRouter(prefix="/api/pg", tags=["PostgreSQL Quotations"])


# ==================== PYDANTIC MODELS ====================

class QuotationRequestCreate(BaseModel):
    description: str
    quantity: int
    unit_of_measurement: str
    required_delivery_date: int  # nanoseconds since epoch


class QuotationRequestStatusUpdate(BaseModel):
    status: RequestStatus


class QuotationCreate(BaseModel):
    vendor_id: str
    request_id: str
    unit_price: float
    total_price: float
    delivery_timeline: str
    terms_and_conditions: str
    validity_period: int  # nanoseconds since epoch


class QuotationStatusUpdate(BaseModel):
    status: QuotationStatus


# ==================== QUOTATION REQUEST ROUTES ====================

@pg_quotations_router.post("/quotation-requests")
async def create_quotation_request(
    data: QuotationRequestCreate,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Create a quotation request in pending status"""
    use_case = CreateQuotationRequestUseCase(
        repository=repository,
        id_generator=lambda: str(uuid.uuid4()),
        clock=now_ns,
    )
    command = CreateQuotationRequestCommand(
        description=data.description,
        quantity=data.quantity,
        unit_of_measurement=data.unit_of_measurement,
        required_delivery_date=data.required_delivery_date,
    )
    try:
        request = await use_case.execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return quotation_request_to_response(request)


@pg_quotations_router.get("/quotation-requests")
async def get_quotation_requests(
    status: Optional[RequestStatus] = None,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Get all quotation requests, or only those with the given status"""
    requests = await ListQuotationRequestsUseCase(repository).execute(status)
    return [quotation_request_to_response(r) for r in requests]


@pg_quotations_router.get("/quotation-requests/{request_id}")
async def get_quotation_request(
    request_id: str,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Get a single quotation request"""
    request = await GetQuotationRequestUseCase(repository).execute(request_id)
    if request is None:
        raise HTTPException(status_code=404, detail="Quotation request not found")

    return quotation_request_to_response(request)


@pg_quotations_router.patch("/quotation-requests/{request_id}/status")
async def update_quotation_request_status(
    request_id: str,
    data: QuotationRequestStatusUpdate,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Set the status of a quotation request"""
    try:
        request = await UpdateQuotationRequestStatusUseCase(repository).execute(
            request_id, data.status
        )
    except DomainError as exc:
        raise to_http_exception(exc)

    return quotation_request_to_response(request)


@pg_quotations_router.get("/quotation-requests/{request_id}/quotations")
async def get_quotations_for_request(
    request_id: str,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Get every quotation submitted against a request, cheapest first"""
    quotations = await ListQuotationsForRequestUseCase(repository).execute(request_id)
    return [quotation_to_response(q) for q in quotations]


# ==================== QUOTATION ROUTES ====================

@pg_quotations_router.post("/quotations")
async def submit_quotation(
    data: QuotationCreate,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Submit a vendor quotation against a request"""
    use_case = SubmitQuotationUseCase(
        repository=repository,
        id_generator=lambda: str(uuid.uuid4()),
        clock=now_ns,
    )
    command = SubmitQuotationCommand(
        vendor_id=data.vendor_id,
        request_id=data.request_id,
        unit_price=data.unit_price,
        total_price=data.total_price,
        delivery_timeline=data.delivery_timeline,
        terms_and_conditions=data.terms_and_conditions,
        validity_period=data.validity_period,
    )
    try:
        quotation = await use_case.execute(command)
    except DomainError as exc:
        raise to_http_exception(exc)

    return quotation_to_response(quotation)


@pg_quotations_router.get("/quotations/{quotation_id}")
async def get_quotation(
    quotation_id: str,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Get a single quotation"""
    quotation = await GetQuotationUseCase(repository).execute(quotation_id)
    if quotation is None:
        raise HTTPException(status_code=404, detail="Quotation not found")

    return quotation_to_response(quotation)


@pg_quotations_router.patch("/quotations/{quotation_id}/status")
async def update_quotation_status(
    quotation_id: str,
    data: QuotationStatusUpdate,
    repository: QuotationRepository = Depends(get_quotation_repository),
):
    """Shortlist, accept or reject a quotation - the request is left unchanged"""
    try:
        quotation = await UpdateQuotationStatusUseCase(repository).execute(
            quotation_id, data.status
        )
    except DomainError as exc:
        raise to_http_exception(exc)

    return quotation_to_response(quotation)
