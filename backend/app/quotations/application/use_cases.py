import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from app.common.clock import Clock, IdGenerator
from app.common.errors import NotFoundError, ValidationError
from app.common.validation import require_non_negative, require_positive_int, require_text
from app.quotations.application.ports import QuotationRepository
from app.quotations.domain.models import (
    Quotation,
    QuotationRequest,
    QuotationStatus,
    RequestStatus,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateQuotationRequestCommand:
    description: str
    quantity: int
    unit_of_measurement: str
    required_delivery_date: int


@dataclass(frozen=True)
class SubmitQuotationCommand:
    vendor_id: str
    request_id: str
    unit_price: float
    total_price: float
    delivery_timeline: str
    terms_and_conditions: str
    validity_period: int


class CreateQuotationRequestUseCase:
    def __init__(
        self,
        repository: QuotationRepository,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    async def execute(self, command: CreateQuotationRequestCommand) -> QuotationRequest:
        request = QuotationRequest(
            id=self._id_generator(),
            description=require_text(command.description, "Description"),
            quantity=require_positive_int(command.quantity, "Quantity"),
            unit_of_measurement=require_text(command.unit_of_measurement, "Unit"),
            required_delivery_date=command.required_delivery_date,
            request_date=self._clock(),
            status=RequestStatus.PENDING,
        )

        await self._repository.add_request(request)
        await self._repository.commit()

        logger.info(f"Created quotation request {request.id}")
        return request


class UpdateQuotationRequestStatusUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(self, request_id: str, status: RequestStatus) -> QuotationRequest:
        try:
            status = RequestStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown request status: {status}")

        if not await self._repository.set_request_status(request_id, status):
            raise NotFoundError(f"Quotation request {request_id} not found")
        await self._repository.commit()

        logger.info(f"Quotation request {request_id} is now {status.value}")
        return await self._repository.get_request(request_id)


class GetQuotationRequestUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(self, request_id: str) -> Optional[QuotationRequest]:
        return await self._repository.get_request(request_id)


class ListQuotationRequestsUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(
        self, status: Optional[RequestStatus] = None
    ) -> Sequence[QuotationRequest]:
        return await self._repository.list_requests(status)


class SubmitQuotationUseCase:
    """Record a vendor's offer.

    The request is referenced by id only: its existence and status are not
    checked, and submitting does not change the request.
    """

    def __init__(
        self,
        repository: QuotationRepository,
        id_generator: IdGenerator,
        clock: Clock,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator
        self._clock = clock

    async def execute(self, command: SubmitQuotationCommand) -> Quotation:
        quotation = Quotation(
            id=self._id_generator(),
            request_id=require_text(command.request_id, "Quotation request"),
            vendor_id=require_text(command.vendor_id, "Vendor"),
            unit_price=require_non_negative(command.unit_price, "Unit price"),
            total_price=require_non_negative(command.total_price, "Total price"),
            delivery_timeline=require_text(command.delivery_timeline, "Delivery timeline"),
            terms_and_conditions=require_text(
                command.terms_and_conditions, "Terms and conditions"
            ),
            validity_period=command.validity_period,
            submission_date=self._clock(),
            status=QuotationStatus.SUBMITTED,
        )

        await self._repository.add_quotation(quotation)
        await self._repository.commit()

        logger.info(
            f"Vendor {quotation.vendor_id} submitted quotation {quotation.id} "
            f"for request {quotation.request_id}"
        )
        return quotation


class UpdateQuotationStatusUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(self, quotation_id: str, status: QuotationStatus) -> Quotation:
        try:
            status = QuotationStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown quotation status: {status}")

        if not await self._repository.set_quotation_status(quotation_id, status):
            raise NotFoundError(f"Quotation {quotation_id} not found")
        await self._repository.commit()

        logger.info(f"Quotation {quotation_id} is now {status.value}")
        return await self._repository.get_quotation(quotation_id)


class GetQuotationUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(self, quotation_id: str) -> Optional[Quotation]:
        return await self._repository.get_quotation(quotation_id)


class ListQuotationsForRequestUseCase:
    def __init__(self, repository: QuotationRepository) -> None:
        self._repository = repository

    async def execute(self, request_id: str) -> Sequence[Quotation]:
        return await self._repository.list_quotations_for_request(request_id)
