from typing import Optional, Sequence

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.quotations.application.ports import QuotationRepository
from app.quotations.domain.models import (
    Quotation,
    QuotationRequest,
    QuotationStatus,
    RequestStatus,
)
from database import (
    Quotation as QuotationModel,
    QuotationRequest as QuotationRequestModel,
)


def _request_to_domain(row: QuotationRequestModel) -> QuotationRequest:
    return QuotationRequest(
        id=row.id,
        description=row.description,
        quantity=row.quantity,
        unit_of_measurement=row.unit_of_measurement,
        required_delivery_date=row.required_delivery_date,
        request_date=row.request_date,
        status=RequestStatus(row.status),
    )


def _quotation_to_domain(row: QuotationModel) -> Quotation:
    return Quotation(
        id=row.id,
        request_id=row.request_id,
        vendor_id=row.vendor_id,
        unit_price=row.unit_price,
        total_price=row.total_price,
        delivery_timeline=row.delivery_timeline,
        terms_and_conditions=row.terms_and_conditions,
        validity_period=row.validity_period,
        submission_date=row.submission_date,
        status=QuotationStatus(row.status),
    )


class SqlAlchemyQuotationRepository(QuotationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_request(self, request_id: str) -> Optional[QuotationRequest]:
        result = await self._session.execute(
            select(QuotationRequestModel).where(QuotationRequestModel.id == request_id)
        )
        row = result.scalar_one_or_none()
        return _request_to_domain(row) if row is not None else None

    async def add_request(self, request: QuotationRequest) -> None:
        self._session.add(
            QuotationRequestModel(
                id=request.id,
                description=request.description,
                quantity=request.quantity,
                unit_of_measurement=request.unit_of_measurement,
                required_delivery_date=request.required_delivery_date,
                request_date=request.request_date,
                status=request.status.value,
            )
        )

    async def set_request_status(self, request_id: str, status: RequestStatus) -> bool:
        result = await self._session.execute(
            update(QuotationRequestModel)
            .where(QuotationRequestModel.id == request_id)
            .values(status=status.value)
        )
        return result.rowcount > 0

    async def list_requests(
        self, status: Optional[RequestStatus] = None
    ) -> Sequence[QuotationRequest]:
        query = select(QuotationRequestModel)
        if status is not None:
            query = query.where(QuotationRequestModel.status == status.value)
        query = query.order_by(desc(QuotationRequestModel.request_date), QuotationRequestModel.id)

        result = await self._session.execute(query)
        return [_request_to_domain(row) for row in result.scalars().all()]

    async def get_quotation(self, quotation_id: str) -> Optional[Quotation]:
        result = await self._session.execute(
            select(QuotationModel).where(QuotationModel.id == quotation_id)
        )
        row = result.scalar_one_or_none()
        return _quotation_to_domain(row) if row is not None else None

    async def add_quotation(self, quotation: Quotation) -> None:
        self._session.add(
            QuotationModel(
                id=quotation.id,
                request_id=quotation.request_id,
                vendor_id=quotation.vendor_id,
                unit_price=quotation.unit_price,
                total_price=quotation.total_price,
                delivery_timeline=quotation.delivery_timeline,
                terms_and_conditions=quotation.terms_and_conditions,
                validity_period=quotation.validity_period,
                submission_date=quotation.submission_date,
                status=quotation.status.value,
            )
        )

    async def set_quotation_status(self, quotation_id: str, status: QuotationStatus) -> bool:
        result = await self._session.execute(
            update(QuotationModel)
            .where(QuotationModel.id == quotation_id)
            .values(status=status.value)
        )
        return result.rowcount > 0

    async def list_quotations_for_request(self, request_id: str) -> Sequence[Quotation]:
        result = await self._session.execute(
            select(QuotationModel)
            .where(QuotationModel.request_id == request_id)
            .order_by(QuotationModel.total_price, QuotationModel.submission_date)
        )
        return [_quotation_to_domain(row) for row in result.scalars().all()]

    async def commit(self) -> None:
        await self._session.commit()
