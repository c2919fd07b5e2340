from typing import Optional, Protocol, Sequence

from app.quotations.domain.models import (
    Quotation,
    QuotationRequest,
    QuotationStatus,
    RequestStatus,
)


class QuotationRepository(Protocol):
    async def get_request(self, request_id: str) -> Optional[QuotationRequest]:
        ...

    async def add_request(self, request: QuotationRequest) -> None:
        ...

    async def set_request_status(self, request_id: str, status: RequestStatus) -> bool:
        """Return False when no request has the given id."""
        ...

    async def list_requests(
        self, status: Optional[RequestStatus] = None
    ) -> Sequence[QuotationRequest]:
        ...

    async def get_quotation(self, quotation_id: str) -> Optional[Quotation]:
        ...

    async def add_quotation(self, quotation: Quotation) -> None:
        ...

    async def set_quotation_status(self, quotation_id: str, status: QuotationStatus) -> bool:
        """Return False when no quotation has the given id."""
        ...

    async def list_quotations_for_request(self, request_id: str) -> Sequence[Quotation]:
        ...

    async def commit(self) -> None:
        ...
