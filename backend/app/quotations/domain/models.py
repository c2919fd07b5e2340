import enum
from dataclasses import dataclass
from typing import Mapping


class RequestStatus(str, enum.Enum):
    PENDING = "pending"
    RECEIVED = "received"
    CLOSED = "closed"


class QuotationStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    ACCEPTED = "accepted"


REQUEST_STATUS_LABELS: Mapping[RequestStatus, str] = {
    RequestStatus.PENDING: "Pending",
    RequestStatus.RECEIVED: "Received",
    RequestStatus.CLOSED: "Closed",
}

QUOTATION_STATUS_LABELS: Mapping[QuotationStatus, str] = {
    QuotationStatus.SUBMITTED: "Submitted",
    QuotationStatus.SHORTLISTED: "Shortlisted",
    QuotationStatus.REJECTED: "Rejected",
    QuotationStatus.ACCEPTED: "Accepted",
}


@dataclass(frozen=True)
class QuotationRequest:
    id: str
    description: str
    quantity: int
    unit_of_measurement: str
    required_delivery_date: int
    request_date: int
    status: RequestStatus


@dataclass(frozen=True)
class Quotation:
    id: str
    request_id: str
    vendor_id: str
    unit_price: float
    total_price: float
    delivery_timeline: str
    terms_and_conditions: str
    validity_period: int
    submission_date: int
    status: QuotationStatus
