from typing import Any, Dict

from app.quotations.domain.models import (
    QUOTATION_STATUS_LABELS,
    REQUEST_STATUS_LABELS,
    Quotation,
    QuotationRequest,
)


def quotation_request_to_response(request: QuotationRequest) -> Dict[str, Any]:
    return {
        "id": request.id,
        "description": request.description,
        "quantity": request.quantity,
        "unit_of_measurement": request.unit_of_measurement,
        "required_delivery_date": request.required_delivery_date,
        "request_date": request.request_date,
        "status": request.status.value,
        "status_label": REQUEST_STATUS_LABELS[request.status],
    }


def quotation_to_response(quotation: Quotation) -> Dict[str, Any]:
    return {
        "id": quotation.id,
        "request_id": quotation.request_id,
        "vendor_id": quotation.vendor_id,
        "unit_price": quotation.unit_price,
        "total_price": quotation.total_price,
        "delivery_timeline": quotation.delivery_timeline,
        "terms_and_conditions": quotation.terms_and_conditions,
        "validity_period": quotation.validity_period,
        "submission_date": quotation.submission_date,
        "status": quotation.status.value,
        "status_label": QUOTATION_STATUS_LABELS[quotation.status],
    }
