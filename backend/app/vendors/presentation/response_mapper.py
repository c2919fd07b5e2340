from typing import Any, Dict

from app.vendors.domain.models import STATUS_LABELS, Vendor


def vendor_to_response(vendor: Vendor) -> Dict[str, Any]:
    return {
        "id": vendor.id,
        "company_name": vendor.company_name,
        "contact_person": vendor.contact_person,
        "email": vendor.email,
        "phone_number": vendor.phone_number,
        "address": vendor.address,
        "category": vendor.category,
        "status": vendor.status.value,
        "status_label": STATUS_LABELS[vendor.status],
        "created_at": vendor.created_at,
    }
