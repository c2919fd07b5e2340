import enum
from dataclasses import dataclass
from typing import Mapping


class VendorStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


STATUS_LABELS: Mapping[VendorStatus, str] = {
    VendorStatus.ACTIVE: "Active",
    VendorStatus.INACTIVE: "Inactive",
}


@dataclass(frozen=True)
class Vendor:
    id: str
    company_name: str
    contact_person: str
    email: str
    phone_number: str
    address: str
    category: str
    status: VendorStatus
    created_at: int
