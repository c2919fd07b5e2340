from dataclasses import replace
from itertools import count


class FakeRequisitionRepository:
    def __init__(self) -> None:
        self.requisitions = {}
        self.appended = []
        self.deleted = []
        self.commits = 0
        self.locked = []

    async def get(self, requisition_id):
        return self.requisitions.get(requisition_id)

    async def get_for_update(self, requisition_id):
        self.locked.append(requisition_id)
        return self.requisitions.get(requisition_id)

    async def add(self, requisition):
        self.requisitions[requisition.id] = requisition

    async def update(self, requisition):
        current = self.requisitions[requisition.id]
        self.requisitions[requisition.id] = replace(
            current,
            status=requisition.status,
            total_estimated_cost=requisition.total_estimated_cost,
            justification=requisition.justification,
            updated_at=requisition.updated_at,
        )

    async def replace_items(self, requisition_id, items):
        current = self.requisitions[requisition_id]
        self.requisitions[requisition_id] = replace(current, items=tuple(items))

    async def append_approval_record(self, requisition_id, sequence, record):
        current = self.requisitions[requisition_id]
        assert sequence == len(current.approval_history)
        self.appended.append((requisition_id, sequence, record))
        self.requisitions[requisition_id] = replace(
            current, approval_history=(*current.approval_history, record)
        )

    async def delete(self, requisition_id):
        self.deleted.append(requisition_id)
        del self.requisitions[requisition_id]

    async def list(self, status=None):
        found = [
            req
            for req in self.requisitions.values()
            if status is None or req.status == status
        ]
        return sorted(found, key=lambda req: (-req.created_at, req.id))

    async def commit(self):
        self.commits += 1


class FakeVendorRepository:
    def __init__(self) -> None:
        self.vendors = {}
        self.commits = 0

    async def get(self, vendor_id):
        return self.vendors.get(vendor_id)

    async def get_for_update(self, vendor_id):
        return self.vendors.get(vendor_id)

    async def add(self, vendor):
        self.vendors[vendor.id] = vendor

    async def update(self, vendor):
        self.vendors[vendor.id] = vendor

    async def delete(self, vendor_id):
        del self.vendors[vendor_id]

    async def list(self):
        return sorted(self.vendors.values(), key=lambda v: (-v.created_at, v.id))

    async def commit(self):
        self.commits += 1


class FakeQuotationRepository:
    def __init__(self) -> None:
        self.requests = {}
        self.quotations = {}
        self.commits = 0

    async def get_request(self, request_id):
        return self.requests.get(request_id)

    async def add_request(self, request):
        self.requests[request.id] = request

    async def set_request_status(self, request_id, status):
        if request_id not in self.requests:
            return False
        self.requests[request_id] = replace(self.requests[request_id], status=status)
        return True

    async def list_requests(self, status=None):
        found = [r for r in self.requests.values() if status is None or r.status == status]
        return sorted(found, key=lambda r: (-r.request_date, r.id))

    async def get_quotation(self, quotation_id):
        return self.quotations.get(quotation_id)

    async def add_quotation(self, quotation):
        self.quotations[quotation.id] = quotation

    async def set_quotation_status(self, quotation_id, status):
        if quotation_id not in self.quotations:
            return False
        self.quotations[quotation_id] = replace(self.quotations[quotation_id], status=status)
        return True

    async def list_quotations_for_request(self, request_id):
        found = [q for q in self.quotations.values() if q.request_id == request_id]
        return sorted(found, key=lambda q: (q.total_price, q.submission_date))

    async def commit(self):
        self.commits += 1


def sequential_ids(prefix="id"):
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def ticking_clock(start=1_700_000_000_000_000_000, step=1_000):
    counter = count()
    return lambda: start + next(counter) * step
