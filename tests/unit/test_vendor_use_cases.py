import asyncio

import pytest

from app.common.errors import NotFoundError, ValidationError
from app.vendors.application.use_cases import (
    CreateVendorUseCase,
    DeleteVendorUseCase,
    GetVendorUseCase,
    ListVendorsUseCase,
    SetVendorStatusUseCase,
    UpdateVendorCommand,
    UpdateVendorUseCase,
    VendorDetails,
)
from app.vendors.domain.models import VendorStatus
from fakes import FakeVendorRepository, sequential_ids, ticking_clock


def run(coro):
    return asyncio.run(coro)


def details(**overrides):
    values = {
        "company_name": "Acme Supplies",
        "contact_person": "Sam Lee",
        "email": "sales@acme.test",
        "phone_number": "+1 555 0100",
        "address": "1 Industrial Way",
        "category": "Hardware",
    }
    values.update(overrides)
    return VendorDetails(**values)


@pytest.fixture
def repo():
    return FakeVendorRepository()


def create(repo, **overrides):
    use_case = CreateVendorUseCase(
        repository=repo,
        id_generator=sequential_ids("vendor"),
        clock=ticking_clock(),
    )
    return run(use_case.execute(details(**overrides)))


def test_create_vendor_starts_active(repo):
    vendor = create(repo, company_name="  Acme Supplies  ")

    assert vendor.id == "vendor-1"
    assert vendor.status is VendorStatus.ACTIVE
    assert vendor.company_name == "Acme Supplies"
    assert repo.commits == 1
    assert run(GetVendorUseCase(repo).execute(vendor.id)) == vendor


@pytest.mark.parametrize(
    "field, value",
    [
        ("company_name", ""),
        ("contact_person", "  "),
        ("phone_number", ""),
        ("address", ""),
        ("category", ""),
        ("email", ""),
        ("email", "not-an-email"),
    ],
)
def test_create_vendor_requires_every_field(repo, field, value):
    with pytest.raises(ValidationError):
        create(repo, **{field: value})
    assert repo.vendors == {}


def test_update_vendor_replaces_all_fields(repo):
    vendor = create(repo)
    command = UpdateVendorCommand(
        vendor_id=vendor.id,
        details=details(company_name="Acme Global", category="Logistics"),
        status=VendorStatus.INACTIVE,
    )

    updated = run(UpdateVendorUseCase(repo).execute(command))

    assert updated.company_name == "Acme Global"
    assert updated.category == "Logistics"
    assert updated.status is VendorStatus.INACTIVE
    assert updated.created_at == vendor.created_at


def test_set_vendor_status_toggles_only_status(repo):
    vendor = create(repo)

    inactive = run(SetVendorStatusUseCase(repo).execute(vendor.id, VendorStatus.INACTIVE))
    active = run(SetVendorStatusUseCase(repo).execute(vendor.id, "active"))

    assert inactive.status is VendorStatus.INACTIVE
    assert active.status is VendorStatus.ACTIVE
    assert active.company_name == vendor.company_name

    with pytest.raises(ValidationError):
        run(SetVendorStatusUseCase(repo).execute(vendor.id, "archived"))


def test_unknown_vendor_mutations_raise_not_found(repo):
    command = UpdateVendorCommand("missing", details(), VendorStatus.ACTIVE)

    with pytest.raises(NotFoundError):
        run(UpdateVendorUseCase(repo).execute(command))
    with pytest.raises(NotFoundError):
        run(SetVendorStatusUseCase(repo).execute("missing", VendorStatus.ACTIVE))
    with pytest.raises(NotFoundError):
        run(DeleteVendorUseCase(repo).execute("missing"))


def test_delete_and_list_vendors(repo):
    use_case = CreateVendorUseCase(repo, sequential_ids("vendor"), ticking_clock())
    first = run(use_case.execute(details(company_name="First")))
    second = run(use_case.execute(details(company_name="Second")))

    assert [v.id for v in run(ListVendorsUseCase(repo).execute())] == [second.id, first.id]

    run(DeleteVendorUseCase(repo).execute(first.id))

    assert run(GetVendorUseCase(repo).execute(first.id)) is None
    assert [v.id for v in run(ListVendorsUseCase(repo).execute())] == [second.id]
