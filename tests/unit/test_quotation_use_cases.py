import asyncio

import pytest

from app.common.errors import NotFoundError, ValidationError
from app.common.validation import MAX_QUANTITY
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
from fakes import FakeQuotationRepository, sequential_ids, ticking_clock

DELIVERY_DATE = 1_800_000_000_000_000_000


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def repo():
    return FakeQuotationRepository()


def create_request(repo, quantity=100, description="Steel beams"):
    use_case = CreateQuotationRequestUseCase(
        repository=repo,
        id_generator=sequential_ids("qr"),
        clock=ticking_clock(),
    )
    command = CreateQuotationRequestCommand(
        description=description,
        quantity=quantity,
        unit_of_measurement="pcs",
        required_delivery_date=DELIVERY_DATE,
    )
    return run(use_case.execute(command))


def submit(repo, request_id, total_price, ids=None, vendor_id="vendor-1"):
    use_case = SubmitQuotationUseCase(
        repository=repo,
        id_generator=ids or sequential_ids("q"),
        clock=ticking_clock(),
    )
    command = SubmitQuotationCommand(
        vendor_id=vendor_id,
        request_id=request_id,
        unit_price=total_price / 100,
        total_price=total_price,
        delivery_timeline="2 weeks",
        terms_and_conditions="Net 30",
        validity_period=DELIVERY_DATE,
    )
    return run(use_case.execute(command))


def test_create_request_is_pending(repo):
    request = create_request(repo)

    assert request.status is RequestStatus.PENDING
    assert request.required_delivery_date == DELIVERY_DATE
    assert run(GetQuotationRequestUseCase(repo).execute(request.id)) == request


@pytest.mark.parametrize("quantity", [0, -1])
def test_create_request_requires_positive_quantity(repo, quantity):
    with pytest.raises(ValidationError):
        create_request(repo, quantity=quantity)


def test_create_request_requires_description(repo):
    with pytest.raises(ValidationError):
        create_request(repo, description=" ")


def test_request_status_is_caller_driven(repo):
    request = create_request(repo)
    use_case = UpdateQuotationRequestStatusUseCase(repo)

    closed = run(use_case.execute(request.id, RequestStatus.CLOSED))
    reopened = run(use_case.execute(request.id, RequestStatus.PENDING))

    assert closed.status is RequestStatus.CLOSED
    assert reopened.status is RequestStatus.PENDING

    with pytest.raises(NotFoundError):
        run(use_case.execute("missing", RequestStatus.CLOSED))


def test_list_requests_by_status(repo):
    request = create_request(repo)
    run(UpdateQuotationRequestStatusUseCase(repo).execute(request.id, RequestStatus.RECEIVED))

    list_use_case = ListQuotationRequestsUseCase(repo)
    assert [r.id for r in run(list_use_case.execute(RequestStatus.RECEIVED))] == [request.id]
    assert run(list_use_case.execute(RequestStatus.PENDING)) == []
    assert len(run(list_use_case.execute())) == 1


def test_submit_quotation_accepts_any_request_id(repo):
    quotation = submit(repo, "no-such-request", 500.0)

    assert quotation.status is QuotationStatus.SUBMITTED
    assert quotation.request_id == "no-such-request"
    assert run(GetQuotationUseCase(repo).execute(quotation.id)) == quotation


def test_submit_quotation_rejects_negative_prices(repo):
    with pytest.raises(ValidationError):
        submit(repo, "qr-1", -1.0)


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_submit_quotation_rejects_non_finite_prices(repo, value):
    with pytest.raises(ValidationError):
        submit(repo, "qr-1", value)
    assert repo.quotations == {}


def test_create_request_rejects_quantity_beyond_storage_range(repo):
    with pytest.raises(ValidationError):
        create_request(repo, quantity=MAX_QUANTITY + 1)
    assert repo.requests == {}


def test_accepting_a_quotation_leaves_its_request_unchanged(repo):
    request = create_request(repo)
    quotation = submit(repo, request.id, 500.0)

    accepted = run(UpdateQuotationStatusUseCase(repo).execute(quotation.id, QuotationStatus.ACCEPTED))

    assert accepted.status is QuotationStatus.ACCEPTED
    assert run(GetQuotationRequestUseCase(repo).execute(request.id)).status is RequestStatus.PENDING


def test_update_quotation_status_rejects_unknown_values(repo):
    quotation = submit(repo, "qr-1", 10.0)

    with pytest.raises(ValidationError):
        run(UpdateQuotationStatusUseCase(repo).execute(quotation.id, "won"))
    with pytest.raises(NotFoundError):
        run(UpdateQuotationStatusUseCase(repo).execute("missing", QuotationStatus.REJECTED))


def test_quotations_for_request_are_cheapest_first(repo):
    ids = sequential_ids("q")
    expensive = submit(repo, "qr-1", 900.0, ids=ids)
    cheap = submit(repo, "qr-1", 400.0, ids=ids)
    submit(repo, "qr-2", 100.0, ids=ids)

    quotations = run(ListQuotationsForRequestUseCase(repo).execute("qr-1"))

    assert [q.id for q in quotations] == [cheap.id, expensive.id]
