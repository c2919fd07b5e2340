import pytest

from app.common.errors import InvalidStateError, ValidationError
from app.quotations.domain.models import (
    QUOTATION_STATUS_LABELS,
    REQUEST_STATUS_LABELS,
    QuotationStatus,
    RequestStatus,
)
from app.requisitions.domain.models import (
    STATUS_LABELS,
    TERMINAL_STATUSES,
    ApprovalAction,
    PurchaseRequisition,
    RequisitionItem,
    RequisitionStatus,
)
from app.requisitions.domain.workflow import (
    TRANSITIONS,
    apply_action,
    ensure_draft,
    total_matches_items,
    validate_items,
)
from app.vendors.domain.models import STATUS_LABELS as VENDOR_STATUS_LABELS, VendorStatus


def make_requisition(status=RequisitionStatus.DRAFT):
    return PurchaseRequisition(
        id="req-1",
        requested_by="Dana",
        department="Engineering",
        total_estimated_cost=10.0,
        justification="x",
        status=status,
        created_at=100,
        updated_at=100,
        items=(RequisitionItem("d", 2, 5.0),),
    )


@pytest.mark.parametrize(
    "enum_type, labels",
    [
        (RequisitionStatus, STATUS_LABELS),
        (VendorStatus, VENDOR_STATUS_LABELS),
        (RequestStatus, REQUEST_STATUS_LABELS),
        (QuotationStatus, QUOTATION_STATUS_LABELS),
    ],
)
def test_every_status_has_a_label(enum_type, labels):
    assert set(labels) == set(enum_type)


def test_terminal_statuses_have_no_outgoing_transitions():
    sources = {status for status, _ in TRANSITIONS}
    assert sources.isdisjoint(TERMINAL_STATUSES)
    assert set(TRANSITIONS.values()) <= set(RequisitionStatus)


@pytest.mark.parametrize("status", list(RequisitionStatus))
@pytest.mark.parametrize("action", list(ApprovalAction))
def test_apply_action_follows_transition_table(status, action):
    requisition = make_requisition(status)
    expected = TRANSITIONS.get((status, action))

    if expected is None:
        with pytest.raises(InvalidStateError):
            apply_action(requisition, action, "Alice", "", 200)
        return

    updated = apply_action(requisition, action, "Alice", "note", 200)
    assert updated.status is expected
    assert updated.updated_at == 200
    assert len(updated.approval_history) == len(requisition.approval_history) + 1
    assert updated.last_record.action is action
    assert updated.last_record.timestamp == 200
    assert requisition.status is status


def test_ensure_draft_names_the_current_status():
    ensure_draft(make_requisition(), "edit")

    with pytest.raises(InvalidStateError) as exc_info:
        ensure_draft(make_requisition(RequisitionStatus.APPROVED), "delete")
    assert "approved" in exc_info.value.message


def test_validate_items_strips_descriptions_and_rejects_fractional_quantity():
    items = validate_items([RequisitionItem("  bolts ", 3, 2)])
    assert items == (RequisitionItem("bolts", 3, 2.0),)

    with pytest.raises(ValidationError):
        validate_items([RequisitionItem("bolts", 1.5, 2.0)])
    with pytest.raises(ValidationError):
        validate_items([RequisitionItem("bolts", True, 2.0)])


def test_total_matches_items_uses_cent_tolerance():
    items = [RequisitionItem("a", 3, 0.1)]
    assert total_matches_items(items, 0.3)
    assert not total_matches_items(items, 0.32)
