from typing import Any, Dict

from app.requisitions.domain.models import STATUS_LABELS, PurchaseRequisition


def purchase_requisition_to_response(requisition: PurchaseRequisition) -> Dict[str, Any]:
    return {
        "id": requisition.id,
        "requested_by": requisition.requested_by,
        "department": requisition.department,
        "items": [
            {
                "description": item.description,
                "quantity": item.quantity,
                "estimated_cost": item.estimated_cost,
            }
            for item in requisition.items
        ],
        "total_estimated_cost": requisition.total_estimated_cost,
        "justification": requisition.justification,
        "status": requisition.status.value,
        "status_label": STATUS_LABELS[requisition.status],
        "approval_history": [
            {
                "action": record.action.value,
                "approver_name": record.approver_name,
                "comments": record.comments,
                "timestamp": record.timestamp,
            }
            for record in requisition.approval_history
        ],
        "created_at": requisition.created_at,
        "updated_at": requisition.updated_at,
    }
