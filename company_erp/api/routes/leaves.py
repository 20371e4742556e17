"""
Leave request endpoints.

``/apply`` and ``/history`` are open to every authenticated employee; the
rest are admin only.
"""

from fastapi import APIRouter, Depends, status

from company_erp.dependencies import AdminEmployee, CurrentEmployee, get_leave_service
from company_erp.schemas.common import DataResponse, ListResponse, error_responses
from company_erp.schemas.leave import LeaveApplyRequest, LeaveRead
from company_erp.services.leave import LeaveWorkflowService

router = APIRouter(prefix="/leaves", tags=["Leave Management"])


@router.post(
    "/apply",
    response_model=DataResponse[LeaveRead],
    status_code=status.HTTP_201_CREATED,
    summary="Apply for leave",
    responses=error_responses(400, 401),
)
def apply_leave(
    payload: LeaveApplyRequest,
    current: CurrentEmployee,
    leave_service: LeaveWorkflowService = Depends(get_leave_service),
) -> DataResponse[LeaveRead]:
    return DataResponse[LeaveRead](data=leave_service.apply(current, payload))


@router.get(
    "/pending",
    response_model=ListResponse[LeaveRead],
    summary="Get all pending leave requests",
    responses=error_responses(401, 403),
)
def get_pending_leaves(
    _admin: AdminEmployee,
    leave_service: LeaveWorkflowService = Depends(get_leave_service),
) -> ListResponse[LeaveRead]:
    return ListResponse[LeaveRead].of(leave_service.list_pending())


@router.patch(
    "/{leave_id}/approve",
    response_model=DataResponse[LeaveRead],
    summary="Approve a leave request",
    responses=error_responses(401, 403, 404),
)
def approve_leave(
    leave_id: str,
    _admin: AdminEmployee,
    leave_service: LeaveWorkflowService = Depends(get_leave_service),
) -> DataResponse[LeaveRead]:
    return DataResponse[LeaveRead](data=leave_service.approve(leave_id))


@router.patch(
    "/{leave_id}/reject",
    response_model=DataResponse[LeaveRead],
    summary="Reject a leave request",
    responses=error_responses(401, 403, 404),
)
def reject_leave(
    leave_id: str,
    _admin: AdminEmployee,
    leave_service: LeaveWorkflowService = Depends(get_leave_service),
) -> DataResponse[LeaveRead]:
    return DataResponse[LeaveRead](data=leave_service.reject(leave_id))


@router.get(
    "/history",
    response_model=ListResponse[LeaveRead],
    summary="Get leave history",
    responses=error_responses(401),
)
def get_leave_history(
    current: CurrentEmployee,
    leave_service: LeaveWorkflowService = Depends(get_leave_service),
) -> ListResponse[LeaveRead]:
    return ListResponse[LeaveRead].of(leave_service.history(current))
