"""Checkout endpoints for REST API."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import JSONResponse

from checkout.application.dtos import CheckoutErrorResponse, CheckoutResponse
from checkout.application.use_cases.checkout_order import CheckoutContext, CheckoutUseCase
from checkout.domain.exceptions import (
    CheckoutError,
    ConflictError,
    InvalidStatusError,
    OrderExpiredError,
    OrderNotFoundError,
    PaymentFailedError,
    PostChargePersistenceFailedError,
    RepositoryError,
)
from checkout.domain.value_objects import ExecutionID

from apps.api.deps import get_checkout_use_case

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["checkout"])


# Most specific first
_STATUS_CODES = (
    (PostChargePersistenceFailedError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (OrderNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidStatusError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (OrderExpiredError, status.HTTP_410_GONE),
    (PaymentFailedError, status.HTTP_402_PAYMENT_REQUIRED),
    (RepositoryError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_code_for(error: CheckoutError) -> int:
    """Map a checkout error to its HTTP status code."""
    for error_type, code in _STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@router.post(
    "/{order_id}/checkout",
    response_model=CheckoutResponse,
    responses={
        402: {"model": CheckoutErrorResponse},
        404: {"model": CheckoutErrorResponse},
        409: {"model": CheckoutErrorResponse},
        410: {"model": CheckoutErrorResponse},
        500: {"model": CheckoutErrorResponse},
        503: {"model": CheckoutErrorResponse},
    },
)
async def checkout_order(
    order_id: str,
    x_execution_id: Optional[str] = Header(default=None),
    use_case: CheckoutUseCase = Depends(get_checkout_use_case),
):
    """Check out a pending order.

    Args:
        order_id: Order ID
        x_execution_id: Optional caller-supplied execution ID (UUID)
        use_case: CheckoutUseCase instance

    Returns:
        CheckoutResponse, or CheckoutErrorResponse with a mapped status code

    Raises:
        HTTPException: If X-Execution-ID is not a UUID
    """
    if x_execution_id:
        try:
            context = CheckoutContext(execution_id=ExecutionID.from_string(x_execution_id))
        except ValueError:
            raise HTTPException(status_code=400, detail="X-Execution-ID must be a UUID")
    else:
        context = CheckoutContext()

    try:
        result = await use_case.execute(order_id, context)
    except CheckoutError as e:
        code = status_code_for(e)
        body = CheckoutErrorResponse.from_error(
            e,
            execution_id=str(context.execution_id),
            reconciliation_required=isinstance(e, PostChargePersistenceFailedError),
        )
        if code >= 500:
            logger.error(f"[{context.execution_id}] Checkout failed for {order_id}: {e}")
        return JSONResponse(status_code=code, content=body.model_dump())

    return CheckoutResponse.from_result(result)
