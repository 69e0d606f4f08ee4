"""Application DTOs for checkout operations."""

from typing import Optional

from pydantic import BaseModel, Field

from checkout.application.use_cases.checkout_order import CheckoutResult
from checkout.domain.exceptions import CheckoutError


class CheckoutResponse(BaseModel):
    """Response DTO for a completed checkout."""

    order_id: str = Field(..., description="Order ID")
    status: str = Field(..., description="Persisted order status")
    execution_id: str = Field(..., description="Execution ID for tracing")
    charged: bool = Field(..., description="Whether a charge was made")
    event_published: bool = Field(..., description="Whether order.paid was emitted")
    warning: Optional[str] = Field(None, description="Non-fatal problem (e.g. publish failure)")

    model_config = {"frozen": True}

    @classmethod
    def from_result(cls, result: CheckoutResult) -> "CheckoutResponse":
        """Map a use case result to the API representation."""
        return cls(
            order_id=result.order_id,
            status=result.status.value,
            execution_id=str(result.execution_id),
            charged=result.charged,
            event_published=result.event_published,
            warning=str(result.publish_error) if result.publish_error else None,
        )


class CheckoutErrorResponse(BaseModel):
    """Error body returned when checkout fails."""

    error: str = Field(..., description="Error class name")
    detail: str = Field(..., description="Human-readable message")
    order_id: Optional[str] = Field(None, description="Order ID")
    execution_id: Optional[str] = Field(None, description="Execution ID for tracing")
    retryable: bool = Field(False, description="Whether rerunning checkout is safe")
    reconciliation_required: bool = Field(
        False, description="Charge made but status not persisted"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_error(
        cls,
        error: CheckoutError,
        execution_id: Optional[str] = None,
        reconciliation_required: bool = False,
    ) -> "CheckoutErrorResponse":
        """Map a checkout error to the API representation."""
        return cls(
            error=type(error).__name__,
            detail=str(error),
            order_id=error.order_id,
            execution_id=execution_id,
            retryable=error.retryable,
            reconciliation_required=reconciliation_required,
        )
