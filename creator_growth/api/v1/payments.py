import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from creator_growth.analytics.repository import (
    PaymentRepository,
    PersistenceFailed,
    default_payment_repository,
)
from creator_growth.core.rate_limit import rate_limit
from creator_growth.schemas.payments import PaymentRequest, PaymentRequestResponse, PaymentWebhookResponse
from creator_growth.services.payments import PaymentConfigError, build_payment_request, record_payment_webhook

logger = logging.getLogger(__name__)

router = APIRouter()


def get_payment_repository() -> PaymentRepository:
    return default_payment_repository()


async def _read_payload(request: Request) -> dict:
    content_type = request.headers.get("content-type", "")
    if "form" in content_type:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    body = await request.body()
    payload = json.loads(body or b"{}")
    if not isinstance(payload, dict):
        raise ValueError("webhook body must be an object")
    return payload


@router.post("/payments", response_model=PaymentRequestResponse)
@rate_limit()
async def create_payment(request: Request, payload: PaymentRequest):
    _ = request
    try:
        return build_payment_request(payload)
    except PaymentConfigError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


async def _record_callback(
    request: Request,
    payments: PaymentRepository,
    *,
    message: str,
    payment_status: str | None = None,
) -> PaymentWebhookResponse:
    try:
        payload = await _read_payload(request)
    except ValueError as exc:
        logger.error("payment_webhook_unreadable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Webhook processing failed", "message": str(exc)},
        ) from exc

    try:
        stored = record_payment_webhook(payload, payments, status=payment_status)
    except ValidationError as exc:
        logger.error("payment_webhook_invalid errors=%s", exc.error_count())
        stored = False
    except PersistenceFailed as exc:
        logger.error("payment_webhook_not_stored code=%s: %s", exc.code, exc)
        stored = False

    return PaymentWebhookResponse(
        message=message,
        stored=stored,
        timestamp=datetime.now(timezone.utc),
    )


@router.post("/payments/webhook", response_model=PaymentWebhookResponse)
async def payment_webhook(
    request: Request,
    payments: PaymentRepository = Depends(get_payment_repository),
):
    return await _record_callback(request, payments, message="OK")


@router.post("/payments/success", response_model=PaymentWebhookResponse)
async def payment_success(
    request: Request,
    payments: PaymentRepository = Depends(get_payment_repository),
):
    return await _record_callback(
        request,
        payments,
        message="Payment Success Recorded",
        payment_status="success",
    )


@router.post("/payments/failure", response_model=PaymentWebhookResponse)
async def payment_failure(
    request: Request,
    payments: PaymentRepository = Depends(get_payment_repository),
):
    return await _record_callback(
        request,
        payments,
        message="Payment Failed Recorded",
        payment_status="failure",
    )
