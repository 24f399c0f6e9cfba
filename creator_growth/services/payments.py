from __future__ import annotations

import hashlib
import logging
from typing import Any

from creator_growth.analytics.repository import PaymentRepository
from creator_growth.core.config import settings
from creator_growth.schemas.payments import PaymentRecord, PaymentRequest, PaymentRequestResponse

logger = logging.getLogger(__name__)


class PaymentConfigError(RuntimeError):
    def __init__(self, message: str, *, code: str = "payment_not_configured"):
        super().__init__(message)
        self.code = code


def payu_hash(params: dict[str, str], salt: str) -> str:
    """sha512 over key|txnid|amount|productinfo|firstname|email|||||||||||salt."""
    raw = "|".join(
        [
            params["key"],
            params["txnid"],
            params["amount"],
            params["productinfo"],
            params["firstname"],
            params["email"],
        ]
    )
    raw = f"{raw}|||||||||||{salt}"
    return hashlib.sha512(raw.encode("utf-8")).hexdigest()


def build_payment_request(payment: PaymentRequest) -> PaymentRequestResponse:
    if not settings.payu_key or not settings.payu_salt:
        raise PaymentConfigError("PayU is not configured. Set PAYU_KEY and PAYU_SALT")

    params = {
        "key": settings.payu_key,
        "txnid": payment.txnid,
        "amount": payment.amount,
        "productinfo": payment.productinfo,
        "firstname": payment.firstname,
        "email": payment.email,
        "surl": settings.payu_success_url,
        "furl": settings.payu_failure_url,
    }
    params["hash"] = payu_hash(params, settings.payu_salt)
    logger.info("payment_request_built txnid=%s", payment.txnid)
    return PaymentRequestResponse(url=f"{settings.payu_base_url.rstrip('/')}/_payment", params=params)


def _as_text(value: Any) -> str | None:
    return str(value) if value is not None else None


def payment_record_from_payload(payload: dict[str, Any], *, status: str | None = None) -> PaymentRecord | None:
    """Map a PayU or JSON callback body onto a record; None when no transaction id is present.

    `status` overrides the body's own status, as the success and failure callbacks do.
    """
    txnid = payload.get("txnid") or payload.get("id")
    if not txnid:
        return None
    return PaymentRecord(
        txnid=str(txnid),
        amount=_as_text(payload.get("amount") or payload.get("price")),
        email=_as_text(payload.get("email")),
        status=status or str(payload.get("status") or "pending"),
        raw_payload=payload,
    )


def record_payment_webhook(
    payload: dict[str, Any],
    repository: PaymentRepository,
    *,
    status: str | None = None,
) -> bool:
    """Persist a PayU callback. Returns True when the payment is stored, including earlier duplicates."""
    record = payment_record_from_payload(payload, status=status)
    if record is None:
        logger.warning("payment_webhook_missing_txnid keys=%s", sorted(payload))
        return False
    inserted = repository.save(record)
    logger.info("payment_webhook_recorded txnid=%s status=%s new=%s", record.txnid, record.status, inserted)
    return True
