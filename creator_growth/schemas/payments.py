from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PaymentRequest(BaseModel):
    txnid: str = Field(min_length=1, max_length=100)
    amount: str = Field(min_length=1, max_length=20)
    firstname: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    productinfo: str = Field(min_length=1, max_length=300)


class PaymentRequestResponse(BaseModel):
    url: str
    params: dict[str, str]


class PaymentRecord(BaseModel):
    txnid: str
    amount: str | None = None
    email: str | None = None
    status: str = "pending"
    payment_method: str = "payu"
    raw_payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None


class PaymentWebhookResponse(BaseModel):
    message: str
    stored: bool
    timestamp: datetime
