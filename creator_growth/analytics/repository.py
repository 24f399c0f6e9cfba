"""Stores for quiz submissions, download events and payments.

The SQLite stores open a short-lived connection per call. With persistence
disabled the routers get process-wide in-memory stores instead, so nothing is
written to disk. Quiz submissions are keyed by user id and upserted; payments
are keyed by transaction id and a repeated transaction id leaves the stored
row untouched.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from creator_growth.analytics.db import connect, get_db_path, init_db, utc_now
from creator_growth.core.config import settings
from creator_growth.schemas.payments import PaymentRecord
from creator_growth.schemas.user_analytics import UserDownloadRecord, UserQuizData

logger = logging.getLogger(__name__)


class PersistenceFailed(RuntimeError):
    def __init__(self, message: str, *, code: str = "persistence_failed"):
        super().__init__(message)
        self.code = code


class QuizRepository(Protocol):
    def save(self, quiz: UserQuizData) -> UserQuizData: ...

    def get_by_user_id(self, user_id: str) -> UserQuizData | None: ...

    def list_all(self) -> list[UserQuizData]: ...


class DownloadRepository(Protocol):
    def save(self, record: UserDownloadRecord) -> UserDownloadRecord: ...

    def get_by_user_id(self, user_id: str) -> list[UserDownloadRecord]: ...

    def list_all(self) -> list[UserDownloadRecord]: ...


class PaymentRepository(Protocol):
    def save(self, record: PaymentRecord) -> bool: ...

    def get_by_txnid(self, txnid: str) -> PaymentRecord | None: ...

    def list_all(self) -> list[PaymentRecord]: ...


class _SqliteStore:
    def __init__(self, db_path: str | Path | None = None):
        self.db_path = get_db_path(db_path)
        init_db(self.db_path)

    def _connect(self) -> sqlite3.Connection:
        return connect(self.db_path)


def _parse_ts(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


class SqliteQuizRepository(_SqliteStore):
    def save(self, quiz: UserQuizData) -> UserQuizData:
        now = utc_now()
        existing = self.get_by_user_id(quiz.user_id)
        created_at = existing.created_at.isoformat() if existing and existing.created_at else now
        stored = quiz.model_copy(update={"created_at": _parse_ts(created_at), "updated_at": _parse_ts(now)})
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO quiz_submissions (
                        user_id, name, email, niche, primary_platform, follower_count,
                        payload_json, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(user_id) DO UPDATE SET
                        name = excluded.name,
                        email = excluded.email,
                        niche = excluded.niche,
                        primary_platform = excluded.primary_platform,
                        follower_count = excluded.follower_count,
                        payload_json = excluded.payload_json,
                        updated_at = excluded.updated_at
                    """,
                    (
                        stored.user_id,
                        stored.name,
                        stored.email,
                        stored.niche,
                        stored.primary_platform,
                        stored.follower_count,
                        stored.model_dump_json(),
                        created_at,
                        now,
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            logger.error("quiz_save_failed user_id=%s: %s", quiz.user_id, exc)
            raise PersistenceFailed(f"Could not store quiz data for {quiz.user_id}") from exc
        return stored

    def get_by_user_id(self, user_id: str) -> UserQuizData | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT payload_json FROM quiz_submissions WHERE user_id = ?",
                (user_id,),
            ).fetchone()
        if row is None:
            return None
        return UserQuizData.model_validate_json(row["payload_json"])

    def list_all(self) -> list[UserQuizData]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT payload_json FROM quiz_submissions ORDER BY created_at DESC"
            ).fetchall()
        return [UserQuizData.model_validate_json(row["payload_json"]) for row in rows]


def new_download_id(user_id: str) -> str:
    return f"download_{user_id}_{int(time.time() * 1000)}"


class SqliteDownloadRepository(_SqliteStore):
    def save(self, record: UserDownloadRecord) -> UserDownloadRecord:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO download_events (
                        id, user_id, download_type, file_name, product_id, file_size,
                        metadata_json, downloaded_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.id,
                        record.user_id,
                        record.download_type,
                        record.file_name,
                        record.product_id,
                        record.file_size,
                        json.dumps(record.metadata, ensure_ascii=False),
                        record.downloaded_at.isoformat(),
                    ),
                )
                conn.commit()
        except sqlite3.Error as exc:
            logger.error("download_save_failed user_id=%s: %s", record.user_id, exc)
            raise PersistenceFailed(f"Could not store download for {record.user_id}") from exc
        return record

    @staticmethod
    def _to_record(row: sqlite3.Row) -> UserDownloadRecord:
        return UserDownloadRecord(
            id=row["id"],
            user_id=row["user_id"],
            download_type=row["download_type"],
            file_name=row["file_name"],
            product_id=row["product_id"],
            file_size=row["file_size"],
            metadata=json.loads(row["metadata_json"] or "{}"),
            downloaded_at=row["downloaded_at"],
        )

    def get_by_user_id(self, user_id: str) -> list[UserDownloadRecord]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM download_events WHERE user_id = ? ORDER BY downloaded_at",
                (user_id,),
            ).fetchall()
        return [self._to_record(row) for row in rows]

    def list_all(self) -> list[UserDownloadRecord]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM download_events ORDER BY downloaded_at").fetchall()
        return [self._to_record(row) for row in rows]


class SqlitePaymentRepository(_SqliteStore):
    def save(self, record: PaymentRecord) -> bool:
        """Store a payment; returns False when the transaction id is already recorded."""
        try:
            with self._connect() as conn:
                cur = conn.execute(
                    """
                    INSERT OR IGNORE INTO payments (
                        txnid, amount, email, status, payment_method, raw_payload_json, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.txnid,
                        record.amount,
                        record.email,
                        record.status,
                        record.payment_method,
                        json.dumps(record.raw_payload, ensure_ascii=False, default=str),
                        utc_now(),
                    ),
                )
                conn.commit()
                inserted = cur.rowcount == 1
        except sqlite3.Error as exc:
            logger.error("payment_save_failed txnid=%s: %s", record.txnid, exc)
            raise PersistenceFailed(f"Could not store payment {record.txnid}") from exc
        if not inserted:
            logger.info("payment_duplicate txnid=%s", record.txnid)
        return inserted

    @staticmethod
    def _to_record(row: sqlite3.Row) -> PaymentRecord:
        payload: dict[str, Any] = json.loads(row["raw_payload_json"] or "{}")
        return PaymentRecord(
            txnid=row["txnid"],
            amount=row["amount"],
            email=row["email"],
            status=row["status"],
            payment_method=row["payment_method"],
            raw_payload=payload,
            created_at=row["created_at"],
        )

    def get_by_txnid(self, txnid: str) -> PaymentRecord | None:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM payments WHERE txnid = ?", (txnid,)).fetchone()
        return self._to_record(row) if row else None

    def list_all(self) -> list[PaymentRecord]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM payments ORDER BY id").fetchall()
        return [self._to_record(row) for row in rows]


class InMemoryQuizRepository:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._quizzes: dict[str, UserQuizData] = {}

    def save(self, quiz: UserQuizData) -> UserQuizData:
        now = datetime.fromisoformat(utc_now())
        with self._lock:
            existing = self._quizzes.get(quiz.user_id)
            created_at = existing.created_at if existing and existing.created_at else now
            stored = quiz.model_copy(update={"created_at": created_at, "updated_at": now})
            self._quizzes[quiz.user_id] = stored
        return stored

    def get_by_user_id(self, user_id: str) -> UserQuizData | None:
        with self._lock:
            return self._quizzes.get(user_id)

    def list_all(self) -> list[UserQuizData]:
        with self._lock:
            return list(reversed(self._quizzes.values()))


class InMemoryDownloadRepository:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[UserDownloadRecord] = []

    def save(self, record: UserDownloadRecord) -> UserDownloadRecord:
        with self._lock:
            self._records.append(record)
        return record

    def get_by_user_id(self, user_id: str) -> list[UserDownloadRecord]:
        with self._lock:
            return [record for record in self._records if record.user_id == user_id]

    def list_all(self) -> list[UserDownloadRecord]:
        with self._lock:
            return list(self._records)


class InMemoryPaymentRepository:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._payments: dict[str, PaymentRecord] = {}

    def save(self, record: PaymentRecord) -> bool:
        with self._lock:
            if record.txnid in self._payments:
                logger.info("payment_duplicate txnid=%s", record.txnid)
                return False
            stamped = record.created_at or datetime.fromisoformat(utc_now())
            self._payments[record.txnid] = record.model_copy(update={"created_at": stamped})
        return True

    def get_by_txnid(self, txnid: str) -> PaymentRecord | None:
        with self._lock:
            return self._payments.get(txnid)

    def list_all(self) -> list[PaymentRecord]:
        with self._lock:
            return list(self._payments.values())


_memory_quizzes = InMemoryQuizRepository()
_memory_downloads = InMemoryDownloadRepository()
_memory_payments = InMemoryPaymentRepository()


def default_quiz_repository() -> QuizRepository:
    if settings.persistence_enabled:
        return SqliteQuizRepository()
    return _memory_quizzes


def default_download_repository() -> DownloadRepository:
    if settings.persistence_enabled:
        return SqliteDownloadRepository()
    return _memory_downloads


def default_payment_repository() -> PaymentRepository:
    if settings.persistence_enabled:
        return SqlitePaymentRepository()
    return _memory_payments
