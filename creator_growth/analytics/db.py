from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from creator_growth.core.config import settings


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_db_path(db_path: str | Path | None = None) -> Path:
    return Path(db_path or settings.db_path)


def connect(db_path: str | Path | None = None) -> sqlite3.Connection:
    conn = sqlite3.connect(get_db_path(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str | Path | None = None) -> None:
    if not settings.persistence_enabled and db_path is None:
        return
    path = get_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS quiz_submissions (
                user_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                email TEXT NOT NULL,
                niche TEXT,
                primary_platform TEXT,
                follower_count INTEGER NOT NULL DEFAULT 0,
                payload_json TEXT NOT NULL,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS download_events (
                id TEXT PRIMARY KEY,
                user_id TEXT NOT NULL,
                download_type TEXT NOT NULL,
                file_name TEXT NOT NULL,
                product_id TEXT,
                file_size INTEGER,
                metadata_json TEXT,
                downloaded_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_download_events_user_id
            ON download_events (user_id)
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS payments (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                txnid TEXT NOT NULL UNIQUE,
                amount TEXT,
                email TEXT,
                status TEXT NOT NULL,
                payment_method TEXT NOT NULL,
                raw_payload_json TEXT,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS analysis_runs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                created_at TEXT NOT NULL,
                agent_id TEXT NOT NULL,
                user_id TEXT NOT NULL,
                niche TEXT,
                platform TEXT,
                fame_score INTEGER NOT NULL,
                result_json TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_analysis_runs_user_id
            ON analysis_runs (user_id)
            """
        )
        conn.commit()


def log_analysis_run(
    *,
    agent_id: str,
    user_id: str,
    niche: str,
    platform: str,
    fame_score: int,
    result: dict[str, Any],
    db_path: str | Path | None = None,
) -> None:
    if not settings.persistence_enabled and db_path is None:
        return
    with sqlite3.connect(get_db_path(db_path)) as conn:
        conn.execute(
            """
            INSERT INTO analysis_runs (
                created_at, agent_id, user_id, niche, platform, fame_score, result_json
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                utc_now(),
                agent_id,
                user_id,
                niche,
                platform,
                fame_score,
                json.dumps(result, ensure_ascii=False, default=str),
            ),
        )
        conn.commit()


def get_analysis_runs(user_id: str, limit: int = 20, db_path: str | Path | None = None) -> list[dict[str, Any]]:
    if not settings.persistence_enabled and db_path is None:
        return []
    with connect(db_path) as conn:
        cur = conn.execute(
            """
            SELECT created_at, agent_id, user_id, niche, platform, fame_score
            FROM analysis_runs
            WHERE user_id = ?
            ORDER BY id DESC
            LIMIT ?
            """,
            (user_id, limit),
        )
        return [dict(row) for row in cur.fetchall()]
