import os
import sys
import tempfile
import unittest
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("PERSISTENCE_ENABLED", "0")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from creator_growth.analytics.db import get_analysis_runs, log_analysis_run
from creator_growth.analytics.engagement import (
    build_admin_row,
    build_user_summary,
    calculate_engagement_score,
    calculate_platform_distribution,
)
from creator_growth.analytics.repository import (
    InMemoryDownloadRepository,
    InMemoryPaymentRepository,
    InMemoryQuizRepository,
    SqliteDownloadRepository,
    SqlitePaymentRepository,
    SqliteQuizRepository,
    default_download_repository,
    default_payment_repository,
    default_quiz_repository,
)
from creator_growth.core.config import settings
from creator_growth.schemas.payments import PaymentRecord
from creator_growth.schemas.user_analytics import UserDownloadRecord, UserQuizData


def _quiz(**overrides) -> UserQuizData:
    data = {
        "user_id": "user-1",
        "name": "Meera",
        "email": "meera@example.com",
        "primary_platform": "Instagram",
        "secondary_platforms": ["YouTube", "Instagram"],
        "follower_count": 50000,
        "engagement_rate": 0.05,
        "niche": "Food & Cooking",
        "posting_frequency": "daily",
        "experience": ["cooking", "photography"],
    }
    data.update(overrides)
    return UserQuizData(**data)


def _download(idx: int, user_id: str = "user-1", size: int | None = 1024) -> UserDownloadRecord:
    return UserDownloadRecord(
        id=f"download_{user_id}_{idx}",
        user_id=user_id,
        download_type="pdf",
        file_name=f"kit-{idx}.pdf",
        downloaded_at=datetime(2026, 1, idx, tzinfo=timezone.utc),
        file_size=size,
        metadata={"source": "test"},
    )


class RepositoryTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.db_path = Path(self._tmp.name) / "analytics.db"

    def tearDown(self):
        self._tmp.cleanup()


class QuizRepositoryTests(RepositoryTestCase):
    def test_save_and_get(self):
        repo = SqliteQuizRepository(self.db_path)
        stored = repo.save(_quiz())
        self.assertIsNotNone(stored.created_at)
        loaded = repo.get_by_user_id("user-1")
        self.assertEqual(loaded.email, "meera@example.com")
        self.assertEqual(loaded.secondary_platforms, ["YouTube", "Instagram"])
        self.assertIsNone(repo.get_by_user_id("nobody"))

    def test_resubmission_upserts_and_keeps_created_at(self):
        repo = SqliteQuizRepository(self.db_path)
        first = repo.save(_quiz())
        second = repo.save(_quiz(follower_count=90000))
        self.assertEqual(first.created_at, second.created_at)
        self.assertEqual(len(repo.list_all()), 1)
        self.assertEqual(repo.get_by_user_id("user-1").follower_count, 90000)

    def test_list_all(self):
        repo = SqliteQuizRepository(self.db_path)
        repo.save(_quiz())
        repo.save(_quiz(user_id="user-2", email="b@example.com"))
        self.assertEqual({q.user_id for q in repo.list_all()}, {"user-1", "user-2"})


class DownloadRepositoryTests(RepositoryTestCase):
    def test_save_and_filter_by_user(self):
        repo = SqliteDownloadRepository(self.db_path)
        repo.save(_download(1))
        repo.save(_download(2))
        repo.save(_download(3, user_id="user-2"))
        records = repo.get_by_user_id("user-1")
        self.assertEqual([r.file_name for r in records], ["kit-1.pdf", "kit-2.pdf"])
        self.assertEqual(records[0].metadata, {"source": "test"})
        self.assertEqual(len(repo.list_all()), 3)


class PaymentRepositoryTests(RepositoryTestCase):
    def test_duplicate_txnid_is_a_no_op(self):
        repo = SqlitePaymentRepository(self.db_path)
        self.assertTrue(repo.save(PaymentRecord(txnid="txn-1", amount="499", status="success")))
        self.assertFalse(repo.save(PaymentRecord(txnid="txn-1", amount="999", status="failure")))
        stored = repo.get_by_txnid("txn-1")
        self.assertEqual(stored.amount, "499")
        self.assertEqual(stored.status, "success")
        self.assertEqual(len(repo.list_all()), 1)


class AnalysisRunLogTests(RepositoryTestCase):
    def test_runs_are_recorded_per_user(self):
        SqliteQuizRepository(self.db_path)
        log_analysis_run(
            agent_id="agent_1",
            user_id="user-1",
            niche="Tech",
            platform="YouTube",
            fame_score=55,
            result={"ok": True},
            db_path=self.db_path,
        )
        runs = get_analysis_runs("user-1", db_path=self.db_path)
        self.assertEqual(len(runs), 1)
        self.assertEqual(runs[0]["fame_score"], 55)
        self.assertEqual(get_analysis_runs("user-2", db_path=self.db_path), [])


class InMemoryRepositoryTests(unittest.TestCase):
    def test_quiz_upsert_keeps_created_at(self):
        repo = InMemoryQuizRepository()
        first = repo.save(_quiz())
        second = repo.save(_quiz(follower_count=90000))
        self.assertEqual(first.created_at, second.created_at)
        self.assertEqual(repo.get_by_user_id("user-1").follower_count, 90000)
        self.assertEqual(len(repo.list_all()), 1)

    def test_downloads_filter_by_user(self):
        repo = InMemoryDownloadRepository()
        repo.save(_download(1))
        repo.save(_download(2, user_id="user-2"))
        self.assertEqual([r.id for r in repo.get_by_user_id("user-1")], ["download_user-1_1"])
        self.assertEqual(len(repo.list_all()), 2)

    def test_payment_duplicate_keeps_first(self):
        repo = InMemoryPaymentRepository()
        self.assertTrue(repo.save(PaymentRecord(txnid="txn-1", amount="499", status="success")))
        self.assertFalse(repo.save(PaymentRecord(txnid="txn-1", amount="999", status="failure")))
        self.assertEqual(repo.get_by_txnid("txn-1").status, "success")
        self.assertIsNotNone(repo.get_by_txnid("txn-1").created_at)


class PersistenceSwitchTests(RepositoryTestCase):
    def _settings(self, enabled: bool):
        return replace(settings, persistence_enabled=enabled, db_path=str(self.db_path))

    def test_disabled_persistence_never_touches_disk(self):
        disabled = self._settings(False)
        with patch("creator_growth.analytics.repository.settings", disabled), patch(
            "creator_growth.analytics.db.settings", disabled
        ):
            quizzes = default_quiz_repository()
            downloads = default_download_repository()
            payments = default_payment_repository()
            quizzes.save(_quiz(user_id="user-offline"))
            downloads.save(_download(4, user_id="user-offline"))
            self.assertTrue(payments.save(PaymentRecord(txnid="txn-offline")))
            self.assertEqual(get_analysis_runs("user-offline"), [])

        self.assertIsInstance(quizzes, InMemoryQuizRepository)
        self.assertIsInstance(downloads, InMemoryDownloadRepository)
        self.assertIsInstance(payments, InMemoryPaymentRepository)
        self.assertEqual(quizzes.get_by_user_id("user-offline").user_id, "user-offline")
        self.assertIsNotNone(payments.get_by_txnid("txn-offline"))
        self.assertFalse(self.db_path.exists())

    def test_in_memory_stores_are_shared_across_requests(self):
        with patch("creator_growth.analytics.repository.settings", self._settings(False)):
            default_quiz_repository().save(_quiz(user_id="user-shared"))
            self.assertIsNotNone(default_quiz_repository().get_by_user_id("user-shared"))

    def test_enabled_persistence_uses_configured_database(self):
        enabled = self._settings(True)
        with patch("creator_growth.analytics.repository.settings", enabled), patch(
            "creator_growth.analytics.db.settings", enabled
        ):
            payments = default_payment_repository()
            payments.save(PaymentRecord(txnid="txn-disk"))

        self.assertIsInstance(payments, SqlitePaymentRepository)
        self.assertTrue(self.db_path.exists())
        self.assertIsNotNone(SqlitePaymentRepository(self.db_path).get_by_txnid("txn-disk"))


class EngagementScoreTests(unittest.TestCase):
    def test_components(self):
        # 15 followers + 17.5 engagement + 20 daily + 6 experience
        self.assertEqual(calculate_engagement_score(_quiz()), 59)

    def test_defaults_for_unknown_frequency_and_missing_experience(self):
        quiz = _quiz(follower_count=0, engagement_rate=0.0, posting_frequency="sometimes", experience=[])
        self.assertEqual(calculate_engagement_score(quiz), 15)

    def test_caps(self):
        quiz = _quiz(follower_count=10**7, engagement_rate=0.5, experience=["x"] * 9)
        self.assertEqual(calculate_engagement_score(quiz), 100)

    def test_platform_distribution(self):
        self.assertEqual(calculate_platform_distribution(_quiz()), {"Instagram": 2, "YouTube": 1})

    def test_user_summary_and_admin_row(self):
        downloads = [_download(1), _download(2, size=None)]
        summary = build_user_summary(_quiz(), downloads)
        self.assertEqual(summary.total_downloads, 2)
        self.assertEqual(summary.total_download_size, 1024)
        self.assertEqual(summary.total_quizzes, 1)
        self.assertEqual(summary.last_activity_at, datetime(2026, 1, 2, tzinfo=timezone.utc))

        row = build_admin_row(_quiz(), downloads)
        self.assertEqual(row.followers, 50000)
        self.assertEqual(row.engagement_score, 59)


if __name__ == "__main__":
    unittest.main()
