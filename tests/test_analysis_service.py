import json
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("PERSISTENCE_ENABLED", "0")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from creator_growth.ai.errors import NoProviderConfigured
from creator_growth.ai.types import ProviderConfig
from creator_growth.core.scoring import round_half_up
from creator_growth.reference import DEFAULT_TRENDS
from creator_growth.schemas.analysis import AnalysisRequest
from creator_growth.services.analysis_service import run_analysis
from creator_growth.services.pdf_report import DocumentRenderFailed
from creator_growth.services.personalization import fame_score_base

RESEARCH_JSON = json.dumps(
    {
        "trends": ["Short-form tutorials", "Authenticity-first storytelling", "Live Q&A", "Collabs"],
        "insights": ["Sponsors favour niche depth"],
        "opportunities": [{"type": "Affiliate", "earnings": "$300/month", "requirements": []}],
    }
)


class FakeClient:
    name = "fake"

    def __init__(self, response: str = RESEARCH_JSON, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = 0

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.response


def _request(**profile) -> AnalysisRequest:
    data = {
        "niche": "Tech & Gadgets",
        "platform": "YouTube",
        "followers": 120000,
        "engagement_rate": 0.06,
        "monthly_views": 800000,
        "goals": "launch a course",
        "challenges": "monetization",
    }
    data.update(profile)
    return AnalysisRequest(user_id="user-1", creator_profile=data)


class RunAnalysisTests(unittest.IsolatedAsyncioTestCase):
    async def test_result_assembly(self):
        client = FakeClient()
        result = await run_analysis(_request(), client=client, render_pdf=False)

        self.assertEqual(client.calls, 4)
        self.assertTrue(result.agent_id.startswith("agent_"))
        self.assertEqual(result.user_id, "user-1")
        self.assertGreaterEqual(result.analysis.fame_score, 0)
        self.assertLessEqual(result.analysis.fame_score, 100)
        self.assertEqual(
            result.analysis.trend_analysis,
            "Short-form tutorials | Authenticity-first storytelling | Live Q&A",
        )
        self.assertEqual(result.analysis.key_insights, ["Sponsors favour niche depth"])
        self.assertTrue(any("You have significant reach" in rec for rec in result.analysis.recommendations))
        self.assertEqual(len(result.growth_plan.next_month), 4)
        self.assertIsNone(result.pdf_url)

    async def test_repeated_runs_are_not_identical(self):
        first = await run_analysis(_request(), client=FakeClient(), render_pdf=False)
        second = await run_analysis(_request(), client=FakeClient(), render_pdf=False)
        self.assertNotEqual(first.agent_id, second.agent_id)

    async def test_repeated_runs_stay_within_five_points(self):
        scores = []
        for _ in range(12):
            result = await run_analysis(_request(), client=FakeClient(), render_pdf=False)
            scores.append(result.analysis.fame_score)
        self.assertLessEqual(max(scores) - min(scores), 5)

    async def test_every_provider_failing_falls_back_to_canned_research(self):
        request = _request(
            niche="Beauty & Skincare",
            platform="Instagram",
            followers=50000,
            engagement_rate=0.08,
            monthly_views=500000,
        )
        for _ in range(10):
            result = await run_analysis(
                request,
                client=FakeClient(error=TimeoutError("provider timed out")),
                render_pdf=False,
            )
            self.assertEqual(result.market_research.trends, list(DEFAULT_TRENDS))
            base = fame_score_base(request.creator_profile, result.market_research)
            self.assertAlmostEqual(base, 35.56)
            self.assertGreaterEqual(result.analysis.fame_score, round_half_up(base + 1))
            self.assertLessEqual(result.analysis.fame_score, round_half_up(base + 5))

    async def test_no_providers_is_rejected_before_research(self):
        with self.assertRaises(NoProviderConfigured):
            await run_analysis(_request(), providers=[])

    async def test_configured_provider_is_used(self):
        client = FakeClient()
        providers = [ProviderConfig(name="anthropic", api_key="k", model="m")]
        with patch("creator_growth.services.analysis_service.get_ai_client", return_value=client) as factory:
            await run_analysis(_request(), providers=providers, render_pdf=False)
        self.assertEqual(factory.call_args.args[0].name, "anthropic")
        self.assertEqual(client.calls, 4)

    async def test_failing_provider_still_produces_result(self):
        result = await run_analysis(_request(), client=FakeClient(error=RuntimeError("down")), render_pdf=False)
        self.assertEqual(len(result.market_research.trends), 4)
        self.assertEqual(result.market_research.monetization_opportunities[0].type, "Brand Partnerships")

    async def test_pdf_is_attached_as_data_url(self):
        result = await run_analysis(_request(), client=FakeClient(), render_pdf=True)
        self.assertTrue(result.pdf_url.startswith("data:application/pdf;base64,"))

    async def test_pdf_failure_leaves_url_empty(self):
        with patch(
            "creator_growth.services.analysis_service.render_analysis_pdf",
            side_effect=DocumentRenderFailed("broken"),
        ):
            result = await run_analysis(_request(), client=FakeClient(), render_pdf=True)
        self.assertIsNone(result.pdf_url)

    async def test_storage_failure_does_not_fail_analysis(self):
        with patch(
            "creator_growth.services.analysis_service.log_analysis_run",
            side_effect=RuntimeError("disk full"),
        ):
            result = await run_analysis(_request(), client=FakeClient(), render_pdf=False)
        self.assertTrue(result.agent_id)


if __name__ == "__main__":
    unittest.main()
