import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("PERSISTENCE_ENABLED", "0")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from creator_growth.schemas.analysis import AdaptationFactors, CreatorProfile, PersonalizationProfile
from creator_growth.services.market_research import fallback_market_research
from creator_growth.services.recommendations import (
    describe_competitive_advantage,
    describe_monetization_strategy,
    generate_personalized_growth_plan,
    generate_personalized_recommendations,
    trend_recommendation,
)


def _profile(**overrides) -> CreatorProfile:
    data = {
        "niche": "Tech & Gadgets",
        "platform": "YouTube",
        "followers": 20000,
        "engagement_rate": 0.05,
        "monthly_views": 300000,
        "goals": "grow an audience",
        "challenges": "",
    }
    data.update(overrides)
    return CreatorProfile(**data)


def _personalization(profile: CreatorProfile, **factors) -> PersonalizationProfile:
    values = {
        "risk_tolerance": 2.0,
        "time_to_monetize": "long-term",
        "content_quality": 1.0,
        "community_engagement": 3.0,
    }
    values.update(factors)
    return PersonalizationProfile(
        user_id="user-1",
        agent_id="agent_x",
        creator_profile=profile,
        personality_score="abcdef123456",
        adaptation_factors=AdaptationFactors(**values),
    )


class RecommendationRuleTests(unittest.TestCase):
    def setUp(self):
        self.market = fallback_market_research()

    def test_only_trend_lines_when_no_rule_matches(self):
        recs = generate_personalized_recommendations(self.market, _personalization(_profile(followers=60000)))
        self.assertEqual(len(recs), 2)
        self.assertTrue(recs[0].startswith("Capitalize on short-form video trend"))
        self.assertTrue(recs[1].startswith("Trend alert"))

    def test_all_matching_rules_fire_in_table_order(self):
        profile = _profile(followers=20000, challenges="Low ENGAGEMENT and slow monetization")
        recs = generate_personalized_recommendations(
            self.market,
            _personalization(profile, community_engagement=8.0, content_quality=7.0),
        )
        self.assertEqual(len(recs), 10)
        self.assertIn("community engagement is strong", recs[0])
        self.assertIn("Quality over quantity", recs[2])
        self.assertIn("posting frequency optimization", recs[4])
        self.assertIn("affiliate marketing", recs[6])
        self.assertIn("$500-2000 per post", recs[7])

    def test_large_reach_rule(self):
        recs = generate_personalized_recommendations(self.market, _personalization(_profile(followers=150000)))
        self.assertIn("You have significant reach", recs[0])

    def test_trend_keywords_match_case_insensitively(self):
        self.assertIn("short-form video trend", trend_recommendation("Short-Form clips"))
        self.assertIn("authentic storytelling", trend_recommendation("Rise of AUTHENTICITY"))
        self.assertTrue(trend_recommendation("Live shopping").startswith("Trend alert"))


class GrowthPlanTests(unittest.TestCase):
    def test_every_horizon_has_four_items(self):
        market = fallback_market_research()
        for followers in (0, 20000, 75000, 500000):
            plan = generate_personalized_growth_plan(_profile(followers=followers), market)
            self.assertEqual(len(plan.next_month), 4)
            self.assertEqual(len(plan.next_quarter), 4)
            self.assertEqual(len(plan.next_year), 4)

    def test_targets_are_interpolated_from_followers(self):
        plan = generate_personalized_growth_plan(_profile(followers=20000), fallback_market_research())
        self.assertIn("Scale to 30,000+ followers through consistency", plan.next_quarter)
        self.assertIn("Target 60,000-100,000 followers (3-5x growth) through strategic content", plan.next_year)

    def test_immediate_creators_get_partnership_goals(self):
        plan = generate_personalized_growth_plan(_profile(followers=250000), fallback_market_research())
        self.assertEqual(plan.next_quarter[0], "Negotiate and finalize 2-3 brand partnerships")
        self.assertIn("Generate $250,000+ annual income through multiple revenue streams", plan.next_year)


class NarrativeTests(unittest.TestCase):
    def test_competitive_advantage_mentions_niche_and_goals(self):
        profile = _profile()
        factors = _personalization(profile).adaptation_factors
        text = describe_competitive_advantage(profile, factors)
        self.assertIn("Tech & Gadgets", text)
        self.assertIn("grow an audience", text)
        self.assertIn("authentic approach", text)

    def test_monetization_strategy_follows_factors(self):
        profile = _profile()
        slow = _personalization(profile).adaptation_factors
        fast = _personalization(profile, time_to_monetize="immediate", community_engagement=9.0).adaptation_factors
        self.assertIn("affiliate marketing", describe_monetization_strategy(slow))
        self.assertIn("premium brand partnerships", describe_monetization_strategy(fast))
        self.assertIn("membership/courses", describe_monetization_strategy(fast))


if __name__ == "__main__":
    unittest.main()
