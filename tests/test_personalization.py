import os
import re
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("PERSISTENCE_ENABLED", "0")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from creator_growth.core.scoring import round_half_up
from creator_growth.schemas.analysis import CreatorProfile
from creator_growth.services.market_research import fallback_market_research
from creator_growth.services.personalization import (
    calculate_adaptation_factors,
    calculate_fame_score,
    fame_score_base,
    fingerprint_offset,
    generate_market_position,
    generate_personality_fingerprint,
    generate_unique_agent_id,
)


def _profile(**overrides) -> CreatorProfile:
    data = {
        "name": "Asha",
        "niche": "Fitness & Wellness",
        "platform": "Instagram",
        "followers": 200000,
        "engagement_rate": 0.08,
        "monthly_views": 2000000,
        "content": "Home workouts",
        "goals": "Launch a program",
        "challenges": "engagement dropping",
    }
    data.update(overrides)
    return CreatorProfile(**data)


def _fixed_entropy(value: bytes):
    return lambda size: value[:size].ljust(size, b"\0")


class AdaptationFactorTests(unittest.TestCase):
    def test_degenerate_profile_is_clamped_to_lower_bound(self):
        factors = calculate_adaptation_factors(_profile(followers=0, engagement_rate=0.0))
        self.assertEqual(factors.risk_tolerance, 1.0)
        self.assertEqual(factors.content_quality, 1.0)
        self.assertEqual(factors.community_engagement, 3.0)
        self.assertEqual(factors.time_to_monetize, "long-term")

    def test_huge_profile_is_clamped_to_upper_bound(self):
        factors = calculate_adaptation_factors(_profile(followers=50_000_000, engagement_rate=1.0))
        self.assertEqual(factors.risk_tolerance, 10.0)
        for value in (factors.risk_tolerance, factors.content_quality, factors.community_engagement):
            self.assertGreaterEqual(value, 1.0)
            self.assertLessEqual(value, 10.0)

    def test_time_to_monetize_buckets(self):
        self.assertEqual(calculate_adaptation_factors(_profile(followers=100000)).time_to_monetize, "immediate")
        self.assertEqual(calculate_adaptation_factors(_profile(followers=50000)).time_to_monetize, "short-term")
        self.assertEqual(calculate_adaptation_factors(_profile(followers=49999)).time_to_monetize, "long-term")

    def test_risk_tolerance_non_decreasing_in_followers(self):
        previous = 0.0
        for followers in (0, 1000, 25000, 60000, 150000, 400000, 2000000):
            value = calculate_adaptation_factors(_profile(followers=followers)).risk_tolerance
            self.assertGreaterEqual(value, previous)
            previous = value


class AgentIdTests(unittest.TestCase):
    def test_format(self):
        agent_id = generate_unique_agent_id("user-1", clock=lambda: 1700000000.123)
        self.assertRegex(agent_id, r"^agent_[0-9a-f]{16}_1700000000123$")

    def test_same_inputs_produce_distinct_ids(self):
        ids = {generate_unique_agent_id("user-1", clock=lambda: 1700000000.0) for _ in range(20)}
        self.assertEqual(len(ids), 20)

    def test_pinned_entropy_and_clock_are_reproducible(self):
        kwargs = {"entropy": _fixed_entropy(b"seed"), "clock": lambda: 1700000000.0}
        self.assertEqual(generate_unique_agent_id("user-1", **kwargs), generate_unique_agent_id("user-1", **kwargs))


class FingerprintTests(unittest.TestCase):
    def test_fingerprint_is_twelve_hex_chars(self):
        fingerprint = generate_personality_fingerprint("user-1", _profile(), "agent_x")
        self.assertTrue(re.fullmatch(r"[0-9a-f]{12}", fingerprint))

    def test_identical_inputs_differ_only_through_entropy(self):
        clock = lambda: 1700000000.0  # noqa: E731
        first = generate_personality_fingerprint(
            "user-1", _profile(), "agent_x", entropy=_fixed_entropy(b"a"), clock=clock
        )
        second = generate_personality_fingerprint(
            "user-1", _profile(), "agent_x", entropy=_fixed_entropy(b"b"), clock=clock
        )
        repeat = generate_personality_fingerprint(
            "user-1", _profile(), "agent_x", entropy=_fixed_entropy(b"a"), clock=clock
        )
        self.assertNotEqual(first, second)
        self.assertEqual(first, repeat)

    def test_fresh_entropy_by_default(self):
        clock = lambda: 1700000000.0  # noqa: E731
        values = {
            generate_personality_fingerprint("user-1", _profile(), "agent_x", clock=clock) for _ in range(10)
        }
        self.assertEqual(len(values), 10)


class FameScoreTests(unittest.TestCase):
    def setUp(self):
        self.market = fallback_market_research()

    def test_offset_is_between_one_and_five(self):
        self.assertEqual(fingerprint_offset("00000000aaaa"), 1)
        self.assertEqual(fingerprint_offset("00000004aaaa"), 5)
        self.assertEqual(fingerprint_offset("00000005aaaa"), 1)
        self.assertEqual(fingerprint_offset("ffffffffffff"), int("ffffffff", 16) % 5 + 1)

    def test_engagement_is_treated_as_raw_fraction(self):
        profile = _profile()
        # 30 (followers) + 0.08 * 7 (engagement) + 20 (reach) + 10 (market bonus)
        self.assertAlmostEqual(fame_score_base(profile, self.market), 60.56)
        self.assertEqual(calculate_fame_score(profile, self.market, "00000000abcd"), 62)

    def test_percentage_engagement_reading_is_not_used(self):
        profile = _profile()
        percent_reading = 30 + min(35, profile.engagement_rate * 100 * 7) + 20 + 10 + 1
        self.assertEqual(percent_reading, 96)
        self.assertNotEqual(calculate_fame_score(profile, self.market, "00000000abcd"), percent_reading)

    def test_score_stays_in_range_across_random_fingerprints(self):
        for profile in (_profile(followers=0, engagement_rate=0.0, monthly_views=0), _profile(followers=10**9)):
            for _ in range(50):
                fingerprint = generate_personality_fingerprint("user-1", profile, "agent_x")
                score = calculate_fame_score(profile, self.market, fingerprint)
                self.assertGreaterEqual(score, 0)
                self.assertLessEqual(score, 100)

    def test_score_stays_within_five_points_of_base(self):
        profile = _profile(followers=50000, engagement_rate=0.08, monthly_views=500000)
        base = fame_score_base(profile, self.market)
        self.assertAlmostEqual(base, 35.56)
        low, high = round_half_up(base + 1), round_half_up(base + 5)
        scores = set()
        for trial in range(200):
            fingerprint = generate_personality_fingerprint(f"user-{trial}", profile, "agent_x")
            score = calculate_fame_score(profile, self.market, fingerprint)
            self.assertGreaterEqual(score, low)
            self.assertLessEqual(score, high)
            scores.add(score)
        self.assertLessEqual(max(scores) - min(scores), 5)
        self.assertGreater(len(scores), 1)

    def test_followers_component_is_flat_beyond_cap(self):
        fingerprint = "00000003abcd"
        at_cap = _profile(followers=100000)
        beyond = _profile(followers=5000000)
        self.assertEqual(fame_score_base(at_cap, self.market), fame_score_base(beyond, self.market))
        self.assertEqual(
            calculate_fame_score(at_cap, self.market, fingerprint),
            calculate_fame_score(beyond, self.market, fingerprint),
        )

    def test_monotonic_in_inputs_with_fixed_fingerprint(self):
        fingerprint = "00000002abcd"
        low = calculate_fame_score(_profile(followers=10000), self.market, fingerprint)
        high = calculate_fame_score(_profile(followers=90000), self.market, fingerprint)
        self.assertLessEqual(low, high)
        low = calculate_fame_score(_profile(monthly_views=1000), self.market, fingerprint)
        high = calculate_fame_score(_profile(monthly_views=900000), self.market, fingerprint)
        self.assertLessEqual(low, high)
        low = calculate_fame_score(_profile(engagement_rate=0.01), self.market, fingerprint)
        high = calculate_fame_score(_profile(engagement_rate=0.9), self.market, fingerprint)
        self.assertLessEqual(low, high)


class MarketPositionTests(unittest.TestCase):
    def test_tier_and_leader_comparison(self):
        market = fallback_market_research()
        text = generate_market_position(_profile(followers=600000), market, 85)
        self.assertIn("TOP TIER", text)
        self.assertIn("exceeds current market leaders", text)

        text = generate_market_position(_profile(followers=300000), market, 45)
        self.assertIn("GROWING", text)
        self.assertIn("competitive tier", text)

        text = generate_market_position(_profile(followers=1000), market, 10)
        self.assertIn("EMERGING", text)
        self.assertIn("high-growth segment", text)


if __name__ == "__main__":
    unittest.main()
