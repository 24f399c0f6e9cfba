"""Per-request personalization: agent ids, fingerprints, adaptation factors and the Fame Score.

Agent ids and fingerprints mix fresh random bytes into their hash, so two
analyses of the same profile never share either value. Both functions take the
entropy source and clock as arguments so tests can pin them.
"""

from __future__ import annotations

import hashlib
import json
import secrets
import time
from typing import Callable

from creator_growth.core.scoring import get_scoring_value, round_half_up
from creator_growth.schemas.analysis import (
    AdaptationFactors,
    CreatorProfile,
    MarketResearchData,
    TimeToMonetize,
)

EntropySource = Callable[[int], bytes]
Clock = Callable[[], float]

_ENTROPY_BYTES = 16
_FINGERPRINT_LENGTH = 12


def _now_ms(clock: Clock) -> int:
    return int(clock() * 1000)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def generate_unique_agent_id(
    user_id: str,
    *,
    entropy: EntropySource = secrets.token_bytes,
    clock: Clock = time.time,
) -> str:
    timestamp = str(_now_ms(clock))
    data = f"{user_id}:{timestamp}:{entropy(_ENTROPY_BYTES).hex()}"
    digest = hashlib.sha256(data.encode("utf-8")).hexdigest()[:16]
    return f"agent_{digest}_{timestamp}"


def generate_personality_fingerprint(
    user_id: str,
    profile: CreatorProfile,
    agent_id: str,
    *,
    entropy: EntropySource = secrets.token_bytes,
    clock: Clock = time.time,
) -> str:
    payload = json.dumps(
        {
            "user_id": user_id,
            "creator_profile": profile.model_dump(),
            "agent_id": agent_id,
            "timestamp": _now_ms(clock),
            "entropy": entropy(_ENTROPY_BYTES).hex(),
        },
        sort_keys=True,
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:_FINGERPRINT_LENGTH]


def _time_to_monetize(followers: int) -> TimeToMonetize:
    if followers >= int(get_scoring_value("adaptation.monetize_thresholds.immediate", 100000)):
        return "immediate"
    if followers >= int(get_scoring_value("adaptation.monetize_thresholds.short_term", 50000)):
        return "short-term"
    return "long-term"


def calculate_adaptation_factors(profile: CreatorProfile) -> AdaptationFactors:
    low = float(get_scoring_value("adaptation.bounds.min", 1))
    high = float(get_scoring_value("adaptation.bounds.max", 10))
    divisor = float(get_scoring_value("adaptation.risk_follower_divisor", 50000))
    rate = profile.engagement_rate

    return AdaptationFactors(
        risk_tolerance=_clamp((rate * 2 + profile.followers / divisor) / 3, low, high),
        time_to_monetize=_time_to_monetize(profile.followers),
        content_quality=_clamp(rate * 5, low, high),
        community_engagement=_clamp(rate * 3 + 3, low, high),
    )


def fame_score_base(profile: CreatorProfile, market_data: MarketResearchData) -> float:
    """Fame Score before the fingerprint offset and rounding."""
    followers_cap = float(get_scoring_value("fame_score.followers.cap", 30))
    followers_sat = float(get_scoring_value("fame_score.followers.saturation", 100000))
    engagement_cap = float(get_scoring_value("fame_score.engagement.cap", 35))
    engagement_mult = float(get_scoring_value("fame_score.engagement.multiplier", 7))
    reach_cap = float(get_scoring_value("fame_score.reach.cap", 20))
    reach_sat = float(get_scoring_value("fame_score.reach.saturation", 1000000))
    market_bonus = float(get_scoring_value("fame_score.market_bonus", 10))

    score = 0.0
    score += min(followers_cap, (profile.followers / followers_sat) * followers_cap)
    # Raw fraction, not a percentage: 0.08 contributes 0.56 points.
    score += min(engagement_cap, profile.engagement_rate * engagement_mult)
    score += min(reach_cap, (profile.monthly_views / reach_sat) * reach_cap)
    if market_data.industry_insights:
        score += market_bonus
    return score


def fingerprint_offset(fingerprint: str) -> int:
    """1-5 point offset taken from the fingerprint's leading hex digits."""
    digits = int(get_scoring_value("fame_score.fingerprint_offset.hex_digits", 8))
    modulus = int(get_scoring_value("fame_score.fingerprint_offset.modulus", 5))
    return int(fingerprint[:digits], 16) % modulus + 1


def calculate_fame_score(
    profile: CreatorProfile,
    market_data: MarketResearchData,
    fingerprint: str,
) -> int:
    ceiling = int(get_scoring_value("fame_score.max", 100))
    score = fame_score_base(profile, market_data) + fingerprint_offset(fingerprint)
    return max(0, min(ceiling, round_half_up(score)))


def _tier_sentence(niche: str, fame_score: int) -> str:
    if fame_score >= int(get_scoring_value("position_tiers.top_tier", 80)):
        return f"You are a TOP TIER creator in the {niche} space"
    if fame_score >= int(get_scoring_value("position_tiers.established", 60)):
        return f"You are an ESTABLISHED creator in the {niche} space"
    if fame_score >= int(get_scoring_value("position_tiers.growing", 40)):
        return f"You are a GROWING creator in the {niche} space"
    return f"You are an EMERGING creator in the {niche} space"


def generate_market_position(
    profile: CreatorProfile,
    market_data: MarketResearchData,
    fame_score: int,
) -> str:
    positioning = [_tier_sentence(profile.niche, fame_score)]

    competitors = market_data.competitor_analysis.top_competitors
    if competitors:
        leader = competitors[0]
        if profile.followers >= leader.followers:
            positioning.append(
                "Your reach exceeds current market leaders. You're positioned for premium brand partnerships."
            )
        elif profile.followers >= leader.followers / 2:
            positioning.append(
                "You're in the competitive tier. Differentiation and consistency are your keys to breakthrough."
            )
        else:
            positioning.append(
                "You're in a high-growth segment. Focus on niche authority building before scaling."
            )

    return " ".join(positioning)
