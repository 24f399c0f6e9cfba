import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from creator_growth.reference import (
    get_monetization_channels,
    get_platform_benchmark,
    get_product,
    get_trends_for_niche,
    known_niches,
    list_products,
)


class ReferenceDataTests(unittest.TestCase):
    def test_niche_lookup_is_case_insensitive_substring(self):
        self.assertEqual(len(known_niches()), 5)
        self.assertEqual(get_trends_for_niche("beauty"), get_trends_for_niche("Beauty & Skincare"))
        self.assertEqual(len(get_trends_for_niche("TECH")), 3)
        self.assertEqual(get_trends_for_niche(""), ())
        self.assertEqual(get_trends_for_niche("Gardening"), ())

    def test_unknown_platform_uses_instagram_benchmark(self):
        self.assertEqual(get_platform_benchmark("Snapchat"), get_platform_benchmark("Instagram"))
        self.assertEqual(get_platform_benchmark("TikTok").avg_engagement_rate, 0.065)

    def test_channels_respect_follower_requirements(self):
        small = {channel.type for channel in get_monetization_channels(15000)}
        self.assertIn("Affiliate Marketing", small)
        self.assertNotIn("Sponsorships & Brand Deals", small)
        self.assertNotIn("Patreon/Membership", small)
        self.assertEqual(len(get_monetization_channels(1000000)), 6)

    def test_product_catalog(self):
        self.assertEqual(len(list_products()), 8)
        self.assertEqual(get_product("media-kit-template").commercial_score, 85)
        self.assertIsNone(get_product("missing"))


if __name__ == "__main__":
    unittest.main()
