# /tests/test_ranker.py

import unittest
import sys
import os

# Add root directory to path to allow imports from 'discovery'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from discovery.ranker import ResourceRanker
from pathway.models import CandidateResource


class TestResourceRanker(unittest.TestCase):

    def setUp(self):
        self.ranker = ResourceRanker()

    def test_score_formula(self):
        candidate = CandidateResource(
            title="Intro to prompt engineering", url="https://www.coursera.org/x",
            provider="Coursera", cost="free", rating=4.5, verified=True,
        )
        # 9.5 quality + 9.0 rating + 5 free + 10 title match + 3 verified
        self.assertAlmostEqual(self.ranker.score(candidate, "Prompt Engineering"), 36.5)

    def test_unknown_provider_contributes_nothing(self):
        candidate = CandidateResource(
            title="Something else", url="https://example.org/x", provider="Class Central", cost="paid", rating=4.0,
        )
        self.assertAlmostEqual(self.ranker.score(candidate, "Prompt Engineering"), 8.0)
        self.assertEqual(self.ranker.provider_quality("coursera"), 9.5)

    def test_rank_is_non_increasing_and_truncated(self):
        candidates = [
            CandidateResource(title="Udemy thing", url="https://udemy.com/a", provider="Udemy", rating=3.0),
            CandidateResource(title="Prompt Engineering Guide", url="https://promptingguide.ai", provider="Guide",
                              cost="free", rating=4.7),
            CandidateResource(title="edX course", url="https://edx.org/a", provider="edX", rating=4.6),
            CandidateResource(title="Other", url="https://example.org/a", rating=1.0),
        ]
        ranked = self.ranker.rank(candidates, "Prompt Engineering", limit=3)

        self.assertEqual(len(ranked), 3)
        self.assertEqual(ranked[0].title, "Prompt Engineering Guide")
        scores = [self.ranker.score(c, "Prompt Engineering") for c in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_equal_scores_keep_input_order(self):
        candidates = [
            CandidateResource(title=f"Same {i}", url=f"https://example.org/{i}", rating=4.0) for i in range(5)
        ]
        ranked = self.ranker.rank(candidates, "Prompt Engineering")
        self.assertEqual([c.title for c in ranked], [c.title for c in candidates])


if __name__ == '__main__':
    unittest.main()
