# tests/test_optimal.py
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from profiles import make_mentor, make_mentee
from mentor_matching.models import MatchingCriteria
from mentor_matching.matching.matcher import find_best_matches
from mentor_matching.matching.optimal import solve_optimal_assignment, compare_with_optimal
from mentor_matching.data_generation.toy_dataset import make_toy_profiles


class TestGreedyVersusOptimal(unittest.TestCase):

    def setUp(self):
        # Expertise-only scoring so each pair score is a plain Jaccard index:
        #   A-X 1.0, A-Y 0.5, B-X 0.67, B-Y 0.33 (below threshold)
        self.criteria = MatchingCriteria(
            expertise_weight=1.0,
            availability_weight=0.0,
            communication_weight=0.0,
            industry_weight=0.0,
            experience_gap_weight=0.0,
            min_compatibility_score=0.4,
            max_matches_per_mentor=1,
            max_matches_per_mentee=1,
        )
        self.mentors = [
            make_mentor("A", expertise=["a", "b"]),
            make_mentor("B", expertise=["a", "b", "c"]),
        ]
        self.mentees = [
            make_mentee("X", interests=["a", "b"]),
            make_mentee("Y", interests=["a"]),
        ]

    def test_greedy_takes_top_pair_only(self):
        matches = find_best_matches(self.mentors, self.mentees, self.criteria)
        self.assertEqual([(m.mentor_id, m.mentee_id) for m in matches], [("A", "X")])

    def test_optimal_assignment_beats_greedy(self):
        status, pairs = solve_optimal_assignment(self.mentors, self.mentees, self.criteria)
        self.assertEqual(status, "Optimal")
        self.assertEqual(sorted((m, e) for m, e, _ in pairs), [("A", "Y"), ("B", "X")])

    def test_compare_reports_gap(self):
        matches = find_best_matches(self.mentors, self.mentees, self.criteria)
        report = compare_with_optimal(matches, self.mentors, self.mentees, self.criteria)

        self.assertEqual(report["status"], "Optimal")
        self.assertAlmostEqual(report["greedy_total"], 1.0)
        self.assertAlmostEqual(report["optimal_total"], 1.17)
        self.assertAlmostEqual(report["gap"], 0.17)
        self.assertEqual(report["greedy_count"], 1)
        self.assertEqual(report["optimal_count"], 2)
        self.assertEqual(len(report["messages"]), 1)

    def test_no_candidates(self):
        status, pairs = solve_optimal_assignment([], self.mentees, self.criteria)
        self.assertEqual(status, "Optimal")
        self.assertEqual(pairs, [])

    def test_optimal_never_below_greedy_on_toy_session(self):
        mentors, mentees = make_toy_profiles(num_mentors=6, num_mentees=10, seed=11)
        criteria = MatchingCriteria(min_compatibility_score=0.45, max_matches_per_mentor=2)
        matches = find_best_matches(mentors, mentees, criteria)

        report = compare_with_optimal(matches, mentors, mentees, criteria)

        self.assertIn(report["status"], ("Optimal", "Feasible"))
        self.assertGreaterEqual(report["optimal_total"] + 1e-6, report["greedy_total"])
        self.assertGreaterEqual(report["gap"], -1e-6)


if __name__ == '__main__':
    unittest.main()
