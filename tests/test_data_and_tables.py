# tests/test_data_and_tables.py
import unittest
import sys
import os
import tempfile

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from profiles import make_mentor, make_mentee
from mentor_matching.models import FACTOR_NAMES
from mentor_matching.matching.matcher import find_best_matches
from mentor_matching.analysis.tables import compatibility_matrix, matches_to_frame, MATCH_COLUMNS
from mentor_matching.data_generation.toy_dataset import make_toy_profiles
from mentor_matching.data_generation.profile_loader import load_mentor_profiles, load_mentee_profiles

MENTORS_CSV = """user_id,session_id,name,expertise_areas,experience_level,industry,communication_style,is_available,time_zone,preferred_days,preferred_hours
M1,s1,Kim,Python;Leadership,Advanced,Software,casual,true,Asia/Seoul,mon;wed,evening
M2,s1,Lee,Finance,expert,,formal,no,UTC,sat,morning
"""

MENTEES_CSV = """user_id,session_id,name,interested_areas,current_level,industry,communication_style,is_available,time_zone,preferred_days,preferred_hours
E1,s1,Park,python;data,beginner,AI,mixed,yes,Asia/Seoul,wed,evening;morning
"""


class TestToyDataset(unittest.TestCase):

    def test_reproducible_with_seed(self):
        a_mentors, a_mentees = make_toy_profiles(num_mentors=5, num_mentees=7, seed=1)
        b_mentors, b_mentees = make_toy_profiles(num_mentors=5, num_mentees=7, seed=1)
        self.assertEqual(a_mentors, b_mentors)
        self.assertEqual(a_mentees, b_mentees)
        self.assertEqual(len(a_mentors), 5)
        self.assertEqual(len(a_mentees), 7)

    def test_profiles_use_known_levels(self):
        mentors, mentees = make_toy_profiles(seed=5)
        self.assertTrue(all(m.experience_level in ("intermediate", "advanced", "expert") for m in mentors))
        self.assertTrue(all(e.current_level in ("beginner", "intermediate", "advanced") for e in mentees))

    def test_unavailable_ratio_extremes(self):
        mentors, mentees = make_toy_profiles(num_mentors=4, num_mentees=4, unavailable_ratio=1.0)
        self.assertFalse(any(p.availability.is_available for p in mentors + mentees))
        self.assertEqual(find_best_matches(mentors, mentees), [])

        mentors, mentees = make_toy_profiles(num_mentors=4, num_mentees=4, unavailable_ratio=0.0)
        self.assertTrue(all(p.availability.is_available for p in mentors + mentees))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            make_toy_profiles(num_mentors=-1)
        with self.assertRaises(ValueError):
            make_toy_profiles(unavailable_ratio=1.5)


class TestProfileLoader(unittest.TestCase):

    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix=".csv")
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_load_mentors(self):
        mentors = load_mentor_profiles(self._write(MENTORS_CSV))

        self.assertEqual([m.user_id for m in mentors], ["M1", "M2"])
        m1, m2 = mentors
        self.assertEqual(m1.expertise_areas, ["Python", "Leadership"])
        self.assertEqual(m1.experience_level, "advanced")
        self.assertEqual(m1.availability.preferred_days, {"mon", "wed"})
        self.assertTrue(m1.availability.is_available)
        self.assertIsNone(m2.industry)
        self.assertFalse(m2.availability.is_available)
        self.assertEqual(m2.mentoring_preferences.preferred_communication_style, "formal")

    def test_load_mentees_and_match(self):
        mentors = load_mentor_profiles(self._write(MENTORS_CSV))
        mentees = load_mentee_profiles(self._write(MENTEES_CSV))

        self.assertEqual(mentees[0].availability.preferred_hours, {"evening", "morning"})

        matches = find_best_matches(mentors, mentees)
        self.assertEqual([(m.mentor_id, m.mentee_id) for m in matches], [("M1", "E1")])

    def test_unknown_level_rejected(self):
        bad = MENTEES_CSV.replace("beginner", "expert")
        with self.assertRaises(ValueError):
            load_mentee_profiles(self._write(bad))

    def test_missing_column_rejected(self):
        bad = MENTORS_CSV.replace("communication_style", "style")
        with self.assertRaises(ValueError):
            load_mentor_profiles(self._write(bad))

    def test_short_row_rejected(self):
        """A row that stops early leaves trailing cells empty; reported as ValueError."""
        header = MENTORS_CSV.splitlines()[0]
        with self.assertRaises(ValueError) as ctx:
            load_mentor_profiles(self._write(header + "\nM1,s1,A,,casual,true\n"))
        self.assertIn("line 2", str(ctx.exception))
        self.assertIn("time_zone", str(ctx.exception))

    def test_optional_columns(self):
        mentors_csv = MENTORS_CSV.replace("preferred_hours\n", "preferred_hours,job_title,years_of_experience\n", 1)
        mentors_csv = mentors_csv.replace("evening\n", "evening,Staff Engineer,12\n", 1)
        mentors_csv = mentors_csv.replace("morning\n", "morning,,\n", 1)
        mentees_csv = MENTEES_CSV.replace("preferred_hours\n", "preferred_hours,learning_goals,background\n", 1)
        mentees_csv = mentees_csv.replace("morning\n", "morning,first job;portfolio,bootcamp\n", 1)

        m1, m2 = load_mentor_profiles(self._write(mentors_csv))
        (e1,) = load_mentee_profiles(self._write(mentees_csv))

        self.assertEqual(m1.job_title, "Staff Engineer")
        self.assertEqual(m1.years_of_experience, 12)
        self.assertIsNone(m2.job_title)
        self.assertIsNone(m2.years_of_experience)
        self.assertEqual(e1.learning_goals, ["first job", "portfolio"])
        self.assertEqual(e1.background, "bootcamp")

    def test_optional_columns_absent(self):
        (m1, _) = load_mentor_profiles(self._write(MENTORS_CSV))
        (e1,) = load_mentee_profiles(self._write(MENTEES_CSV))
        self.assertIsNone(m1.job_title)
        self.assertIsNone(m1.years_of_experience)
        self.assertEqual(e1.learning_goals, [])
        self.assertIsNone(e1.background)

    def test_bad_years_of_experience_rejected(self):
        bad = MENTORS_CSV.replace("preferred_hours\n", "preferred_hours,years_of_experience\n", 1)
        bad = bad.replace("evening\n", "evening,ten\n", 1)
        with self.assertRaises(ValueError):
            load_mentor_profiles(self._write(bad))


class TestTables(unittest.TestCase):

    def test_compatibility_matrix_shape(self):
        mentors = [make_mentor("M1", industry="Software"), make_mentor("M2")]
        mentees = [make_mentee("E1", industry="Software"), make_mentee("E2"), make_mentee("E3")]

        df = compatibility_matrix(mentors, mentees)

        self.assertEqual(df.shape, (3, 2))
        self.assertEqual(list(df.index), ["E1", "E2", "E3"])
        self.assertEqual(list(df.columns), ["M1", "M2"])
        self.assertEqual(df.loc["E1", "M1"], 1.0)

    def test_matches_to_frame(self):
        matches = find_best_matches([make_mentor("M1", industry="Software")], [make_mentee("E1", industry="Software")])
        df = matches_to_frame(matches)

        self.assertEqual(list(df.columns), MATCH_COLUMNS)
        self.assertEqual(len(df), 1)
        self.assertEqual(df.iloc[0]["status"], "pending")
        for name in FACTOR_NAMES:
            self.assertIn(name, df.columns)

    def test_empty_matches_frame(self):
        df = matches_to_frame([])
        self.assertEqual(len(df), 0)
        self.assertEqual(list(df.columns), MATCH_COLUMNS)


if __name__ == '__main__':
    unittest.main()
