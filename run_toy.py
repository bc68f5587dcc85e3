# run_toy.py

import os

import pandas as pd

from mentor_matching.config import MENTORS_CSV_PATH, MENTEES_CSV_PATH, FACTOR_LABELS
from mentor_matching.data_generation.toy_dataset import make_toy_profiles
from mentor_matching.data_generation.profile_loader import load_mentor_profiles, load_mentee_profiles
from mentor_matching.models import MatchingCriteria
from mentor_matching.matching.matcher import find_best_matches
from mentor_matching.matching.optimal import compare_with_optimal
from mentor_matching.analysis.quality import analyze_matching_quality
from mentor_matching.analysis.recommend import recommend_mentors_for_mentee
from mentor_matching.analysis.session_analytics import build_session_analytics
from mentor_matching.analysis.tables import compatibility_matrix, matches_to_frame


def load_profiles():
    """CSV profiles if both files exist, otherwise a seeded toy session."""
    if os.path.exists(MENTORS_CSV_PATH) and os.path.exists(MENTEES_CSV_PATH):
        print(f"Found CSVs at {MENTORS_CSV_PATH} / {MENTEES_CSV_PATH}. Loading profiles...")
        return load_mentor_profiles(MENTORS_CSV_PATH), load_mentee_profiles(MENTEES_CSV_PATH)
    return make_toy_profiles()


def main():
    mentors, mentees = load_profiles()
    criteria = MatchingCriteria()

    session_id = mentors[0].session_id if mentors else "-"
    print(f"Session {session_id}: {len(mentors)} mentors, {len(mentees)} mentees")
    print(
        f"- unavailable: {sum(not m.availability.is_available for m in mentors)} mentors, "
        f"{sum(not e.availability.is_available for e in mentees)} mentees"
    )
    print()

    # ============================
    #  COMPATIBILITY MATRIX
    # ============================
    print("=== MENTEE–MENTOR COMPATIBILITY MATRIX (0–1) ===")
    print(compatibility_matrix(mentors, mentees, criteria).round(2))
    print()

    # ============================
    #  GREEDY MATCHING
    # ============================
    matches = find_best_matches(mentors, mentees, criteria)
    print(f"=== MATCHES (threshold {criteria.min_compatibility_score}) ===")
    if not matches:
        print("No pair reached the compatibility threshold.")
    else:
        df = matches_to_frame(matches).drop(columns=["match_id"])
        print(df.round(2).to_string(index=False))
    print()

    unmatched = sorted({e.user_id for e in mentees} - {m.mentee_id for m in matches})
    print(f"Unmatched mentees: {', '.join(unmatched) or '-'}")
    print()

    # ============================
    #  QUALITY REPORT
    # ============================
    report = analyze_matching_quality(matches)
    print("=== QUALITY REPORT ===")
    print(f"Average compatibility: {report.average_compatibility:.2f}")
    if report.score_distribution:
        dist = pd.Series(
            {b.range: b.count for b in report.score_distribution},
            name="matches",
        )
        print(dist.to_string())
    if report.unbucketed_count:
        print(f"(outside buckets: {report.unbucketed_count})")
    for fa in report.factor_analysis:
        print(f"  {FACTOR_LABELS[fa.factor]:<10} {fa.average_score:.2f}")
    for rec in report.recommendations:
        print("-", rec)
    print()

    # ============================
    #  GREEDY VS OPTIMAL
    # ============================
    print("=== GREEDY VS OPTIMAL ASSIGNMENT ===")
    cmp = compare_with_optimal(matches, mentors, mentees, criteria)
    print("Solver status:", cmp["status"])
    for msg in cmp["messages"]:
        print("-", msg)
    print()

    # ============================
    #  RECOMMENDATIONS FOR UNMATCHED
    # ============================
    mentee_map = {e.user_id: e for e in mentees}
    for mentee_id in unmatched:
        mentee = mentee_map[mentee_id]
        recs = recommend_mentors_for_mentee(mentee, mentors, limit=3)
        print(f"{mentee_id} Top {len(recs)} Recommended Mentors:")
        for rec in recs:
            print(f"  - {rec.mentor.user_id} (Score {rec.score:.2f})")
            for reason in rec.reasons:
                print(f"      · {reason}")
    print()

    analytics = build_session_analytics(session_id, mentors, mentees, matches)
    print("=== SESSION ANALYTICS ===")
    print(f"Total matches : {analytics.total_matches}")
    print(f"Participation : {analytics.participation_rate}")
    print("Top expertise :", ", ".join(f"{a} ({c})" for a, c in analytics.top_expertise_areas))


if __name__ == "__main__":
    main()
