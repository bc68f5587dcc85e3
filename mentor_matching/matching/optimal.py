# mentor_matching/matching/optimal.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pulp

from ..models import MentorProfile, MenteeProfile, MatchingCriteria, MentorshipMatch
from .matcher import build_candidates


def build_assignment_model(
    scores: Dict[Tuple[str, str], float],
    mentor_ids: List[str],
    mentee_ids: List[str],
    max_per_mentor: int,
    max_per_mentee: int,
) -> Tuple[pulp.LpProblem, Dict[Tuple[str, str], pulp.LpVariable]]:
    """
    MILP for the capacity-constrained assignment with maximum total score.

    Variables:
        x[m, e] = 1 if mentor m is assigned to mentee e
        (only created for pairs present in `scores`).

    Rules encoded:

      1) Mentor capacity:  ∀m: sum_e x[m,e] ≤ max_per_mentor
      2) Mentee capacity:  ∀e: sum_m x[m,e] ≤ max_per_mentee

    Objective: maximise sum score[m,e] * x[m,e].
    """
    prob = pulp.LpProblem("Mentorship_Assignment", pulp.LpMaximize)

    x: Dict[Tuple[str, str], pulp.LpVariable] = {}
    for idx, (m, e) in enumerate(scores):
        x[(m, e)] = pulp.LpVariable(f"x_{idx}", lowBound=0, upBound=1, cat="Binary")

    prob += pulp.lpSum(scores[key] * var for key, var in x.items()), "TotalCompatibility"

    for m in mentor_ids:
        pairs = [var for (mm, _), var in x.items() if mm == m]
        if pairs:
            prob += pulp.lpSum(pairs) <= max_per_mentor, f"MentorCap_{mentor_ids.index(m)}"

    for e in mentee_ids:
        pairs = [var for (_, ee), var in x.items() if ee == e]
        if pairs:
            prob += pulp.lpSum(pairs) <= max_per_mentee, f"MenteeCap_{mentee_ids.index(e)}"

    return prob, x


def solve_optimal_assignment(
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    criteria: Optional[MatchingCriteria] = None,
) -> Tuple[str, List[Tuple[str, str, float]]]:
    """
    Solve the assignment MILP over the same above-threshold candidates the
    greedy matcher sees. Returns (status, [(mentor_id, mentee_id, score), ...]).
    """
    if criteria is None:
        criteria = MatchingCriteria()

    candidates = build_candidates(mentors, mentees, criteria)
    if not candidates:
        return "Optimal", []

    scores: Dict[Tuple[str, str], float] = {}
    for mentor, mentee, score, _ in candidates:
        scores[(mentor.user_id, mentee.user_id)] = score

    mentor_ids = sorted({m for m, _ in scores})
    mentee_ids = sorted({e for _, e in scores})

    prob, x = build_assignment_model(
        scores,
        mentor_ids,
        mentee_ids,
        max_per_mentor=criteria.max_matches_per_mentor,
        max_per_mentee=criteria.max_matches_per_mentee,
    )

    solver = pulp.PULP_CBC_CMD(msg=False)
    prob.solve(solver)

    status = pulp.LpStatus[prob.status]

    pairs: List[Tuple[str, str, float]] = []
    if status in ("Optimal", "Feasible"):
        for key, var in x.items():
            val = var.varValue
            if val is not None and val > 0.5:
                pairs.append((key[0], key[1], scores[key]))

    pairs.sort(key=lambda p: p[2], reverse=True)
    return status, pairs


def compare_with_optimal(
    matches: List[MentorshipMatch],
    mentors: List[MentorProfile],
    mentees: List[MenteeProfile],
    criteria: Optional[MatchingCriteria] = None,
) -> Dict[str, Any]:
    """
    Report how far a greedy match list is from the maximum-total assignment.

    Returns a dict with:
      - 'status': solver status string
      - 'greedy_total': sum of greedy compatibility scores
      - 'optimal_total': sum of optimal compatibility scores
      - 'gap': optimal_total - greedy_total (>= 0 when solved)
      - 'greedy_count' / 'optimal_count': number of pairs on each side
      - 'optimal_pairs': list of (mentor_id, mentee_id, score)
      - 'messages': list[str]
    """
    messages: List[str] = []

    status, pairs = solve_optimal_assignment(mentors, mentees, criteria)

    greedy_total = round(sum(m.compatibility_score for m in matches), 2)
    optimal_total = round(sum(score for _, _, score in pairs), 2)
    gap = round(optimal_total - greedy_total, 2)

    if status not in ("Optimal", "Feasible"):
        messages.append(f"Optimal assignment could not be computed (solver status: {status}).")
    elif gap > 0:
        messages.append(
            f"Greedy matching leaves {gap:.2f} total compatibility on the table "
            f"({greedy_total:.2f} vs optimal {optimal_total:.2f})."
        )
    else:
        messages.append("Greedy matching reaches the optimal total compatibility.")

    return {
        "status": status,
        "greedy_total": greedy_total,
        "optimal_total": optimal_total,
        "gap": gap,
        "greedy_count": len(matches),
        "optimal_count": len(pairs),
        "optimal_pairs": pairs,
        "messages": messages,
    }
