# mentor_matching/config.py

# Default factor weights (straight weighted sum, not normalised)
EXPERTISE_WEIGHT_DEFAULT = 0.30
AVAILABILITY_WEIGHT_DEFAULT = 0.25
COMMUNICATION_WEIGHT_DEFAULT = 0.20
INDUSTRY_WEIGHT_DEFAULT = 0.15
EXPERIENCE_GAP_WEIGHT_DEFAULT = 0.10

# Matching threshold and capacity caps
MIN_COMPATIBILITY_SCORE_DEFAULT = 0.6
MAX_MATCHES_PER_MENTOR_DEFAULT = 3
MAX_MATCHES_PER_MENTEE_DEFAULT = 1

# Mentor recommendations use their own fixed floor, not the matcher threshold
RECOMMENDATION_MIN_SCORE = 0.5
RECOMMENDATION_LIMIT_DEFAULT = 5

# Ordinal experience scale shared by mentors and mentees
EXPERIENCE_LEVELS = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
    "expert": 4,
}
MENTEE_LEVELS = ("beginner", "intermediate", "advanced")

COMMUNICATION_STYLES = ("formal", "casual", "mixed")

# Industry groups: key -> synonyms that count as "related"
RELATED_INDUSTRIES = {
    "technology": ["software", "it", "ai", "data"],
    "finance": ["banking", "investment", "fintech"],
    "healthcare": ["medical", "pharmaceutical", "biotech"],
    "education": ["training", "academic", "learning"],
}

# Histogram buckets for quality analysis: (label, min inclusive, max exclusive)
SCORE_BUCKETS = [
    ("0.9-1.0", 0.9, 1.0),
    ("0.8-0.9", 0.8, 0.9),
    ("0.7-0.8", 0.7, 0.8),
    ("0.6-0.7", 0.6, 0.7),
    ("0.5-0.6", 0.5, 0.6),
]

# Quality report thresholds
LOW_AVERAGE_COMPATIBILITY = 0.7
WEAK_FACTOR_THRESHOLD = 0.6
MIN_HEALTHY_MATCH_COUNT = 5

# Human labels for the five factors (used in recommendations)
FACTOR_LABELS = {
    "expertise_alignment": "전문성 일치도",
    "availability_alignment": "시간 가용성",
    "communication_style_match": "소통 스타일",
    "industry_alignment": "산업 분야",
    "experience_level_gap": "경험 격차",
}

TOP_EXPERTISE_AREAS_LIMIT = 5

# -----------------------------------------------------------
# Toy data knobs
# -----------------------------------------------------------

NUM_MENTORS_DEFAULT = 8
NUM_MENTEES_DEFAULT = 12
UNAVAILABLE_RATIO_DEFAULT = 0.1
DEFAULT_SEED = 42
DEFAULT_SESSION_ID = "session_demo"

TOY_TOPICS = [
    "Python", "Data Analysis", "Machine Learning", "Leadership",
    "Product Management", "Marketing", "Public Speaking", "Career Planning",
    "UX Design", "Finance", "Cloud", "Statistics",
]
TOY_INDUSTRIES = [
    "Technology", "Software", "AI", "Finance", "Banking", "FinTech",
    "Healthcare", "Biotech", "Education", "Training", None,
]
TOY_DAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
TOY_HOURS = ["morning", "afternoon", "evening"]
TOY_TIME_ZONES = ["Asia/Seoul", "Asia/Seoul", "Asia/Seoul", "Asia/Tokyo", "UTC"]

# Separator for list-valued cells in profile CSV files
CSV_LIST_SEPARATOR = ";"

# Optional profile CSVs picked up by run_toy.py instead of toy data
MENTORS_CSV_PATH = "data/mentors.csv"
MENTEES_CSV_PATH = "data/mentees.csv"
