"""Quiz-related constants shared across server and core layers."""

NUM_QUESTIONS: int = 10
HEX_ANSWER_LENGTH: int = 6
EMPTY_ANSWER_FALLBACK: str = "000000"

PERCENT_DECIMALS: int = 2
RMSE_DECIMALS: int = 4

SESSION_COOKIE: str = "color_quiz_session"
SESSION_COOKIE_MAX_AGE_SECONDS: int = 60 * 60 * 24
MAX_ACTIVE_SESSIONS: int = 1000
