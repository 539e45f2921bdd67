"""Central configuration for the March Madness bracket engine."""

import os

# Rounds in tournament order
ROUND_OF_64 = "Round of 64"
ROUND_OF_32 = "Round of 32"
SWEET_16 = "Sweet 16"
ELITE_8 = "Elite 8"
FINAL_FOUR = "Final Four"
CHAMPIONSHIP = "Championship"

ROUND_ORDER = [ROUND_OF_64, ROUND_OF_32, SWEET_16, ELITE_8, FINAL_FOUR, CHAMPIONSHIP]

# Regional rounds only; used in game ids like "top-left-r32-3"
ROUND_TAGS = {
    ROUND_OF_64: "r64",
    ROUND_OF_32: "r32",
    SWEET_16: "s16",
    ELITE_8: "e8",
}
REGIONAL_ROUNDS = list(ROUND_TAGS)

# Games per round within one region
GAMES_PER_REGION = {ROUND_OF_64: 8, ROUND_OF_32: 4, SWEET_16: 2, ELITE_8: 1}

# Bracket structure
NUM_TEAMS = 64
NUM_GAMES = 63
NUM_REGIONS = 4
TEAMS_PER_REGION = 16

REGION_POSITIONS = ["top-left", "bottom-left", "top-right", "bottom-right"]
REGION_NAMES = ["East", "West", "South", "Midwest"]

# Final Four semifinals, paired by region position (team1 side, team2 side)
FINAL_FOUR_PAIRINGS = {
    "final-four-1": ("top-left", "bottom-left"),
    "final-four-2": ("top-right", "bottom-right"),
}
CHAMPIONSHIP_ID = "championship"

# Submission rules
DEFAULT_TIE_BREAKER_LOW = 50
DEFAULT_TIE_BREAKER_HIGH = 500
MAX_LISTED_INVALID_PICKS = 5

MESSAGE_SUBMIT_OFF = "Bracket submissions are currently disabled."
MESSAGE_TOO_LATE = "Bracket submissions are closed. The deadline has passed."

# Site config lives in a Google Sheet with "parameter,value" rows
SITE_CONFIG_SHEET_ID = os.environ.get("SITE_CONFIG_SHEET_ID", "")
SHEET_CSV_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
