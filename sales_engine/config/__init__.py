import os

# --- DYNAMIC PATH CONFIGURATION ---
# sales_engine/config/__init__.py -> parent is config -> parent is sales_engine -> parent is project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

ENGINE_DIR = os.path.join(BASE_DIR, "sales_engine")
DATA_DIR = os.path.join(BASE_DIR, "data")

# --- RECORD STORE FILES ---
ACCOUNTS_FILE = "accounts.json"
REPS_FILE = "reps.json"
DEALS_FILE = "deals.json"
ACTIVITIES_FILE = "activities.json"
TARGETS_FILE = "targets.json"

# --- REPORTING WINDOWS ---
# Reference quarter (Q1 2026), inclusive on both ends
QUARTER_START = "2026-01-01"
QUARTER_END = "2026-03-31"
QUARTER_MONTHS = ["2026-01", "2026-02", "2026-03"]

# Revenue trend / driver trend window, oldest first
TREND_MONTHS = ["2025-10", "2025-11", "2025-12", "2026-01", "2026-02", "2026-03"]

# --- DEAL STATUSES ---
STATUS_OPEN = "Open"
STATUS_WON = "Won"
STATUS_LOST = "Lost"
DEAL_STATUSES = (STATUS_OPEN, STATUS_WON, STATUS_LOST)

# --- RISK THRESHOLDS ---
STALE_DEAL_SEGMENT = "Enterprise"
STALE_DEAL_DAYS = 30
LOW_WIN_RATE_THRESHOLD = 15
INACTIVITY_WINDOW_DAYS = 30

# --- RISK -> RECOMMENDATION TABLE ---
# "{rep}" is filled with the flagged rep's name
RECOMMENDATION_RULES = {
    "stale_deals": {"priority": "high", "action": "Focus on aging deals in Enterprise segment"},
    "low_win_rate": {"priority": "medium", "action": "Coach {rep} to improve closing skills"},
    "inactive_accounts": {"priority": "medium", "action": "Increase outreach to inactive accounts"},
}
