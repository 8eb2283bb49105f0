# -----------------------------
# Configuration (tweak as needed)
# -----------------------------

SCREEN_W, SCREEN_H = 480, 800      # pygame window (play area) size

# Session defaults and the bounds the settings surface allows
SESSION_DURATION_SEC = 60
SESSION_DURATION_MIN, SESSION_DURATION_MAX = 10, 120
SESSION_DURATION_STEP = 5
MAX_BUBBLES = 15
MAX_BUBBLES_MIN, MAX_BUBBLES_MAX = 1, 20
COUNTDOWN_START = 3

# Geometry / speed (same length units as the play area)
BUBBLE_DIAMETER = 70.0
HUD_HEIGHT = 60.0                  # band at the top reserved for the HUD
BASE_SPEED = 100.0                 # units/s at the start of a session
MAX_SPEED = 400.0                  # units/s when the clock runs out

# Spawning
GOLD_CHANCE = 0.03                 # 3% of spawns are gold
MAX_PLACEMENT_ATTEMPTS = 30        # draws per bubble before giving up

# Scoring
STREAK_MULTIPLIER = 1.5
GOLD_EFFECT_TEXT = "+10s"

# Deferred removal windows
POP_GRACE_SEC = 0.2                # popped bubble stays for its exit animation
EFFECT_LIFETIME_SEC = 1.0          # "+10s" overlay

# Tick periods
SLOW_TICK_MS = 1000
FAST_TICK_MS = 33
FAST_TICK_DT = 1.0 / 30.0

# High scores
HIGH_SCORE_LIMIT = 10
TOP_SCORES_SHOWN = 3

# UI
BG_COLOR = (235, 240, 248)
HUD_COLOR = (30, 30, 40)
OVERLAY_TEXT_COLOR = (245, 245, 245)
HUD_FONT_SIZE = 26
BIG_FONT_SIZE = 96
