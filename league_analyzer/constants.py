"""Constants and default tuning values for the league analyzer."""

# Sleeper public API
SLEEPER_BASE_URL = 'https://api.sleeper.app/v1'
DEFAULT_SPORT = 'nfl'
REQUEST_TIMEOUT = 20
REQUEST_DELAY_MS = 200
MAX_LEAGUES = 4

# Position value multipliers used in draft grades
# (single QB leagues: keep QB near 1.0-1.2, Superflex closer to 1.4-1.6)
POSITION_VALUES = {
    'QB': 1.15,
    'RB': 1.2,
    'WR': 1.15,
    'TE': 1.05,
    'K': 0.6,
    'DEF': 0.7,
}

# Roster depth targets used by the balance score
IDEAL_DEPTH = {
    'QB': 2,
    'RB': 5,
    'WR': 5,
    'TE': 2,
    'K': 1,
    'DEF': 1,
}

# Draft grade blend
SCORING_WEIGHTS = {
    'top_heavy': 0.45,
    'balance': 0.25,
    'depth': 0.20,
    'volatility': 0.10,
}

# Round value curve: value = scale / sqrt(pick_no + offset)
ROUND_VALUE_SCALE = 100.0
ROUND_VALUE_OFFSET = 2.0

# Overall pick boundaries
EARLY_PICK_MAX = 36     # picks 1-36 count toward the top-heavy score
BENCH_PICK_MIN = 72     # bench range is (72, 168]
BENCH_PICK_MAX = 168    # anything later is a late-round dart

# Sub-score scaling
TOP_HEAVY_SCALE = 3.0
DEPTH_SCALE = 2.5
BALANCE_BASE = 10.0
BALANCE_SCALE = 8.0
BALANCE_MAX_DIFF = 3
VOLATILITY_BASE = 10.0
VOLATILITY_SCALE = 5.0
VOLATILITY_LATE_CAP = 5
VOLATILITY_LATE_BONUS = 2.0

# Grade bands, highest first: (lower bound inclusive, grade, note)
GRADE_SCALE = [
    (92, 'A', 'Elite haul. Cohesive, high-ceiling roster.'),
    (88, 'A-', 'Strong foundation with upside at key spots.'),
    (84, 'B+', 'Rock-solid draft with minor gaps.'),
    (80, 'B', 'Balanced build; competitive immediately.'),
    (76, 'B-', 'Sensible draft; needs a breakout or two.'),
    (72, 'C+', 'Middle of the pack; trade room exists.'),
    (68, 'C', 'Some reaches; lineup decisions will matter.'),
    (64, 'C-', 'Upside plays but fragile floor.'),
    (58, 'D+', 'Risk-forward draft; waivers will be key.'),
    (52, 'D', 'Value left on the board.'),
]
FLOOR_GRADE = ('D-', 'Rebuild mode: trade early, trade often.')

# Draft tags
TAG_RB_CORE = 'Built around a strong RB core.'
TAG_WR_ROOM = 'Premium WR room with weekly ceiling.'
TAG_QB_DEPTH = 'QB depth offers trade leverage.'
TAG_TE_INSURANCE = 'TE insulation for bye/injury weeks.'
TAG_LATE_UPSIDE = 'Late-round upside shots could swing the league.'

# Power index: 50 + (total - 75) * 1.25
POWER_CENTER = 50.0
POWER_AVERAGE_GRADE = 75.0
POWER_SCALE = 1.25
DEFAULT_POWER = 50.0

# Matchup labels
TIE = 'Tie'
TOSS_UP = 'Toss-up'
SLIGHT_FAVORITE = 'slight favorite'
