# =============================================================================
# STAT STAGE CONSTANTS
# =============================================================================
MIN_STAT_STAGE = -6
MAX_STAT_STAGE = 6

# Ratio bases for boost-to-multiplier conversion
STAT_STAGE_BASE = 2
ACCURACY_STAGE_BASE = 3  # Accuracy and evasion

# =============================================================================
# STAT FORMULA CONSTANTS
# =============================================================================
HP_LEVEL_OFFSET = 10  # HP adds level + 10
STAT_OFFSET = 5  # Other stats add 5 before the nature multiplier
NATURE_BOOST = 1.1
NATURE_DROP = 0.9

MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_PER_STAT_IVS = 31
MAX_PER_STAT_EVS = 255
MAX_MON_MOVES = 4
MAX_ROSTER_SIZE = 6

# =============================================================================
# DAMAGE CONSTANTS
# =============================================================================
STAB_MULTIPLIER = 1.5
DAMAGE_RANDOM_MIN = 85
DAMAGE_RANDOM_MAX = 100
MIN_DAMAGE = 1

# =============================================================================
# RNG RANGES
# =============================================================================
ACCURACY_ROLL_MIN = 1
ACCURACY_ROLL_MAX = 100
ALWAYS_HIT_ACCURACY = 100
SPEED_TIEBREAK_MIN = 1
SPEED_TIEBREAK_MAX = 1000

# =============================================================================
# PLAYERS & POSITIONS
# =============================================================================
NUM_PLAYERS = 2
NO_TARGET = 0  # Target sentinel for moves without an explicit target

# HP of foe entities is reported on this scale instead of the true value
PUBLIC_HP_SCALE = 48

# =============================================================================
# FIELD
# =============================================================================
WEATHER_DEFAULT_DURATION = 5
