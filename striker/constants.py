"""Fixed values shared across the simulator."""

STRIKER_WHO_AM_I = "striker-python"
STRIKER_VERSION = "v3.00.00"  # Epoch.Major.Minor
TIME_LAYOUT = "%Y-%m-%d %H:%M:%S %z"
STATUS_ROUNDS = 1_000_000

# Simulation limits
MILLION = 1_000_000
BILLION = MILLION * 1000
NUMBER_OF_HANDS_MAXIMUM = 10 * BILLION
NUMBER_OF_HANDS_MINIMUM = 100
NUMBER_OF_HANDS_DEFAULT = 500 * MILLION
NUMBER_OF_HANDS_DATABASE = 10 * MILLION
NUMBER_OF_CARDS_IN_DECK = 52
NUMBER_OF_CORES_MINIMUM = 1
NUMBER_OF_CORES_PHYSICAL = 24
NUMBER_OF_CORES_LOGICAL = 32
NUMBER_OF_CORES_DEFAULT = NUMBER_OF_CORES_PHYSICAL
NUMBER_OF_CORES_MAXIMUM = NUMBER_OF_CORES_LOGICAL

# Strategy and deck names
STRATEGY_MIMIC = "mimic"
STRATEGY_BASIC = "basic"
STRATEGY_NEURAL = "neural"
STRATEGY_LINEAR = "linear"
STRATEGY_POLYNOMIAL = "polynomial"
STRATEGY_HIGH_LOW = "high-low"
STRATEGY_WONG = "wong"
DECKS_SINGLE_DECK = "single-deck"
DECKS_DOUBLE_DECK = "double-deck"
DECKS_SIX_SHOE = "six-shoe"

# Betting
MINIMUM_BET = 2
MAXIMUM_BET = 20
TRUE_COUNT_BET = 2
TRUE_COUNT_MULTIPLIER = 26