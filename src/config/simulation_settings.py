"""
Centralized Simulation Settings

Tuning constants for the squad simulation core.
Change these values to rebalance fitness, development, and squad rules.
"""


class SimulationSettings:
    """
    Simulation tuning constants.

    Engines read their defaults from here; every engine constructor also
    accepts explicit overrides so tests can pin values.
    """

    # ================================================================
    # FITNESS ENGINE
    # ================================================================

    FATIGUE_RATE = 0.15
    # Fitness lost per minute played, before modifiers

    RECOVERY_RATE = 10.0
    # Base fitness recovered per day

    INJURY_THRESHOLD = 40.0
    # Below this fitness, injury risk starts climbing

    MAX_MATCH_FATIGUE = 60.0
    MAX_INJURY_RISK = 0.5

    # ================================================================
    # DEVELOPMENT ENGINE
    # ================================================================

    DEVELOPMENT_SEED = 42
    # Fixed seed so repeated runs with the same call sequence match

    TRAINING_FITNESS_COST = 5.0
    # Fitness lost per unit of training intensity

    # ================================================================
    # PLAYER STATE
    # ================================================================

    ATTRIBUTE_MIN = 0
    ATTRIBUTE_MAX = 100

    AVAILABILITY_FITNESS = 70.0
    # Minimum fitness for a player to be selectable

    FORM_WEIGHT = 0.3
    # Weight of the newest match rating in the form average

    YOUTH_AGE = 21
    VETERAN_AGE = 30

    # ================================================================
    # SQUAD RULES
    # ================================================================

    SQUAD_SIZE_LIMIT = 30
    STARTERS = 11
    MAX_SUBSTITUTES = 7
    FORM_HISTORY_LENGTH = 5
