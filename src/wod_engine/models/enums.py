"""Enumerations and fixed constants for the workout generator.

Frequencies and time-domain bands follow the "linchpin" programming
patterns the weight tables were tuned against.
"""

from enum import IntEnum, auto


class Modality(IntEnum):
    """The three movement categories a workout slot can draw from."""

    WEIGHTLIFTING = auto()
    GYMNASTICS = auto()
    MONOSTRUCTURAL = auto()


class Structure(IntEnum):
    """Movement-count shape of a workout.

    CHIPPER has no fixed modality slots: it is a long list of movements
    done once through.
    """

    SINGLE = auto()
    COUPLET = auto()
    TRIPLET = auto()
    CHIPPER = auto()


class DurationBucket(IntEnum):
    """Coarse expected-duration classification (label only, no range math)."""

    SHORT = auto()   # < 8 min
    MEDIUM = auto()  # 8-20 min
    LONG = auto()    # 20+ min


class WorkoutFormat(IntEnum):
    """Prescribed execution style.

    EMOM covers E2MOM as well, and FOR_TIME covers "for time or not";
    the athlete picks the variant.
    """

    SETS = auto()
    EMOM = auto()
    BENCHMARK = auto()
    FOR_TIME_WITH_REPS = auto()
    FOR_TIME = auto()
    ROUNDS_FOR_TIME = auto()
    AMRAP = auto()
    INTERVALS = auto()
    SKILL = auto()


class CombinationCategory(IntEnum):
    """Shape of a modality combination, for combination-aware duration tables."""

    PURE = auto()                # every slot the same modality
    MIXED = auto()               # couplet with two different modalities
    TRI_MODAL = auto()           # triplet with all three modalities
    TWO_WEIGHTLIFTING = auto()   # triplet with exactly two W slots
    TWO_GYMNASTICS = auto()
    TWO_MONOSTRUCTURAL = auto()


# ---------------------------------------------------------------------------
# Structure constants
# ---------------------------------------------------------------------------

STRUCTURE_SLOT_COUNT = {
    Structure.SINGLE: 1,
    Structure.COUPLET: 2,
    Structure.TRIPLET: 3,
    Structure.CHIPPER: 0,
}

# Chippers skip duration and format draws entirely
CHIPPER_DURATION = DurationBucket.LONG
CHIPPER_FORMAT = WorkoutFormat.FOR_TIME

# Structure used when a caller passes something we can't recognise
FALLBACK_STRUCTURE = Structure.SINGLE

TWO_OF_A_KIND_CATEGORY = {
    Modality.WEIGHTLIFTING: CombinationCategory.TWO_WEIGHTLIFTING,
    Modality.GYMNASTICS: CombinationCategory.TWO_GYMNASTICS,
    Modality.MONOSTRUCTURAL: CombinationCategory.TWO_MONOSTRUCTURAL,
}

# ---------------------------------------------------------------------------
# Weight table constants
# ---------------------------------------------------------------------------

# Declared weights must sum to 1.0 within this tolerance
WEIGHT_SUM_TOLERANCE = 1e-6

# Formats that may only appear for a given single-modality lead
SKILL_ONLY_MODALITY = Modality.GYMNASTICS
# Monostructural singles never run as AMRAP
MONOSTRUCTURAL_EXCLUDED_FORMATS = frozenset({WorkoutFormat.AMRAP})
