from sqlalchemy.orm import declarative_base
import enum

Base = declarative_base()


# ============================================================================
# CONSTANTS
# ============================================================================

MIN_ATOMIC_NUMBER = 1
MAX_ATOMIC_NUMBER = 118


# ============================================================================
# ENUMS
# ============================================================================

class StandardState(str, enum.Enum):
    """Physical state at standard conditions, as stored in standardState"""
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"
    UNKNOWN = "unknown"
