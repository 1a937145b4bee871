"""JSON Healer: diagnose, explain and repair almost-JSON text."""

__version__ = "0.1.0"

from jsonhealer.convenience import (  # noqa: E402
    diagnose,
    diagnose_bytes,
    heal,
    heal_bytes,
    is_valid,
    is_valid_bytes,
    process,
    quick_fix,
    quick_repair,
)
from jsonhealer.healer import Critical, Healed, HealingResult, Healthy, JSONHealer  # noqa: E402
from jsonhealer.models import (  # noqa: E402
    Diagnostic,
    Fault,
    FaultKind,
    HealerOptions,
    HealthStatus,
    Position,
    RepairSuggestion,
)
from jsonhealer.parser import TolerantParser  # noqa: E402

__all__ = [
    "Critical",
    "Diagnostic",
    "Fault",
    "FaultKind",
    "Healed",
    "HealerOptions",
    "HealingResult",
    "HealthStatus",
    "Healthy",
    "JSONHealer",
    "Position",
    "RepairSuggestion",
    "TolerantParser",
    "__version__",
    "diagnose",
    "diagnose_bytes",
    "heal",
    "heal_bytes",
    "is_valid",
    "is_valid_bytes",
    "process",
    "quick_fix",
    "quick_repair",
]
