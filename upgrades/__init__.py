"""Pure upgrade-cost package for Hero Wars Helper.

This package contains deterministic, testable computations over static cost
tables. It must not import Django or perform any database I/O.
"""

from .artifacts import calculate_artifact_upgrade
from .errors import InvalidArgument, UpgradeTableError
from .skins import calculate_skin_upgrade, get_other_skin_names

__all__ = [
    "InvalidArgument",
    "UpgradeTableError",
    "calculate_artifact_upgrade",
    "calculate_skin_upgrade",
    "get_other_skin_names",
]
