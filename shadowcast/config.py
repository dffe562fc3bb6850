"""
Configuration constants.

Values are read at call time, so tests may monkeypatch them.
"""

from shadowcast.types import ScanStrategy

# =============================================================================
# SLOPE ARITHMETIC
# =============================================================================

# Width of the signed integer range slope arithmetic must stay within.
# 64 matches a machine isize. None disables the range check.
FRACTION_INT_BITS: int | None = 64

# =============================================================================
# SCANNING
# =============================================================================

# "recursive" follows rows depth-first with Python recursion; stack depth grows
# with the furthest row explored. "iterative" uses an explicit stack instead.
DEFAULT_SCAN_STRATEGY: ScanStrategy = "recursive"
