"""
Constants for ROLLSTAT.

Central location for magic numbers and default values.
"""

# ============================================================
# ROBUST STATISTICS
# ============================================================

# Scale factor making MAD a consistent estimator of the standard
# deviation for normally distributed data (1 / Phi^-1(3/4))
MAD_SCALE = 1.4826

# Returned by mad() for empty input. Out-of-band: a real MAD is never negative
MAD_UNDEFINED = -1.0

# ============================================================
# ROLLING WINDOW DEFAULTS
# ============================================================

DEFAULT_WINDOW = 3
DEFAULT_OMIT_NANS = False
DEFAULT_TRAILING = False
DEFAULT_FULL_WINDOW = False

# ============================================================
# TIMEFRAMES
# ============================================================

# Trading days per year
TRADING_DAYS_PER_YEAR = 252

# Long-term average for US markets
DEFAULT_PERIODICITY = float(TRADING_DAYS_PER_YEAR)
