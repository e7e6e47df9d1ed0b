"""Constants and defaults.

Note: Keep statutory figures here to avoid magic numbers spread across code.
"""

# Shift arithmetic is done in whole minutes.
# Ordinary daily minutes before overtime, per shift type (8h, 7.5h, 7h).
DIURNAL_THRESHOLD_MINUTES = 480
MIXED_THRESHOLD_MINUTES = 450
NOCTURNAL_THRESHOLD_MINUTES = 420

# More than this many night minutes (4h) makes the whole shift nocturnal.
PREDOMINANTLY_NOCTURNAL_MINUTES = 240

# Nocturnal band 19:00-05:00 on an extended (0-29h) timeline, in minutes.
NOCTURNAL_BANDS = ((0, 300), (1140, 1440), (1440, 1740))

MINUTES_PER_DAY = 1440

# date.weekday(): Saturday=5, Sunday=6
REST_WEEKDAYS = frozenset({5, 6})

MONTHLY_DIVISOR_DAYS = 30
ACCRUAL_DIVISOR_DAYS = 360
HALF_PERIOD_DAYS = 15

MAX_VACATION_BONUS_DAYS = 30
DEFAULT_BASE_VACATION_DAYS = 15
DEFAULT_PROFIT_SHARE_DAYS = 30

DEDUCTION_CAP_MINIMUM_WAGES = 5
IVSS_RATE = 0.04
SPF_RATE = 0.005
FAOV_RATE = 0.01

DEFAULT_FALLBACK_EXCHANGE_RATE = 36.5
DEFAULT_EXCHANGE_RATE_TIMEOUT = 10
