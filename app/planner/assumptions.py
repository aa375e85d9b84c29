# backend/app/planner/assumptions.py

# 2024 federal brackets, single filer: (salary floor, marginal rate, base tax at floor).
# Highest floor first; the scan stops at the first floor the salary exceeds.
FEDERAL_BRACKETS_2024 = (
    (609350.0, 0.37, 183647.0),
    (243725.0, 0.35, 55678.0),
    (191950.0, 0.32, 39110.0),
    (100525.0, 0.24, 17168.0),
    (47150.0, 0.22, 5444.0),
    (11600.0, 0.12, 1160.0),
)
FEDERAL_BOTTOM_RATE = 0.10

TAX_COUNTRY = "USA"
NON_US_FLAT_RATE = 0.25

STATE_TAX_RATES = {
    "GA": 0.0549,
    "CA": 0.093,
    "NY": 0.065,
    "TX": 0.0,
    "FL": 0.0,
    "WA": 0.0,
}
DEFAULT_STATE_RATE = 0.05

# Risk scoring
AGE_WEIGHT = 0.6
HORIZON_WEIGHT = 0.4
NEUTRAL_HORIZON_FACTOR = 50.0

# Warnings
EMERGENCY_FUND_MONTHS = 3
DEBT_TO_INCOME_LIMIT = 0.36

# Allocation bounds
STOCK_MIN_PCT = 10.0
STOCK_MAX_PCT = 90.0
STOCK_SCORE_MULTIPLIER = 0.9
REAL_ESTATE_MAX_PCT = 15.0
REAL_ESTATE_SCORE_DIVISOR = 10.0
BOND_SHARE_OF_REMAINDER = 0.8
