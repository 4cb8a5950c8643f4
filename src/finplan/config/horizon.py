"""Projection horizon — fixed 3-year monthly grid."""

HORIZON_MONTHS = 36

# (year, first month, last month) — months are 1-indexed and inclusive
YEAR_BUCKETS: tuple[tuple[int, int, int], ...] = (
    (1, 1, 12),
    (2, 13, 24),
    (3, 25, 36),
)

SNAPSHOT_MONTHS: tuple[int, ...] = (12, 24, 36)
