"""Diagnostics package.

- light-weight text tools: pretty_month, new_years_table, round_trip
- leap_months plot: requires the diagnostics extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
