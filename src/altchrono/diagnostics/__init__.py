"""Diagnostics package.

- pretty_month, year_starts: always available, plain text output
- leap_years: plot needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["pretty_month", "year_starts", "leap_years"]
