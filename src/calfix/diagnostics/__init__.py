"""Diagnostics package.

Bulk checks and plots outside the unit tests. Needs the optional extras:
pip install "calfix[diagnostics]"
"""

__all__ = ["round_trip", "new_year_drift"]
