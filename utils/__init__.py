"""
utils/ - Shared Helpers
=======================
Logging setup and money conversions.
"""
