"""
models/ - Domain Models
=======================
Plain dataclasses returned by the repositories. Money fields are integer cents.
"""
