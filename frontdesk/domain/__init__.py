"""Domain constants for the front desk.

Kept framework-agnostic so services and tests can share them without Flask.
"""
