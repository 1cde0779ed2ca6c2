"""
LifeOS - Personal Daily Accountability System

A self-hosted Python system for logging one structured entry per day,
scoring discipline, and enforcing the shutdown ritual between days.

This system exists to close each day, not to decorate it.
"""

__version__ = "0.1.0"
