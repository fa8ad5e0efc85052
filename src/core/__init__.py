"""
Core algebra and conversion primitives.

This module contains the foundational building blocks (ranges, domains,
conversion models) that hold no mutable state and are independent of
variables and monitors.
"""
