"""
Core domain models, mathematical primitives, and invariants.

This module contains the digit chain container, schoolbook decimal
arithmetic, base conversion and the JSON snapshot contracts.
"""
