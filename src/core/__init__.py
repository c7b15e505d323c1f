"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the box value type:
units of measure, the Box model itself, float safeguards and the JSON contract.
"""
