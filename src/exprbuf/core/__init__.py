"""
Core domain models, arithmetic primitives, and contracts.

This module contains the building blocks of the expression engine that are
independent of any presentation layer (button grid, terminal, API).
"""
