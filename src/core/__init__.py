"""
Core domain models, mathematical primitives, and invariants.

This module contains the exact rational arithmetic (src.core.math), the
lattice model built on top of it (src.core.domain), and the JSON Schema
contracts for lattice definitions (src.core.contracts).
"""
