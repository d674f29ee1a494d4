"""
Contract Validation Module

Модуль для валидации JSON-совместимых определений решётки.
"""

from .validators import (
    LATTICE_SCHEMA,
    SCHEMA_DIR,
    LatticeDefinitionValidator,
    build_lattice,
    format_error_path,
    load_schema,
    validate_lattice_definition,
)

__all__ = [
    # Constants
    "LATTICE_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "LatticeDefinitionValidator",
    # Functions
    "load_schema",
    "format_error_path",
    "validate_lattice_definition",
    "build_lattice",
]
