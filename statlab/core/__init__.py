"""
Core infrastructure for statlab.

This module provides shared abstractions, utilities, and numeric kernels
used by all domain-specific submodules (descriptive, hypothesis,
regression, ...).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    methods: exact / compat method constants
    compute: Special functions, linear algebra, combinatorics, timing
"""

from statlab.core.result import Result
from statlab.core.exceptions import (
    StatLabError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)
from statlab.core.methods import METHOD_EXACT, METHOD_COMPAT

__all__ = [
    # Result
    "Result",
    # Exceptions
    "StatLabError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    # Methods
    "METHOD_EXACT",
    "METHOD_COMPAT",
]
