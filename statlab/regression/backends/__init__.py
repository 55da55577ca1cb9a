"""
Regression backends.

Available backends:
    CPUNormalEquationsBackend: normal equations with Gauss-Jordan inversion
"""

from statlab.regression.backends.cpu import CPUNormalEquationsBackend

__all__ = [
    "CPUNormalEquationsBackend",
]
