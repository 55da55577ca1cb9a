"""
statlab: a statistical computation engine for teaching and exploration.

Pure functions over samples and matrices returning immutable result
objects. Approximations that reproduce the classic calculator output
are available with method='compat'; the default method='exact' uses
true quantile and distribution functions.

Submodules:
    descriptive: Summary statistics, histograms, box plots, simple regression
    distributions: Normal, binomial, Poisson, uniform, exponential, Student's t
    hypothesis: t, z, chi-squared and ANOVA tests
    regression: Multiple linear and polynomial regression
    intervals: Confidence intervals for a mean and a proportion
    simulation: Coin flips, dice rolls, central limit theorem
"""

__version__ = "0.1.0"

from statlab import descriptive
from statlab import distributions
from statlab import hypothesis
from statlab import regression
from statlab import intervals
from statlab import simulation

__all__ = [
    "__version__",
    "descriptive",
    "distributions",
    "hypothesis",
    "regression",
    "intervals",
    "simulation",
]
