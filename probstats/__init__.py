"""probstats: closed-form properties of standard probability distributions.

This package provides probability mass/density functions, cumulative
distribution functions, means and variances for the Bernoulli, Binomial,
discrete uniform, continuous uniform and Normal distributions.
"""

try:
    from probstats._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.exceptions import InvalidParameter
from .core.operations import probability
from .core.types import ContinuousDist, DiscreteDist, Dist
from .distributions.continuous import ContinuousUniform, Normal
from .distributions.discrete import Bernoulli, Binomial, DiscreteUniform

__all__ = [
    "Dist",
    "DiscreteDist",
    "ContinuousDist",
    "InvalidParameter",
    "Bernoulli",
    "Binomial",
    "DiscreteUniform",
    "ContinuousUniform",
    "Normal",
    "probability",
]
