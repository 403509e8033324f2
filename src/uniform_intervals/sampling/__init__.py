"""Import classes for sampling uniformly from open, closed, and half-open intervals."""

from .distributions import UniformDistributionWrapper as UniformDistributionWrapper
from .distributions import uniform as uniform
from .samplers import UniformIntSampler as UniformIntSampler
from .samplers import UniformRealSampler as UniformRealSampler
from .samplers import uniform_sampler as uniform_sampler
