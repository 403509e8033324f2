"""Import definitions used to configure uniform samplers and the package's logging."""

from .logging import configure_logging as configure_logging
from .pydantic_schemata import UniformSamplerSchema as UniformSamplerSchema
from .pydantic_schemata import load_uniform_samplers as load_uniform_samplers
from .yaml_utils import load_sampler_declarations as load_sampler_declarations
