"""Define Pydantic models for validating YAML files that declare uniform samplers.

Example YAML file declaring two named samplers:

    dice: {interval: "[]", low: 1, high: 6, dtype: int}
    unit: {interval: "[)", low: 0.0, high: 1.0, dtype: float32}
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Literal, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator

from uniform_intervals.io.logging import log_info
from uniform_intervals.io.yaml_utils import load_sampler_declarations
from uniform_intervals.math.intervals import IntervalKind
from uniform_intervals.math.numeric import max_finite
from uniform_intervals.sampling.distributions import UniformDistributionWrapper

NumericTypeName = Literal[
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float",
    "float16",
    "float32",
    "float64",
    "longdouble",
]
"""Names of the numeric types that sampler endpoints can be converted into."""

NUMERIC_TYPES: dict[str, type] = {
    "int": int,
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
    "uint64": np.uint64,
    "float": float,
    "float16": np.float16,
    "float32": np.float32,
    "float64": np.float64,
    "longdouble": np.longdouble,
}
"""Map from numeric type names to the corresponding Python or NumPy scalar types."""


class UniformSamplerSchema(BaseModel):
    """Schema for a uniform sampler over an interval of integers or floats."""

    interval: str = Field(default="[)", description="Interval kind, e.g. '[)' or 'open_closed'")
    low: Union[int, float] = Field(description="Left endpoint of the interval")
    high: Union[int, float] = Field(description="Right endpoint of the interval")
    dtype: NumericTypeName = "float"

    model_config = ConfigDict(extra="forbid")

    @field_validator("interval")
    @classmethod
    def normalize_interval_brackets(cls, value: str) -> str:
        """Validate the interval kind and store it as a bracket pair."""
        return IntervalKind.parse(value).brackets

    @model_validator(mode="after")
    def check_endpoints(self) -> UniformSamplerSchema:
        """Verify that the endpoints are ordered and fit the declared numeric type."""
        if self.high < self.low:
            raise ValueError(f"Invalid interval: high ({self.high}) < low ({self.low}).")

        if self.is_integer_type:
            for endpoint in (self.low, self.high):
                if isinstance(endpoint, float) and not endpoint.is_integer():
                    raise ValueError(f"Endpoint {endpoint} is not an integer ({self.dtype}).")

                info = None if self.numeric_type is int else np.iinfo(self.numeric_type)
                if info is not None and not info.min <= int(endpoint) <= info.max:
                    raise ValueError(f"Endpoint {endpoint} is out of range for {self.dtype}.")
        else:
            largest = float(max_finite(self.numeric_type(0)))
            for endpoint in (self.low, self.high):
                if not abs(endpoint) <= largest:
                    raise ValueError(f"Endpoint {endpoint} is not a finite {self.dtype} value.")

        return self

    @property
    def kind(self) -> IntervalKind:
        """Retrieve the interval kind of the sampler."""
        return IntervalKind.parse(self.interval)

    @property
    def numeric_type(self) -> type:
        """Retrieve the scalar type of the sampler's endpoints."""
        return NUMERIC_TYPES[self.dtype]

    @property
    def is_integer_type(self) -> bool:
        """Check whether the sampler draws integers rather than floats."""
        return bool(np.issubdtype(np.dtype(self.numeric_type), np.integer))

    def to_distribution(self) -> UniformDistributionWrapper:
        """Construct the uniform distribution declared by this schema."""
        if self.is_integer_type:
            low, high = self.numeric_type(int(self.low)), self.numeric_type(int(self.high))
        else:
            low, high = self.numeric_type(self.low), self.numeric_type(self.high)
        return UniformDistributionWrapper(self.kind, low, high)


class UniformSamplersSchema(RootModel):
    """Schema for a YAML file mapping sampler names to uniform sampler declarations."""

    root: Dict[str, UniformSamplerSchema]


def load_uniform_samplers(yaml_path: Path) -> dict[str, UniformDistributionWrapper]:
    """Load named uniform distributions from a YAML file.

    :param yaml_path: Path to a YAML file mapping sampler names to sampler declarations
    :return: Map from sampler names to the uniform distributions they declare
    :raises ValidationError: If the YAML data doesn't match UniformSamplersSchema
    :raises TypeError: If the YAML file doesn't map sampler names to declarations
    """
    declarations = load_sampler_declarations(yaml_path)
    schema = UniformSamplersSchema.model_validate(declarations)

    samplers = {name: declared.to_distribution() for name, declared in schema.root.items()}
    log_info(f"Loaded {len(samplers)} uniform sampler(s) from {yaml_path}.")
    return samplers
