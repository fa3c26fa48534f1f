"""Rotation samplers used by the exploration runner."""

import random
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from orientgrid.core.grid import Vec3
from orientgrid.core.patterns import unique_rotations
from orientgrid.core.registry import ROTATION_SAMPLER_REGISTRY, register_rotation_sampler
from orientgrid.core.rotation import IDENTITY, ROTATION_MATRICES, euler_rotation


class RotationSampler(ABC):
    """Draws rotations for placement attempts."""

    def __init__(self, pattern: Sequence[Vec3], rng: random.Random):
        self.pattern = pattern
        self.rng = rng

    @abstractmethod
    def sample(self) -> np.ndarray:
        pass


@register_rotation_sampler("euler90")
class Euler90Sampler(RotationSampler):
    """Independent multiples of 90 degrees about X, Y and Z."""

    def sample(self) -> np.ndarray:
        x = self.rng.randrange(4) * 90
        y = self.rng.randrange(4) * 90
        z = self.rng.randrange(4) * 90
        return euler_rotation(x, y, z)


@register_rotation_sampler("rot24")
class Rot24Sampler(RotationSampler):
    """Uniform over the rotations that give the pattern a distinct shape."""

    def __init__(self, pattern: Sequence[Vec3], rng: random.Random):
        super().__init__(pattern, rng)
        self.rotation_indices = unique_rotations(pattern) if pattern else [0]

    def sample(self) -> np.ndarray:
        return ROTATION_MATRICES[self.rng.choice(self.rotation_indices)]


@register_rotation_sampler("identity")
class IdentitySampler(RotationSampler):

    def sample(self) -> np.ndarray:
        return IDENTITY


def create_sampler(kind: str, pattern: Sequence[Vec3], rng: random.Random) -> RotationSampler:
    sampler_cls = ROTATION_SAMPLER_REGISTRY.get(kind)
    if sampler_cls is None:
        raise RuntimeError(f"Unknown or unsupported rotation sampler: {kind}")
    return sampler_cls(pattern, rng)
