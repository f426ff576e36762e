"""CPU-side particle simulation with billboarding and an acceleration field."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any

from enginekit.matrix import Matrix, rotation_y
from enginekit.transform import AABB, Transform, is_collision
from enginekit.vector import Float3, Float4

DELTA_TIME = 1.0 / 60.0
MAX_INSTANCES = 100


@dataclass
class Particle:
    """A single simulated particle."""

    transform: Transform = field(default_factory=Transform)
    velocity: Float3 = field(default_factory=Float3)
    color: Float4 = field(default_factory=lambda: Float4(1.0, 1.0, 1.0, 1.0))
    life_time: float = 0.0
    current_time: float = 0.0


@dataclass(frozen=True)
class InstanceData:
    """Per-instance data produced for drawing one particle."""

    wvp: Matrix
    world: Matrix
    color: Float4


@dataclass
class ParticleGroup:
    """Particles sharing a model and texture, with this frame's instance data."""

    model: Any = None
    texture_handle: int = 0
    particles: list[Particle] = field(default_factory=list)
    instances: list[InstanceData] = field(default_factory=list)
    max_instances: int = MAX_INSTANCES


@dataclass
class AccelerationField:
    """Constant acceleration applied to particles inside ``area``."""

    acceleration: Float3
    area: AABB


def _default_field() -> AccelerationField:
    return AccelerationField(
        acceleration=Float3(15.0, 0.0, 0.0),
        area=AABB(Float3(-1.0, -1.0, -1.0), Float3(1.0, 1.0, 1.0)),
    )


class ParticleManager:
    """Owns named particle groups and advances them one frame at a time."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self.particle_groups: dict[str, ParticleGroup] = {}
        self.back_to_front_matrix = rotation_y(math.pi)
        self.billboard_matrix = Matrix()
        self.acceleration_field = _default_field()

    def _group(self, name: str) -> ParticleGroup:
        try:
            return self.particle_groups[name]
        except KeyError:
            raise KeyError(f"unknown particle group: {name!r}") from None

    def create_particle_group(self, name: str) -> ParticleGroup:
        """Register a new empty group; the name must not be in use."""
        if name in self.particle_groups:
            raise ValueError(f"particle group already exists: {name!r}")
        group = ParticleGroup()
        self.particle_groups[name] = group
        return group

    def set_model(self, name: str, model: Any) -> None:
        """Attach a model to an existing group."""
        self._group(name).model = model

    def set_texture(self, name: str, texture_handle: int) -> None:
        """Attach a texture handle to an existing group."""
        self._group(name).texture_handle = texture_handle

    def emit(self, name: str, position: Float3, count: int) -> list[Particle]:
        """Spawn ``count`` randomised particles around ``position`` into a group."""
        group = self._group(name)
        rng = self._random
        spread = lambda: rng.uniform(-1.0, 1.0)  # noqa: E731
        created = []
        for _ in range(count):
            velocity = Float3(spread(), spread(), spread())
            offset = Float3(spread(), spread(), spread())
            particle = Particle(
                transform=Transform(translate=position + offset),
                velocity=velocity,
                color=Float4(rng.random(), rng.random(), rng.random(), 1.0),
                life_time=rng.uniform(1.0, 3.0),
                current_time=0.0,
            )
            group.particles.append(particle)
            created.append(particle)
        return created

    def _make_billboard(self, view_matrix: Matrix) -> Matrix:
        rows = [list(row) for row in self.back_to_front_matrix * view_matrix]
        rows[3][0:3] = [0.0, 0.0, 0.0]
        return Matrix(rows)

    def update(self, view_matrix: Matrix, projection_matrix: Matrix) -> None:
        """Advance every group by one frame and rebuild its instance data."""
        self.billboard_matrix = self._make_billboard(view_matrix)
        view_projection = view_matrix * projection_matrix
        accel_step = self.acceleration_field.acceleration * DELTA_TIME

        for group in self.particle_groups.values():
            group.particles = [p for p in group.particles if p.current_time < p.life_time]
            group.instances = []

            for particle in group.particles:
                world = particle.transform.make_affine_matrix()
                if len(group.instances) < group.max_instances:
                    alpha = 1.0 - particle.current_time / particle.life_time
                    c = particle.color
                    group.instances.append(
                        InstanceData(
                            wvp=world * self.billboard_matrix * view_projection,
                            world=world,
                            color=Float4(c.x, c.y, c.z, alpha),
                        )
                    )

                if is_collision(self.acceleration_field.area, particle.transform.translate):
                    particle.velocity = particle.velocity + accel_step

                particle.transform.translate = (
                    particle.transform.translate + particle.velocity * DELTA_TIME
                )
                particle.current_time += DELTA_TIME


class ParticleEmitter:
    """Emits particles from a fixed transform at a regular interval."""

    def __init__(self, manager: ParticleManager) -> None:
        self.manager = manager
        self.count = 3
        self.frequency = 0.5
        self.frequency_time = 0.0
        self.transform = Transform()

    def update(self, name: str, is_emit: bool) -> None:
        """Advance the emitter clock by one frame, emitting when it is due."""
        self.frequency_time += DELTA_TIME
        if self.frequency <= self.frequency_time:
            if is_emit:
                self.emit(name)
            self.frequency_time -= self.frequency

    def emit(self, name: str) -> None:
        """Emit ``count`` particles at the emitter's position."""
        self.manager.emit(name, self.transform.translate, self.count)