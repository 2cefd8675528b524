"""Particles and the pieces that create, advance and emit them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Protocol

from spacefighter.vector2 import Vector2

Color = tuple[float, float, float, float]

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class _ParticleLike(Protocol):
    @property
    def is_active(self) -> bool: ...

    def initialize(self, position: Vector2) -> None: ...

    def update(self, elapsed: float) -> None: ...


class _Initializer(Protocol):
    def initialize(self, particle: Particle, position: Vector2) -> None: ...


@dataclass
class Particle:
    """A basic particle that moves with constant velocity until its life runs out."""

    position: Vector2 = Vector2.ZERO
    velocity: Vector2 = Vector2.ZERO
    color: Color = _WHITE
    scale: float = 1.0
    life_span: float = 0.0
    life_remaining: float = 0.0
    life_percentage: float = 0.0

    @property
    def is_active(self) -> bool:
        """True while the particle has life remaining."""
        return self.life_remaining > 0

    def initialize(self, position: Vector2) -> None:
        """Place the particle and restore its full life span."""
        self.position = position
        self.life_remaining = self.life_span

    def update(self, elapsed: float) -> None:
        """Age the particle by the elapsed seconds and move it."""
        self.life_remaining = max(self.life_remaining - elapsed, 0.0)
        self.life_percentage = (
            self.life_remaining / self.life_span if self.life_span else 0.0
        )
        self.position = self.position + self.velocity * elapsed


class ParticleInitializer:
    """Prepares particles with a fixed life span, velocity, scale and color."""

    def __init__(self, color: Color = _WHITE, scale: float = 1.0) -> None:
        self.color = color
        self.scale = scale
        self.life_span = 0.5
        self.velocity = Vector2.UNIT_Y * 50

    def initialize(self, particle: Particle, position: Vector2) -> None:
        """Configure the particle and start it at the given position."""
        particle.life_span = self.life_span
        particle.velocity = self.velocity
        particle.scale = self.scale
        particle.color = self.color
        particle.initialize(position)


class ParticleUpdater:
    """Advances a particle by one step."""

    def update(self, particle: _ParticleLike, elapsed: float) -> None:
        """Update the particle with the elapsed seconds."""
        particle.update(elapsed)


class ParticleEmitter:
    """Emits particles taken from a pool at a rate bounded per second."""

    def __init__(self, initializer: _Initializer) -> None:
        self.initializer = initializer
        self.position = Vector2.ZERO
        self.max_particles_per_second = 100
        self.remaining_particles = 0.0
        self.pool: Optional[Iterable[Particle]] = None

    def _inactive_particle(self) -> Optional[Particle]:
        if self.pool is None:
            raise ValueError("no particle pool has been set for the emitter")
        return next((p for p in self.pool if not p.is_active), None)

    def emit(self, amount: float, elapsed: float) -> None:
        """Emit particles; amount in [0, 1] scales the maximum rate."""
        wanted = amount * self.max_particles_per_second * elapsed
        count = int(wanted)
        self.remaining_particles += wanted - count

        while count:
            particle = self._inactive_particle()
            if particle is None:
                self.remaining_particles += count
                return
            self.initializer.initialize(particle, self.position)
            count -= 1