"""Pairwise collision dispatch between game objects."""

from __future__ import annotations

from typing import Callable

from spacefighter.gameobject import GameObject
from spacefighter.masks import CollisionType

OnCollision = Callable[[GameObject, GameObject], None]


def _ordered(
    type1: CollisionType, type2: CollisionType
) -> tuple[CollisionType, CollisionType]:
    return (type1, type2) if type1 <= type2 else (type2, type1)


class CollisionManager:
    """Decides which pairs of collision types interact and runs their callbacks."""

    def __init__(self) -> None:
        self._non_collisions: set[tuple[CollisionType, CollisionType]] = set()
        self._collisions: dict[tuple[CollisionType, CollisionType], OnCollision] = {}

    def add_collision_type(
        self, type1: CollisionType, type2: CollisionType, callback: OnCollision
    ) -> None:
        """Call callback when objects of these two types overlap.

        The callback receives the object with the lower type value first.
        The first callback registered for a pair is the one used.
        """
        self._collisions.setdefault(_ordered(type1, type2), callback)

    def add_non_collision_type(self, type1: CollisionType, type2: CollisionType) -> None:
        """Never check objects of these two types against each other."""
        self._non_collisions.add(_ordered(type1, type2))

    def check_collision(self, first: GameObject, second: GameObject) -> None:
        """Run the callback for this pair if their types interact and they overlap."""
        type1 = first.collision_type()
        type2 = second.collision_type()
        if type1 == type2 or not type1 or not type2:
            return

        if type1 > type2:
            type1, type2 = type2, type1
            first, second = second, first

        pair = (type1, type2)
        if pair in self._non_collisions:
            return

        callback = self._collisions.get(pair)
        if callback is None:
            self.add_non_collision_type(type1, type2)
            return

        difference = first.position - second.position
        radii = first.collision_radius + second.collision_radius
        if difference.length_squared() <= radii * radii:
            callback(first, second)