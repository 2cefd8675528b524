"""Bit-mask types for collision categories and weapon triggers."""

from __future__ import annotations

from enum import IntFlag


class CollisionType(IntFlag):
    """Collision categories; combine with | to describe an object."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    SHIP = 1 << 2
    PROJECTILE = 1 << 3

    def contains(self, other: CollisionType) -> bool:
        """Return True if any bit of other is set in this type."""
        return (int(self) & int(other)) > 0


class TriggerType(IntFlag):
    """Trigger categories used to fire weapons."""

    NONE = 0
    PRIMARY = 1 << 0
    SECONDARY = 1 << 1
    SPECIAL = 1 << 2
    ALL = 0xFFFF

    def contains(self, other: TriggerType) -> bool:
        """Return True if any bit of other is set in this type."""
        return (int(self) & int(other)) > 0