"""Base game object, timing values and the attachment interface."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Protocol

from spacefighter.masks import CollisionType
from spacefighter.vector2 import Vector2

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 900


class _Level(Protocol):
    def update_sector_position(self, game_object: GameObject) -> None: ...


@dataclass(frozen=True)
class GameTime:
    """Timing values for one frame: seconds since the last frame and in total."""

    elapsed: float = 0.0
    total: float = 0.0


class Attachment(ABC):
    """An item that can be attached to an object, such as a weapon."""

    key: str

    @abstractmethod
    def attach_to(self, owner: Any, position: Vector2) -> None:
        """Attach the item to an owner at an offset from its center."""

    @abstractmethod
    def update(self, game_time: GameTime) -> None:
        """Advance the item by one frame."""

    @property
    @abstractmethod
    def attachment_type(self) -> str:
        """The kind of attachment, such as "Weapon"."""


class GameObject(ABC):
    """Base for everything that is updated and checked for collisions."""

    _current_level: ClassVar[Optional[_Level]] = None
    _counter: ClassVar[itertools.count] = itertools.count()

    def __init__(self) -> None:
        self.index = next(GameObject._counter)
        self.collision_radius = 0.0
        self._is_active = False
        self._position = Vector2.ZERO
        self._previous_position = Vector2.ZERO

    @staticmethod
    def set_current_level(level: Optional[_Level]) -> None:
        """Set the level that game objects report their positions to."""
        GameObject._current_level = level

    @staticmethod
    def current_level() -> Optional[_Level]:
        """Return the level set by set_current_level."""
        return GameObject._current_level

    def update(self, game_time: GameTime) -> None:
        """Register an active object with the current level's sectors."""
        level = GameObject._current_level
        if not self.is_active or level is None:
            return
        level.update_sector_position(self)

    @property
    def is_active(self) -> bool:
        """True while the object takes part in the game."""
        return self._is_active

    def activate(self) -> None:
        """Make the object active."""
        self._is_active = True

    def deactivate(self) -> None:
        """Make the object inactive."""
        self._is_active = False

    @property
    def position(self) -> Vector2:
        """The current position."""
        return self._position

    @property
    def previous_position(self) -> Vector2:
        """The position before the last move."""
        return self._previous_position

    def half_dimensions(self) -> Vector2:
        """Half the object's extent; by default the collision radius on both axes."""
        return Vector2(self.collision_radius, self.collision_radius)

    @abstractmethod
    def collision_type(self) -> CollisionType:
        """The collision categories of the object."""

    def hit(self, damage: float) -> None:
        """Apply damage; ignored unless a subclass handles it."""

    def has_mask(self, mask: CollisionType) -> bool:
        """True if the mask shares any bit with the object's collision type."""
        return mask.contains(self.collision_type())

    def is_mask(self, mask: CollisionType) -> bool:
        """True if the object's collision type equals the mask."""
        return self.collision_type() == mask

    def set_position(self, position: Vector2) -> None:
        """Move to a position, remembering the old one."""
        self._previous_position = self._position
        self._position = position

    def translate(self, offset: Vector2) -> None:
        """Move by an offset."""
        self.set_position(self._position + offset)

    def is_on_screen(self) -> bool:
        """True if any part of the object overlaps the screen."""
        half = self.half_dimensions()
        x, y = self._position.x, self._position.y
        if y - half.y >= SCREEN_HEIGHT:
            return False
        if y + half.y <= 0:
            return False
        if x - half.x >= SCREEN_WIDTH:
            return False
        if x + half.x <= 0:
            return False
        return True