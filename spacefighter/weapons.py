"""Projectiles and the weapons that fire them."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Optional, Protocol

from spacefighter.gameobject import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Attachment,
    GameObject,
    GameTime,
)
from spacefighter.masks import CollisionType, TriggerType
from spacefighter.vector2 import Vector2


class _Sound(Protocol):
    def play(self) -> None: ...


class Projectile(GameObject):
    """A shot that travels in a straight line until it leaves the screen."""

    texture_size: ClassVar[Vector2] = Vector2.ZERO
    """Size of the projectile sprite; used as the off-screen margin."""

    def __init__(self) -> None:
        super().__init__()
        self.direction = -Vector2.UNIT_Y
        self.collision_radius = 9.0
        self.speed = 500.0
        self.damage = 1.0
        self.was_shot_by_player = True

    def update(self, game_time: GameTime) -> None:
        """Move the projectile and deactivate it once off screen."""
        if self.is_active:
            self.translate(self.direction * self.speed * game_time.elapsed)
            position = self.position
            size = Projectile.texture_size
            if (
                position.y < -size.y
                or position.x < -size.x
                or position.y > SCREEN_HEIGHT + size.y
                or position.x > SCREEN_WIDTH + size.x
            ):
                self.deactivate()
        super().update(game_time)

    def activate(self, position: Vector2, was_shot_by_player: bool = True) -> None:
        """Launch the projectile from a position."""
        self.was_shot_by_player = was_shot_by_player
        self.set_position(position)
        super().activate()

    @property
    def projectile_type(self) -> CollisionType:
        """The projectile part of the collision type."""
        return CollisionType.PROJECTILE

    def collision_type(self) -> CollisionType:
        """Player or enemy, combined with the projectile type."""
        owner = CollisionType.PLAYER if self.was_shot_by_player else CollisionType.ENEMY
        return owner | self.projectile_type

    def __str__(self) -> str:
        return ("Player" if self.was_shot_by_player else "Enemy") + " Projectile"


class Weapon(Attachment):
    """Base for weapons attached to a game object and fired from a projectile pool."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        self.key = key
        self.is_attached_to_player = is_attached_to_player
        self.trigger_type = trigger_type
        self.projectile_pool: Optional[list[Projectile]] = None
        self.fire_sound: Optional[_Sound] = None
        self._enabled = is_active
        self._owner: Optional[GameObject] = None
        self._offset = Vector2.ZERO

    @property
    def attachment_type(self) -> str:
        return "Weapon"

    def attach_to(self, owner: object, position: Vector2) -> None:
        """Attach to a game object at an offset from its center."""
        self._owner = owner if isinstance(owner, GameObject) else None
        self._offset = position

    def update(self, game_time: GameTime) -> None:
        """Advance the weapon; nothing to do by default."""

    def activate(self) -> None:
        """Enable the weapon."""
        self._enabled = True

    def deactivate(self) -> None:
        """Disable the weapon."""
        self._enabled = False

    @property
    def is_active(self) -> bool:
        """True if the weapon is enabled and its owner is active."""
        return self._enabled and self._owner is not None and self._owner.is_active

    @property
    def position(self) -> Vector2:
        """The weapon's position on screen."""
        if self._owner is None:
            raise RuntimeError(f"weapon {self.key!r} is not attached")
        return self._owner.position + self._offset

    def get_projectile(self) -> Optional[Projectile]:
        """Return the first inactive projectile in the pool, or None."""
        if self.projectile_pool is None:
            raise ValueError(f"weapon {self.key!r} has no projectile pool")
        return next((p for p in self.projectile_pool if not p.is_active), None)

    @abstractmethod
    def fire(self, trigger_type: TriggerType) -> None:
        """Try to fire; a weapon only fires when active and triggered."""


class Blaster(Weapon):
    """A weapon that fires one projectile per shot with a cooldown between shots."""

    def __init__(
        self,
        key: str,
        is_attached_to_player: bool = True,
        is_active: bool = True,
        trigger_type: TriggerType = TriggerType.PRIMARY,
    ) -> None:
        super().__init__(key, is_attached_to_player, is_active, trigger_type)
        self.cooldown = 0.0
        self.cooldown_seconds = 0.35

    def update(self, game_time: GameTime) -> None:
        """Count the cooldown down."""
        if self.cooldown > 0:
            self.cooldown -= game_time.elapsed

    @property
    def can_fire(self) -> bool:
        """True once the cooldown has run out."""
        return self.cooldown <= 0

    def reset_cooldown(self) -> None:
        """Make the blaster ready to fire at once."""
        self.cooldown = 0.0

    def fire(self, trigger_type: TriggerType) -> None:
        """Fire if active, cooled down and the trigger matches."""
        if not self.is_active or not self.can_fire:
            return
        if not trigger_type.contains(self.trigger_type):
            return
        projectile = self.get_projectile()
        if projectile is None:
            return
        if self.fire_sound is not None:
            self.fire_sound.play()
        projectile.activate(self.position, self.is_attached_to_player)
        self.cooldown = self.cooldown_seconds