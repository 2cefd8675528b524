"""Ships: the shared ship behaviour, enemy ships and the player's ship."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Optional, Union

from spacefighter.gameobject import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Attachment,
    GameObject,
    GameTime,
)
from spacefighter.inputs import Key
from spacefighter.masks import CollisionType, TriggerType
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Weapon

_DIAGONAL_SCALE = math.sqrt(0.5)
_SCREEN_PADDING = 4


def _level() -> Optional[Any]:
    return GameObject.current_level()


class Ship(GameObject):
    """A game object with hit points, speed and attached items such as weapons."""

    def __init__(self) -> None:
        super().__init__()
        self.set_position(Vector2(0, 0))
        self.collision_radius = 10.0
        self.speed = 300.0
        self.max_hit_points = 3.0
        self.hit_points = self.max_hit_points
        self.is_invulnerable = False
        self._attachments: dict[str, Attachment] = {}

    def update(self, game_time: GameTime) -> None:
        """Update every attachment, then the object itself."""
        for key in sorted(self._attachments):
            self._attachments[key].update(game_time)
        super().update(game_time)

    def hit(self, damage: float) -> None:
        """Take damage; at zero hit points the ship is destroyed and explodes."""
        if self.is_invulnerable:
            return
        self.hit_points -= damage
        if self.hit_points > 0:
            return
        GameObject.deactivate(self)
        level = _level()
        if level is not None:
            level.spawn_explosion(self)

    def initialize(self) -> None:
        """Restore the ship to full hit points."""
        self.hit_points = self.max_hit_points

    def attach_item(self, item: Attachment, position: Vector2) -> None:
        """Attach an item at an offset from the ship's center, keyed by its key."""
        item.attach_to(self, position)
        self._attachments[item.key] = item

    def get_attachment(self, key: Union[str, int]) -> Optional[Attachment]:
        """Return an attachment by key, or by index in key order; None if absent."""
        if isinstance(key, int):
            keys = sorted(self._attachments)
            if 0 <= key < len(keys):
                return self._attachments[keys[key]]
            return None
        return self._attachments.get(key)

    def get_weapon(self, key: str) -> Optional[Weapon]:
        """Return the attachment with this key if it is a weapon."""
        item = self._attachments.get(key)
        return item if isinstance(item, Weapon) else None

    def fire_weapons(self, trigger_type: TriggerType = TriggerType.ALL) -> None:
        """Fire every attached weapon with the given trigger."""
        for key in sorted(self._attachments):
            item = self._attachments[key]
            if item.attachment_type != "Weapon":
                continue
            if isinstance(item, Weapon):
                item.fire(trigger_type)

    @property
    def attachments(self) -> Iterable[Attachment]:
        """The attached items in key order."""
        return [self._attachments[key] for key in sorted(self._attachments)]

    def __str__(self) -> str:
        return "Ship"


class EnemyShip(Ship):
    """An enemy ship that appears after a delay and scores when destroyed."""

    def __init__(self) -> None:
        super().__init__()
        self.max_hit_points = 1.0
        self.collision_radius = 20.0
        self.delay_seconds = 0.0
        self.activation_seconds = 0.0

    def update(self, game_time: GameTime) -> None:
        """Count down the activation delay and leave once off screen for long."""
        if self.delay_seconds > 0:
            self.delay_seconds -= game_time.elapsed
            if self.delay_seconds <= 0:
                GameObject.activate(self)

        if self.is_active:
            self.activation_seconds += game_time.elapsed
            if self.activation_seconds > 2 and not self.is_on_screen():
                self.deactivate()

        super().update(game_time)

    def initialize(  # type: ignore[override]
        self, position: Vector2, delay_seconds: float
    ) -> None:
        """Place the ship and set the delay before it becomes active."""
        self.set_position(position)
        self.delay_seconds = delay_seconds
        super().initialize()

    def hit(self, damage: float) -> None:
        """Take damage; the score goes up by one if the ship is left inactive."""
        super().hit(damage)
        if not self.is_active:
            level = _level()
            if level is not None:
                level.change_score_amount(1)

    def fire(self) -> None:
        """Fire the ship's weapons; plain enemy ships have none."""

    def collision_type(self) -> CollisionType:
        return CollisionType.ENEMY | CollisionType.SHIP

    def __str__(self) -> str:
        return "Enemy Ship"


class BioEnemyShip(EnemyShip):
    """An enemy ship that weaves side to side as it descends."""

    def __init__(self, texture: Any = None) -> None:
        super().__init__()
        self.texture = texture
        self.speed = 150.0
        self.max_hit_points = 1.0
        self.collision_radius = 20.0

    def update(self, game_time: GameTime) -> None:
        """Weave downwards; leaving the screen costs the player a point."""
        if self.is_active:
            sway = math.sin(game_time.total * math.pi + self.index)
            sway *= self.speed * game_time.elapsed * 1.4
            self.translate(Vector2(sway, self.speed * game_time.elapsed))

            if not self.is_on_screen():
                level = _level()
                if level is not None:
                    level.change_score_amount(-1)
                self.deactivate()

        super().update(game_time)


class PlayerShip(Ship):
    """The ship the player steers with the keyboard."""

    def __init__(self, sprite_half_size: Optional[Vector2] = None) -> None:
        super().__init__()
        self.sprite_half_size = sprite_half_size
        self.desired_direction = Vector2.ZERO
        self.velocity = Vector2.ZERO
        self.responsiveness = 0.0
        self.is_confined_to_screen = False

    def initialize(self, start_position: Vector2) -> None:  # type: ignore[override]
        """Place the ship at its starting position."""
        self.set_position(start_position)

    def handle_input(self, pressed_keys: Iterable[Key]) -> None:
        """Steer with the arrow keys and fire the primary weapons with space."""
        if not self.is_active:
            return
        keys = set(pressed_keys)
        dx = dy = 0.0
        if Key.DOWN in keys:
            dy += 1
        if Key.UP in keys:
            dy -= 1
        if Key.RIGHT in keys:
            dx += 1
        if Key.LEFT in keys:
            dx -= 1

        direction = Vector2(dx, dy)
        if dx != 0 and dy != 0:
            direction = direction * _DIAGONAL_SCALE

        trigger = TriggerType.NONE
        if Key.SPACE in keys:
            trigger |= TriggerType.PRIMARY

        self.set_desired_direction(direction)
        if trigger != TriggerType.NONE:
            self.fire_weapons(trigger)

    def update(self, game_time: GameTime) -> None:
        """Ease towards the desired velocity, move, and keep to the screen if confined."""
        target = self.desired_direction * self.speed * game_time.elapsed
        self.velocity = Vector2.lerp(self.velocity, target, self.responsiveness)
        self.translate(self.velocity)

        if self.is_confined_to_screen:
            top = _SCREEN_PADDING
            left = _SCREEN_PADDING
            right = SCREEN_WIDTH - _SCREEN_PADDING
            bottom = SCREEN_HEIGHT - _SCREEN_PADDING
            half = self.half_dimensions()

            if self.position.x - half.x < left:
                self.set_position(Vector2(left + half.x, self.position.y))
                self.velocity = Vector2(0, self.velocity.y)
            if self.position.x + half.x > right:
                self.set_position(Vector2(right - half.x, self.position.y))
                self.velocity = Vector2(0, self.velocity.y)
            if self.position.y - half.y < top:
                self.set_position(Vector2(self.position.x, top + half.y))
                self.velocity = Vector2(self.velocity.x, 0)
            if self.position.y + half.y > bottom:
                self.set_position(Vector2(self.position.x, bottom - half.y))
                self.velocity = Vector2(self.velocity.x, 0)

        super().update(game_time)

    def half_dimensions(self) -> Vector2:
        """Half the sprite size, or the collision radius when no sprite is set."""
        if self.sprite_half_size is not None:
            return self.sprite_half_size
        return super().half_dimensions()

    def set_desired_direction(self, direction: Vector2) -> None:
        """Set the direction the player wants to move in."""
        self.desired_direction = direction

    def confine_to_screen(self, is_confined: bool = True) -> None:
        """Keep the ship from leaving the screen, or allow it to."""
        self.is_confined_to_screen = is_confined

    def set_responsiveness(self, responsiveness: float) -> None:
        """Set how quickly the ship reaches its desired velocity, clamped to [0, 1]."""
        self.responsiveness = min(max(responsiveness, 0.0), 1.0)

    def collision_type(self) -> CollisionType:
        return CollisionType.PLAYER | CollisionType.SHIP

    def __str__(self) -> str:
        return "Player Ship"