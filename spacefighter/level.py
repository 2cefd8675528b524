"""Levels: the game objects, collision sectors, explosions and score of one stage."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Callable, Optional, Protocol, TypeVar

from spacefighter.collision import CollisionManager
from spacefighter.gameobject import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    GameObject,
    GameTime,
)
from spacefighter.inputs import Key
from spacefighter.masks import CollisionType
from spacefighter.ships import BioEnemyShip, PlayerShip
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Blaster, Projectile

T = TypeVar("T")

_SECTOR_SIZE = 64
_PROJECTILE_COUNT = 100
_APPROXIMATE_TEXTURE_RADIUS = 120.0
_DRAMATIC_EFFECT = 2.2
_START_DELAY = 3.0


class _Explosion(Protocol):
    @property
    def is_active(self) -> bool: ...

    def activate(self, position: Vector2, scale: float = 1.0) -> None: ...

    def update(self, game_time: GameTime) -> None: ...


def player_shoots_enemy(first: GameObject, second: GameObject) -> None:
    """Collision callback: a player projectile damages an enemy ship and is spent."""
    enemy_first = first.has_mask(CollisionType.ENEMY)
    enemy = first if enemy_first else second
    projectile = second if enemy_first else first
    enemy.hit(getattr(projectile, "damage", 0.0))
    projectile.deactivate()


def player_collides_with_enemy(first: GameObject, second: GameObject) -> None:
    """Collision callback: the player ship and an enemy ship destroy each other."""
    player_first = first.has_mask(CollisionType.PLAYER)
    player = first if player_first else second
    enemy = second if player_first else first
    player.hit(sys.float_info.max)
    enemy.hit(sys.float_info.max)


class Level:
    """A stage of the game holding the player, its projectiles and the enemies."""

    def __init__(self, on_exit: Optional[Callable[[], None]] = None) -> None:
        self.on_exit = on_exit
        self.exit_requested = False
        self.alpha = 1.0
        self.score = 0

        self.sector_size = (_SECTOR_SIZE, _SECTOR_SIZE)
        self.sector_count = (
            SCREEN_WIDTH // _SECTOR_SIZE + 1,
            SCREEN_HEIGHT // _SECTOR_SIZE + 1,
        )
        columns, rows = self.sector_count
        self._sectors: list[list[GameObject]] = [[] for _ in range(columns * rows)]
        self.collision_manager = CollisionManager()

        self.game_objects: list[GameObject] = []
        self.explosions: list[_Explosion] = []

        GameObject.set_current_level(self)

        self.player_ship = PlayerShip()
        self.projectiles: list[Projectile] = []
        blaster = Blaster("Main Blaster")
        blaster.projectile_pool = self.projectiles
        self.player_ship.attach_item(blaster, Vector2.UNIT_Y * -20)

        for _ in range(_PROJECTILE_COUNT):
            projectile = Projectile()
            self.projectiles.append(projectile)
            self.add_game_object(projectile)

        self.player_ship.activate()
        self.add_game_object(self.player_ship)

        player_ship = CollisionType.PLAYER | CollisionType.SHIP
        player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
        enemy_ship = CollisionType.ENEMY | CollisionType.SHIP

        manager = self.collision_manager
        manager.add_non_collision_type(player_ship, player_projectile)
        manager.add_collision_type(player_projectile, enemy_ship, player_shoots_enemy)
        manager.add_collision_type(player_ship, enemy_ship, player_collides_with_enemy)

    @property
    def sectors(self) -> Sequence[Sequence[GameObject]]:
        """The objects in each collision sector, row by row."""
        return self._sectors

    def add_game_object(self, game_object: GameObject) -> None:
        """Add an object to be updated and checked for collisions."""
        self.game_objects.append(game_object)

    def add_explosion(self, explosion: _Explosion) -> None:
        """Add an explosion to the pool used by spawn_explosion."""
        self.explosions.append(explosion)

    def is_screen_transitioning(self) -> bool:
        """True while the screen is fading in or out."""
        return self.alpha < 1

    def handle_input(self, pressed_keys: Iterable[Key]) -> None:
        """Pass the pressed keys to the player ship unless the screen is fading."""
        if self.is_screen_transitioning():
            return
        self.player_ship.handle_input(pressed_keys)

    def update(self, game_time: GameTime) -> None:
        """Update every object, resolve collisions and exit once the player is gone."""
        for sector in self._sectors:
            sector.clear()

        for game_object in self.game_objects:
            game_object.update(game_time)

        for sector in self._sectors:
            if len(sector) > 1:
                self._check_collisions(sector)

        for explosion in self.explosions:
            explosion.update(game_time)

        if not self.player_ship.is_active:
            self.exit_requested = True
            if self.on_exit is not None:
                self.on_exit()

    def update_sector_position(self, game_object: GameObject) -> None:
        """Put an object into every sector its bounds overlap."""
        position = game_object.position
        half = game_object.half_dimensions()
        columns, rows = self.sector_count
        width, height = self.sector_size

        def sector_of(value: float, size: int, count: int) -> int:
            return min(max(int(int(value) / size), 0), count - 1)

        min_x = sector_of(position.x - half.x - 0.5, width, columns)
        max_x = sector_of(position.x + half.x + 0.5, width, columns)
        min_y = sector_of(position.y - half.y - 0.5, height, rows)
        max_y = sector_of(position.y + half.y + 0.5, height, rows)

        for x in range(min_x, max_x + 1):
            for y in range(min_y, max_y + 1):
                self._sectors[y * columns + x].append(game_object)

    def spawn_explosion(self, exploding_object: GameObject) -> None:
        """Start the first idle explosion at the object, sized to its radius."""
        explosion = next((e for e in self.explosions if not e.is_active), None)
        if explosion is None:
            return
        scale_to_object = (
            (1 / _APPROXIMATE_TEXTURE_RADIUS) * exploding_object.collision_radius * 2
        )
        explosion.activate(exploding_object.position, scale_to_object * _DRAMATIC_EFFECT)

    def change_score_amount(self, amount: int) -> None:
        """Add an amount (possibly negative) to the score."""
        self.score += amount

    def closest_object(
        self, object_type: type[T], position: Vector2, search_range: float
    ) -> Optional[T]:
        """Return the closest inactive object of a type within range, or None.

        A range of zero or less searches the whole screen diagonal.
        """
        if search_range <= 0:
            squared_range = float(SCREEN_WIDTH**2 + SCREEN_HEIGHT**2)
        else:
            squared_range = search_range * search_range

        closest: Optional[T] = None
        for game_object in self.game_objects:
            if game_object.is_active:
                continue
            squared = (position - game_object.position).length_squared()
            if squared < squared_range and isinstance(game_object, object_type):
                closest = game_object
                squared_range = squared
        return closest

    def _check_collisions(self, sector: Sequence[GameObject]) -> None:
        for i, first in enumerate(sector[:-1]):
            if not first.is_active:
                continue
            for second in sector[i + 1 :]:
                if not first.is_active:
                    break
                if second.is_active:
                    self.collision_manager.check_collision(first, second)

    def _prepare_player(self) -> None:
        player = self.player_ship
        player.confine_to_screen()
        player.set_responsiveness(0.1)
        center = Vector2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
        player.set_position(center + Vector2.UNIT_Y * 300)

    def _spawn_wave(
        self,
        x_positions: Sequence[float],
        delays: Sequence[float],
        enemy_half_height: float,
    ) -> None:
        delay = _START_DELAY
        for x_fraction, step in zip(x_positions, delays):
            delay += step
            enemy = BioEnemyShip()
            enemy.initialize(
                Vector2(x_fraction * SCREEN_WIDTH, -enemy_half_height), delay
            )
            self.add_game_object(enemy)


_LEVEL01_X = (
    0.25, 0.2, 0.3,
    0.75, 0.8, 0.7,
    0.3, 0.25, 0.35, 0.2, 0.4,
    0.7, 0.75, 0.65, 0.8, 0.6,
    0.5, 0.4, 0.6, 0.45, 0.55,
)
_LEVEL01_DELAYS = (
    0.0, 0.25, 0.25,
    3.0, 0.25, 0.25,
    3.25, 0.25, 0.25, 0.25, 0.25,
    3.25, 0.25, 0.25, 0.25, 0.25,
    3.5, 0.3, 0.3, 0.3, 0.3,
)
_LEVEL02_X = _LEVEL01_X + (0.6,)
_LEVEL02_DELAYS = _LEVEL01_DELAYS + (0.3,)


class Level01(Level):
    """The first level: five waves of 21 weaving enemy ships."""

    def load_content(self, enemy_half_height: float) -> None:
        """Create the enemy waves just above the screen and set up the player."""
        self._spawn_wave(_LEVEL01_X, _LEVEL01_DELAYS, enemy_half_height)
        self._prepare_player()


class Level02(Level):
    """The second level: the first level's waves with one more enemy."""

    def load_content(self, enemy_half_height: float) -> None:
        """Create the enemy waves just above the screen and set up the player."""
        self._spawn_wave(_LEVEL02_X, _LEVEL02_DELAYS, enemy_half_height)
        self._prepare_player()