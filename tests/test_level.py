import pytest

from spacefighter.gameobject import SCREEN_WIDTH, GameTime
from spacefighter.inputs import Key
from spacefighter.level import (
    Level,
    Level01,
    Level02,
    player_collides_with_enemy,
    player_shoots_enemy,
)
from spacefighter.ships import BioEnemyShip, EnemyShip
from spacefighter.vector2 import Vector2
from spacefighter.weapons import Projectile


class FakeExplosion:
    def __init__(self, active=False):
        self.active = active
        self.activations = []
        self.updates = 0

    @property
    def is_active(self):
        return self.active

    def activate(self, position, scale=1.0):
        self.active = True
        self.activations.append((position, scale))

    def update(self, game_time):
        self.updates += 1


def make_enemy(level, position):
    enemy = EnemyShip()
    enemy.initialize(position, 0.0)
    enemy.activate()
    level.add_game_object(enemy)
    return enemy


def test_new_level_has_player_and_projectiles():
    level = Level()
    assert level.player_ship.is_active
    assert len(level.projectiles) == 100
    assert len(level.game_objects) == 101
    assert level.score == 0
    assert not any(p.is_active for p in level.projectiles)


def test_sector_grid_matches_counts():
    level = Level()
    columns, rows = level.sector_count
    assert len(level.sectors) == columns * rows
    assert level.sector_size == (64, 64)


def test_object_inside_one_sector():
    level = Level()
    enemy = make_enemy(level, Vector2(100, 100))
    level.update_sector_position(enemy)
    holding = [s for s in level.sectors if enemy in s]
    assert len(holding) == 1


def test_object_across_sector_corner_fills_four():
    level = Level()
    enemy = make_enemy(level, Vector2(64, 64))
    level.update_sector_position(enemy)
    holding = [s for s in level.sectors if enemy in s]
    assert len(holding) == 4


def test_object_off_screen_is_clamped_to_first_sector():
    level = Level()
    enemy = make_enemy(level, Vector2(-500, -500))
    level.update_sector_position(enemy)
    assert enemy in level.sectors[0]
    assert sum(enemy in s for s in level.sectors) == 1


def test_player_shoots_enemy_in_either_order():
    for swap in (False, True):
        level = Level()
        enemy = make_enemy(level, Vector2(500, 500))
        projectile = level.projectiles[0]
        projectile.activate(Vector2(500, 500))
        if swap:
            player_shoots_enemy(projectile, enemy)
        else:
            player_shoots_enemy(enemy, projectile)
        assert not enemy.is_active
        assert not projectile.is_active
        assert level.score == 1


def test_player_collides_with_enemy_destroys_both():
    level = Level()
    explosion = FakeExplosion()
    level.add_explosion(explosion)
    enemy = make_enemy(level, Vector2(10, 10))
    player_collides_with_enemy(level.player_ship, enemy)
    assert not level.player_ship.is_active
    assert not enemy.is_active
    assert level.score == 1
    assert len(explosion.activations) == 1


def test_update_resolves_projectile_hit():
    level = Level()
    enemy = make_enemy(level, Vector2(800, 450))
    projectile = level.projectiles[3]
    projectile.activate(Vector2(800, 450))
    level.update(GameTime(0.0, 0.0))
    assert not enemy.is_active
    assert not projectile.is_active
    assert level.score == 1
    assert not level.exit_requested


def test_update_keeps_distant_objects():
    level = Level()
    enemy = make_enemy(level, Vector2(800, 450))
    projectile = level.projectiles[3]
    projectile.activate(Vector2(200, 450))
    level.update(GameTime(0.0, 0.0))
    assert enemy.is_active
    assert projectile.is_active
    assert level.score == 0


def test_update_advances_explosions():
    level = Level()
    explosion = FakeExplosion()
    level.add_explosion(explosion)
    level.update(GameTime(0.1, 0.1))
    level.update(GameTime(0.1, 0.2))
    assert explosion.updates == 2


def test_exit_when_player_destroyed():
    calls = []
    level = Level(on_exit=lambda: calls.append(True))
    level.player_ship.hit(1000.0)
    level.update(GameTime(0.0, 0.0))
    assert level.exit_requested
    assert calls == [True]


def test_spawn_explosion_uses_first_idle_and_scales():
    level = Level()
    busy = FakeExplosion(active=True)
    idle = FakeExplosion()
    level.add_explosion(busy)
    level.add_explosion(idle)
    enemy = make_enemy(level, Vector2(300, 200))
    enemy.collision_radius = 60.0
    level.spawn_explosion(enemy)
    assert busy.activations == []
    position, scale = idle.activations[0]
    assert position == Vector2(300, 200)
    assert scale == pytest.approx(2.2)


def test_spawn_explosion_without_idle_does_nothing():
    level = Level()
    busy = FakeExplosion(active=True)
    level.add_explosion(busy)
    enemy = make_enemy(level, Vector2(300, 200))
    level.spawn_explosion(enemy)
    assert busy.activations == []


def test_change_score_amount():
    level = Level()
    level.change_score_amount(5)
    level.change_score_amount(-2)
    assert level.score == 3


def test_transitioning_blocks_input():
    level = Level()
    level.alpha = 0.5
    assert level.is_screen_transitioning()
    level.handle_input([Key.SPACE])
    assert sum(p.is_active for p in level.projectiles) == 0


def test_space_fires_from_blaster_offset():
    level = Level()
    assert not level.is_screen_transitioning()
    level.handle_input([Key.SPACE])
    fired = [p for p in level.projectiles if p.is_active]
    assert len(fired) == 1
    assert fired[0].position == level.player_ship.position + Vector2.UNIT_Y * -20


def test_closest_object_finds_inactive_of_type():
    level = Level()
    target = level.projectiles[5]
    target.set_position(Vector2(500, 500))
    found = level.closest_object(Projectile, Vector2(500, 500), 0)
    assert found is target


def test_closest_object_skips_active_objects():
    level = Level()
    target = level.projectiles[5]
    target.set_position(Vector2(500, 500))
    target.activate(Vector2(500, 500))
    found = level.closest_object(Projectile, Vector2(500, 500), 0)
    assert isinstance(found, Projectile)
    assert found.position == Vector2.ZERO


def test_closest_object_respects_range():
    level = Level()
    assert level.closest_object(Projectile, Vector2(500, 500), 10) is None


def test_level01_spawns_enemy_wave():
    level = Level01()
    level.load_content(40)
    enemies = [o for o in level.game_objects if isinstance(o, BioEnemyShip)]
    assert len(enemies) == 21
    assert not any(e.is_active for e in enemies)
    assert all(e.position.y == -40 for e in enemies)
    assert enemies[0].position.x == pytest.approx(0.25 * SCREEN_WIDTH)
    delays = [e.delay_seconds for e in enemies]
    assert delays[0] == pytest.approx(3.0)
    assert delays == sorted(delays)
    assert level.player_ship.is_confined_to_screen
    assert level.player_ship.responsiveness == pytest.approx(0.1)


def test_level02_spawns_one_more_enemy():
    level = Level02()
    level.load_content(40)
    enemies = [o for o in level.game_objects if isinstance(o, BioEnemyShip)]
    assert len(enemies) == 22
    assert all(0 < e.position.x < SCREEN_WIDTH for e in enemies)