# spacefighter

The rules of a small vertical-scrolling space shooter. The package has no
display, audio or input backend. A renderer or a test harness drives it: it
passes in the elapsed time and the keys held down, and it reads back each
object's position and state.

## Modules

- `spacefighter.vector2.Vector2` is an immutable 2D vector. It supports
  `+`, `-`, scalar `*` and `/`, and negation. Its methods are
  `length`, `length_squared`, `normalized`, `is_zero`, `dot`, `cross`,
  `left`, `right` and `to_point`. The static methods `distance`,
  `distance_squared`, `lerp` (clamped to `[0, 1]`), `random` and `parse`
  build or compare vectors. `parse` reads two whitespace-separated numbers
  and raises `ValueError` on bad input. `ZERO`, `ONE`, `UNIT_X` and `UNIT_Y`
  are ready-made constants.
- `spacefighter.region.Region` is an integer rectangle. It has the
  properties `top`, `bottom`, `left`, `right`, the four corners and
  `center`, and the method `translate(x, y)`.
- `spacefighter.masks` holds the bit-flag types `CollisionType` (`NONE`,
  `PLAYER`, `ENEMY`, `SHIP`, `PROJECTILE`) and `TriggerType` (`NONE`,
  `PRIMARY`, `SECONDARY`, `SPECIAL`, `ALL`). Each has `contains()`, which is
  true when the two masks share a bit.
- `spacefighter.inputs` holds `Key`, `MouseButton`, `Button`, `ButtonState`
  and the game-pad dataclasses. `GamePadState` provides `is_button_down`,
  `is_button_up` and `reset`.
- `spacefighter.particles` holds `Particle`, `ParticleInitializer`,
  `ParticleUpdater` and `ParticleEmitter`. The emitter takes inactive
  particles from its `pool`. It raises `ValueError` if no pool has been set.
- `spacefighter.resources.ResourceManager` loads resources through a type
  whose instances have `load(path, manager)`. It caches them by path and
  hands out clones of cached resources that set `is_cloneable`. It raises
  `OSError` when a load fails. `unload_all` forgets all cached resources and
  clones.
- `spacefighter.gameobject` holds `GameTime(elapsed, total)`, the abstract
  `Attachment` and `GameObject` classes, and the screen size
  (`SCREEN_WIDTH = 1600`, `SCREEN_HEIGHT = 900`).
- `spacefighter.collision.CollisionManager` maps pairs of collision types to
  callbacks. `check_collision` calls the callback for a pair of overlapping
  objects whose types are registered.
- `spacefighter.weapons` holds `Projectile`, `Weapon` and `Blaster`. A
  blaster fires one projectile from its `projectile_pool` per shot and then
  waits out a 0.35 s cooldown.
- `spacefighter.ships` holds `Ship`, `EnemyShip`, `BioEnemyShip` and
  `PlayerShip`.
- `spacefighter.level` holds `Level`, `Level01` and `Level02`, and the
  collision callbacks `player_shoots_enemy` and `player_collides_with_enemy`.
  A level sorts its objects into 64-pixel sectors and checks collisions only
  within a sector. It also keeps the score and starts explosions from its
  pool.

## Example

```python
from spacefighter.vector2 import Vector2
from spacefighter.masks import CollisionType

v = Vector2(3, 4)
assert v.length() == 5
assert str(v) == "{ 3, 4 }"

enemy_ship = CollisionType.ENEMY | CollisionType.SHIP
assert enemy_ship.contains(CollisionType.SHIP)
```

A game loop looks like this:

```python
from spacefighter.gameobject import GameTime
from spacefighter.inputs import Key
from spacefighter.level import Level01

level = Level01(on_exit=lambda: print("game over"))
level.load_content(enemy_half_height=32)

total = 0.0
for _ in range(600):
    total += 1 / 60
    level.handle_input({Key.SPACE})
    level.update(GameTime(elapsed=1 / 60, total=total))

print(level.score)
```

Creating a `Level` makes it the current level of every `GameObject`. Ships
report their sector positions, score changes and explosions to it.

## What the package does not do

The package draws nothing and plays no sound. It has no window, menu screen
or command to start a game. Explosions are any objects you add with
`Level.add_explosion` that offer `is_active`, `activate(position, scale)`
and `update(game_time)`. Input comes only from the keys you pass to
`handle_input`. Resources come only from the types you give to
`ResourceManager.load`.

## Tests

```
pip install -e .[test]
pytest
```