import pytest

from spacefighter.gameobject import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Attachment,
    GameObject,
    GameTime,
)
from spacefighter.masks import CollisionType
from spacefighter.vector2 import Vector2


class Thing(GameObject):
    def __init__(self, kind=CollisionType.PLAYER | CollisionType.SHIP, radius=10):
        super().__init__()
        self.kind = kind
        self.collision_radius = radius

    def collision_type(self):
        return self.kind


class RecordingLevel:
    def __init__(self):
        self.seen = []

    def update_sector_position(self, game_object):
        self.seen.append(game_object)


@pytest.fixture(autouse=True)
def no_level():
    GameObject.set_current_level(None)
    yield
    GameObject.set_current_level(None)


def test_indices_increase():
    first = Thing()
    second = Thing()
    third = Thing(radius=3)
    assert second.index == first.index + 1
    assert third.index == second.index + 1
    assert GameObject.half_dimensions(third) == Vector2(3, 3)


def test_activation_toggles():
    thing = Thing()
    assert thing.is_active is False
    GameObject.activate(thing)
    assert thing.is_active is True
    GameObject.deactivate(thing)
    assert thing.is_active is False


def test_set_position_remembers_previous():
    thing = Thing()
    thing.set_position(Vector2(3, 4))
    thing.set_position(Vector2(5, 6))
    assert thing.position == Vector2(5, 6)
    assert thing.previous_position == Vector2(3, 4)


def test_translate_adds_offset():
    thing = Thing()
    thing.set_position(Vector2(3, 4))
    thing.translate(Vector2(1, -2))
    assert thing.position == Vector2(3, 4) + Vector2(1, -2)
    assert thing.previous_position == Vector2(3, 4)


def test_half_dimensions_use_radius():
    assert Thing(radius=7).half_dimensions() == Vector2(7, 7)


@pytest.mark.parametrize(
    "position, expected",
    [
        (Vector2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2), True),
        (Vector2(-10, 100), False),
        (Vector2(-9.5, 100), True),
        (Vector2(SCREEN_WIDTH + 10, 100), False),
        (Vector2(100, SCREEN_HEIGHT + 10), False),
        (Vector2(100, -10), False),
        (Vector2(100, SCREEN_HEIGHT + 9), True),
    ],
)
def test_is_on_screen(position, expected):
    thing = Thing(radius=10)
    thing.set_position(position)
    assert thing.is_on_screen() is expected


def test_update_reports_active_object_to_level():
    level = RecordingLevel()
    GameObject.set_current_level(level)
    thing = Thing()
    thing.update(GameTime(0.1, 1.0))
    assert level.seen == []
    thing.activate()
    thing.update(GameTime(0.1, 1.0))
    assert level.seen == [thing]
    assert GameObject.current_level() is level


def test_masks():
    thing = Thing(kind=CollisionType(6))
    assert GameObject.has_mask(thing, CollisionType.ENEMY)
    assert not GameObject.has_mask(thing, CollisionType.PLAYER)
    assert GameObject.is_mask(thing, CollisionType.ENEMY | CollisionType.SHIP)
    assert not GameObject.is_mask(thing, CollisionType.ENEMY)


def test_hit_leaves_base_object_unchanged():
    thing = Thing()
    GameObject.activate(thing)
    GameObject.hit(thing, 100)
    assert thing.is_active is True


def test_base_classes_are_abstract():
    with pytest.raises(TypeError):
        GameObject()
    with pytest.raises(TypeError):
        Attachment()


def test_game_time_fields():
    time = GameTime(elapsed=0.25, total=3.0)
    assert (time.elapsed, time.total) == (0.25, 3.0)