import math

import pytest

from bird_flop.data_models import Bird, Pipe
from bird_flop.physics_core import NonFiniteStateError, PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def test_one_tick_of_gravity_from_rest(core):
    y, v = core.apply_gravity_and_movement(400.0, 0.0)
    assert v == 0.5
    assert y == 400.5


def test_velocity_grows_by_gravity_each_tick(core):
    y, v = 400.0, -10.0
    for _ in range(10):
        prev = v
        y, v = core.apply_gravity_and_movement(y, v)
        assert v == pytest.approx(prev + 0.5)


def test_flap_is_fixed_not_additive(core):
    assert core.flap() == -10.0
    assert PhysicsCore(jump_strength=-7.5).flap() == -7.5


def test_ceiling_pins_position_but_keeps_velocity(core):
    bird = Bird(y=5.0, velocity=-8.0)
    assert core.clamp_to_bounds(bird, ground_y=700) is False
    assert bird.y == bird.radius
    assert bird.velocity == -8.0


def test_ground_clamps_and_reports_hit(core):
    bird = Bird(y=695.0, velocity=6.0)
    assert core.clamp_to_bounds(bird, ground_y=700) is True
    assert bird.y == 680.0


def test_inside_playfield_is_untouched(core):
    bird = Bird(y=300.0, velocity=2.0)
    assert core.clamp_to_bounds(bird, ground_y=700) is False
    assert bird.y == 300.0


@pytest.mark.parametrize("y, expected", [
    (400.0, False),   # fully inside the gap
    (310.0, True),    # top edge above gap top
    (490.0, True),    # bottom edge below gap bottom
    (320.0, False),   # top edge exactly on gap top
])
def test_collision_against_gap(core, y, expected):
    pipe = Pipe(x=90.0, top_height=300.0)
    assert core.check_collision(Bird(y=y), pipe) is expected


def test_no_collision_without_horizontal_overlap(core):
    assert core.check_collision(Bird(y=50.0), Pipe(x=200.0, top_height=300.0)) is False
    # Touching edges do not overlap.
    assert core.check_collision(Bird(y=50.0), Pipe(x=120.0, top_height=300.0)) is False
    assert core.check_collision(Bird(y=50.0), Pipe(x=0.0, top_height=300.0)) is False


def test_non_finite_state_raises():
    with pytest.raises(NonFiniteStateError):
        PhysicsCore(gravity=math.inf).apply_gravity_and_movement(0.0, 0.0)
    with pytest.raises(ArithmeticError):
        PhysicsCore().apply_gravity_and_movement(math.nan, 0.0)
