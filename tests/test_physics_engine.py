import random

import pytest

from bird_flop.data_models import GameState, Pipe, Session
from bird_flop.physics_engine import GameEngine

from conftest import FixedRandom


def playing_session():
    return Session(state=GameState.PLAYING)


def test_bird_starts_centered(engine):
    assert engine.bird.y == 400
    assert engine.bird.velocity == 0.0
    assert engine.ground_y == 700


def test_rejects_empty_viewport():
    with pytest.raises(ValueError):
        GameEngine(width=0, height=800)
    with pytest.raises(ValueError):
        GameEngine().resize(480, -1)


def test_first_tick_spawns_at_right_edge_then_scrolls(engine):
    engine.step_pipes()
    assert len(engine.pipes) == 1
    assert engine.pipes[0].x == 477


def test_next_spawn_waits_for_spacing(engine):
    for _ in range(101):
        engine.step_pipes()
    assert len(engine.pipes) == 1
    engine.step_pipes()
    assert len(engine.pipes) == 2
    assert engine.pipes[-1].x == 477


@pytest.mark.parametrize("value, expected_top", [(0.0, 100.0), (0.5, 250.0)])
def test_gap_height_comes_from_injected_random(value, expected_top):
    engine = GameEngine(width=480, height=800, rng=FixedRandom(value))
    engine.step_pipes()
    assert engine.pipes[0].top_height == expected_top


def test_gap_stays_above_ground():
    engine = GameEngine(width=480, height=800, rng=FixedRandom(0.999999))
    engine.step_pipes()
    pipe = engine.pipes[0]
    assert pipe.top_height >= 100
    assert pipe.gap_bottom < engine.ground_y


def test_taller_ground_keeps_gap_above_it():
    engine = GameEngine(width=480, height=800, ground_height=250, rng=FixedRandom(0.999999))
    engine.step_pipes()
    pipe = engine.pipes[0]
    assert pipe.top_height >= 100
    assert pipe.gap_bottom <= engine.ground_y


@pytest.mark.parametrize("height, value", [(300, 0.5), (300, 0.999999), (450, 0.0), (450, 0.999999)])
def test_short_viewport_still_fits_gap(height, value):
    engine = GameEngine(width=480, height=height, rng=FixedRandom(value))
    engine.step_pipes()
    pipe = engine.pipes[0]
    assert pipe.top_height >= 0
    assert pipe.gap_bottom <= engine.ground_y


def test_offscreen_pipes_are_culled_in_order(engine):
    engine.pipes = [Pipe(x=-78.0, top_height=200.0), Pipe(x=300.0, top_height=200.0)]
    engine.step_pipes()
    assert [p.x for p in engine.pipes] == [297.0]


def test_pipes_stay_ordered_and_on_screen(engine):
    for _ in range(600):
        engine.step_pipes()
        xs = [p.x for p in engine.pipes]
        assert xs == sorted(xs)
        assert all(p.right > -engine.pipe_speed for p in engine.pipes)


def test_step_pipes_reports_collision(engine):
    engine.pipes = [Pipe(x=100.0, top_height=100.0)]
    assert engine.step_pipes() is True


def test_score_follows_distance(engine):
    session = playing_session()
    for _ in range(10):
        assert engine.step(session) is False
    assert session.distance_traveled == 30
    assert session.score == 1
    assert session.highest_score == 1


def test_no_score_when_not_playing(engine):
    session = Session()
    engine.step(session)
    assert session.distance_traveled == 0
    assert session.score == 0


def test_pipe_hit_does_not_count_distance(engine):
    session = playing_session()
    engine.pipes = [Pipe(x=100.0, top_height=100.0)]
    assert engine.step(session) is True
    assert session.distance_traveled == 0


def test_free_fall_hits_ground_on_tick_33(engine):
    session = playing_session()
    ticks = 0
    hit = False
    while not hit:
        hit = engine.step(session)
        ticks += 1
    assert ticks == 33
    assert engine.bird.y == engine.ground_y - engine.bird.radius


def test_cleared_pipes_are_marked_once(engine):
    engine.pipes = [Pipe(x=-10.0, top_height=200.0), Pipe(x=200.0, top_height=200.0)]
    assert engine.mark_passed() == 1
    assert engine.pipes[0].scored
    assert not engine.pipes[1].scored
    assert engine.mark_passed() == 0


def test_reset_recenters_and_clears(engine):
    engine.step_pipes()
    engine.bird.velocity = 7.0
    engine.bird.y = 12.0
    engine.reset()
    assert engine.pipes == []
    assert engine.bird.y == 400
    assert engine.bird.velocity == 0.0


def test_same_seed_same_pipes():
    a = GameEngine(rng=random.Random(7))
    b = GameEngine(rng=random.Random(7))
    for _ in range(250):
        a.step_pipes()
        b.step_pipes()
    assert [p.top_height for p in a.pipes] == [p.top_height for p in b.pipes]
