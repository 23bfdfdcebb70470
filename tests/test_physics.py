import math

import pytest

from floodforge.physics import (
    BodyChunk,
    BodyChunkConnection,
    ConnectionType,
    PhysicalObject,
    Simulation,
    create_leviathan,
)
from floodforge.vector import Vector2


def make_chunk(x, y, radius=1.0, owner=None, velocity=None):
    chunk = BodyChunk(owner or PhysicalObject(), Vector2(x, y), radius, 0.0)
    if velocity is not None:
        chunk.velocity = velocity
    return chunk


def test_chunk_falls_under_gravity():
    chunk = make_chunk(0.0, 100.0)
    chunk.update()
    assert chunk.velocity.y < 0
    assert chunk.position.y == pytest.approx(100.0 + chunk.velocity.y)
    assert chunk.position.x == 0.0


def test_chunk_stops_on_floor():
    owner = PhysicalObject(gravity=0.0, air_friction=1.0, surface_friction=1.0)
    chunk = make_chunk(0.0, -9.0, radius=2.0, owner=owner, velocity=Vector2(10.0, -5.0))
    chunk.update()
    assert chunk.position.y == -8.0
    assert chunk.velocity.y == 0.0
    assert chunk.velocity.x == 10.0


def test_floor_friction_zero_stops_sliding():
    owner = PhysicalObject(gravity=0.0, air_friction=1.0, surface_friction=0.0)
    chunk = make_chunk(0.0, -9.0, radius=2.0, owner=owner, velocity=Vector2(10.0, 0.0))
    chunk.update()
    assert chunk.velocity.x == 0.0


def test_nan_velocity_is_reset():
    owner = PhysicalObject(gravity=0.0, air_friction=1.0)
    chunk = make_chunk(3.0, 50.0, owner=owner, velocity=Vector2(math.nan, math.nan))
    chunk.update()
    assert chunk.velocity == Vector2(0.0, 0.0)
    assert chunk.position == Vector2(3.0, 50.0)


def test_normal_connection_restores_distance():
    a = make_chunk(0.0, 0.0)
    b = make_chunk(20.0, 0.0)
    connection = BodyChunkConnection(a, b, 10.0, ConnectionType.NORMAL, 1.0, 0.5)
    connection.update()
    assert a.position.distance_to(b.position) == pytest.approx(10.0)
    assert a.velocity == a.position - Vector2(0.0, 0.0)


def test_pull_ignores_close_chunks():
    a = make_chunk(0.0, 0.0)
    b = make_chunk(5.0, 0.0)
    BodyChunkConnection(a, b, 10.0, ConnectionType.PULL, 1.0, 0.5).update()
    assert b.position == Vector2(5.0, 0.0)


def test_push_ignores_distant_chunks():
    a = make_chunk(0.0, 0.0)
    b = make_chunk(20.0, 0.0)
    BodyChunkConnection(a, b, 10.0, ConnectionType.PUSH, 1.0, 0.5).update()
    assert a.position == Vector2(0.0, 0.0)
    assert b.position == Vector2(20.0, 0.0)


def test_push_separates_close_chunks():
    a = make_chunk(0.0, 0.0)
    b = make_chunk(4.0, 0.0)
    BodyChunkConnection(a, b, 10.0, ConnectionType.PUSH, 1.0, 0.5).update()
    assert a.position.distance_to(b.position) == pytest.approx(10.0)


def test_inactive_connection_does_nothing():
    a = make_chunk(0.0, 0.0)
    b = make_chunk(20.0, 0.0)
    connection = BodyChunkConnection(a, b, 10.0, ConnectionType.NORMAL, 1.0, 0.5, active=False)
    connection.update()
    assert b.position == Vector2(20.0, 0.0)


def test_grab_drag_release():
    chunk = make_chunk(0.0, 0.0, radius=2.0)
    sim = Simulation([chunk])
    assert sim.grab(Vector2(1.0, 1.0)) is chunk
    sim.drag(Vector2(10.0, 0.0))
    assert chunk.velocity.x > 0
    assert chunk.velocity.y == 0.0
    sim.release()
    assert sim.grabbed is None


def test_grab_misses_outside_radius():
    sim = Simulation([make_chunk(0.0, 0.0, radius=1.0)])
    assert sim.grab(Vector2(5.0, 5.0)) is None


def test_leviathan_shape():
    sim = create_leviathan()
    assert len(sim.chunks) == 3
    assert len(sim.connections) == 3
    assert sim.connections[2].type is ConnectionType.PUSH
    assert sim.connections[2].distance == pytest.approx(sim.connections[0].distance * 1.7)


def test_leviathan_settles_above_floor():
    sim = create_leviathan()
    for _ in range(300):
        sim.step()
    for chunk in sim.chunks:
        assert math.isfinite(chunk.position.x)
        assert chunk.position.y >= -10.0 + chunk.radius - 1.0