"""A small verlet-style body simulation of chunks joined by distance constraints."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from floodforge.shapes import lerp
from floodforge.vector import Vector2

FLOOR = -10.0
GRAB_PULL = 0.3


@dataclass
class PhysicalObject:
    """Shared physical properties of the chunks that make up one body."""

    gravity: float = 0.9
    air_friction: float = 0.999
    surface_friction: float = 0.3


@dataclass
class BodyChunk:
    """A circular mass point belonging to a physical object."""

    owner: PhysicalObject
    position: Vector2
    radius: float
    mass: float
    velocity: Vector2 = field(default_factory=Vector2)

    def update(self) -> None:
        """Apply gravity, air friction and the floor for one tick."""
        vx, vy = self.velocity
        if math.isnan(vy):
            vy = 0.0
        if math.isnan(vx):
            vx = 0.0

        vy -= self.owner.gravity
        velocity = Vector2(vx, vy) * self.owner.air_friction
        position = self.position + velocity

        if position.y - self.radius <= FLOOR:
            position = Vector2(position.x, FLOOR + self.radius)
            friction = min(max(self.owner.surface_friction * 2.0, 0.0), 1.0)
            velocity = Vector2(velocity.x * friction, 0.0)

        self.velocity = velocity
        self.position = position


class ConnectionType(Enum):
    NORMAL = "normal"
    PULL = "pull"
    PUSH = "push"


@dataclass
class BodyChunkConnection:
    """Keeps two chunks at a set distance.

    NORMAL always enforces the distance, PULL only when the chunks are too far
    apart and PUSH only when they are too close.
    """

    chunk1: BodyChunk
    chunk2: BodyChunk
    distance: float
    type: ConnectionType
    elasticity: float
    weight_symmetry: float
    active: bool = True

    def update(self) -> None:
        if not self.active:
            return

        current = self.chunk1.position.distance_to(self.chunk2.position)
        applies = (
            self.type is ConnectionType.NORMAL
            or (self.type is ConnectionType.PULL and current > self.distance)
            or (self.type is ConnectionType.PUSH and current < self.distance)
        )
        # Coincident chunks have no direction to push along.
        if not applies or current == 0.0:
            return

        direction = (self.chunk2.position - self.chunk1.position) / current
        error = (self.distance - current) * self.elasticity
        shift1 = direction * (error * self.weight_symmetry)
        shift2 = direction * (error * (1.0 - self.weight_symmetry))

        self.chunk1.position -= shift1
        self.chunk1.velocity -= shift1
        self.chunk2.position += shift2
        self.chunk2.velocity += shift2


@dataclass
class Simulation:
    """Chunks and their connections, with one chunk that can be dragged."""

    chunks: List[BodyChunk] = field(default_factory=list)
    connections: List[BodyChunkConnection] = field(default_factory=list)
    grabbed: Optional[BodyChunk] = None
    camera_offset: Vector2 = field(default_factory=Vector2)
    camera_scale: float = 96.0

    def step(self) -> None:
        """Advance every chunk, then resolve every connection."""
        for chunk in self.chunks:
            chunk.update()
        for connection in self.connections:
            connection.update()

    def grab(self, point: Vector2) -> Optional[BodyChunk]:
        """Grab the last chunk whose circle contains ``point``, if any."""
        for chunk in self.chunks:
            if chunk.position.distance_to(point) <= chunk.radius:
                self.grabbed = chunk
        return self.grabbed

    def release(self) -> None:
        self.grabbed = None

    def drag(self, point: Vector2) -> None:
        """Pull the grabbed chunk towards ``point``."""
        if self.grabbed is None:
            return
        chunk = self.grabbed
        chunk.velocity += (point - chunk.position) * GRAB_PULL


def create_leviathan() -> Simulation:
    """A three-chunk body: two links of equal length and a stiffening push link."""
    body = PhysicalObject()
    radius = 8.0 * 0.95
    chunks = [
        BodyChunk(body, Vector2(0.0, 0.0), radius, 0.0),
        BodyChunk(body, Vector2(16.575, 0.0), radius, 0.0),
        BodyChunk(body, Vector2(28.1775, 0.0), radius, 0.0),
    ]
    link = 17 * 1.95 / 2
    connections = [
        BodyChunkConnection(chunks[0], chunks[1], link, ConnectionType.NORMAL, 0.95, 0.5),
        BodyChunkConnection(chunks[1], chunks[2], link, ConnectionType.NORMAL, 0.95, 0.5),
        BodyChunkConnection(
            chunks[0],
            chunks[2],
            link * 1.7,
            ConnectionType.PUSH,
            1 - lerp(0.9, 0.5, 0.7),
            0.5,
        ),
    ]
    return Simulation(chunks, connections)