"""Balls: random spawning, wall bounces, gravity and ball-to-ball impulses."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional

from physim.vector import (
    PINK,
    PURPLE,
    SKYBLUE,
    YELLOW,
    Color,
    Vector2,
    check_collision_circles,
    float_equals,
)

COLORS = (PINK, PURPLE, SKYBLUE, YELLOW)

NUM_OF_BALLS = 256

PIXELS_PER_METER = 30.0
GRAVITY_CONSTANT = 9.81

_RAND_MAX = 2**31 - 1


def clamp(value: float, low: float, high: float) -> float:
    """Restrict ``value`` to ``[low, high]``; an empty range is an error."""
    if low > high:
        raise ValueError(f"empty clamp range: {low} > {high}")
    return min(max(value, low), high)


def _rand(rng: random.Random) -> int:
    return rng.randint(0, _RAND_MAX)


@dataclass
class Ball:
    """A circular body; lengths in metres, velocity in m/s, mass in kg."""

    pos: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    radius: float = 0.5
    elast: float = 0.91
    mass: float = 0.2
    color: Color = PINK

    @classmethod
    def random(cls, screen: Vector2, rng: Optional[random.Random] = None) -> Ball:
        """A ball at a random spot on a screen of ``screen`` pixels."""
        rng = rng if rng is not None else random.Random()
        width = math.ceil(screen.x / PIXELS_PER_METER)
        height = math.ceil(screen.y / PIXELS_PER_METER)
        if width <= 0 or height <= 0:
            raise ValueError("screen must be at least one pixel in each direction")

        pos = Vector2(float(_rand(rng) % width), float(_rand(rng) % height))
        speed = float(max(_rand(rng) % 16, 2))
        elast = max(_rand(rng) % 100, 92) / 100.0 - 0.01
        color = COLORS[_rand(rng) % 4]
        if _rand(rng) % 2 == 0:
            speed = -speed

        return cls(
            pos=pos,
            velocity=Vector2(speed, 0.0),
            radius=0.5,
            elast=elast,
            mass=0.2,
            color=color,
        )

    @classmethod
    def random_many(
        cls, num: int, screen: Vector2, rng: Optional[random.Random] = None
    ) -> List[Ball]:
        rng = rng if rng is not None else random.Random()
        return [cls.random(screen, rng) for _ in range(num)]

    def collide_with_ball(self, other: Ball) -> None:
        """Separate two overlapping balls and exchange an elastic impulse."""
        if not check_collision_circles(self.pos, self.radius, other.pos, other.radius):
            return

        v_1, v_2 = self.velocity, other.velocity
        m_1, m_2 = self.mass, other.mass

        elast = (self.elast + other.elast) / 2.0
        delta = other.pos - self.pos
        dist = delta.length()
        min_dist = self.radius + other.radius

        if not (0.0 < dist < min_dist):
            return

        normal = delta / dist
        correction = normal * ((min_dist - dist) / 2.0)
        self.pos = self.pos - correction
        other.pos = other.pos + correction

        vel_along_normal = (v_2 - v_1).dot(normal)
        if vel_along_normal > 0.0:
            return

        impulse_scalar = -(1.0 + elast) * vel_along_normal / (1.0 / m_1 + 1.0 / m_2)
        impulse = normal * impulse_scalar

        self.velocity = v_1 - impulse / m_1
        other.velocity = v_2 + impulse / m_2

    def update_gravity(self, dt: float) -> None:
        vx, vy = self.velocity
        if float_equals(vx, 0.0):
            vx = 0.0
        if float_equals(vy, 0.0):
            vy = 0.0
        self.velocity = Vector2(vx, vy + GRAVITY_CONSTANT * dt)

    def update_clamp(self, screen: Vector2) -> None:
        """Keep the ball inside the screen, bouncing off its edges."""
        coords = screen / PIXELS_PER_METER
        x, y = self.pos
        vx, vy = self.velocity
        r = self.radius

        if y >= coords.y - r or y <= r:
            y = clamp(y, r, coords.y - r)
            vy *= -self.elast
        if x <= r or x >= coords.x - r:
            x = clamp(x, r, coords.x - r)
            vx *= -self.elast

        self.pos = Vector2(x, y)
        self.velocity = Vector2(vx, vy)

    def update(self, screen: Vector2, dt: float) -> None:
        self.update_gravity(dt)
        self.update_clamp(screen)
        self.pos = self.pos + self.velocity * dt


def update_ball_to_ball_collision(index: int, balls: MutableSequence[Ball]) -> None:
    """Collide ``balls[index]`` with every ball that comes after it."""
    current = balls[index]
    for other in balls[index + 1:]:
        current.collide_with_ball(other)