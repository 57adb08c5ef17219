"""The player-controlled block."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from physim.ball import GRAVITY_CONSTANT, PIXELS_PER_METER, Ball, clamp
from physim.vector import (
    WHITE,
    Color,
    Rectangle,
    Vector2,
    check_collision_circle_rec,
    float_equals,
)

ACCELERATION = 15.0  # m/s^2
MAX_SPEED = 35.0  # m/s
JUMP_SPEED = 10.0  # m/s


@dataclass(frozen=True)
class Controls:
    """Input state for one frame: keys held (left, right) or just pressed."""

    left: bool = False
    right: bool = False
    jump: bool = False
    slam: bool = False


@dataclass
class Player:
    """A rectangular body; lengths in metres, velocity in m/s, mass in kg."""

    pos: Vector2 = field(default_factory=lambda: Vector2.splat(5.0))
    dim: Vector2 = field(default_factory=lambda: Vector2.splat(2.0))
    velocity: Vector2 = field(default_factory=Vector2.zero)
    elast: float = 0.85
    mass: float = 50.0
    color: Color = WHITE

    def collide_with_ball(self, ball: Ball) -> None:
        """Push an overlapping ball out of the block and exchange an impulse."""
        rect = Rectangle(self.pos.x, self.pos.y, self.dim.x, self.dim.y)
        if not check_collision_circle_rec(ball.pos, ball.radius, rect):
            return

        closest = Vector2(
            clamp(ball.pos.x, self.pos.x, self.pos.x + self.dim.x),
            clamp(ball.pos.y, self.pos.y, self.pos.y + self.dim.y),
        )
        delta = ball.pos - closest
        dist = delta.length()
        if dist == 0.0 or dist >= ball.radius:
            return

        normal = delta / dist
        correction = normal * ((ball.radius - dist) / 2.0)
        ball.pos = ball.pos + correction
        self.pos = self.pos - correction

        vel_along_normal = (ball.velocity - self.velocity).dot(normal)
        if vel_along_normal > 0.0:
            return

        elast = (self.elast + ball.elast) / 2.0
        impulse_scalar = (
            -(1.0 + elast) * vel_along_normal / (1.0 / self.mass + 1.0 / ball.mass)
        )
        impulse = normal * impulse_scalar

        self.velocity = self.velocity - impulse / self.mass
        ball.velocity = ball.velocity + impulse / ball.mass

    def update_collision_with_balls(self, balls: Iterable[Ball]) -> None:
        for ball in balls:
            self.collide_with_ball(ball)

    def update_gravity(self, dt: float) -> None:
        vx, vy = self.velocity
        if float_equals(vx, 0.0):
            vx = 0.0
        if float_equals(vy, 0.0):
            vy = 0.0
        self.velocity = Vector2(vx, vy + GRAVITY_CONSTANT * dt)

    def update_movement(self, dt: float, controls: Optional[Controls] = None) -> None:
        """Apply steering, jumping and slamming from this frame's input."""
        controls = controls if controls is not None else Controls()
        vx, vy = self.velocity

        vx += (float(controls.right) - float(controls.left)) * ACCELERATION * dt
        vx = clamp(vx, -MAX_SPEED, MAX_SPEED)

        if controls.jump:
            vy -= JUMP_SPEED
        if controls.slam:
            vy = abs(vy) * 2.0

        self.velocity = Vector2(vx, vy)

    def update_clamp(self, screen: Vector2) -> None:
        """Keep the block inside the screen, bouncing off its edges."""
        coords = screen / PIXELS_PER_METER
        x, y = self.pos
        vx, vy = self.velocity

        if y >= coords.y - self.dim.y or y <= 0.0:
            y = clamp(y, 0.0, coords.y - self.dim.y)
            vy *= -self.elast
        if x <= 0.0 or x >= coords.x - self.dim.x:
            x = clamp(x, 0.0, coords.x - self.dim.x)
            vx *= -self.elast

        self.pos = Vector2(x, y)
        self.velocity = Vector2(vx, vy)

    def update(
        self, screen: Vector2, dt: float, controls: Optional[Controls] = None
    ) -> None:
        self.update_gravity(dt)
        self.update_movement(dt, controls)
        self.update_clamp(screen)
        self.pos = self.pos + self.velocity * dt

    def speed(self) -> float:
        return self.velocity.length()