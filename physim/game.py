"""The playing field: the hoop, the game state, the frame step and the window loop."""

from __future__ import annotations

import argparse
import math
import random
import time
from dataclasses import dataclass, field
from typing import Iterator, List, MutableSequence, Optional, Sequence

from physim.ball import NUM_OF_BALLS, PIXELS_PER_METER, Ball, update_ball_to_ball_collision
from physim.player import Controls, Player
from physim.vector import (
    BEIGE,
    BLACK,
    LIME,
    MAROON,
    RAYWHITE,
    Color,
    Rectangle,
    Vector2,
    check_collision_circle_rec,
)

GHOSTTY = Color(40, 44, 52, 255)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_FPS = 120

_SPEED_REFRESH_SECONDS = 0.1


def grid_cells(screen: Vector2) -> Iterator[Rectangle]:
    """Yield one-metre grid cells covering ``screen`` pixels, row by row."""
    width = math.ceil(screen.x / PIXELS_PER_METER)
    height = math.ceil(screen.y / PIXELS_PER_METER)
    for row in range(height):
        for col in range(width):
            yield Rectangle(
                col * PIXELS_PER_METER,
                row * PIXELS_PER_METER,
                PIXELS_PER_METER,
                PIXELS_PER_METER,
            )


@dataclass
class Hoop:
    """A target on the right-hand edge of the screen, in pixel coordinates."""

    pos: Vector2 = field(default_factory=Vector2.zero)
    dim: Vector2 = field(
        default_factory=lambda: Vector2(1.0 * PIXELS_PER_METER, 2.0 * PIXELS_PER_METER)
    )
    color: Color = RAYWHITE

    def rect(self) -> Rectangle:
        return Rectangle(self.pos.x, self.pos.y, self.dim.x, self.dim.y)

    def collide_with_ball(self, ball: Ball) -> bool:
        """True if ``ball`` touches the hoop."""
        return check_collision_circle_rec(ball.pos, ball.radius, self.rect())

    def update(self, screen: Vector2, balls: MutableSequence[Ball]) -> List[Ball]:
        """Pin the hoop to the right edge and remove the balls that touch it.

        After a removal the ball that slides into the freed slot is not
        checked until the next frame. Returns the removed balls.
        """
        self.pos = Vector2(screen.x - self.dim.x, screen.y / 2.0 - self.dim.y / 2.0)

        removed: List[Ball] = []
        i = 0
        remaining = len(balls)
        while i < remaining:
            if self.collide_with_ball(balls[i]):
                removed.append(balls.pop(i))
                remaining -= 1
                i += 1
                print(f"Removed Ball Number {i}")
                continue
            i += 1
        return removed


@dataclass
class Game:
    """Everything that lives on screen, plus the random source for respawns."""

    screen: Vector2 = field(
        default_factory=lambda: Vector2(float(DEFAULT_WIDTH), float(DEFAULT_HEIGHT))
    )
    balls: List[Ball] = field(default_factory=list)
    player: Player = field(default_factory=Player)
    hoop: Hoop = field(default_factory=Hoop)
    is_showing_background: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False)
    shown_speed: float = 0.0
    _speed_stamp: float = field(default=-math.inf, repr=False)

    @classmethod
    def new(
        cls, screen: Optional[Vector2] = None, rng: Optional[random.Random] = None
    ) -> Game:
        """A fresh game with a full set of random balls."""
        screen = screen if screen is not None else Vector2(
            float(DEFAULT_WIDTH), float(DEFAULT_HEIGHT)
        )
        rng = rng if rng is not None else random.Random()
        return cls(
            screen=screen,
            balls=Ball.random_many(NUM_OF_BALLS, screen, rng),
            rng=rng,
        )

    def reset(self) -> None:
        """Respawn all balls and put the player back at its start."""
        self.balls = Ball.random_many(NUM_OF_BALLS, self.screen, self.rng)
        self.player = Player()

    def toggle_background(self) -> None:
        self.is_showing_background = not self.is_showing_background

    def resize(self, screen: Vector2) -> None:
        self.screen = screen

    def step(self, dt: float, controls: Optional[Controls] = None) -> List[Ball]:
        """Advance the simulation by ``dt`` seconds; returns balls the hoop took."""
        balls = self.balls
        for index in range(len(balls)):
            balls[index].update(self.screen, dt)
            update_ball_to_ball_collision(index, balls)
            self.player.update_collision_with_balls(balls)

        self.player.update(self.screen, dt, controls)
        return self.hoop.update(self.screen, balls)

    def speed_readout(self, now: Optional[float] = None) -> float:
        """The player's speed, refreshed at most every tenth of a second."""
        now = now if now is not None else time.monotonic()
        if now - self._speed_stamp >= _SPEED_REFRESH_SECONDS:
            self.shown_speed = self.player.speed()
            self._speed_stamp = now
        return self.shown_speed


def _blit_text(surface, font, text: str, x: float, y: float, color: Color) -> None:
    surface.blit(font.render(text, True, color), (int(x), int(y)))


def draw(game: Game, surface, font) -> None:
    """Render one frame of ``game`` onto a pygame surface."""
    import pygame

    surface.fill(GHOSTTY)

    if game.is_showing_background:
        for cell in grid_cells(game.screen):
            pygame.draw.rect(
                surface,
                BEIGE,
                pygame.Rect(int(cell.x), int(cell.y), int(cell.width), int(cell.height)),
                1,
            )

    for index, ball in enumerate(game.balls):
        center = ball.pos * PIXELS_PER_METER
        pygame.draw.circle(
            surface, ball.color, (center.x, center.y), ball.radius * PIXELS_PER_METER
        )
        label = str(index)
        text_width, _ = font.size(label)
        _blit_text(
            surface, font, label, center.x - text_width / 2.0, center.y - 5.0, BLACK
        )

    hoop = game.hoop
    pygame.draw.rect(
        surface,
        hoop.color,
        pygame.Rect(int(hoop.pos.x), int(hoop.pos.y), int(hoop.dim.x), int(hoop.dim.y)),
    )

    player = game.player
    top_left = player.pos * PIXELS_PER_METER
    size = player.dim * PIXELS_PER_METER
    pygame.draw.rect(
        surface,
        player.color,
        pygame.Rect(int(top_left.x), int(top_left.y), int(size.x), int(size.y)),
    )
    speed_text = f"{game.speed_readout():.1f}"
    text_width, _ = font.size(speed_text)
    _blit_text(
        surface,
        font,
        speed_text,
        top_left.x + PIXELS_PER_METER - text_width / 2.0,
        top_left.y,
        MAROON,
    )


def run(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, fps: int = DEFAULT_FPS) -> None:
    """Open a resizable window and play until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("PhySim")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        game = Game.new(Vector2(float(width), float(height)))
        dt = 0.0

        while True:
            jump = slam = False
            quitting = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quitting = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        quitting = True
                    elif event.key == pygame.K_r:
                        game.reset()
                    elif event.key == pygame.K_BACKQUOTE:
                        game.toggle_background()
                    elif event.key == pygame.K_w:
                        jump = True
                    elif event.key == pygame.K_s:
                        slam = True
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(Vector2(float(event.w), float(event.h)))
            if quitting:
                break

            held = pygame.key.get_pressed()
            controls = Controls(
                left=bool(held[pygame.K_a]),
                right=bool(held[pygame.K_d]),
                jump=jump,
                slam=slam,
            )
            game.step(dt, controls)

            surface = pygame.display.get_surface()
            draw(game, surface, font)
            _blit_text(surface, font, f"{round(clock.get_fps())} FPS", 0, 0, LIME)
            pygame.display.flip()

            dt = clock.tick(fps) / 1000.0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="physim", description="Bouncing-ball sandbox.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    run(args.width, args.height, args.fps)
    return 0