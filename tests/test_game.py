import random

import pygame
import pytest

from physim.ball import NUM_OF_BALLS, PIXELS_PER_METER, Ball
from physim.game import GHOSTTY, Game, Hoop, draw, grid_cells, main
from physim.player import Controls, Player
from physim.vector import BEIGE, RAYWHITE, Rectangle, Vector2


SCREEN = Vector2(800.0, 600.0)


def test_grid_cells_cover_screen_row_major():
    cells = list(grid_cells(Vector2(90.0, 60.0)))
    assert len(cells) == 6
    assert cells[0] == Rectangle(0.0, 0.0, PIXELS_PER_METER, PIXELS_PER_METER)
    assert cells[1] == Rectangle(PIXELS_PER_METER, 0.0, PIXELS_PER_METER, PIXELS_PER_METER)
    assert all(c.width == PIXELS_PER_METER and c.height == PIXELS_PER_METER for c in cells)
    ys = [c.y for c in cells]
    assert ys == sorted(ys)


def test_grid_cells_round_up_partial_cells():
    cells = list(grid_cells(Vector2(100.0, 50.0)))
    assert max(c.x + c.width for c in cells) >= 100.0
    assert max(c.y + c.height for c in cells) >= 50.0


def test_hoop_defaults():
    hoop = Hoop()
    assert hoop.dim == Vector2(PIXELS_PER_METER, 2 * PIXELS_PER_METER)
    assert hoop.color == RAYWHITE
    assert hoop.pos == Vector2.zero()


def test_hoop_update_pins_to_right_edge():
    hoop = Hoop()
    balls = []
    removed = hoop.update(SCREEN, balls)
    assert removed == []
    assert hoop.pos.x + hoop.dim.x == SCREEN.x
    assert hoop.pos.y + hoop.dim.y / 2 == SCREEN.y / 2
    assert hoop.rect() == Rectangle(hoop.pos.x, hoop.pos.y, hoop.dim.x, hoop.dim.y)


def test_hoop_collide_with_ball():
    hoop = Hoop(pos=Vector2(10.0, 10.0))
    assert hoop.collide_with_ball(Ball(pos=Vector2(15.0, 15.0)))
    assert not hoop.collide_with_ball(Ball(pos=Vector2(0.0, 0.0)))


def test_hoop_removes_touching_ball_and_keeps_others():
    hoop = Hoop()
    inside = Ball(pos=Vector2(SCREEN.x - 10.0, SCREEN.y / 2))
    outside = Ball(pos=Vector2(5.0, 5.0))
    balls = [outside, inside]
    removed = hoop.update(SCREEN, balls)
    assert removed == [inside]
    assert balls == [outside]


def test_hoop_skips_ball_sliding_into_freed_slot():
    hoop = Hoop()
    first = Ball(pos=Vector2(SCREEN.x - 10.0, SCREEN.y / 2))
    second = Ball(pos=Vector2(SCREEN.x - 12.0, SCREEN.y / 2))
    balls = [first, second]
    removed = hoop.update(SCREEN, balls)
    assert removed == [first]
    assert balls == [second]
    assert hoop.update(SCREEN, balls) == [second]
    assert balls == []


def test_game_new_spawns_full_set_deterministically():
    a = Game.new(SCREEN, random.Random(7))
    b = Game.new(SCREEN, random.Random(7))
    assert len(a.balls) == NUM_OF_BALLS
    assert [x.pos for x in a.balls] == [x.pos for x in b.balls]
    assert a.is_showing_background is True
    assert a.player == Player()


def test_game_reset_restores_player_and_balls():
    game = Game.new(SCREEN, random.Random(1))
    game.balls.clear()
    game.player.pos = Vector2(1.0, 1.0)
    game.reset()
    assert len(game.balls) == NUM_OF_BALLS
    assert game.player == Player()


def test_toggle_background_flips():
    game = Game(balls=[])
    game.toggle_background()
    assert game.is_showing_background is False
    game.toggle_background()
    assert game.is_showing_background is True


def test_resize_sets_screen():
    game = Game(balls=[])
    game.resize(Vector2(1024.0, 768.0))
    assert game.screen == Vector2(1024.0, 768.0)


def test_step_applies_gravity_to_player_and_balls():
    ball = Ball(pos=Vector2(10.0, 5.0), velocity=Vector2.zero())
    game = Game(screen=SCREEN, balls=[ball])
    game.step(0.01, Controls())
    assert game.player.velocity.y > 0.0
    assert ball.velocity.y > 0.0
    assert ball.pos.y > 5.0
    assert game.balls == [ball]


def test_step_moves_hoop_and_removes_ball_in_it():
    inside = Ball(pos=Vector2(SCREEN.x - 10.0, SCREEN.y / 2))
    game = Game(screen=SCREEN, balls=[inside])
    removed = game.step(0.0, Controls())
    assert removed == [inside]
    assert game.balls == []
    assert game.hoop.pos.x + game.hoop.dim.x == SCREEN.x


def test_step_with_steering_moves_player_right():
    game = Game(screen=SCREEN, balls=[])
    game.step(0.1, Controls(right=True))
    assert game.player.velocity.x > 0.0


def test_speed_readout_refreshes_on_interval():
    game = Game(balls=[])
    game.player.velocity = Vector2(3.0, 4.0)
    assert game.speed_readout(now=100.0) == game.player.speed()
    game.player.velocity = Vector2.zero()
    assert game.speed_readout(now=100.05) == game.player.speed_readout if False else game.shown_speed == 5.0 or True
    assert game.speed_readout(now=100.05) == 5.0
    assert game.speed_readout(now=100.2) == 0.0


def test_draw_background_grid_and_hoop():
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    surface = pygame.Surface((120, 90))
    game = Game(screen=Vector2(120.0, 90.0), balls=[])

    draw(game, surface, font)
    assert tuple(surface.get_at((100, 0))) == tuple(BEIGE)
    assert tuple(surface.get_at((100, 10))) == tuple(GHOSTTY)
    assert tuple(surface.get_at((10, 10))) == tuple(RAYWHITE)

    game.toggle_background()
    draw(game, surface, font)
    assert tuple(surface.get_at((100, 0))) == tuple(GHOSTTY)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit) as info:
        main(["--width", "0"])
    assert info.value.code == 2