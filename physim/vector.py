"""2D vectors, rectangles, colours, input enums and shape collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Iterator, NamedTuple, Union

EPSILON = 0.000001

_Scalar = (int, float)


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector supporting the usual arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def splat(cls, value: float) -> Vector2:
        """A vector with both components set to ``value``."""
        return cls(value, value)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return Vector2.zero()

    def __add__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        if isinstance(other, _Scalar):
            return Vector2(self.x + other, self.y + other)
        return NotImplemented

    def __radd__(self, other: float) -> Vector2:
        return self.__add__(other)

    def __sub__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, _Scalar):
            return Vector2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, _Scalar):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        return self.__mul__(other)

    def __truediv__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, _Scalar):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


LIGHTGRAY = Color(200, 200, 200, 255)
GRAY = Color(130, 130, 130, 255)
DARKGRAY = Color(80, 80, 80, 255)
YELLOW = Color(253, 249, 0, 255)
GOLD = Color(255, 203, 0, 255)
ORANGE = Color(255, 161, 0, 255)
PINK = Color(255, 109, 194, 255)
RED = Color(230, 41, 55, 255)
MAROON = Color(190, 33, 55, 255)
GREEN = Color(0, 228, 48, 255)
LIME = Color(0, 158, 47, 255)
DARKGREEN = Color(0, 117, 44, 255)
SKYBLUE = Color(102, 191, 255, 255)
BLUE = Color(0, 121, 241, 255)
DARKBLUE = Color(0, 82, 172, 255)
PURPLE = Color(200, 122, 255, 255)
VIOLET = Color(135, 60, 190, 255)
DARKPURPLE = Color(112, 31, 126, 255)
BEIGE = Color(211, 176, 131, 255)
BROWN = Color(127, 106, 79, 255)
DARKBROWN = Color(76, 63, 47, 255)
WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
BLANK = Color(0, 0, 0, 0)
MAGENTA = Color(255, 0, 255, 255)
RAYWHITE = Color(245, 245, 245, 255)


class ConfigFlags(IntFlag):
    FLAG_VSYNC_HINT = 0x00000040
    FLAG_FULLSCREEN_MODE = 0x00000002
    FLAG_WINDOW_RESIZABLE = 0x00000004
    FLAG_WINDOW_UNDECORATED = 0x00000008
    FLAG_WINDOW_HIDDEN = 0x00000080
    FLAG_WINDOW_MINIMIZED = 0x00000200
    FLAG_WINDOW_MAXIMIZED = 0x00000400
    FLAG_WINDOW_UNFOCUSED = 0x00000800
    FLAG_WINDOW_TOPMOST = 0x00001000
    FLAG_WINDOW_ALWAYS_RUN = 0x00000100
    FLAG_WINDOW_TRANSPARENT = 0x00000010
    FLAG_WINDOW_HIGHDPI = 0x00002000
    FLAG_WINDOW_MOUSE_PASSTHROUGH = 0x00004000
    FLAG_BORDERLESS_WINDOWED_MODE = 0x00008000
    FLAG_MSAA_4X_HINT = 0x00000020
    FLAG_INTERLACED_HINT = 0x00010000


class KeyboardKey(IntEnum):
    KEY_NULL = 0
    KEY_APOSTROPHE = 39
    KEY_COMMA = 44
    KEY_MINUS = 45
    KEY_PERIOD = 46
    KEY_SLASH = 47
    KEY_ZERO = 48
    KEY_ONE = 49
    KEY_TWO = 50
    KEY_THREE = 51
    KEY_FOUR = 52
    KEY_FIVE = 53
    KEY_SIX = 54
    KEY_SEVEN = 55
    KEY_EIGHT = 56
    KEY_NINE = 57
    KEY_SEMICOLON = 59
    KEY_EQUAL = 61
    KEY_A = 65
    KEY_B = 66
    KEY_C = 67
    KEY_D = 68
    KEY_E = 69
    KEY_F = 70
    KEY_G = 71
    KEY_H = 72
    KEY_I = 73
    KEY_J = 74
    KEY_K = 75
    KEY_L = 76
    KEY_M = 77
    KEY_N = 78
    KEY_O = 79
    KEY_P = 80
    KEY_Q = 81
    KEY_R = 82
    KEY_S = 83
    KEY_T = 84
    KEY_U = 85
    KEY_V = 86
    KEY_W = 87
    KEY_X = 88
    KEY_Y = 89
    KEY_Z = 90
    KEY_LEFT_BRACKET = 91
    KEY_BACKSLASH = 92
    KEY_RIGHT_BRACKET = 93
    KEY_GRAVE = 96
    KEY_SPACE = 32
    KEY_ESCAPE = 256
    KEY_ENTER = 257
    KEY_TAB = 258
    KEY_BACKSPACE = 259
    KEY_INSERT = 260
    KEY_DELETE = 261
    KEY_RIGHT = 262
    KEY_LEFT = 263
    KEY_DOWN = 264
    KEY_UP = 265
    KEY_PAGE_UP = 266
    KEY_PAGE_DOWN = 267
    KEY_HOME = 268
    KEY_END = 269
    KEY_CAPS_LOCK = 280
    KEY_SCROLL_LOCK = 281
    KEY_NUM_LOCK = 282
    KEY_PRINT_SCREEN = 283
    KEY_PAUSE = 284
    KEY_F1 = 290
    KEY_F2 = 291
    KEY_F3 = 292
    KEY_F4 = 293
    KEY_F5 = 294
    KEY_F6 = 295
    KEY_F7 = 296
    KEY_F8 = 297
    KEY_F9 = 298
    KEY_F10 = 299
    KEY_F11 = 300
    KEY_F12 = 301
    KEY_LEFT_SHIFT = 340
    KEY_LEFT_CONTROL = 341
    KEY_LEFT_ALT = 342
    KEY_LEFT_SUPER = 343
    KEY_RIGHT_SHIFT = 344
    KEY_RIGHT_CONTROL = 345
    KEY_RIGHT_ALT = 346
    KEY_RIGHT_SUPER = 347
    KEY_KB_MENU = 348
    KEY_KP_0 = 320
    KEY_KP_1 = 321
    KEY_KP_2 = 322
    KEY_KP_3 = 323
    KEY_KP_4 = 324
    KEY_KP_5 = 325
    KEY_KP_6 = 326
    KEY_KP_7 = 327
    KEY_KP_8 = 328
    KEY_KP_9 = 329
    KEY_KP_DECIMAL = 330
    KEY_KP_DIVIDE = 331
    KEY_KP_MULTIPLY = 332
    KEY_KP_SUBTRACT = 333
    KEY_KP_ADD = 334
    KEY_KP_ENTER = 335
    KEY_KP_EQUAL = 336
    KEY_BACK = 4
    KEY_MENU = 5
    KEY_VOLUME_UP = 24
    KEY_VOLUME_DOWN = 25


class MouseButton(IntEnum):
    MOUSE_BUTTON_LEFT = 0
    MOUSE_BUTTON_RIGHT = 1
    MOUSE_BUTTON_MIDDLE = 2
    MOUSE_BUTTON_SIDE = 3
    MOUSE_BUTTON_EXTRA = 4
    MOUSE_BUTTON_FORWARD = 5
    MOUSE_BUTTON_BACK = 6


def check_collision_circles(
    center1: Vector2, radius1: float, center2: Vector2, radius2: float
) -> bool:
    """True if two circles overlap or touch."""
    delta = center2 - center1
    total = radius1 + radius2
    return delta.dot(delta) <= total * total


def check_collision_circle_rec(center: Vector2, radius: float, rec: Rectangle) -> bool:
    """True if a circle overlaps or touches a rectangle."""
    half_w = rec.width / 2
    half_h = rec.height / 2
    dx = abs(center.x - (rec.x + half_w))
    dy = abs(center.y - (rec.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True

    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def check_collision_point_rec(point: Vector2, rec: Rectangle) -> bool:
    """True if a point lies inside a rectangle (right and bottom edges excluded)."""
    return (
        rec.x <= point.x < rec.x + rec.width
        and rec.y <= point.y < rec.y + rec.height
    )


def check_collision_circle_line(
    center: Vector2, radius: float, p1: Vector2, p2: Vector2
) -> bool:
    """True if a circle touches the line segment from ``p1`` to ``p2``."""
    d = p1 - p2
    if abs(d.x) + abs(d.y) <= EPSILON:
        return check_collision_circles(p1, 0.0, center, radius)

    length_sq = d.dot(d)
    t = (center - p1).dot(p2 - p1) / length_sq
    t = min(max(t, 0.0), 1.0)

    closest = p1 - d * t
    offset = closest - center
    return offset.dot(offset) <= radius * radius


def float_equals(x: float, y: float) -> bool:
    """Compare two floats with a relative tolerance."""
    return abs(x - y) <= EPSILON * max(1.0, abs(x), abs(y))


def get_color(hex_value: int) -> Color:
    """Colour from a 0xRRGGBBAA integer."""
    return Color(
        (hex_value >> 24) & 0xFF,
        (hex_value >> 16) & 0xFF,
        (hex_value >> 8) & 0xFF,
        hex_value & 0xFF,
    )