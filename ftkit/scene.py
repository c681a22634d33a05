"""Data types describing a ray-traced scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIDTH = 600
HEIGHT = 300


class ObjectType(Enum):
    """Kinds of scene object."""

    SPHERE = 0
    PLANE = 1
    CYLINDER = 2


class Key(IntEnum):
    """Keyboard codes used by the interactive viewer."""

    ESC = 53
    W = 13
    A = 0
    S = 1
    D = 2
    Q = 12
    E = 14
    LEFT = 123
    RIGHT = 124
    UP = 126
    DOWN = 125
    PLUS = 24
    MINUS = 27
    # object translation
    I = 34  # noqa: E741
    K = 40
    J = 38
    L = 37
    U = 32
    O = 31  # noqa: E741
    # object rotation
    NUM_2 = 84
    NUM_4 = 86
    NUM_6 = 88
    NUM_7 = 89
    NUM_8 = 91
    NUM_9 = 92
    # light translation
    T = 17
    G = 5
    F = 3
    H = 4
    R = 15
    Y = 16
    # object resizing
    LEFT_BRACKET = 33
    RIGHT_BRACKET = 30
    SEMICOLON = 41
    APOSTROPHE = 39


@dataclass
class Vec3:
    """A three-component vector or point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def invalid(cls) -> "Vec3":
        """The marker vector for a failed parse: every component NaN."""
        return cls(math.nan, math.nan, math.nan)

    def is_valid(self) -> bool:
        """True when no component is NaN."""
        return not any(math.isnan(v) for v in (self.x, self.y, self.z))


@dataclass
class Colour:
    """An RGB colour with an intensity ratio."""

    r: int = 0
    g: int = 0
    b: int = 0
    ratio: float = 0.0

    @classmethod
    def invalid(cls) -> "Colour":
        """The marker colour for a failed parse: all components -1."""
        return cls(-1, -1, -1, -1.0)

    def is_valid(self) -> bool:
        """True unless this is the invalid marker colour."""
        return self != Colour.invalid()


@dataclass
class Camera:
    view_point: Vec3 = field(default_factory=Vec3)
    norm: Vec3 = field(default_factory=Vec3)
    fov_rad: float = 0.0
    fov_deg: int = 0


@dataclass
class Light:
    pos: Vec3 = field(default_factory=Vec3)
    colour: Colour = field(default_factory=Colour)


@dataclass
class Ray:
    start: Vec3 = field(default_factory=Vec3)
    dir: Vec3 = field(default_factory=Vec3)
    colour: Colour = field(default_factory=Colour)


@dataclass
class Hit:
    p: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    front_face: bool = False
    colour: Colour = field(default_factory=Colour)


@dataclass
class SceneObject:
    """A sphere, plane or cylinder; unused fields keep their defaults."""

    type: ObjectType
    center: Vec3 = field(default_factory=Vec3)
    colour: Colour = field(default_factory=Colour)
    norm: Vec3 = field(default_factory=Vec3)
    diameter: float = 0.0
    r: float = 0.0
    h: float = 0.0
    point: Vec3 = field(default_factory=Vec3)


@dataclass
class Scene:
    """Everything in a scene: objects, camera, light and ambient light."""

    objects: list[SceneObject] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)
    light: Light = field(default_factory=Light)
    a_light: Colour = field(default_factory=Colour)