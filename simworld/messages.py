"""Message types describing objects, poses and service results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


@dataclass(frozen=True)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """An orientation as a quaternion; defaults to the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Pose:
    """Position and orientation."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Header:
    """Reference frame and time stamp (seconds) of a message."""

    frame_id: str = ""
    stamp: float = 0.0


@dataclass(frozen=True)
class PoseStamped:
    """A pose expressed in the frame given by its header."""

    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


class Origin(IntEnum):
    """How the pose of an object is derived from its parts.

    Positive integers select a part pose by index.
    """

    UNDEFINED = -3
    AVERAGE = -2
    CUSTOM = -1


@dataclass(frozen=True)
class Object:
    """An object made of primitive and mesh parts, each with its own pose."""

    name: str = ""
    header: Header = field(default_factory=Header)
    origin: Pose = field(default_factory=Pose)
    primitive_origin: int = Origin.UNDEFINED
    mesh_origin: int = Origin.UNDEFINED
    primitive_poses: tuple[Pose, ...] = ()
    mesh_poses: tuple[Pose, ...] = ()


class RegisterResult(Enum):
    """Outcome of registering an object for transform broadcasting."""

    SUCCESS = auto()
    EXISTS = auto()
    ERROR_INFO = auto()


class ServiceCallError(Exception):
    """Raised when a remote service cannot be called."""