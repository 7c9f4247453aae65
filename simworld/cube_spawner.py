"""Spawning of box and cylinder models into the simulator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from .messages import Point, Pose, Quaternion

log = logging.getLogger(__name__)

SPAWN_OBJECT_TOPIC = "gazebo/spawn_sdf_model"
ROBOT_NAMESPACE = "cube_spawner"
DEFAULT_SIZE = 0.05
DEFAULT_MASS = 0.05


@dataclass(frozen=True)
class SpawnRequest:
    """Request to spawn a model described in SDF."""

    model_name: str
    model_xml: str
    robot_namespace: str = ROBOT_NAMESPACE
    initial_pose: Pose = field(default_factory=Pose)
    reference_frame: str = ""


def _num(value: float) -> str:
    return format(float(value), "g")


def _geometry(is_cube: bool, w: float, h: float, d: float) -> str:
    if is_cube:
        return f"<box><size>{_num(w)} {_num(h)} {_num(d)}</size></box>"
    return (
        f"<cylinder><length>{_num(h)}</length>"
        f"<radius>{_num(w)}</radius></cylinder>"
    )


def _inertia(is_cube: bool, w: float, h: float, d: float, mass: float):
    mass12 = mass / 12.0
    if is_cube:
        return (
            mass12 * (h * h + d * d),
            mass12 * (w * w + d * d),
            mass12 * (w * w + h * h),
        )
    side = mass12 * (3 * w * w + h * h)
    return side, side, 0.5 * mass * w * w


def build_model_sdf(
    name: str,
    is_cube: bool,
    width: float,
    height: float,
    depth: float,
    mass: float,
) -> str:
    """Return the SDF model of a box, or of a cylinder when ``is_cube`` is false.

    For a cylinder ``width`` is the radius, ``height`` the length and
    ``depth`` is ignored.
    """
    geometry = _geometry(is_cube, width, height, depth)
    ixx, iyy, izz = _inertia(is_cube, width, height, depth, mass)
    model_name = escape(name, {"'": "&apos;"})
    return (
        "<?xml version='1.0'?>"
        "<sdf version='1.4'>"
        f"<model name='{model_name}'>"
        "<static>false</static>"
        "<link name='link'>"
        "<inertial>"
        f"<mass>{_num(mass)}</mass>"
        "<inertia>"
        f"<ixx>{_num(ixx)}</ixx>"
        "<ixy>0.0</ixy>"
        "<ixz>0.0</ixz>"
        f"<iyy>{_num(iyy)}</iyy>"
        "<iyz>0.0</iyz>"
        f"<izz>{_num(izz)}</izz>"
        "</inertia>"
        "</inertial>"
        "<collision name='collision'>"
        f"<geometry>{geometry}</geometry>"
        "</collision>"
        "<visual name='visual'>"
        f"<geometry>{geometry}</geometry>"
        "<material>"
        "<script>"
        "<uri>file://media/materials/scripts/gazebo.material</uri>"
        "<name>Gazebo/Blue</name>"
        "</script>"
        "</material>"
        "</visual>"
        "</link>"
        "</model>"
        "</sdf>"
    )


class CubeSpawner:
    """Spawns cubes and cylinders of given size, position and orientation.

    ``spawn_service`` takes a SpawnRequest and returns
    ``(success, status_message)``; it may raise ServiceCallError.
    """

    def __init__(self, spawn_service: Callable[[SpawnRequest], tuple[bool, str]]):
        self._spawn_service = spawn_service

    def spawn_cube(
        self,
        name: str,
        frame_id: str,
        x: float,
        y: float,
        z: float,
        qx: float,
        qy: float,
        qz: float,
        qw: float,
        width: float = DEFAULT_SIZE,
        height: float = DEFAULT_SIZE,
        depth: float = DEFAULT_SIZE,
        mass: float = DEFAULT_MASS,
    ) -> bool:
        """Spawn a box; return whether the simulator reported success."""
        return self.spawn_primitive(
            name, True, frame_id, x, y, z, qx, qy, qz, qw,
            width, height, depth, mass,
        )

    def spawn_primitive(
        self,
        name: str,
        is_cube: bool,
        frame_id: str,
        x: float,
        y: float,
        z: float,
        qx: float,
        qy: float,
        qz: float,
        qw: float,
        width: float = DEFAULT_SIZE,
        height: float = DEFAULT_SIZE,
        depth: float = DEFAULT_SIZE,
        mass: float = DEFAULT_MASS,
    ) -> bool:
        """Spawn a box or a cylinder; return whether the simulator reported success."""
        request = SpawnRequest(
            model_name=name,
            model_xml=build_model_sdf(name, is_cube, width, height, depth, mass),
            robot_namespace=ROBOT_NAMESPACE,
            initial_pose=Pose(Point(x, y, z), Quaternion(qx, qy, qz, qw)),
            reference_frame=frame_id,
        )
        success, status_message = self._spawn_service(request)
        log.info("Result: %s, code %d", status_message, int(bool(success)))
        return bool(success)