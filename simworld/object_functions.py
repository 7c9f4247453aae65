"""Helpers to derive the pose of an object from its message fields."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .messages import Header, Object, Origin, Point, Pose, PoseStamped

log = logging.getLogger(__name__)


def average_point(poses: Sequence[Pose]) -> Point:
    """Return the mean position of the poses; orientations are ignored."""
    poses = list(poses)
    if not poses:
        raise ValueError("cannot average an empty list of poses")
    count = len(poses)
    return Point(
        sum(p.position.x for p in poses) / count,
        sum(p.position.y for p in poses) / count,
        sum(p.position.z for p in poses) / count,
    )


def pose_from_fields(
    header: Header, idx: int, poses: Sequence[Pose], origin: Pose
) -> PoseStamped | None:
    """Build the object pose for origin mode ``idx``.

    Returns None when the mode is undefined and raises ValueError when the
    fields are inconsistent or the mode is unknown.
    """
    if idx == Origin.UNDEFINED:
        return None
    if idx == Origin.AVERAGE:
        pose = Pose(average_point(poses), origin.orientation)
    elif idx == Origin.CUSTOM:
        pose = origin
    elif idx > 0:
        if len(poses) <= idx:
            raise ValueError(
                f"inconsistent object, has less poses than required "
                f"({len(poses)}, required {idx})"
            )
        pose = poses[idx]
    else:
        raise ValueError(f"unknown origin mode: {idx}")
    return PoseStamped(header, pose)


def get_object_pose(obj: Object) -> PoseStamped | None:
    """Return the pose of the object, or None if it cannot be determined.

    Primitive parts take precedence over mesh parts.
    """
    if obj.primitive_origin != Origin.UNDEFINED:
        idx, poses = obj.primitive_origin, obj.primitive_poses
    elif obj.mesh_origin != Origin.UNDEFINED:
        idx, poses = obj.mesh_origin, obj.mesh_poses
    else:
        return None
    try:
        return pose_from_fields(obj.header, idx, poses, obj.origin)
    except ValueError as exc:
        log.error("Could not get pose of object %r: %s", obj.name, exc)
        return None