"""Broadcasting of registered object poses as coordinate frame transforms."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from .messages import (
    Header,
    Object,
    Point,
    PoseStamped,
    Quaternion,
    RegisterResult,
    ServiceCallError,
)
from .object_functions import get_object_pose

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StampedTransform:
    """Transform of ``child_frame_id`` relative to ``frame_id`` at ``stamp``."""

    frame_id: str
    child_frame_id: str
    stamp: float
    translation: Point = field(default_factory=Point)
    rotation: Quaternion = field(default_factory=Quaternion)


class ObjectTFBroadcaster:
    """Keeps the poses of registered objects and broadcasts them as transforms.

    Only objects registered with :meth:`register_object` are processed.
    Object information arrives through :meth:`on_object` or is queried with
    ``query_object_info(name, include_geometry)``, which returns the Object
    (or None) and may raise ServiceCallError. ``send_transform`` receives each
    StampedTransform. ``clock`` gives the time stamp used when publishing.
    """

    def __init__(
        self,
        send_transform: Callable[[StampedTransform], Any],
        query_object_info: Callable[[str, bool], Object | None] | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._send_transform = send_transform
        self._query = query_object_info
        self._clock = clock
        self._poses: dict[str, PoseStamped] = {}
        self._lock = threading.RLock()

    def is_registered(self, name: str) -> bool:
        """Return whether the object is registered for broadcasting."""
        with self._lock:
            return name in self._poses

    def register_object(self, name: str) -> RegisterResult:
        """Register the object, taking its initial pose from the query service."""
        obj = self._query_object_pose(name, print_errors=False) or Object(name=name)
        pose = get_object_pose(obj)
        if pose is None:
            log.warning("ObjectTFBroadcaster: Could not get pose for object '%s'", name)
            return RegisterResult.ERROR_INFO
        with self._lock:
            if name in self._poses:
                log.warning(
                    "Object %s could not be added in ObjectTFBroadcaster because "
                    "it was already registered.", name,
                )
                return RegisterResult.EXISTS
            self._poses[name] = pose
        return RegisterResult.SUCCESS

    def register_object_service(self, name: str) -> RegisterResult:
        """Service entry point for registering an object; returns the result code."""
        log.info("Calling ObjectTFBroadcaster service with %s", name)
        return self.register_object(name)

    def update_object(self, obj: Object) -> bool:
        """Store the new pose of a registered object; False if not possible."""
        pose = get_object_pose(obj)
        if pose is None:
            log.error("ObjectTFBroadcaster: Could not get pose")
            return False
        with self._lock:
            if obj.name not in self._poses:
                log.error(
                    "ObjectTFBroadcaster: Could not update object %s because it "
                    "was not registered. Call register_object() to add it.", obj.name,
                )
                return False
            self._poses[obj.name] = pose
        return True

    def on_object(self, obj: Object) -> None:
        """Handle an incoming object message."""
        self.update_object(obj)

    def publish_tf(self) -> list[StampedTransform]:
        """Send a freshly stamped transform for every registered object.

        Returns the transforms sent, ordered by object name.
        """
        sent = []
        with self._lock:
            for name in sorted(self._poses):
                stamped = self._poses[name]
                stamped = replace(
                    stamped, header=replace(stamped.header, stamp=self._clock())
                )
                self._poses[name] = stamped
                transform = self._to_transform(stamped, name)
                self._send_transform(transform)
                sent.append(transform)
        return sent

    def query_object_poses(self) -> None:
        """Refresh the pose of every registered object from the query service."""
        with self._lock:
            for name in sorted(self._poses):
                obj = self._query_object_pose(name, print_errors=True)
                if obj is None:
                    continue
                self.update_object(obj)

    def _query_object_pose(self, name: str, print_errors: bool) -> Object | None:
        if self._query is None:
            if print_errors:
                log.error(
                    "ObjectTFBroadcaster: Service to request object info is not running."
                )
            return None
        try:
            return self._query(name, False)
        except ServiceCallError:
            if print_errors:
                log.error(
                    "ObjectTFBroadcaster: Failed to call service to obtain object info"
                )
            return None

    @staticmethod
    def _to_transform(stamped: PoseStamped, frame_name: str) -> StampedTransform:
        header: Header = stamped.header
        return StampedTransform(
            frame_id=header.frame_id,
            child_frame_id=frame_name,
            stamp=header.stamp,
            translation=stamped.pose.position,
            rotation=stamped.pose.orientation,
        )