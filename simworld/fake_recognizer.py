"""A stand-in object recogniser that republishes known objects on demand."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

from .messages import Object, ServiceCallError

log = logging.getLogger(__name__)

RECOGNITION_TIMEOUT = 3.0
RECOGNITION_CHECK_STEP = 0.5


class FakeObjectRecognizer:
    """Publishes object information when asked to "recognise" an object.

    Objects recognised with ``republish`` set are kept and published again on
    every recognition event, until recognised once more without it.

    ``query_object_info(name, include_geometry)`` returns the Object or None
    if it does not exist, and may raise ServiceCallError. ``publish`` sends an
    Object. ``register_object_tf(name)``, if given, asks for transforms of the
    object to be broadcast and may raise ServiceCallError.
    """

    def __init__(
        self,
        query_object_info: Callable[[str, bool], Object | None],
        publish: Callable[[Object], Any],
        register_object_tf: Callable[[str], Any] | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self._query = query_object_info
        self._publish = publish
        self._register_object_tf = register_object_tf
        self._clock = clock
        self._sleep = sleep
        self._added: set[str] = set()
        self._lock = threading.Lock()

    def recognize_object(self, name: str, republish: bool) -> bool:
        """Publish the object once and switch its republishing on or off.

        Returns False if the object information could not be obtained.
        """
        log.info("Recognizing object %s", name)
        with self._lock:
            if name in self._added:
                if republish:
                    log.warning(
                        "The object %s was already set to being continuously "
                        "published.", name,
                    )
                    return True
                log.info("Removing object %s from being re-published", name)
                self._added.discard(name)
            if republish:
                self._added.add(name)

            obj = self._wait_for(
                name, True, RECOGNITION_TIMEOUT, RECOGNITION_CHECK_STEP, False
            )
            if obj is None:
                log.error("Could not find object %s", name)
                return False
            self._publish(obj)

        if self._register_object_tf is not None:
            try:
                result = self._register_object_tf(obj.name)
            except ServiceCallError as exc:
                log.debug("Could not register object %s for tf: %s", obj.name, exc)
            else:
                log.info("Register tf result: %s", result)
        return True

    def publish_recognition_event(self, has_subscribers: bool) -> list[Object]:
        """Publish the current pose of every republished object.

        Does nothing when nobody listens. Returns the objects published.
        """
        if not has_subscribers:
            return []
        published = []
        with self._lock:
            for name in sorted(self._added):
                obj = self._query_info(name, False, True)
                if obj is None:
                    log.error("Could not find object %s", name)
                    continue
                self._publish(obj)
                published.append(obj)
        return published

    def wait_for_query_object_info(
        self, name: str, include_geometry: bool, timeout: float, check_step: float
    ) -> Object | None:
        """Query the object repeatedly every ``check_step`` seconds until
        found or ``timeout`` seconds have passed."""
        return self._wait_for(name, include_geometry, timeout, check_step, True)

    def query_object_info(self, name: str, include_geometry: bool) -> Object | None:
        """Query the object information; None if unavailable."""
        return self._query_info(name, include_geometry, True)

    def _wait_for(self, name, include_geometry, timeout, check_step, print_errors):
        start = self._clock()
        waited = 0.0
        while waited < timeout:
            obj = self._query_info(name, include_geometry, print_errors)
            if obj is not None:
                return obj
            self._sleep(check_step)
            waited = self._clock() - start
        return None

    def _query_info(self, name, include_geometry, print_errors):
        try:
            obj = self._query(name, include_geometry)
        except ServiceCallError:
            if print_errors:
                log.error(
                    "Could not get object %s because service request failed.", name
                )
            return None
        if obj is None and print_errors:
            log.error("Could not get object %s because it does not exist.", name)
        return obj