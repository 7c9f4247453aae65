import pytest

from simworld.fake_recognizer import FakeObjectRecognizer
from simworld.messages import Header, Object, ServiceCallError


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class World:
    def __init__(self, objects=(), missing_first=0, fail=False):
        self.objects = {o.name: o for o in objects}
        self.missing_first = missing_first
        self.fail = fail
        self.queries = []

    def __call__(self, name, include_geometry):
        self.queries.append((name, include_geometry))
        if self.fail:
            raise ServiceCallError("down")
        if self.missing_first > 0:
            self.missing_first -= 1
            return None
        return self.objects.get(name)


CUBE = Object(name="cube1", header=Header(frame_id="world"))


def make(world, register=None):
    clock = FakeClock()
    published = []
    registered = []

    def default_register(name):
        registered.append(name)
        return "SUCCESS"

    rec = FakeObjectRecognizer(
        world, published.append, register or default_register, clock, clock.sleep
    )
    return rec, published, registered, clock


# Carried over from the command client: "<object-name> <republish-flag>" with flag 1.
def test_recognize_with_republish_flag_set():
    world = World([CUBE])
    rec, published, registered, _ = make(world)
    assert rec.recognize_object("cube1", True) is True
    assert published == [CUBE]
    assert registered == ["cube1"]
    assert world.queries == [("cube1", True)]
    assert rec.publish_recognition_event(True) == [CUBE]
    assert world.queries[-1] == ("cube1", False)
    assert published == [CUBE, CUBE]


# Carried over from the command client with republish flag 0.
def test_recognize_with_republish_flag_unset():
    rec, published, registered, _ = make(World([CUBE]))
    assert rec.recognize_object("cube1", False) is True
    assert published == [CUBE]
    assert registered == ["cube1"]
    assert rec.publish_recognition_event(True) == []


def test_no_subscribers_publishes_nothing():
    world = World([CUBE])
    rec, published, _, _ = make(world)
    rec.recognize_object("cube1", True)
    queries = len(world.queries)
    assert rec.publish_recognition_event(False) == []
    assert len(world.queries) == queries
    assert published == [CUBE]


def test_second_republish_request_does_not_publish_again():
    rec, published, registered, _ = make(World([CUBE]))
    rec.recognize_object("cube1", True)
    assert rec.recognize_object("cube1", True) is True
    assert published == [CUBE]
    assert registered == ["cube1"]


def test_switching_off_republish_publishes_once_more():
    rec, published, _, _ = make(World([CUBE]))
    rec.recognize_object("cube1", True)
    assert rec.recognize_object("cube1", False) is True
    assert published == [CUBE, CUBE]
    assert rec.publish_recognition_event(True) == []


def test_missing_object_times_out():
    world = World()
    rec, published, registered, clock = make(world)
    assert rec.recognize_object("ghost", False) is False
    assert published == []
    assert registered == []
    assert all(step == 0.5 for step in clock.sleeps)
    assert clock.now >= 3.0
    assert len(world.queries) == len(clock.sleeps)


def test_missing_object_with_republish_stays_registered():
    world = World()
    rec, published, _, _ = make(world)
    assert rec.recognize_object("ghost", True) is False
    world.objects["ghost"] = Object(name="ghost")
    assert rec.publish_recognition_event(True) == [Object(name="ghost")]


def test_object_found_after_retries():
    world = World([CUBE], missing_first=2)
    rec, published, _, clock = make(world)
    assert rec.recognize_object("cube1", False) is True
    assert clock.sleeps == [0.5, 0.5]
    assert published == [CUBE]


def test_service_failure_counts_as_missing():
    rec, published, _, _ = make(World([CUBE], fail=True))
    assert rec.query_object_info("cube1", True) is None
    assert rec.recognize_object("cube1", False) is False
    assert published == []


def test_register_tf_failure_is_not_fatal():
    def broken(name):
        raise ServiceCallError("no broadcaster")

    rec, published, _, _ = make(World([CUBE]), register=broken)
    assert rec.recognize_object("cube1", False) is True
    assert published == [CUBE]


def test_wait_with_zero_timeout_does_not_query():
    world = World([CUBE])
    rec, _, _, _ = make(world)
    assert rec.wait_for_query_object_info("cube1", True, 0.0, 0.5) is None
    assert world.queries == []


def test_query_object_info_passes_geometry_flag():
    world = World([CUBE])
    rec, _, _, _ = make(world)
    assert rec.query_object_info("cube1", False) == CUBE
    assert world.queries == [("cube1", False)]


@pytest.mark.parametrize("step", [0.25, 1.0])
def test_wait_sleeps_with_check_step(step):
    rec, _, _, clock = make(World())
    assert rec.wait_for_query_object_info("x", True, 2.0, step) is None
    assert set(clock.sleeps) == {step}
    assert clock.now >= 2.0