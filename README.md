# simworld

Helpers for driving a physics simulation world. The package does not talk to
a simulator itself. Service calls, publishers and clocks are passed in as
plain Python callables, so every piece can be used and tested without any
particular middleware.

## Modules

- `simworld.messages`: frozen dataclasses `Point`, `Quaternion` (identity
  by default), `Pose`, `Header` (`frame_id`, `stamp` in seconds),
  `PoseStamped` and `Object`. It also has the `Origin` enum (`UNDEFINED`,
  `AVERAGE`, `CUSTOM`), the `RegisterResult` enum (`SUCCESS`, `EXISTS`,
  `ERROR_INFO`) and the `ServiceCallError` exception.
- `simworld.object_functions`: works out an object's pose from its origin
  fields.
  - `get_object_pose(obj)` uses `primitive_origin` if it is defined and
    `mesh_origin` otherwise. It returns a `PoseStamped`, or `None` when the
    pose cannot be determined.
  - `pose_from_fields(header, idx, poses, origin)` handles one origin mode:
    - `Origin.AVERAGE` takes the mean position with the orientation of
      `origin`.
    - `Origin.CUSTOM` takes `origin` itself.
    - A positive `idx` selects `poses[idx]`.
    - `Origin.UNDEFINED` gives `None`.
    - Inconsistent or unknown modes raise `ValueError`.
  - `average_point(poses)` returns the mean position. It raises
    `ValueError` for an empty list.
- `simworld.physics`: physics settings for the simulator.
  - `settings_from_params(params)` reads `PhysicsSettings`, either from
    `"gazebo_physics/<name>"` keys or from a nested `"gazebo_physics"`
    mapping. Missing values fall back to the defaults, and
    `ode_slv_rms_error_tol` is always 0.
  - `build_request(settings)` makes a `PhysicsRequest` with an `OdeConfig`
    and gravity `(0, 0, -9.81)`.
  - `set_physics_properties(params, call_service)` sends the request and
    returns it. It raises `PhysicsError` when the service fails or reports
    failure.
- `simworld.cube_spawner`: `build_model_sdf(name, is_cube, width, height,
  depth, mass)` renders an SDF model of a box or a cylinder with its
  inertia. For a cylinder, `width` is the radius. `CubeSpawner` sends a
  `SpawnRequest` through the spawn service you give it. `spawn_cube` and
  `spawn_primitive` return whether the service reported success.
- `simworld.plugin_loader`: `parse_world_plugins(value)` turns a list of
  `{"name", "file"}` entries into `PluginSpec` items. It skips incomplete
  entries and raises `PluginConfigError` if the value is not a list.
  `load_world_plugins(world, value)` calls `world.load_plugin(file, name,
  None)` for each entry.
- `simworld.fake_recognizer`: `FakeObjectRecognizer` publishes object
  information on request.
  - `recognize_object(name, republish)` queries the object for up to 3
    seconds, publishes it and, if a registration callable was given,
    registers it for transform broadcasting.
  - Objects recognised with `republish=True` are published again by
    `publish_recognition_event(has_subscribers)`.
- `simworld.tf_broadcaster`: `ObjectTFBroadcaster` keeps the poses of
  registered objects.
  - Poses come from `on_object` / `update_object` or from
    `query_object_poses`.
  - `publish_tf` emits a freshly stamped `StampedTransform` for each object,
    in name order.

## Examples

Spawning a cube:

```python
from simworld.cube_spawner import CubeSpawner

requests = []

def spawn_service(request):
    requests.append(request)
    return True, "spawned"

spawner = CubeSpawner(spawn_service)
ok = spawner.spawn_cube("cube1", "world", 0.0, 0.0, 1.0, 0, 0, 0, 1)
print(ok, requests[0].model_xml)
```

Broadcasting an object's frame:

```python
from simworld.messages import Header, Object, Origin, Point, Pose
from simworld.tf_broadcaster import ObjectTFBroadcaster

box = Object(
    name="box",
    header=Header(frame_id="world"),
    origin=Pose(Point(1.0, 2.0, 3.0)),
    primitive_origin=Origin.CUSTOM,
)
sent = []
broadcaster = ObjectTFBroadcaster(sent.append, lambda name, geometry: box)
print(broadcaster.register_object("box"))  # RegisterResult.SUCCESS
broadcaster.publish_tf()
print(sent[0].child_frame_id, sent[0].translation)
```

## What the package does not do

- It has no command-line programs and starts no nodes.
- It has no connection to a simulator or a message bus.
- It runs no timers. The caller decides when to call `publish_tf`,
  `query_object_poses` or `publish_recognition_event`.

## Running the tests

```
pip install -e .[test]
pytest
```