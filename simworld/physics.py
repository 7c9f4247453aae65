"""Physics engine settings read from parameters and sent to the simulator."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields

from .messages import ServiceCallError

log = logging.getLogger(__name__)

PARAM_NAMESPACE = "gazebo_physics"
GRAVITY = (0.0, 0.0, -9.81)


class PhysicsError(Exception):
    """Raised when the physics properties could not be set."""


@dataclass(frozen=True)
class PhysicsSettings:
    """Tunable physics parameters with their default values."""

    max_step_size: float = 0.001
    max_update_rate: float = 1000.0
    ode_slv_precon_iters: float = 0.0
    ode_slv_iters: float = 500.0
    ode_slv_w: float = 1.3
    ode_slv_rms_error_tol: float = 0.0
    contact_surface_layer: float = 0.001
    contact_max_correcting_vel: float = 100.0
    cfm: float = 0.0
    erp: float = 0.2
    max_contacts: float = 20.0


# The RMS error tolerance is fixed and never read from parameters.
_FIXED_SETTINGS = {"ode_slv_rms_error_tol"}


@dataclass(frozen=True)
class OdeConfig:
    """Solver configuration for the ODE physics engine."""

    auto_disable_bodies: bool = False
    sor_pgs_precon_iters: int = 0
    sor_pgs_iters: int = 500
    sor_pgs_w: float = 1.3
    sor_pgs_rms_error_tol: float = 0.0
    contact_surface_layer: float = 0.001
    contact_max_correcting_vel: float = 100.0
    cfm: float = 0.0
    erp: float = 0.2
    max_contacts: int = 20


@dataclass(frozen=True)
class PhysicsRequest:
    """Request to set the physics properties of the simulator."""

    time_step: float
    max_update_rate: float
    gravity: tuple[float, float, float] = GRAVITY
    ode_config: OdeConfig = field(default_factory=OdeConfig)


def _lookup(params: Mapping, name: str):
    flat_key = f"{PARAM_NAMESPACE}/{name}"
    if flat_key in params:
        return params[flat_key]
    nested = params.get(PARAM_NAMESPACE)
    if isinstance(nested, Mapping) and name in nested:
        return nested[name]
    return None


def settings_from_params(params: Mapping) -> PhysicsSettings:
    """Read settings from ``gazebo_physics/<name>`` keys, or a nested
    ``gazebo_physics`` mapping, falling back to the defaults."""
    values = {}
    for f in fields(PhysicsSettings):
        if f.name in _FIXED_SETTINGS:
            continue
        raw = _lookup(params, f.name)
        value = f.default if raw is None else float(raw)
        log.info("Setting gazebo physics %s %s", f.name, value)
        values[f.name] = value
    return PhysicsSettings(**values)


def build_request(settings: PhysicsSettings) -> PhysicsRequest:
    """Turn settings into a physics request with earth gravity."""
    ode = OdeConfig(
        auto_disable_bodies=False,
        sor_pgs_precon_iters=int(settings.ode_slv_precon_iters),
        sor_pgs_iters=int(settings.ode_slv_iters),
        sor_pgs_w=settings.ode_slv_w,
        sor_pgs_rms_error_tol=settings.ode_slv_rms_error_tol,
        contact_surface_layer=settings.contact_surface_layer,
        contact_max_correcting_vel=settings.contact_max_correcting_vel,
        cfm=settings.cfm,
        erp=settings.erp,
        max_contacts=int(settings.max_contacts),
    )
    return PhysicsRequest(
        time_step=settings.max_step_size,
        max_update_rate=settings.max_update_rate,
        gravity=GRAVITY,
        ode_config=ode,
    )


def set_physics_properties(
    params: Mapping,
    call_service: Callable[[PhysicsRequest], tuple[bool, str]],
) -> PhysicsRequest:
    """Send the physics settings from ``params`` and return the request sent.

    ``call_service`` takes the request and returns ``(success, status_message)``;
    it may raise ServiceCallError if the service cannot be reached.
    """
    request = build_request(settings_from_params(params))
    try:
        success, status_message = call_service(request)
    except ServiceCallError as exc:
        raise PhysicsError("Failed to call gazebo set physics service") from exc
    if not success:
        raise PhysicsError(
            f"Could not set gazebo physics properties. Error: '{status_message}'"
        )
    return request