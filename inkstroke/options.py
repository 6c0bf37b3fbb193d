"""Stroke options: defaults, easing curves, and dict coercion."""
from collections.abc import Callable, Mapping
from numbers import Real
from typing import Any, NamedTuple

from .geometry import StrokeError
from .constants import (
    DEFAULT_SIZE, DEFAULT_THINNING, DEFAULT_SMOOTHING, DEFAULT_STREAMLINE,
)

Easing = Callable[[float], float]

def identity(t: float) -> float:
    return t

def ease_out_quad(t: float) -> float:
    return t * (2 - t)

def ease_out_cubic(t: float) -> float:
    t -= 1
    return t * t * t + 1


class TaperOptions(NamedTuple):
    """Taper settings for one end of the stroke.

    Accepted and validated but not applied to the outline.
    """
    taper: float = 0.0
    easing: Easing = ease_out_quad


class StrokeOptions(NamedTuple):
    size: float = DEFAULT_SIZE
    thinning: float = DEFAULT_THINNING
    smoothing: float = DEFAULT_SMOOTHING
    streamline: float = DEFAULT_STREAMLINE
    simulate_pressure: bool = True
    easing: Easing = identity
    start: TaperOptions = TaperOptions()
    end: TaperOptions = TaperOptions(easing=ease_out_cubic)
    last: bool = False                # no more points will arrive
    clip: bool = False                # self-union before emitting the path
    strategy: str = "offset"          # "offset" or "spline"
    cap_end: bool = True              # close the spline outline at the end

    @classmethod
    def from_mapping(cls, m: Mapping[str, Any]) -> "StrokeOptions":
        """Build options from a dict using camelCase or snake_case keys."""
        kw = {}
        for key, val in m.items():
            name = _ALIASES.get(key, key)
            if name not in cls._fields:
                raise StrokeError(f"Unknown stroke option: {key!r}")
            if name in ("start", "end"):
                val = _taper(name, val)
            kw[name] = val
        return _checked(cls(**kw))


# camelCase spellings accepted in option dicts
_ALIASES = {
    "simulatePressure": "simulate_pressure",
    "capEnd": "cap_end",
}

def _taper(which: str, val: Any) -> TaperOptions:
    if isinstance(val, TaperOptions):
        return val
    if not isinstance(val, Mapping):
        raise StrokeError(f"{which} must be a mapping, got {type(val).__name__}")
    unknown = set(val) - set(TaperOptions._fields)
    if unknown:
        raise StrokeError(f"Unknown {which} option(s): {sorted(unknown)}")
    base = StrokeOptions._field_defaults[which]
    return base._replace(**val)


def _checked(o: StrokeOptions) -> StrokeOptions:
    if isinstance(o.size, bool) or not isinstance(o.size, Real) or not o.size > 0:
        raise StrokeError(f"size must be a positive number, got {o.size!r}")
    return o


def coerce_options(options: "StrokeOptions | Mapping[str, Any] | None") -> StrokeOptions:
    if options is None:
        return StrokeOptions()
    if isinstance(options, StrokeOptions):
        return _checked(options)
    if isinstance(options, Mapping):
        return StrokeOptions.from_mapping(options)
    raise StrokeError(f"Options must be StrokeOptions or a mapping, got {type(options).__name__}")
