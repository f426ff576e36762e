"""Keyframe animation data and sampling."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from enginekit.quaternion import Quaternion, slerp
from enginekit.vector import Float3, lerp

V = TypeVar("V", Float3, Quaternion)


@dataclass(frozen=True)
class Keyframe(Generic[V]):
    """A value at a point in time (seconds)."""

    value: V
    time: float


@dataclass
class NodeAnimation:
    """Translation, rotation and scale tracks for one node."""

    translate: list[Keyframe[Float3]] = field(default_factory=list)
    rotate: list[Keyframe[Quaternion]] = field(default_factory=list)
    scale: list[Keyframe[Float3]] = field(default_factory=list)


@dataclass
class Animation:
    """A whole animation: its length in seconds and the tracks keyed by node name."""

    duration: float = 0.0
    node_animations: dict[str, NodeAnimation] = field(default_factory=dict)


def _interpolate(a: V, b: V, t: float) -> Union[Float3, Quaternion]:
    if isinstance(a, Quaternion):
        return slerp(a, b, t)
    return lerp(a, b, t)


def calculate_value(keyframes: Sequence[Keyframe[V]], time: float) -> V:
    """Sample a keyframe track at ``time``.

    Before the first key the first value is returned, after the last key the
    last value; in between, vectors are interpolated linearly and quaternions
    spherically.
    """
    if not keyframes:
        raise ValueError("cannot sample an empty keyframe track")

    first = keyframes[0]
    if len(keyframes) == 1 or time <= first.time:
        return first.value

    for current, following in zip(keyframes, keyframes[1:]):
        if current.time <= time <= following.time:
            t = (time - current.time) / (following.time - current.time)
            return _interpolate(current.value, following.value, t)

    return keyframes[-1].value