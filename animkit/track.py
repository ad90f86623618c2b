"""Keyframed animation tracks for scalars, vectors and quaternions."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Real
from typing import Generic, Iterable, Sequence, TypeVar, Union

from animkit.vecmath import Quat, Vec3, dot, lerp, mix

T = TypeVar("T")

_Values = Union[float, Sequence[float]]


class Interpolation(enum.Enum):
    """How values between keyframes are computed."""

    CONSTANT = "constant"
    LINEAR = "linear"
    CUBIC = "cubic"


def _as_tuple(values: _Values) -> tuple:
    if isinstance(values, Real):
        return (float(values),)
    return tuple(float(v) for v in values)


@dataclass
class Frame:
    """A keyframe: a time, a value and incoming/outgoing tangents."""

    time: float
    value: _Values
    in_tangent: _Values = ()
    out_tangent: _Values = ()

    def __post_init__(self) -> None:
        self.time = float(self.time)
        self.value = _as_tuple(self.value)
        zeros = (0.0,) * len(self.value)
        self.in_tangent = _as_tuple(self.in_tangent) or zeros
        self.out_tangent = _as_tuple(self.out_tangent) or zeros


class Track(ABC, Generic[T]):
    """A sequence of keyframes sampled with one interpolation mode."""

    def __init__(
        self,
        frames: Iterable[Frame] | None = None,
        interpolation: Interpolation = Interpolation.LINEAR,
    ) -> None:
        self.frames: list[Frame] = list(frames or [])
        self.interpolation = interpolation

    def __len__(self) -> int:
        return len(self.frames)

    def start_time(self) -> float:
        """Time of the first keyframe."""
        if not self.frames:
            raise IndexError("track has no frames")
        return self.frames[0].time

    def end_time(self) -> float:
        """Time of the last keyframe."""
        if not self.frames:
            raise IndexError("track has no frames")
        return self.frames[-1].time

    def sample(self, time: float, looping: bool) -> T:
        """Sample the track with its interpolation mode."""
        if self.interpolation is Interpolation.CONSTANT:
            return self.sample_constant(time, looping)
        if self.interpolation is Interpolation.LINEAR:
            return self.sample_linear(time, looping)
        return self.sample_cubic(time, looping)

    def sample_constant(self, time: float, looping: bool) -> T:
        index = self.frame_index(time, looping)
        if index < 0 or index >= len(self.frames):
            return self._default()
        return self.cast(self.frames[index].value)

    def sample_linear(self, time: float, looping: bool) -> T:
        index = self.frame_index(time, looping)
        if index < 0 or index >= len(self.frames) - 1:
            return self._default()
        current, following = self.frames[index], self.frames[index + 1]
        track_time = self.adjust_to_fit_track(time, looping)
        frame_delta = following.time - current.time
        if frame_delta <= 0.0:
            return self._default()
        t = (track_time - current.time) / frame_delta
        return self._interpolate(self.cast(current.value), self.cast(following.value), t)

    def sample_cubic(self, time: float, looping: bool) -> T:
        index = self.frame_index(time, looping)
        if index < 0 or index >= len(self.frames) - 1:
            return self._default()
        current, following = self.frames[index], self.frames[index + 1]
        track_time = self.adjust_to_fit_track(time, looping)
        frame_delta = following.time - current.time
        if frame_delta <= 0.0:
            return self._default()
        t = (track_time - current.time) / frame_delta
        point1 = self.cast(current.value)
        slope1 = self._slope(current.out_tangent) * frame_delta
        point2 = self.cast(following.value)
        slope2 = self._slope(following.in_tangent) * frame_delta
        return self.hermite(t, point1, slope1, point2, slope2)

    def frame_index(self, time: float, looping: bool) -> int:
        """Index of the keyframe at or before ``time``, or -1 if there is none."""
        count = len(self.frames)
        if count < 1:
            return -1
        start = self.start_time()
        if looping:
            duration = self.end_time() - start
            if duration <= 0.0:
                return -1
            time = math.fmod(time - start, duration)
            if time < 0.0:
                time += duration
            time += start
        else:
            if time <= start:
                return 0
            if count >= 2 and time >= self.frames[-2].time:
                return count - 2
        for index, frame in reversed(list(enumerate(self.frames))):
            if time >= frame.time:
                return index
        return -1

    def adjust_to_fit_track(self, time: float, looping: bool) -> float:
        """Wrap or clamp ``time`` into the track's time range."""
        if not self.frames:
            return 0.0
        start, end = self.start_time(), self.end_time()
        duration = end - start
        if duration <= 0.0:
            return 0.0
        if looping:
            time = math.fmod(time - start, duration)
            if time < 0.0:
                time += duration
            return time + start
        if time <= start:
            time = start
        if time >= end:
            return end
        return time

    def hermite(self, t: float, p1: T, s1: T, p2: T, s2: T) -> T:
        """Evaluate a cubic Hermite spline at ``t`` in [0, 1]."""
        tt = t * t
        ttt = tt * t
        p2 = self._neighborhood(p1, p2)
        h1 = 2.0 * ttt - 3.0 * tt + 1.0
        h2 = -2.0 * ttt + 3.0 * tt
        h3 = ttt - 2.0 * tt + t
        h4 = ttt - tt
        result = p1 * h1 + p2 * h2 + s1 * h3 + s2 * h4
        return self._adjust_hermite(result)

    @abstractmethod
    def cast(self, values: Sequence[float]) -> T:
        """Build a track value from raw keyframe components."""

    @abstractmethod
    def _default(self) -> T:
        """Value returned when the track cannot be sampled."""

    @abstractmethod
    def _interpolate(self, a: T, b: T, t: float) -> T:
        """Linear blend between two values."""

    @abstractmethod
    def _slope(self, values: Sequence[float]) -> T:
        """Tangent built from raw components."""

    def _neighborhood(self, a: T, b: T) -> T:
        return b

    def _adjust_hermite(self, value: T) -> T:
        return value


class ScalarTrack(Track[float]):
    """A track of single floats."""

    def cast(self, values: Sequence[float]) -> float:
        return float(values[0])

    def _default(self) -> float:
        return 0.0

    def _interpolate(self, a: float, b: float, t: float) -> float:
        return (1.0 - t) * a + t * b

    def _slope(self, values: Sequence[float]) -> float:
        return float(values[0])


class VectorTrack(Track[Vec3]):
    """A track of three-component vectors."""

    def cast(self, values: Sequence[float]) -> Vec3:
        return Vec3(*values[:3])

    def _default(self) -> Vec3:
        return Vec3()

    def _interpolate(self, a: Vec3, b: Vec3, t: float) -> Vec3:
        return lerp(a, b, t)

    def _slope(self, values: Sequence[float]) -> Vec3:
        return Vec3(*values[:3])


class QuatTrack(Track[Quat]):
    """A track of rotations; sampled values are normalised."""

    def cast(self, values: Sequence[float]) -> Quat:
        return Quat(*values[:4]).normalized()

    def _default(self) -> Quat:
        return Quat()

    def _interpolate(self, a: Quat, b: Quat, t: float) -> Quat:
        if dot(a, b) < 0.0:
            return mix(a, -b, t).normalized()
        return mix(a, b, t).normalized()

    def _slope(self, values: Sequence[float]) -> Quat:
        return Quat(*values[:4])

    def _neighborhood(self, a: Quat, b: Quat) -> Quat:
        return -b if dot(a, b) < 0.0 else b

    def _adjust_hermite(self, value: Quat) -> Quat:
        return value.normalized()