"""Per-joint transforms and the tracks that animate them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from animkit.track import QuatTrack, Track, VectorTrack
from animkit.vecmath import Quat, Vec3


@dataclass(frozen=True)
class Transform:
    """Translation, orientation and scale of one joint."""

    translation: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat)
    scaling: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))


class TransformTrack:
    """Position, rotation and scale tracks for a single joint."""

    def __init__(self, joint_id: int = 0) -> None:
        self.joint_id = joint_id
        self.position = VectorTrack()
        self.rotation = QuatTrack()
        self.scaling = VectorTrack()

    def _animated(self) -> Iterator[Track]:
        return (
            track
            for track in (self.position, self.rotation, self.scaling)
            if len(track) > 1
        )

    def is_valid(self) -> bool:
        """True when at least one component track has two or more frames."""
        return any(True for _ in self._animated())

    def start_time(self) -> float:
        """Earliest start of the animated component tracks, or 0.0."""
        return min((track.start_time() for track in self._animated()), default=0.0)

    def end_time(self) -> float:
        """Latest end of the animated component tracks, or 0.0."""
        return max((track.end_time() for track in self._animated()), default=0.0)

    def sample(self, reference: Transform, time: float, looping: bool) -> Transform:
        """Return ``reference`` with each animated component replaced by its sample."""
        changes = {}
        if len(self.position) > 1:
            changes["translation"] = self.position.sample(time, looping)
        if len(self.rotation) > 1:
            changes["orientation"] = self.rotation.sample(time, looping)
        if len(self.scaling) > 1:
            changes["scaling"] = self.scaling.sample(time, looping)
        return replace(reference, **changes)