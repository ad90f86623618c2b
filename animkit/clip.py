"""Animation clips: named sets of joint tracks sharing a time range."""

from __future__ import annotations

import math
from typing import Iterable

from animkit.pose import Pose
from animkit.transform_track import TransformTrack


class Clip:
    """A named group of transform tracks played over a common time range."""

    def __init__(
        self,
        name: str = "none",
        tracks: Iterable[TransformTrack] | None = None,
        looping: bool = True,
    ) -> None:
        self.name = name
        self.looping = looping
        self.tracks: list[TransformTrack] = list(tracks or [])
        self.start_time = 0.0
        self.end_time = 0.0
        self.recalculate_duration()

    def __len__(self) -> int:
        return len(self.tracks)

    def track_id_at(self, index: int) -> int:
        return self.tracks[index].joint_id

    def set_track_id_at(self, index: int, joint_id: int) -> None:
        self.tracks[index].joint_id = joint_id

    def duration(self) -> float:
        return self.end_time - self.start_time

    def sample(self, pose: Pose, time: float) -> float:
        """Write the clip's joint transforms at ``time`` into ``pose``; return the adjusted time."""
        if self.duration() == 0.0:
            return 0.0
        time = self.adjust_time_to_fit_range(time)
        for track in self.tracks:
            local = pose.local_transform(track.joint_id)
            pose.set_local_transform(track.joint_id, track.sample(local, time, self.looping))
        return time

    def adjust_time_to_fit_range(self, time: float) -> float:
        """Wrap ``time`` when looping, otherwise clamp it to the clip's range."""
        if self.looping:
            duration = self.duration()
            if duration <= 0.0:
                return 0.0
            time = math.fmod(time - self.start_time, duration)
            if time <= 0.0:
                time += duration
            return time + self.start_time
        return min(max(time, self.start_time), self.end_time)

    def recalculate_duration(self) -> None:
        """Set the clip's range to span all of its tracks."""
        if not self.tracks:
            self.start_time = 0.0
            self.end_time = 0.0
            return
        self.start_time = min(track.start_time() for track in self.tracks)
        self.end_time = max(track.end_time() for track in self.tracks)