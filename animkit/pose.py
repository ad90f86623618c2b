"""A skeleton pose: local joint transforms and their parent links."""

from __future__ import annotations

from animkit.transform_track import Transform


class Pose:
    """Local transforms and parent indices for a set of joints."""

    def __init__(self, joint_count: int = 0) -> None:
        self.joints: list[Transform] = []
        self.parents: list[int] = []
        self.resize(joint_count)

    def resize(self, new_size: int) -> None:
        """Grow or shrink the pose; new joints get a default transform and parent 0."""
        if new_size < 0:
            raise ValueError("pose size cannot be negative")
        del self.joints[new_size:]
        del self.parents[new_size:]
        self.joints.extend(Transform() for _ in range(new_size - len(self.joints)))
        self.parents.extend([0] * (new_size - len(self.parents)))

    def __len__(self) -> int:
        return len(self.joints)

    def parent(self, index: int) -> int:
        return self.parents[index]

    def set_parent(self, index: int, parent: int) -> None:
        self.parents[index] = parent

    def local_transform(self, index: int) -> Transform:
        return self.joints[index]

    def set_local_transform(self, index: int, transform: Transform) -> None:
        self.joints[index] = transform

    def copy(self) -> Pose:
        """Independent copy of this pose."""
        duplicate = Pose()
        duplicate.joints = list(self.joints)
        duplicate.parents = list(self.parents)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose):
            return NotImplemented
        return self.parents == other.parents and self.joints == other.joints