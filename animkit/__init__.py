"""Keyframe animation tracks, poses and clips, a skyline rectangle packer and a text-editing state machine with undo."""

__version__ = "0.1.0"

__all__ = [
    "vecmath",
    "track",
    "transform_track",
    "pose",
    "clip",
    "rectpack",
    "textlayout",
    "textundo",
    "textedit",
]