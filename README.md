# animkit

Building blocks for a small skeletal-animation player, in pure Python with no
runtime dependencies:

- **Vector maths** (`animkit.vecmath`): immutable `Vec3` and `Quat`, with
  `lerp`, `dot` and `mix`. `Quat.normalized()` returns a unit-length copy.
- **Keyframe tracks** (`animkit.track`): `ScalarTrack`, `VectorTrack` and
  `QuatTrack` hold `Frame`s (time, value, in/out tangents) and sample them with
  constant, linear or cubic Hermite `Interpolation`, either looping or clamped
  to the track's time range. Quaternion samples are normalised and take the
  shorter path between keyframes.
- **Transform tracks** (`animkit.transform_track`): a `TransformTrack` groups
  `position`, `rotation` and `scaling` tracks for one joint and samples a
  `Transform`. Component tracks with fewer than two frames leave the reference
  value untouched.
- **Poses** (`animkit.pose`): a `Pose` stores a local `Transform` and a parent
  index for each joint; it can be resized, copied and compared.
- **Clips** (`animkit.clip`): a `Clip` is a named set of transform tracks whose
  time range spans all of them; `Clip.sample` writes animated transforms into a
  `Pose` and returns the wrapped or clamped time.
- **Rectangle packing** (`animkit.rectpack`): a skyline `RectPacker` for
  building texture atlases from `Rect`s, with bottom-left or best-fit
  `Heuristic`s.
- **Text editing** (`animkit.textedit`, `animkit.textlayout`,
  `animkit.textundo`): a `TextEditState` turns clicks, drags, typed characters
  and `Key` presses into edits of an `EditableText` such as `MonospaceText`,
  with bounded undo and redo kept in an `UndoState`.

## Installation

From a checkout of the project:

```
pip install .
```

## Sampling a track

```python
from animkit.track import Frame, Interpolation, VectorTrack

track = VectorTrack(
    [Frame(time=0.0, value=(0.0, 0.0, 0.0)), Frame(time=1.0, value=(2.0, 0.0, 0.0))],
    Interpolation.LINEAR,
)
print(track.sample(0.5, looping=False))   # Vec3(x=1.0, y=0.0, z=0.0)
```

## Playing a clip into a pose

```python
from animkit.clip import Clip
from animkit.pose import Pose
from animkit.track import Frame
from animkit.transform_track import TransformTrack

joint = TransformTrack(joint_id=0)
joint.position.frames = [
    Frame(time=0.0, value=(0.0, 0.0, 0.0)),
    Frame(time=1.0, value=(0.0, 4.0, 0.0)),
]
clip = Clip("walk", [joint], looping=False)

pose = Pose(1)
time = clip.sample(pose, 0.25)
print(time, pose.local_transform(0).translation)   # 0.25 Vec3(x=0.0, y=1.0, z=0.0)
```

If tracks are added or changed after the clip is built, call
`clip.recalculate_duration()` to update its time range.

## Packing rectangles

```python
from animkit.rectpack import Rect, RectPacker

packer = RectPacker(64, 64, 64)
rects = [Rect(id=1, w=20, h=10), Rect(id=2, w=30, h=30)]
all_packed = packer.pack(rects)
for rect in rects:
    print(rect.id, rect.x, rect.y, rect.was_packed)
```

Rectangles that do not fit are left at `(MAXVAL, MAXVAL)` with `was_packed`
false, and `pack` returns `False`.

## Editing text

Typed characters are passed to `TextEditState.key` as strings; editing keys
as `Key` values, combined with `Key.SHIFT` to extend the selection.

```python
from animkit.textedit import Key, TextEditState
from animkit.textlayout import MonospaceText

text = MonospaceText("hello", char_width=1.0, line_height=1.0)
state = TextEditState(single_line=True)
state.key(text, Key.TEXTEND)
state.key(text, "!")
print(str(text))   # "hello!"
state.key(text, Key.UNDO)
print(str(text))   # "hello"
```

## What the package does not do

animkit only computes: it has no window, no renderer and no command-line
player. It does not load models or animations from files, so tracks and frames
are built in code. `Pose` keeps local transforms only; it does not combine them
along the parent chain into global transforms or skinning matrices.

## Running the tests

```
pip install -e ".[test]"
pytest
```