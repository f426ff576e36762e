# enginekit

CPU-side building blocks for a small 3D game engine, in plain Python with no
third-party dependencies.

## Modules

- `enginekit.vector`: frozen `Float2`, `Float3` and `Float4` dataclasses.
  `Float3` supports `+`, `-`, multiplication by a scalar on either side,
  `length()` and `normalized()`. Also `lerp`, `catmull_rom_interpolation` and
  `catmull_rom_position` (which needs at least four control points and raises
  `ValueError` otherwise).
- `enginekit.quaternion`: a frozen `Quaternion` (identity by default) with
  `+`, `-`, unary minus, scalar multiplication, `dot()` and `norm()`;
  `from_axis_angle(axis, angle)` and `slerp(a, b, t)`.
- `enginekit.matrix`: an immutable 4x4 `Matrix` (identity when built with no
  rows) in the row-vector convention. `m[i]` is a row, `m[i, j]` an element.
  Supports `+`, `-`, `*`, `inverse()` (also unary `-`) and `transpose()`.
  Builders: `identity`, `perspective_fov_lh`, `orthographic`, `scaling`,
  `translation`, `pitch`/`yaw`/`roll` (aliases `rotation_x`/`rotation_y`/
  `rotation_z`), `rotation_roll_pitch_yaw`, `quaternion_to_rotation` and
  `make_affine`.
- `enginekit.transform`: `Transform` (Euler rotation) and
  `QuaternionTransform`, each with `make_affine_matrix()`; `AABB`,
  `is_collision(aabb, point)` and `transform_point(vector, matrix)`, which
  raises `ValueError` when the resulting w is zero.
- `enginekit.animation`: `Keyframe`, `NodeAnimation`, `Animation` and
  `calculate_value(keyframes, time)`, which clamps to the first and last keys
  and interpolates vectors linearly and quaternions spherically.
- `enginekit.skeleton`: `Node`, `Joint`, `Skeleton` (`update()`,
  `apply_animation()`), `create_joint`, `create_skeleton`; skinning with
  `VertexWeight`, `JointWeightData`, `VertexInfluence`, `PaletteEntry`,
  `SkinCluster.update(skeleton)` and `create_skin_cluster(skeleton,
  skin_cluster_data, vertex_count)`, which gives each vertex up to four
  joint influences.
- `enginekit.particles`: `ParticleManager` (optionally seeded) with named
  particle groups, `emit`, and `update(view_matrix, projection_matrix)`, which
  advances one frame of 1/60 s, removes expired particles, applies the
  acceleration field and rebuilds each group's `InstanceData` list (at most
  100 per group). `ParticleEmitter` emits 3 particles every 0.5 s.
- `enginekit.scene`: `BaseScene`, `AbstractSceneFactory` and `SceneManager`,
  which switches to a requested scene on its next `update()` and can be used
  as a context manager that finalizes the running scene on exit.
- `enginekit.sound`: `parse_wave(data)` and `load_wave(path)` decode
  RIFF/WAVE data into `SoundData` (a `WaveFormat` plus the sample bytes),
  skipping chunks other than `fmt ` and `data`; malformed input raises
  `WaveFormatError`.
- `enginekit.descriptors`: `DescriptorAllocator`, handing out indices from 1
  up to its capacity (128 by default) and raising `DescriptorHeapFullError`
  when full.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A point on a spline:

```python
from enginekit.vector import Float3, catmull_rom_position

points = [Float3(0, 0, 0), Float3(1, 2, 0), Float3(3, 2, 0), Float3(4, 0, 0)]
position = catmull_rom_position(points, 0.5)
```

An affine matrix from scale, rotation and translation:

```python
from enginekit.vector import Float3
from enginekit.quaternion import from_axis_angle
from enginekit.matrix import make_affine

rotation = from_axis_angle(Float3(0, 1, 0), 1.57)
world = make_affine(Float3(1, 1, 1), rotation, Float3(0, 0, 5))
```

Sampling a keyframe track:

```python
from enginekit.animation import Keyframe, calculate_value
from enginekit.vector import Float3

track = [Keyframe(Float3(0, 0, 0), 0.0), Keyframe(Float3(10, 0, 0), 1.0)]
calculate_value(track, 0.25)  # Float3(x=2.5, y=0.0, z=0.0)
```

Reading a WAVE file:

```python
from enginekit.sound import load_wave

sound = load_wave("jump.wav")
print(sound.wave_format.samples_per_sec, sound.buffer_size)
```

Matrices follow the row-vector convention: points are multiplied on the left,
so `scale * rotation * translation` applies the scale first.

## What it does not do

enginekit does no rendering and talks to no GPU: particle updates and skin
clusters produce matrices and instance data as Python objects, but nothing
draws them. It does not open windows, load model or texture files, or play
sound; `enginekit.sound` only decodes WAVE data into bytes, and
`enginekit.descriptors` only counts slot indices.