# terrainkit

Building blocks for generating fractal terrain and planets.

## Modules

- `terrainkit.rng` – `Random01`, a Mersenne Twister seeded with a 32-bit word.
  Calling it returns the next number in [0, 1); the same seed always gives the
  same sequence.
- `terrainkit.rgb` – frozen `ByteRGBA` (components 0..255, addition and
  subtraction wrap modulo 256) and `FloatRGBA` (addition, subtraction,
  negation, componentwise or scalar multiplication, division by a number).
  `byte_from_float` clamps to [0, 1] and scales to 0..255, truncating;
  `float_from_byte` divides by 255. Formatting: `str()` gives space-separated
  components, `ByteRGBA.format_comma()` comma-separated ones, and
  `FloatRGBA.format_pov_rgb()` / `format_pov_rgbf()` give POV-Ray vectors
  (the latter with one minus alpha as the filter value).
- `terrainkit.progress` – the abstract `Progress` callback interface
  (`progress_start`, `progress_stall`, `progress_step`, `progress_complete`) and
  `ProgressScope`, which reports start when created, each `step()`, and
  "<info> completed" when its `with` block exits. The target may be `None`.
- `terrainkit.matrix33` – `Matrix33` held as column vectors `x`, `y`, `z`, with
  `element`, `row`, `cofactor`, `determinant` and `inverted` (raises
  `ZeroDivisionError` when singular); multiplication by a matrix, a scalar or a
  3-vector. Constructors `identity`, `rotate_about_x`, `rotate_about_y`,
  `rotate_about_z` and `rotate_about_axis` (the axis must be normalised and not
  parallel to the x axis, otherwise `ValueError`).
- `terrainkit.matrix34` – `Matrix34` affine transforms (`rotate` plus
  `translate`) composed or applied to vectors with `*`; constructors
  `identity`, `translation`, `rotate_about_axis_through` and
  `rotate_by_axis_vector_through` (the angle is the axis length; a zero axis
  gives the identity).
- `terrainkit.triangle` – `Triangle`, three vertex indices, with `vertex(i)`.
- `terrainkit.triangle_edge` – `TriangleEdge`, an undirected edge stored with
  the lesser index first; ordered, equal and hashable by that pair, so it can
  key a dictionary.
- `terrainkit.scan` – `ScanEdge` and the abstract `ScanConverter` and
  `ScanConvertBackend` interfaces for scan-converting triangles onto a raster.
- `terrainkit.noise` – `Noise(seed)`, Perlin gradient noise, and
  `MultiscaleNoise(seed, terms, decay)`, which sums terms at doubling
  frequencies with amplitudes normalised to sum to one.
- `terrainkit.parameters_object`, `parameters_noise`, `parameters_cloud`,
  `parameters_render`, `parameters_save`, `parameters_terrain` – dataclasses of
  generation settings with defaults (`ObjectType`, `ParametersObject`,
  `ParametersNoise`, `ParametersCloud`, `ParametersRender`, `ParametersSave`,
  `ParametersTerrain`). Seeds default to the current time.

## Installation

```
pip install .
```

## Example

```python
from terrainkit.noise import MultiscaleNoise
from terrainkit.rgb import FloatRGBA, byte_from_float
from terrainkit.parameters_terrain import ParametersTerrain

params = ParametersTerrain()
noise = MultiscaleNoise(seed=42, terms=4, decay=0.5)
print(noise((0.1, 0.2, 0.3)))                  # a reproducible value

ocean = FloatRGBA(0.0, 0.0, 1.0, 1.0)
print(ocean.format_pov_rgb())                  # <0,0,1>
print(byte_from_float(ocean).format_comma())   # 0,0,255,255
print(params.power_law)                        # 1.5
```

Rendering options (`-d/--display-list`, `-w/--wireframe`,
`-y/--invert-mouse-y`) can be added to an `argparse` parser with
`terrainkit.parameters_render.add_render_options`, and the parsed result turned
into a `ParametersRender` with `parameters_render_from_args`.

## What it does not do

terrainkit is a library of parts. It has no command-line program, builds no
triangle meshes or terrain, renders nothing, and writes no POV-Ray, Blender or
texture files; the parameter classes only hold settings for such steps.

## Tests

```
pip install ".[test]"
pytest
```