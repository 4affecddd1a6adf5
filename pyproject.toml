[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainkit"
version = "0.1.0"
description = "Building blocks for fractal terrain generation: colours, matrices, mesh edges, Perlin noise and generation parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["terrain", "fractal", "perlin", "noise", "mesh", "matrix", "procedural"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terrainkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
