[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dgpkit"
version = "0.1.0"
description = "Geometry-processing building blocks: a VRML-style tokenizer, bounding boxes, axis-angle rotations and loader/saver registries"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vrml", "tokenizer", "rotation", "bounding-box", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dgpkit"]

[tool.pytest.ini_options]
addopts = "-ra"
