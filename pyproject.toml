[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animkit"
version = "0.1.0"
description = "Keyframe animation tracks, poses and clips, a skyline rectangle packer and a text-editing state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "skeleton", "keyframe", "interpolation", "rectangle-packing", "text-editing", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["animkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
