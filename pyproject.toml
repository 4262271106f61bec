[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remapkit"
version = "0.10.12"
description = "Key remapping configuration, input event model and action dispatching for Linux input devices"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = [
    "keyboard",
    "remap",
    "keymap",
    "modmap",
    "evdev",
    "input",
    "linux",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["remapkit"]

[tool.hatch.build.targets.sdist]
include = [
    "remapkit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
