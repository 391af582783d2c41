[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procdeck"
version = "0.1.0"
description = "Building blocks for a terminal process manager: key notation, xterm key and mouse encoding, config values, copy-mode selection, message framing and clipboard."
requires-python = ">=3.10"
keywords = ["process", "manager", "terminal", "xterm", "keys", "clipboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["procdeck"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
