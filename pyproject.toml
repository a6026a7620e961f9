[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extmanager"
version = "0.6.3"
description = "Model, parse, manage and check GNOME Shell extensions for compatibility with a target GNOME release"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnome", "gnome-shell", "extensions", "upgrade", "compatibility"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Gnome",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["extmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
