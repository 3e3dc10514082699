[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eiwidgets"
version = "0.1.0"
description = "A small retained-mode widget toolkit: frames, buttons and toplevel windows with a placer and colour picking."
requires-python = ">=3.10"
dependencies = []
keywords = ["widgets", "gui", "toolkit", "placer", "toplevel", "button"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eiwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
