[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citygraph"
version = "0.1.0"
description = "Styled geometric forms, path handling, command-line option parsing and SVG export for city map drawings"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "graphics", "shapes", "city", "map", "export", "animation"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["citygraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
