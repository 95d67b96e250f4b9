[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "convexhull"
version = "0.1.0"
description = "Convex hulls of planar point sets with the Graham scan, using a slow or a fast polar-angle sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["convex hull", "graham scan", "computational geometry", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
convexhull = "convexhull.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["convexhull"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
