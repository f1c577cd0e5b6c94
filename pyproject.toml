[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datespan"
version = "0.1.0"
description = "Calendar date differences in years, months and days, plus a small text-mode Mandelbrot renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["date", "difference", "age", "calendar", "mandelbrot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datespan-mandelbrot = "datespan.mandelbrot:main"

[tool.hatch.build.targets.wheel]
packages = ["datespan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
