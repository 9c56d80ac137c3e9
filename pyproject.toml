[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "drills"
version = "0.1.0"
description = "Small classic programming exercises: number checks, array and matrix helpers, string routines and a calculator."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "arrays", "matrices", "strings", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drills = "drills.cli:main"

[tool.setuptools]
packages = ["drills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
