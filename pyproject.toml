[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bipedctl"
version = "0.1.0"
description = "Orientation math, trajectory curves, filters, robot geometry, messages and state-estimation containers for small biped robot controllers"
requires-python = ">=3.10"
keywords = [
    "robotics",
    "biped",
    "quaternion",
    "rotation",
    "b-spline",
    "bezier",
    "filter",
    "state-estimation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bipedctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
