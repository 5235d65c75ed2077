[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transportkit"
version = "0.1.0"
description = "Neutron multiplicity analysis, particle track conversion and dose bookkeeping for transport simulations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neutron",
    "multiplicity",
    "coincidence counting",
    "particle transport",
    "dosimetry",
    "vtk",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
transportkit-analyze = "transportkit.multiplicity:main"

[tool.hatch.build.targets.wheel]
packages = ["transportkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
