[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Operating-systems lab exercises: page replacement, CPU and disk scheduling, deadlock avoidance, synchronisation and process demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "page replacement",
    "disk scheduling",
    "banker's algorithm",
    "synchronization",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab-paging = "oslab.paging:main"
oslab-cpu = "oslab.cpu:main"
oslab-disk = "oslab.disk:main"
oslab-banker = "oslab.banker:main"
oslab-sync = "oslab.sync:main"
oslab-textstats = "oslab.textstats:main"
oslab-addressbook = "oslab.addressbook:main"
oslab-parent = "oslab.processes:parent_main"
oslab-child = "oslab.processes:child_main"
oslab-fork = "oslab.processes:fork_main"
oslab-shm-server = "oslab.shm:server_main"
oslab-shm-client = "oslab.shm:client_main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.hatch.build.targets.sdist]
include = ["oslab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
