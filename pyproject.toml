[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agtx"
version = "0.1.0"
description = "Kanban board selection state, shell popup helpers and tmux session control for coding agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["tmux", "agents", "kanban", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agtx"]

[tool.pytest.ini_options]
addopts = "-ra"
