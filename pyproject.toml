[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robopoker"
version = "0.1.1"
description = "Playing cards, hand evaluation and suit-isomorphic observations for No-Limit Texas Hold'em."
requires-python = ">=3.10"
keywords = ["poker", "cards", "holdem", "hand-evaluator", "isomorphism"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robopoker"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
