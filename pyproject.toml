[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fruitbowl"
version = "0.1.0"
description = "Small runnable examples of Python collections, randomness, concurrency and ranking, built around fruit salads"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "examples", "pagerank", "dining-philosophers", "shuffle", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
fruitbowl-heap = "fruitbowl.heap_salad:main"
fruitbowl-tree-set = "fruitbowl.tree_set:main"
fruitbowl-custom = "fruitbowl.custom_salad:main"
fruitbowl-salad = "fruitbowl.cli_salad:main"
fruitbowl-random-set = "fruitbowl.random_set:main"
fruitbowl-shuffled = "fruitbowl.shuffled_salads:main"
fruitbowl-philosophers = "fruitbowl.philosophers:main"
fruitbowl-count = "fruitbowl.counting:main"
fruitbowl-languages = "fruitbowl.languages:main"
fruitbowl-pagerank = "fruitbowl.pagerank:main"

[tool.hatch.build.targets.wheel]
packages = ["fruitbowl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
