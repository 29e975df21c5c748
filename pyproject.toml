[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perrera"
version = "0.1.0"
description = "Dog shelter records: dates, dogs, people, adoptions and the collections that hold them, with command interpreters to drive them."
requires-python = ">=3.10"
dependencies = []
keywords = ["shelter", "dogs", "adoptions", "binary-search-tree", "sorted-list", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perrera-refugio = "perrera.refugio_cli:main"
perrera-colecciones = "perrera.colecciones_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["perrera"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
