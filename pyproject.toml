[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Worked object-oriented design examples: SOLID principles, classic design patterns and small domain models such as a chess board, food ordering and quick commerce."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "solid",
    "low-level-design",
    "object-oriented",
    "education",
]
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
patternbook-files = "patternbook.file_visitors:main"
patternbook-food = "patternbook.food_app:main"
patternbook-quickcommerce = "patternbook.quickcommerce:main"
patternbook-quickcommerce-simple = "patternbook.quickcommerce_simple:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
