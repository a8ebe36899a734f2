[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ettu"
version = "0.1.0"
description = "Backend service for a project management and collaboration platform"
requires-python = ">=3.10"
keywords = ["web", "api", "backend", "project-management", "collaboration", "starlette"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database",
    "Typing :: Typed",
]
dependencies = [
    "sqlalchemy>=2.0",
    "starlette>=0.27",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "httpx>=0.24",
]

[tool.hatch.build.targets.wheel]
packages = ["ettu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
