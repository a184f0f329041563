[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lwebapi"
version = "0.1.0"
description = "A small HTTP API server with JSONC configuration and coloured request logging"
requires-python = ">=3.10"
keywords = ["http", "api", "server", "starlette", "jsonc", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
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
]
dependencies = [
    "starlette",
    "uvicorn",
    "sqlalchemy",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "httpx",
]

[project.scripts]
lwebapi = "lwebapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lwebapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
