[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purple"
version = "0.1.0"
description = "Asynchronous MQTT 3.1.1 packet framing, CONNECT encoding and client handshake over asyncio streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["mqtt", "mqtt-3.1.1", "asyncio", "iot", "messaging", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Internet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
purple-handshake = "purple.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["purple"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["purple"]
warn_unused_ignores = true
