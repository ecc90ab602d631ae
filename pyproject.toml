[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gooberbot"
version = "1.0.0"
description = "Command logic for a playful chat bot: strikes moderation, server configuration, anonymous messages, timestamps, games and usage analytics"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["chat", "bot", "moderation", "commands", "strikes", "rock-paper-scissors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["gooberbot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
