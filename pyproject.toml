[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airhockey"
version = "0.1.0"
description = "A two-player gamepad air hockey game with growing pucks, breakable fences and a match timer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "air hockey", "arcade", "two-player", "gamepad", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
airhockey = "airhockey.app:main"

[tool.hatch.build.targets.wheel]
packages = ["airhockey"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
