[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corgi-treats"
version = "1.0.0"
description = "A small arcade game: steer a corgi to catch falling treats before they hit the ground."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "corgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
corgi-treats = "corgi_treats.game:main"

[tool.hatch.build.targets.wheel]
packages = ["corgi_treats"]

[tool.pytest.ini_options]
addopts = "-ra"
