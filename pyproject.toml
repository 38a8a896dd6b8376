[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bbchess"
version = "0.1.0"
description = "A bitboard chess board with move generation, check detection and a pygame window"
requires-python = ">=3.10"
keywords = ["chess", "bitboard", "move-generation", "perft", "pygame", "fen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bbchess = "bbchess.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["bbchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
