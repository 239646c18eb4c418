[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "A collection of small interactive console programs: quizzes, games, patterns, tables and calculators."
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "quiz", "games", "patterns", "multiplication-table", "learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
pocketapps-patterns = "pocketapps.patterns:main"
pocketapps-quiz = "pocketapps.quiz:main"
pocketapps-rectangle = "pocketapps.rectangle:main"
pocketapps-rps = "pocketapps.rock_paper_scissors:main"
pocketapps-reverse = "pocketapps.text:reverse_main"
pocketapps-palindrome = "pocketapps.text:palindrome_main"
pocketapps-digits = "pocketapps.digits:main"
pocketapps-table = "pocketapps.tables:table_main"
pocketapps-grid = "pocketapps.tables:grid_main"
pocketapps-scorecard = "pocketapps.scorecard:main"
pocketapps-vectors = "pocketapps.vectors:main"
pocketapps-voting = "pocketapps.voting:main"
pocketapps-weight = "pocketapps.weight:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
