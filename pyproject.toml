[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordinflect"
version = "0.1.0"
description = "English inflection helpers: plurals, ordinals, present participles and numbers in words"
requires-python = ">=3.10"
dependencies = []
keywords = ["inflection", "plural", "ordinal", "participle", "english", "numbers", "words"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordinflect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
