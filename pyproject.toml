[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arrowhead"
version = "0.1.0"
description = "Settings, message validation and an INI reader for systems in an Arrowhead-style local cloud"
requires-python = ">=3.10"
dependencies = []
keywords = ["arrowhead", "service-registry", "iot", "ini", "configuration", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arrowhead"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
