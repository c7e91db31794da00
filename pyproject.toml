[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bazaarcart"
version = "0.1.0"
description = "Interactive grocery shopping cart with multi-currency bank account checkout"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping-cart", "currency", "bank-account", "grocery", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bazaarcart = "bazaarcart.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bazaarcart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
