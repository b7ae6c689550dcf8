[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shortrates"
version = "0.1.0"
description = "Short-rate interest rate models with Monte Carlo zero-coupon bond pricing"
requires-python = ">=3.10"
dependencies = []
keywords = ["interest rates", "short rate", "vasicek", "cir", "hull-white", "monte carlo", "bond pricing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shortrates = "shortrates.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shortrates"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
