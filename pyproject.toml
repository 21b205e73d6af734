[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "optionpricer"
version = "0.1.0"
description = "Option pricing with Black-Scholes formulas, Cox-Ross-Rubinstein binomial trees and Monte Carlo simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "options",
    "black-scholes",
    "binomial tree",
    "monte carlo",
    "derivatives",
    "quantitative finance",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["optionpricer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
