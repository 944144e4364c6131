[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinclock"
version = "0.1.0"
description = "Cryptocurrency price ticker with an NTP-synchronised clock for the terminal"
requires-python = ">=3.10"
keywords = ["bitcoin", "cryptocurrency", "price", "ticker", "ntp", "clock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: System :: Networking :: Time Synchronization",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coinclock = "coinclock.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coinclock"]

[tool.pytest.ini_options]
addopts = "-ra"
