[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alarmtimer"
version = "1.0.0"
description = "A desktop stopwatch with lap times and a target-time alarm"
requires-python = ">=3.10"
dependencies = []
keywords = ["stopwatch", "alarm", "timer", "lap", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
alarmtimer = "alarmtimer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["alarmtimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
