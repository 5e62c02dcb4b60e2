[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortviz"
version = "0.1.0"
description = "An interactive, step-by-step visualizer for classic sorting algorithms"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "sorting",
    "algorithms",
    "visualization",
    "education",
    "pygame",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[project.scripts]
sortviz = "sortviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortviz"]

[tool.pytest.ini_options]
addopts = "-ra"
