[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ngexplorer"
version = "2.0.0a0"
description = "A small desktop file explorer with file search by name, extension and content"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "file explorer", "search", "desktop", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ngexplorer = "ngexplorer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ngexplorer"]

[tool.pytest.ini_options]
addopts = "-ra"
