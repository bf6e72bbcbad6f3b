[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaleview"
version = "0.1.0"
description = "A small desktop viewer that draws a scalable rectangle with an overlay button and a side panel of controls."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["viewer", "canvas", "overlay", "scaling", "wireframe", "tkinter", "pillow"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scaleview = "scaleview.main_frame:main"

[tool.hatch.build.targets.wheel]
packages = ["scaleview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
