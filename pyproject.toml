[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "epaperkit"
version = "0.1.0"
description = "Image preparation for 6-colour 800x480 e-paper panels: palette mapping, dithering, tone adjustment and 4-bit packing"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["e-paper", "epd", "dithering", "atkinson", "floyd-steinberg", "palette", "image"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
epaperkit = "epaperkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["epaperkit"]

[tool.pytest.ini_options]
addopts = "-ra"
