[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitcla"
version = "0.1.0"
description = "Server-side HTML components producing Tailwind CSS and Alpine.js markup"
requires-python = ">=3.11"
dependencies = []
keywords = ["html", "components", "tailwind", "alpinejs", "ui", "templating"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kitcla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
