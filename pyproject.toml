[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jupiter-design"
version = "0.1.0"
description = "Chainable builders that produce consistent Tailwind CSS class strings from design-system tokens"
requires-python = ">=3.10"
keywords = ["design-system", "ui", "tailwind", "css", "components"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jupiter_design"]

[tool.pytest.ini_options]
addopts = "-ra"
