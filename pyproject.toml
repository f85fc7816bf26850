[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easytier-monitor"
version = "0.1.0"
description = "Web server and JSON API that reports peers, node details and connectors from the EasyTier command-line tool"
requires-python = ">=3.10"
keywords = ["easytier", "vpn", "mesh", "monitoring", "dashboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = [
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
easytier-monitor = "easytier_monitor.main:main"

[tool.hatch.build.targets.wheel]
packages = ["easytier_monitor"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
