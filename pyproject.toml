[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dagtrack"
version = "0.1.1"
description = "Dependency-graph task tracking: ordering, state transitions, focus subgraphs, Mermaid output and MCP client configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "dag", "dependencies", "topological-sort", "scheduling", "mermaid", "mcp"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dagtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
