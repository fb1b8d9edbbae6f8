[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poolkit"
version = "0.1.0"
description = "Thread pools, object and connection pools, a framed packet splitter and small networking utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threadpool",
    "thread pool",
    "object pool",
    "connection pool",
    "packet framing",
    "varint",
    "websocket",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
poolkit-pool-demo = "poolkit.pool_demo:main"
poolkit-recv = "poolkit.recv_client:main"

[tool.hatch.build.targets.wheel]
packages = ["poolkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
