[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fogos"
version = "0.1.0"
description = "Small Unix-style user tools, a shell command parser and teaching-kernel data formats"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "shell",
    "grep",
    "coreutils",
    "elf",
    "virtio",
    "risc-v",
    "malloc",
    "teaching",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fogos-cat = "fogos.textutils:cat_main"
fogos-echo = "fogos.textutils:echo_main"
fogos-wc = "fogos.textutils:wc_main"
fogos-grep = "fogos.grep:main"
fogos-ln = "fogos.fileutils:ln_main"
fogos-mkdir = "fogos.fileutils:mkdir_main"
fogos-rm = "fogos.fileutils:rm_main"
fogos-ls = "fogos.ls:main"

[tool.hatch.build.targets.wheel]
packages = ["fogos"]

[tool.hatch.build.targets.sdist]
include = ["fogos", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
