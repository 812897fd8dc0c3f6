[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mailforge"
version = "0.4.1"
description = "Building blocks for SMTP e-mail: client configuration, MIME and header vocabulary, attachment descriptions, Base64 line wrapping and protocol loggers."
requires-python = ">=3.11"
dependencies = []
keywords = ["email", "smtp", "mime", "dsn", "base64", "mail", "logging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mailforge"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
