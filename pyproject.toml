[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oclcrypto"
version = "0.1.0"
description = "Pure-Python Keccak sponge, SHA-256, AES, NIST KAT DRBG and seed expander, 16-bit mask helpers, a bump arena, and small sysfs and UART helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "keccak",
    "sponge",
    "aes",
    "sha256",
    "drbg",
    "seed-expander",
    "sysfs",
    "uart",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["oclcrypto"]

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
