[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdrills"
version = "0.1.0"
description = "Small programming drills: primes in a range, string exercises, toy RSA, PIN request field checks, a threaded ticker and a socket chat."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "primes",
    "sieve",
    "rsa",
    "modular-arithmetic",
    "sockets",
    "chat",
    "threading",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cdrills-primes = "cdrills.prime_range:main"
cdrills-vowels = "cdrills.vowels:main"
cdrills-words = "cdrills.words:main"
cdrills-rsa = "cdrills.rsa:main"
cdrills-ticker = "cdrills.ticker:main"
cdrills-callback = "cdrills.callback:main"
cdrills-chat-host = "cdrills.chat_basic:host_main"
cdrills-chat-node = "cdrills.chat_basic:node_main"
cdrills-chat-host-threaded = "cdrills.chat_threaded:host_main"
cdrills-chat-node-threaded = "cdrills.chat_threaded:node_main"

[tool.hatch.build.targets.wheel]
packages = ["cdrills"]

[tool.pytest.ini_options]
addopts = "-ra"
