[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dipractice"
version = "0.1.0"
description = "A small dependency-injection container with worked example services"
requires-python = ">=3.10"
dependencies = []
keywords = ["dependency injection", "ioc", "container", "components", "providers"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dipractice-messaging = "dipractice.messaging:main"
dipractice-notifications = "dipractice.notifications:main"
dipractice-mailer = "dipractice.mailer:main"
dipractice-orders = "dipractice.orders:main"
dipractice-users = "dipractice.users:main"
dipractice-timelog = "dipractice.timelog:main"
dipractice-appconfig = "dipractice.appconfig:main"
dipractice-webapp = "dipractice.webapp:main"

[tool.hatch.build.targets.wheel]
packages = ["dipractice"]

[tool.hatch.build.targets.sdist]
include = ["dipractice", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
