[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minisoccer"
version = "1.0.0"
description = "Building blocks for a mini soccer field booking backend: settings, a user model, bcrypt passwords, JWT and role guards for Flask views, seeding and a Swagger description."
requires-python = ">=3.10"
keywords = ["soccer", "booking", "flask", "jwt", "sqlalchemy", "bcrypt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "pyjwt",
    "bcrypt",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["minisoccer"]

[tool.pytest.ini_options]
addopts = "-ra"
