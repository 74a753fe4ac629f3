[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Classic algorithm exercises, linked lists, a transaction tree builder and two small JSON web services"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "linked-list",
    "exercises",
    "asgi",
    "rest-api",
    "starlette",
    "sqlite",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "starlette>=0.27",
    "uvicorn>=0.23",
    "httpx>=0.25",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
    "httpx>=0.25",
]

[project.scripts]
practicekit-tree = "practicekit.transactions:main"
practicekit-list = "practicekit.linked_list:main"
practicekit-tasks = "practicekit.concurrency:main"
practicekit-fetch = "practicekit.fetch:main"
practicekit-users = "practicekit.users_api:main"
practicekit-qa = "practicekit.qa_app:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.hatch.build.targets.sdist]
include = ["practicekit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
