"""Algorithm exercises, linked lists, transaction trees, concurrency helpers and two small JSON web services."""

__version__ = "0.1.0"