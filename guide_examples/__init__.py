"""
Top-level package for the guide examples.

``app`` holds the middleware and dependency injection example served over
HTTP; ``snippets`` holds the standalone language and standard library
examples, each runnable on its own.
"""

__all__ = []
