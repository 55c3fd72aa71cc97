"""Shared testing fixtures for the mdhtml test suite."""

from .workspace import WorkspaceBuilder  # noqa: F401

__all__ = [
    "WorkspaceBuilder",
]
