"""Parsing of user input into commands."""

from .quickcache_parser import QuickCacheParser

__all__ = ["QuickCacheParser"]
