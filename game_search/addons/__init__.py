# -*- coding: utf-8 -*-
"""
Configuration and shared types of the move search.
"""
from .config import Algorithm, SearchConfig
from .types import NO_DIRECTION, SearchResult, Turn

__all__ = ["Algorithm", "SearchConfig", "NO_DIRECTION", "SearchResult", "Turn"]
