# -*- coding: utf-8 -*-
"""
Blockcast Application Core Module
"""

from .config import Config

__all__ = ["Config"]
