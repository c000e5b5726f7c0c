"""
Core handler infrastructure.
"""
from core.base_handler import BaseHandler

__all__ = ["BaseHandler"]
