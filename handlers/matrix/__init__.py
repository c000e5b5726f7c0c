"""
Matrix handler package.

Exports MatrixHandler class for range-based matrix operations.
"""
from handlers.matrix.handler import MatrixHandler

__all__ = ["MatrixHandler"]
