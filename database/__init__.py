"""
Database Package - MongoDB connection handling
"""

from .mongodb import MongoDB, db

__all__ = ["MongoDB", "db"]
