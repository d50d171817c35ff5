"""
Core helpers: constants, models and logging utilities
"""
