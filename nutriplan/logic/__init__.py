"""Core business logic layer.

Subpackages:
- shopping: consolidating a week plan into a shopping list
- reporting: dashboard nutrition figures
"""
__all__ = ["shopping", "reporting"]
