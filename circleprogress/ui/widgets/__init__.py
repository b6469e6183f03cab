"""
Widgets PyQt6
"""

from .progress import CircleProgress
