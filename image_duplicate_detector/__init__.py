"""
Image Duplicate Detector - find near-duplicate images by pixel comparison
and review them interactively.
"""

from .grouper import add_duplicate, clamp_threshold, find_duplicates
from .scorer import compare_images
from .session import ReviewSession

__version__ = "1.0.0"

__all__ = [
    'add_duplicate',
    'clamp_threshold',
    'compare_images',
    'find_duplicates',
    'ReviewSession',
]
