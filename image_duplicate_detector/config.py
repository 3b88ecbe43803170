"""
Default settings and limits for the Image Duplicate Detector.
"""

BANNER = "=== Image Duplicate Detector ==="

# Fraction of identical bytes needed to flag two images as duplicates
DEFAULT_THRESHOLD = 0.9
MIN_THRESHOLD = 0.1
MAX_THRESHOLD = 1.0

# Largest side of a compare window, in pixels
DEFAULT_LARGEST_DIMENSION = 1000
MIN_LARGEST_DIMENSION = 250

SUPPORTED_FORMATS = {
    '.bmp', '.dib', '.jpeg', '.jpg', '.jpe', '.jp2', '.png', '.webp',
    '.pbm', '.pgm', '.ppm', '.pxm', '.pnm', '.sr', '.ras',
    '.tiff', '.tif', '.exr', '.hdr', '.pic',
}
