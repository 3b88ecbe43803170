"""
Side by side comparison windows for the images of a group.
"""

from pathlib import Path
from typing import List, Tuple

from PIL import Image

# GUI imports (only needed for comparing images)
GUI_AVAILABLE = True
try:
    import tkinter as tk
    from PIL import ImageTk
except ImportError:
    GUI_AVAILABLE = False


class DisplayError(RuntimeError):
    """Raised when the comparison windows cannot be shown."""


def compute_display_size(width: int, height: int, largest_dimension: int) -> Tuple[int, int]:
    """
    Scale an image size so its larger side equals largest_dimension.

    The smaller side keeps the aspect ratio and is rounded down.
    """
    ratio = width / height
    if height > width:
        return int(largest_dimension * ratio), largest_dimension
    if width > height:
        return largest_dimension, int(largest_dimension / ratio)
    return largest_dimension, largest_dimension


class ImageViewer:
    """Open one window per image, all at the size of the first one."""

    def show(self, paths: List[Path], largest_dimension: int):
        if not GUI_AVAILABLE:
            raise DisplayError("Display not available. Tkinter is not installed.")

        try:
            with Image.open(paths[0]) as first:
                width, height = first.size
        except (IOError, OSError) as e:
            raise DisplayError(f"Could not open image: {e}") from e

        print(f"Image size: {width}x{height}")
        width, height = compute_display_size(width, height, largest_dimension)
        print(f"Resized size: {width}x{height}")

        root = None
        try:
            root = tk.Tk()
            root.withdraw()

            # Keep references so Tk does not drop the images
            photos = []
            for i, path in enumerate(paths):
                window = tk.Toplevel(root)
                window.title(f"Compare {i} [Press any key to close]")
                window.geometry(f"{width}x{height}")
                with Image.open(path) as img:
                    resized = img.resize((width, height), Image.Resampling.LANCZOS)
                photo = ImageTk.PhotoImage(resized, master=root)
                photos.append(photo)
                tk.Label(window, image=photo).pack()
                window.bind('<Key>', lambda event: root.quit())
                window.protocol("WM_DELETE_WINDOW", root.quit)

            root.mainloop()
        except (tk.TclError, IOError, OSError, ValueError) as e:
            raise DisplayError(str(e)) from e
        finally:
            if root is not None:
                try:
                    root.destroy()
                except tk.TclError:
                    pass
