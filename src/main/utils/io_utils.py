"""Image I/O utilities: decode, encode and debug renders."""
from __future__ import annotations
import os
import cv2
import numpy as np

__all__ = ["ImageIOError", "ensure_dir", "file_exists", "read_image", "save_image", "render_histogram"]


class ImageIOError(RuntimeError):
    pass

# ---- Directory utilities ----

def ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


def file_exists(path: str) -> bool:
    return os.path.isfile(path)

# ---- Image utilities ----

def read_image(path: str) -> np.ndarray:
    """Decode an image file as 3-channel BGR."""
    if not file_exists(path):
        raise FileNotFoundError(f"Image file doesn't exist: {path}")
    image = cv2.imread(path, cv2.IMREAD_COLOR)
    if image is None or image.size == 0:
        raise ImageIOError(f"Failed to read the input image: {path}")
    return image


def save_image(path: str, image: np.ndarray) -> None:
    parent = os.path.dirname(path)
    if parent:
        ensure_dir(parent)
    if not cv2.imwrite(path, image):
        raise ImageIOError(f"Failed to write image: {path}")


def render_histogram(gray: np.ndarray, width: int = 512, height: int = 400) -> np.ndarray:
    """Draw the 256-bin intensity histogram of ``gray`` as a curve on a BGR canvas."""
    hist_size = 256
    hist = cv2.calcHist([gray], [0], None, [hist_size], [0, 256])
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    hist = cv2.normalize(hist, None, 0, height, cv2.NORM_MINMAX).reshape(-1)
    bin_w = int(round(width / hist_size))
    for i in range(1, hist_size):
        p0 = (bin_w * (i - 1), height - int(round(float(hist[i - 1]))))
        p1 = (bin_w * i, height - int(round(float(hist[i]))))
        cv2.line(canvas, p0, p1, (255, 0, 0), 2, cv2.LINE_8, 0)
    return canvas
