"""Elementary filters feeding the texture analysis: gray conversion, multi-level
thresholding, ROI masking, Sobel gradients and Gabor filtering."""
from __future__ import annotations
from typing import Dict
import cv2
import numpy as np

__all__ = [
    "to_gray",
    "threshold_image",
    "build_roi_mask",
    "mask_image",
    "extract_gradient",
    "extract_gradient_normalized",
    "apply_gabor",
    "filter_stages",
]


def to_gray(image: np.ndarray) -> np.ndarray:
    if image.ndim == 3 and image.shape[2] == 1:
        image = image[:, :, 0]
    if image.ndim == 2:
        return image
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    if gray is None or gray.size == 0:
        raise RuntimeError("Failed to convert the image to gray")
    return gray


def threshold_image(image: np.ndarray, thresh_value: int, out: np.ndarray, bin_value: int = 255) -> np.ndarray:
    """Set ``out`` to ``bin_value`` wherever ``image > thresh_value``.

    ``out`` is modified in place and not cleared first, so several calls with
    increasing thresholds stack into a quantized map.
    """
    out[image > thresh_value] = bin_value
    return out


def build_roi_mask(gray: np.ndarray, levels: int = 10) -> np.ndarray:
    mask = np.full(gray.shape, 255, dtype=np.uint8)
    step = 255 // levels
    for i in range(1, levels - 1):
        threshold_image(gray, i * step, mask, i * step)
    return mask


def mask_image(gray: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Keep ``gray`` where ``mask`` is non-zero, 0 elsewhere."""
    roi = np.zeros_like(gray)
    np.copyto(roi, gray, where=mask != 0)
    return roi


def extract_gradient(gray: np.ndarray, axis: int, ksize: int = 3) -> np.ndarray:
    """Absolute Sobel derivative along x (axis=0) or y (axis=1), scaled to uint8."""
    dx, dy = (1, 0) if axis == 0 else (0, 1)
    grad = cv2.Sobel(gray, cv2.CV_16S, dx, dy, ksize=ksize, scale=1, delta=0, borderType=cv2.BORDER_DEFAULT)
    return cv2.convertScaleAbs(grad)


def extract_gradient_normalized(gray: np.ndarray, axis: int) -> np.ndarray:
    """Float Sobel derivative min-max stretched to 0..255."""
    dx, dy = (1, 0) if axis == 0 else (0, 1)
    grad = cv2.Sobel(gray, cv2.CV_32F, dx, dy)
    lo, hi = float(grad.min()), float(grad.max())
    if hi == lo:
        return np.zeros(gray.shape, dtype=np.uint8)
    scale = 255.0 / (hi - lo)
    return cv2.convertScaleAbs(grad, alpha=scale, beta=-lo * scale)


def apply_gabor(gray: np.ndarray, kernel_size: int = 31, sigma: float = 1.0, theta: float = 0.0,
                lambd: float = 1.0, gamma: float = 0.02, psi: float = 0.0) -> np.ndarray:
    kernel = cv2.getGaborKernel((kernel_size, kernel_size), sigma, theta, lambd, gamma, psi)
    filtered = cv2.filter2D(gray, cv2.CV_32F, kernel)
    return np.clip(np.rint(filtered / 255.0), 0, 255).astype(np.uint8)


def filter_stages(gray: np.ndarray) -> Dict[str, np.ndarray]:
    """Gradient and Gabor views of ``gray``, keyed by stage name in pipeline order."""
    grad_x = extract_gradient(gray, axis=0)
    grad_y = extract_gradient(gray, axis=1)
    return {
        'gray': gray,
        'gradX': grad_x,
        'gradY': grad_y,
        'gradient': cv2.add(grad_x, grad_y),  # saturating
        'gabor': apply_gabor(gray),
    }
