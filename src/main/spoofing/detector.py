"""Spoofing detector built on ROI intensity histograms and LBP texture.

Pipeline per image:
  1. BGR -> gray
  2. multi-level threshold mask, ROI = gray where mask is set
  3. 26-bin histogram of the ROI, normalized to percent of all pixels
  4. attack when the configured bin exceeds its percentage limit
Optionally the LBP engine runs on the ROI (or on its x-gradient) and the
result is attached for inspection.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import logging
import os
import numpy as np

from .config.validation import validate_detector_config
from .preprocessing import to_gray, build_roi_mask, mask_image, extract_gradient_normalized
from ..texture import LBPEngine, LBPResult, compute_histogram, normalize_histogram
from ..utils.config import require
from ..utils.config_loader import load_layered_config
from ..utils.io_utils import read_image, save_image, render_histogram

__all__ = ["AnalysisResult", "SpoofingDetector", "load_detector_config", "detect_attack", "DEFAULT_CONFIG_PATH"]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config', 'detector.yml')


@dataclass
class AnalysisResult:
    attack: bool
    histogram: np.ndarray
    percentages: np.ndarray
    pixel_count: int
    lbp: Optional[LBPResult] = None


def load_detector_config(extra_paths: Optional[List[str]] = None) -> Dict[str, Any]:
    cfg = load_layered_config(DEFAULT_CONFIG_PATH, extra_paths)
    validate_detector_config(cfg)
    return cfg


class SpoofingDetector:
    def __init__(self, cfg: Optional[Dict[str, Any]] = None):
        self.cfg = cfg if cfg is not None else load_detector_config()
        validate_detector_config(self.cfg)
        self.cell_size = int(self.cfg['cell_size'])
        self.threshold_levels = int(self.cfg['threshold_levels'])
        self.attack_bin = int(self.cfg['attack_bin'])
        self.attack_percent = float(self.cfg['attack_percent'])
        self.engine = LBPEngine(
            workers=int(self.cfg.get('lbp_workers', 1)),
            progress_bar=bool(self.cfg.get('progress_bar', False)),
        )

    def roi(self, gray: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(mask, roi_image)`` for a gray image."""
        mask = build_roi_mask(gray, self.threshold_levels)
        return mask, mask_image(gray, mask)

    def roi_histogram(self, gray: np.ndarray) -> np.ndarray:
        _, roi = self.roi(gray)
        return compute_histogram(roi)

    def is_attack(self, histogram: np.ndarray, pixel_count: int) -> bool:
        percentages = normalize_histogram(histogram, pixel_count)
        return bool(percentages[self.attack_bin] > self.attack_percent)

    def analyze(self, image: np.ndarray, label: Optional[str] = None) -> AnalysisResult:
        gray = to_gray(image)
        mask, roi = self.roi(gray)
        histogram = compute_histogram(roi)
        pixel_count = int(roi.shape[0] * roi.shape[1])
        percentages = normalize_histogram(histogram, pixel_count)
        attack = self.is_attack(histogram, pixel_count)
        logger.info("%s: bin %d holds %.2f%% of pixels (limit %.2f%%) -> attack=%s",
                    label or 'image', self.attack_bin, percentages[self.attack_bin], self.attack_percent, attack)

        lbp_result: Optional[LBPResult] = None
        texture_input = roi
        if self.cfg.get('run_lbp'):
            if self.cfg.get('use_gradient'):
                texture_input = extract_gradient_normalized(roi, axis=0)
            lbp_result = self.engine.run(texture_input, self.cell_size)

        if self.cfg.get('save_debug_images'):
            self._save_debug(label or 'image', mask, roi, texture_input, lbp_result)

        return AnalysisResult(
            attack=attack,
            histogram=histogram,
            percentages=percentages,
            pixel_count=pixel_count,
            lbp=lbp_result,
        )

    def _save_debug(self, label: str, mask: np.ndarray, roi: np.ndarray,
                    texture_input: np.ndarray, lbp_result: Optional[LBPResult]):
        out_dir = require(self.cfg, 'debug_output_dir')
        save_image(os.path.join(out_dir, f"{label}_thresh.jpg"), mask)
        save_image(os.path.join(out_dir, f"{label}_ROI.jpg"), roi)
        save_image(os.path.join(out_dir, f"{label}_ROI_hist.png"), render_histogram(roi))
        if texture_input is not roi:
            save_image(os.path.join(out_dir, f"{label}_gradX.jpg"), texture_input)
        if lbp_result is not None:
            save_image(os.path.join(out_dir, f"{label}_lbp_gray.jpg"), lbp_result.score_image)

    def detect_attack(self, path: str) -> bool:
        image = read_image(path)
        label = os.path.splitext(os.path.basename(path))[0]
        return self.analyze(image, label).attack

    def compare(self, true_path: str, fake_path: str) -> Tuple[AnalysisResult, AnalysisResult]:
        """Analyze a genuine/spoofed pair of the same scene."""
        true_res = self.analyze(read_image(true_path), 'true')
        fake_res = self.analyze(read_image(fake_path), 'fake')
        return true_res, fake_res


def detect_attack(path: str, cfg: Optional[Dict[str, Any]] = None) -> bool:
    return SpoofingDetector(cfg).detect_attack(path)
