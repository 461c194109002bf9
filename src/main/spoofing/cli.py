"""Command line entry point.

  spoofing-detect detect IMAGE
  spoofing-detect lbp IMAGE [--cell-size N] [--output PATH]
  spoofing-detect compare DIR        (DIR holds true.jpg and fake.jpg)
  spoofing-detect filters IMAGE [--output-dir DIR]
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from .detector import SpoofingDetector, load_detector_config
from .preprocessing import to_gray, filter_stages
from ..texture import LBPError
from ..utils.config import ConfigError
from ..utils.io_utils import ImageIOError, read_image, save_image

ATTACK_MESSAGE = "An attack was detected !!!!"
NO_ATTACK_MESSAGE = "No attack was detected"


def _format_hist(values) -> str:
    return ", ".join(f"{v:g}" for v in values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spoofing-detect", description="LBP texture based spoofing detection")
    parser.add_argument('--config', action='append', default=[],
                        help="extra YAML file merged over the default detector config (repeatable)")
    sub = parser.add_subparsers(dest='command', required=True)

    p_detect = sub.add_parser('detect', help="decide whether an image is a spoofing attack")
    p_detect.add_argument('image')

    p_lbp = sub.add_parser('lbp', help="run the LBP engine and print the cumulative histogram")
    p_lbp.add_argument('image')
    p_lbp.add_argument('--cell-size', type=int, default=None)
    p_lbp.add_argument('--output', default=None, help="save the LBP score image here")

    p_cmp = sub.add_parser('compare', help="compare ROI histograms of DIR/true.jpg and DIR/fake.jpg")
    p_cmp.add_argument('directory')

    p_flt = sub.add_parser('filters', help="save gray, gradient X/Y, summed gradient and Gabor images")
    p_flt.add_argument('image')
    p_flt.add_argument('--output-dir', default=None, help="defaults to the configured debug_output_dir")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_detector_config(args.config)
        logging.basicConfig(level=str(cfg.get('log_level', 'INFO')).upper(),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        detector = SpoofingDetector(cfg)

        if args.command == 'detect':
            attack = detector.detect_attack(args.image)
            print(ATTACK_MESSAGE if attack else NO_ATTACK_MESSAGE)
        elif args.command == 'lbp':
            cell_size = args.cell_size if args.cell_size is not None else detector.cell_size
            gray = to_gray(read_image(args.image))
            result = detector.engine.run(gray, cell_size)
            print(f"LBP HISTOGRAM : {_format_hist(result.histogram)}")
            if args.output:
                save_image(args.output, result.score_image)
        elif args.command == 'filters':
            out_dir = args.output_dir or cfg.get('debug_output_dir', 'spoofing_debug')
            label = os.path.splitext(os.path.basename(args.image))[0]
            for stage, img in filter_stages(to_gray(read_image(args.image))).items():
                path = os.path.join(out_dir, f"{label}_{stage}.jpg")
                save_image(path, img)
                print(path)
        else:
            true_res, fake_res = detector.compare(os.path.join(args.directory, 'true.jpg'),
                                                  os.path.join(args.directory, 'fake.jpg'))
            print(f"TRUE HISTOGRAM : {_format_hist(true_res.histogram)}")
            print(f"FAKE HISTOGRAM : {_format_hist(fake_res.histogram)}")
        return 0
    except (LBPError, ImageIOError, ConfigError, FileNotFoundError) as e:
        print(str(e), file=sys.stderr)
        return 1


def main():
    sys.exit(run())


if __name__ == '__main__':  # pragma: no cover
    main()
