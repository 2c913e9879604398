# main.py
import argparse
import logging
import sys
from typing import List, Optional
from pathtracer.config import QUALITY_LEVELS, RENDER_DEFAULTS
from pathtracer.core.vector import Vector3
from pathtracer.renderer.background import SkyBackground, SolidBackground
from pathtracer.renderer.raytracer import Renderer, save_image
from pathtracer.scenes import SCENES, build_camera, build_scene

logger = logging.getLogger("pathtracer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pathtracer", description="Offline Monte-Carlo path tracer")
    parser.add_argument("scene", nargs="?", default=RENDER_DEFAULTS["scene"], choices=sorted(SCENES),
                        help="Scene from the built-in catalogue")
    parser.add_argument("output", nargs="?", default=RENDER_DEFAULTS["output"],
                        help="Output image path")
    parser.add_argument("--width", type=int, default=RENDER_DEFAULTS["width"], help="Image width in pixels")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Preset for samples per pixel and bounce depth "
                             "(default: the scene's suggestion, else " + RENDER_DEFAULTS["quality"] + ")")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (overrides the preset and the scene)")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum bounces per path")
    parser.add_argument("--workers", type=int, default=RENDER_DEFAULTS["workers"],
                        help="Worker processes, 0 for one per CPU")
    parser.add_argument("--seed", type=int, default=RENDER_DEFAULTS["seed"], help="Seed for scene and samples")
    parser.add_argument("--background", choices=("scene", "solid", "sky"),
                        default=RENDER_DEFAULTS["background"],
                        help="Keep the scene's background, use a flat colour or a sky gradient")
    parser.add_argument("--background-color", type=float, nargs=3, default=(0.70, 0.80, 1.00),
                        metavar=("R", "G", "B"), help="Colour used with --background solid")
    parser.add_argument("--texture", default=None, help="Image for the earth and final scenes")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        description = build_scene(args.scene, seed=args.seed, texture_path=args.texture)
        camera = build_camera(description)
    except (OSError, ValueError) as e:
        logger.error("Scene setup failed: %s", e)
        return 1

    if args.background == "sky":
        background = SkyBackground()
    elif args.background == "solid":
        background = SolidBackground(Vector3(*args.background_color))
    else:
        background = description.background

    quality = QUALITY_LEVELS[args.quality or RENDER_DEFAULTS["quality"]]
    samples = args.samples
    if samples is None:
        samples = quality["samples"] if args.quality else (description.samples_per_pixel or quality["samples"])
    max_depth = args.max_depth if args.max_depth is not None else quality["bounces"]
    width = args.width
    height = max(1, int(width / description.aspect_ratio))

    try:
        renderer = Renderer(width, height, samples_per_pixel=samples, max_depth=max_depth,
                            workers=args.workers, seed=args.seed, progress=not args.no_progress)
    except ValueError as e:
        logger.error("Invalid render settings: %s", e)
        return 1
    pixels = renderer.render_image(description.world, camera, background)
    try:
        save_image(pixels, args.output)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
