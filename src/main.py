# main.py
import argparse
import random
import sys
from typing import List, Optional
from camera.camera import Camera
from renderer.raytracer import DEFAULT_SEED, Renderer
from scenes import SCENES

# Image width, samples per pixel and bounce limit for each quality level.
# "scene" keeps whatever the scene builder configured.
QUALITY_LEVELS = {
    "preview": {"width": 200, "samples": 4, "bounces": 5},
    "draft": {"width": 400, "samples": 32, "bounces": 10},
    "final": {"width": 1200, "samples": 500, "bounces": 50},
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a scene of spheres with Monte-Carlo path tracing.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="final",
                        help="scene to render (default: %(default)s)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS) + ["scene"], default="preview",
                        help="quality preset (default: %(default)s)")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum number of ray bounces")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="random seed for scene and render (default: %(default)s)")
    parser.add_argument("-o", "--output",
                        help="output file; .ppm is plain text, other extensions use Pillow "
                             "(default: P3 PPM on stdout)")
    parser.add_argument("-q", "--quiet", action="store_true", help="suppress progress output")
    return parser

def apply_quality_settings(camera: Camera, quality: str, width: Optional[int] = None,
                           samples: Optional[int] = None, max_depth: Optional[int] = None):
    """
    Apply a quality preset to the camera, then any explicit overrides.
    """
    if quality != "scene":
        level = QUALITY_LEVELS[quality]
        camera.image_width = level["width"]
        camera.samples_per_pixel = level["samples"]
        camera.max_depth = level["bounces"]
    if width is not None:
        camera.image_width = width
    if samples is not None:
        camera.samples_per_pixel = samples
    if max_depth is not None:
        camera.max_depth = max_depth

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    try:
        world, camera = SCENES[args.scene](random.Random(args.seed))
        apply_quality_settings(camera, args.quality, args.width, args.samples, args.max_depth)
        camera.verbose = verbose
        camera.initialize()

        if verbose:
            print(f"=== Scene '{args.scene}' ===", file=sys.stderr)
            print(f"Objects: {len(world)}", file=sys.stderr)
            print(f"Camera: from {camera.lookfrom} to {camera.lookat}, vfov {camera.vfov}", file=sys.stderr)
            print(f"Resolution: {camera.image_width}x{camera.image_height}, "
                  f"samples: {camera.samples_per_pixel}, bounces: {camera.max_depth}, "
                  f"seed: {args.seed}", file=sys.stderr)

        renderer = Renderer(camera, seed=args.seed)
        renderer.render(world)

        if args.output:
            renderer.save(args.output)
            if verbose:
                print(f"Saved {args.output}", file=sys.stderr)
        else:
            renderer.write(sys.stdout)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
