#!/usr/bin/env python3
"""
weekendtracer - A small Python path tracer

Main entry point for rendering scenes.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

from weekendtracer.renderer import Renderer, RenderSettings, get_platform_info
from weekendtracer.scenes import (
    book_camera, make_book_scene, make_single_sphere_scene, single_sphere_camera,
)

SCENES = {
    'book': (make_book_scene, book_camera),
    'single': (make_single_sphere_scene, single_sphere_camera),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='weekendtracer - A small Python path tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene single --output single.png
  python main.py --width 320 --height 180 --samples 20 --output render.ppm
        '''
    )

    parser.add_argument('--width', type=int, default=400, help='Image width (default: 400)')
    parser.add_argument('--height', type=int, default=225, help='Image height (default: 225)')
    parser.add_argument('--samples', type=int, default=10, help='Samples per pixel (default: 10)')
    parser.add_argument('--depth', type=int, default=50, help='Max ray depth (default: 50)')
    parser.add_argument('--threads', type=int, default=0, help='Number of threads (0=auto)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for scene and render')
    parser.add_argument('--output', type=str, default='render.ppm',
                        help='Output filename, .ppm or any format Pillow writes (default: render.ppm)')
    parser.add_argument('--scene', type=str, default='book', choices=sorted(SCENES),
                        help='Scene to render (default: book)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--info', action='store_true', help='Show platform info and exit')
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.info:
        info = get_platform_info()
        print("weekendtracer Platform Info:")
        print(f"  System: {info['system']}")
        print(f"  Machine: {info['machine']}")
        print(f"  Python: {info['python_version']}")
        print(f"  NumPy: {info['numpy_version']}")
        print(f"  CPU Cores: {info['cpu_count']}")
        return 0

    print("=" * 60)
    print("weekendtracer")
    print("=" * 60)

    try:
        settings = RenderSettings(num_threads=args.threads, seed=args.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.seed is not None:
        np.random.seed(args.seed)

    make_scene, make_camera = SCENES[args.scene]
    scene = make_scene()
    camera = make_camera(args.width, args.height, args.samples, args.depth)

    print(f"\nRender Settings:")
    print(f"  Resolution: {args.width}x{args.height}")
    print(f"  Samples: {args.samples}")
    print(f"  Max Depth: {args.depth}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Objects in scene: {len(scene)}")

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()
    image = renderer.render(scene, camera)
    elapsed = time.time() - start_time
    print(f"\nCompleted rendering in {elapsed:.2f} seconds")

    output_path = Path(args.output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path)
    except (OSError, ValueError) as exc:
        print(f"error: could not save {output_path}: {exc}", file=sys.stderr)
        return 1

    print(f"Saved to: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
