#!/usr/bin/env python3
"""Render the demo scene or a JSON scene description.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene SCENE       JSON scene description (default: built-in demo scene)
    --width WIDTH       Image width for the demo scene (default: 400)
    --height HEIGHT     Image height for the demo scene (default: 200)
    --max-depth DEPTH   Reflection/refraction recursion limit (default: 5)
    --output OUTPUT     Output file, .png or .ppm (default: scene.png)
    --gamma GAMMA       Gamma for PNG output (default: 1.0)
    --tone-map METHOD   Tone map for PNG output: none, reinhard, exposure
    --quiet             Only log warnings and errors

The JSON file holds the same list of {"add": ...} commands accepted by
whitted.scene.builder.build_scene.

Example:
    python -m examples.render_scene --width 200 --height 100 --output demo.ppm
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

import taichi as ti

logger = logging.getLogger("render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a Whitted ray traced scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene description (default: built-in demo scene)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width for the demo scene (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height for the demo scene (default: 200)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=5,
        help="Reflection/refraction recursion limit (default: 5)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file, .png or .ppm (default: scene.png)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma for PNG output (default: 1.0)",
    )
    parser.add_argument(
        "--tone-map",
        choices=["none", "reinhard", "exposure"],
        default="none",
        help="Tone map for PNG output (default: none)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser.parse_args()


def render_scene(
    scene_path: str | None = None,
    width: int = 400,
    height: int = 200,
    max_depth: int = 5,
    output_path: str = "scene.png",
    gamma: float = 1.0,
    tone_map: str = "none",
) -> Path:
    """Render a scene and save it to file.

    Args:
        scene_path: JSON scene description, or None for the demo scene.
        width: Demo scene image width (ignored for a scene file).
        height: Demo scene image height (ignored for a scene file).
        max_depth: Recursion limit for reflection and refraction.
        output_path: Output file path; the suffix selects PNG or PPM.
        gamma: Gamma for PNG output.
        tone_map: Tone mapping method for PNG output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from whitted.preview.export import save_png, save_ppm
    from whitted.scene.builder import build_scene
    from whitted.scene.presets import demo_scene

    if scene_path is None:
        logger.info("Using demo scene (%dx%d)", width, height)
        camera, world = demo_scene(width, height)
    else:
        logger.info("Loading scene from %s", scene_path)
        commands = json.loads(Path(scene_path).read_text(encoding="utf-8"))
        camera, world = build_scene(commands)

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        elapsed = time.time() - start_time
        rows_per_sec = done / elapsed if elapsed > 0 else 0
        if done == total or done % 10 == 0:
            logger.info(
                "Progress: %d/%d rows (%.1f%%) - %.1f rows/s",
                done,
                total,
                done / total * 100,
                rows_per_sec,
            )

    canvas = camera.render(world, max_depth=max_depth, callback=progress_callback)

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file, tone_map=tone_map, gamma=gamma)

    logger.info("Saved to: %s", output_file.absolute())
    logger.info("Total time: %.2fs", time.time() - start_time)
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Shading runs in Python; the canvas only needs the CPU backend
    ti.init(arch=ti.cpu)

    try:
        render_scene(
            scene_path=args.scene,
            width=args.width,
            height=args.height,
            max_depth=args.max_depth,
            output_path=args.output,
            gamma=args.gamma,
            tone_map=args.tone_map,
        )
        return 0
    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
