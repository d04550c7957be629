"""Interactive entry point for the rotating pyramid demo."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .scene3d.animation import FRAME_LENGTH, Animator
from .scene3d.objects import SCENES, build_space
from .scene3d.space import DrawOrder, Space
from .scene3d.surface import SurfaceUnavailable, TerminalSurface
from .scene3d.terminal import TerminalController


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spinning painter's-algorithm scene for your terminal")
    parser.add_argument(
        "--frame-ms",
        type=float,
        default=FRAME_LENGTH * 1000.0,
        help="Milliseconds to wait between frames (default: 25)",
    )
    parser.add_argument(
        "--tilt",
        type=float,
        default=-0.33,
        help="Initial rotation about the X axis in radians (default: -0.33)",
    )
    parser.add_argument(
        "--spin",
        type=float,
        default=0.033,
        help="Rotation applied every frame in radians (default: 0.033)",
    )
    parser.add_argument(
        "--axis",
        type=str,
        default="y",
        choices=["x", "y", "z"],
        help="Axis the scene spins around (default: y)",
    )
    parser.add_argument(
        "--object",
        type=str,
        default="pyramid",
        choices=sorted(SCENES),
        help="Which object to place at the origin",
    )
    parser.add_argument(
        "--no-axes",
        action="store_true",
        help="Do not draw the X/Y/Z axis lines",
    )
    parser.add_argument(
        "--draw-order",
        type=str,
        default=DrawOrder.DEPTH.value,
        choices=[order.value for order in DrawOrder],
        help="Render polygons back to front ('depth') or as added ('insertion')",
    )
    parser.add_argument(
        "--extent",
        type=float,
        default=150.0,
        help="Half-width of the visible world square (default: 150)",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Run for a fixed number of frames (0 = infinite)",
    )
    parser.add_argument(
        "--async",
        dest="async_mode",
        action="store_true",
        help="Drive frames from an asyncio timer instead of a blocking sleep",
    )
    return parser.parse_args(argv)


@dataclass
class RuntimeConfig:
    warnings: list[str]
    frame_length: float
    tilt: float
    spin: float
    axis: str
    object_name: str
    with_axes: bool
    draw_order: DrawOrder
    bounds: Tuple[float, float, float, float]
    frames: int
    async_mode: bool


def _setup_runtime(args: argparse.Namespace) -> RuntimeConfig:
    warnings: list[str] = []

    frame_length = args.frame_ms / 1000.0
    if frame_length <= 0:
        warnings.append(f"Frame length {args.frame_ms}ms is not positive; using {FRAME_LENGTH * 1000:.0f}ms")
        frame_length = FRAME_LENGTH

    if args.spin == 0:
        warnings.append("Spin is 0; the scene will not rotate")

    extent = args.extent
    if extent <= 0:
        warnings.append(f"Extent {extent} is not positive; using 150")
        extent = 150.0

    frames = max(0, args.frames)

    return RuntimeConfig(
        warnings=warnings,
        frame_length=frame_length,
        tilt=args.tilt,
        spin=args.spin,
        axis=args.axis,
        object_name=args.object,
        with_axes=not args.no_axes,
        draw_order=DrawOrder(args.draw_order),
        bounds=(-extent, -extent, extent, extent),
        frames=frames,
        async_mode=bool(args.async_mode),
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[scene3d] {warning}\n")
    sys.stderr.flush()


def build_scene(config: RuntimeConfig) -> Space:
    space = build_space(config.object_name, draw_order=config.draw_order, with_axes=config.with_axes)
    space.rotate_x(config.tilt)
    return space


def _create_animator(space: Space, config: RuntimeConfig) -> Animator:
    return Animator(space, axis=config.axis, step=config.spin, frame_length=config.frame_length)


def _run_sync_loop(config: RuntimeConfig) -> int:
    animator = _create_animator(build_scene(config), config)
    surface = TerminalSurface(TerminalController(), bounds=config.bounds)
    with surface as active:
        try:
            return animator.run(active, frames=config.frames)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            active.close()
    sys.stdout.write("\nInterrupted. Bye!\n")
    sys.stdout.flush()
    return animator.frames_drawn


async def _run_async_loop(config: RuntimeConfig) -> int:
    animator = _create_animator(build_scene(config), config)
    surface = TerminalSurface(TerminalController(), bounds=config.bounds)
    with surface as active:
        try:
            return await animator.run_async(active, frames=config.frames)
        except (KeyboardInterrupt, asyncio.CancelledError):  # pragma: no cover - interactive loop
            active.close()
    sys.stdout.write("\nInterrupted. Bye!\n")
    sys.stdout.flush()
    return animator.frames_drawn


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    config = _setup_runtime(args)
    _emit_warnings(config.warnings)

    try:
        if config.async_mode:
            asyncio.run(_run_async_loop(config))
        else:
            _run_sync_loop(config)
    except SurfaceUnavailable as exc:
        sys.stderr.write(f"[scene3d] error: {exc}\n")
        sys.stderr.flush()
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
