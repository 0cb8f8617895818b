"""Command that opens the game window and runs the frame loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from airhockey.character import PadState
from airhockey.match import SCREEN_H, SCREEN_W
from airhockey.scenes import DEFAULT_ASSETS, SceneManager

AXIS_MAX = 32767
AXIS_MIN = -32768
BUTTON_NAMES = (
    "a",
    "b",
    "x",
    "y",
    "left_shoulder",
    "right_shoulder",
    "back",
    "start",
    "left_thumb",
    "right_thumb",
)


def _clamp_axis(value: float) -> int:
    return max(AXIS_MIN, min(AXIS_MAX, round(value)))


def read_pad(joystick) -> PadState:
    """Read a joystick's left stick and buttons into a PadState.

    Stick values use the gamepad range, with positive y meaning up.
    ``None`` gives an idle pad.
    """
    if joystick is None:
        return PadState()
    axes = joystick.get_numaxes()

    def axis(index: int) -> float:
        return joystick.get_axis(index) * AXIS_MAX if index < axes else 0.0

    count = joystick.get_numbuttons()
    buttons = frozenset(
        name
        for index, name in enumerate(BUTTON_NAMES)
        if index < count and joystick.get_button(index)
    )
    return PadState(_clamp_axis(axis(0)), _clamp_axis(-axis(1)), buttons)


def _parse(argv):
    parser = argparse.ArgumentParser(prog="airhockey", description="Two-player air hockey.")
    parser.add_argument("--assets", default=str(DEFAULT_ASSETS), help="directory with images and sounds")
    parser.add_argument("--fullscreen", action="store_true", help="use the whole screen")
    parser.add_argument("--fps", type=int, default=60, help="frame rate limit, 0 for none")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.fps < 0:
        parser.error("--fps must not be negative")
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    return args


def _joysticks() -> list:
    return [pygame.joystick.Joystick(i) for i in range(pygame.joystick.get_count())]


def main(argv=None) -> int:
    """Run the game until the window is closed; return the exit status."""
    args = _parse(argv)
    pygame.init()
    try:
        flags = pygame.FULLSCREEN if args.fullscreen else 0
        try:
            screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), flags)
        except pygame.error as exc:
            print(f"airhockey: cannot open display: {exc}", file=sys.stderr)
            return -1
        pygame.display.set_caption("Air Hockey")

        manager = SceneManager(assets_root=args.assets)
        clock = pygame.time.Clock()
        joysticks = _joysticks()
        frames = 0
        while args.frames is None or frames < args.frames:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in (pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED):
                    joysticks = _joysticks()
            pads = [read_pad(j) for j in joysticks[:2]]
            pads += [PadState()] * (2 - len(pads))
            manager.frame(pads[0], pads[1], screen)
            pygame.display.flip()
            clock.tick(args.fps)
            frames += 1
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())