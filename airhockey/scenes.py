"""Screens of the game (title, rules, match, result) and the scene manager."""

from __future__ import annotations

import time
from collections.abc import Callable
from pathlib import Path

import pygame

from airhockey.character import CHARACTER_TYPE_NONE, PUCK_RADIUS, PadState, PuckGrade
from airhockey.match import (
    RESULT_DELAY,
    SCREEN_H,
    SCREEN_W,
    EffectKind,
    Match,
    Sound,
)

DEFAULT_ASSETS = Path("res")

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
TIME_COLOR = (255, 10, 255)
FENCE_COLOR = (200, 40, 40)
PUCK_COLOR = (205, 127, 50)

TITLE_IMAGE = "start_gamen240702.png"
TITLE_MUSIC = "GamePlay.BGM.wav"
BACKGROUND_IMAGE = "haikei.png"
FENCE_IMAGE = "redfence.front.png"
FINISH_IMAGE = "font_finish.png"
PLAYER_IMAGES = ("padlered big.png", "padleblue big.png")
PUCK_IMAGES = {
    PuckGrade.SMALL: "blonzepack64.png",
    PuckGrade.MEDIUM: "silberpack128.png",
    PuckGrade.BIG: "goldpack256.png",
}
EFFECT_IMAGES = {
    EffectKind.NORMAL: tuple(f"kin effect{n}.png" for n in range(1, 7)),
    EffectKind.FIRE: tuple(f"hibana effect{n}.png" for n in range(1, 6)),
    EffectKind.CRASH: ("distortionredfence.front.png",)
    + tuple(f"breakeffect{n}.png" for n in range(1, 6)),
}
SOUND_FILES = {
    Sound.GOAL: "Goal.wav",
    Sound.FENCE_CRASH: "HitPandP.wav",
    Sound.FENCE_BREAK: "FenceBreak.wav",
}
RESULT_IMAGES = {0: "Untitled-4.png", 1: "winresult5.png", 2: "winresult6.png"}
RESULT_TEXT = {0: "Draw", 1: "Player 1 wins", 2: "Player 2 wins"}
PLAYER_COLORS = (RED, BLUE)
PLAYER_SPRITE_OFFSET = 64

_FONTS: dict[int, pygame.font.Font] = {}


class _Assets:
    """Loads images and sounds from a directory; missing files yield None."""

    def __init__(self, root) -> None:
        self.root = Path(root)
        self._images: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, object] = {}

    def image(self, name: str) -> pygame.Surface | None:
        if name not in self._images:
            path = self.root / name
            surface = None
            if path.is_file():
                try:
                    surface = pygame.image.load(str(path))
                except pygame.error:
                    surface = None
            self._images[name] = surface
        return self._images[name]

    def sound(self, name: str):
        try:
            if not pygame.mixer.get_init():
                return None
        except (NotImplementedError, pygame.error):
            return None
        if name not in self._sounds:
            path = self.root / name
            sound = None
            if path.is_file():
                try:
                    sound = pygame.mixer.Sound(str(path))
                except pygame.error:
                    sound = None
            self._sounds[name] = sound
        return self._sounds[name]

    def play(self, name: str, loops: int = 0) -> None:
        sound = self.sound(name)
        if sound is not None:
            sound.play(loops)


_SHARED_ASSETS = _Assets(DEFAULT_ASSETS)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _FONTS.clear()
    if size not in _FONTS:
        _FONTS[size] = pygame.font.Font(None, size)
    return _FONTS[size]


def _text(surface: pygame.Surface, message: str, pos, color, size: int = 64) -> None:
    surface.blit(_font(size).render(message, True, color), (int(pos[0]), int(pos[1])))


class Scene:
    """One screen of the game, driven once per frame by a SceneManager."""

    def __init__(self) -> None:
        self.manager: SceneManager | None = None
        self.pad1 = PadState()
        self.pad2 = PadState()

    @property
    def assets(self) -> _Assets:
        return self.manager.assets if self.manager is not None else _SHARED_ASSETS

    def init(self) -> None:
        """Prepare the scene when it is chosen."""

    def input(self, pad1: PadState, pad2: PadState) -> None:
        """Take this frame's gamepad states."""
        self.pad1 = pad1
        self.pad2 = pad2

    def process(self) -> None:
        """Update the scene for one frame."""

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scene onto ``surface``."""

    def _go(self, scene: Scene) -> None:
        if self.manager is None:
            raise RuntimeError("scene is not attached to a manager")
        self.manager.change(scene)


class TitleScene(Scene):
    """Title screen; the left shoulder button starts a match."""

    def init(self) -> None:
        self.assets.play(TITLE_MUSIC, loops=-1)

    def process(self) -> None:
        if "left_shoulder" in self.pad1.buttons:
            self._go(GameMainScene())

    def draw(self, surface: pygame.Surface) -> None:
        image = self.assets.image(TITLE_IMAGE)
        if image is not None:
            surface.blit(image, (0, 0))
        else:
            _text(surface, "AIR HOCKEY", (SCREEN_W // 2 - 160, SCREEN_H // 2 - 32), WHITE)


class RuleScene(Scene):
    """Rules screen; the A button starts a match."""

    def process(self) -> None:
        if "a" in self.pad1.buttons:
            self._go(GameMainScene())

    def draw(self, surface: pygame.Surface) -> None:
        _text(surface, "Rules", (0, 20), WHITE, 20)


class GameMainScene(Scene):
    """The match itself; moves to the result screen a few seconds after time is up."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        super().__init__()
        self.match = Match(clock)

    def init(self) -> None:
        self.match.reset()

    def process(self) -> None:
        self.match.step(self.pad1, self.pad2)
        for sound in self.match.sounds:
            self.assets.play(SOUND_FILES[sound])
        self.match.sounds.clear()
        if self.match.remaining <= -RESULT_DELAY:
            winner = self.match.winner
            if winner is None:
                winner = self.match.judge_winner()
            self._go(ResultScene(winner))

    def draw(self, surface: pygame.Surface) -> None:
        assets = self.assets
        match = self.match

        background = assets.image(BACKGROUND_IMAGE)
        if background is not None:
            surface.blit(background, (0, 0))

        fence_image = assets.image(FENCE_IMAGE)
        for fence in match.fences:
            if fence.broken:
                continue
            if fence_image is not None:
                surface.blit(fence_image, (fence.x, fence.y))
            else:
                pygame.draw.rect(surface, FENCE_COLOR, (fence.x, fence.y, fence.w, fence.h))

        for index, character in enumerate(match.characters):
            if character.kind == CHARACTER_TYPE_NONE:
                continue
            image = assets.image(PLAYER_IMAGES[index])
            if image is not None:
                surface.blit(
                    image,
                    (int(character.pos.x) - PLAYER_SPRITE_OFFSET, int(character.pos.y) - PLAYER_SPRITE_OFFSET),
                )
            else:
                pygame.draw.circle(
                    surface, PLAYER_COLORS[index],
                    (int(character.pos.x), int(character.pos.y)), int(character.radius),
                )

        puck = match.puck
        if puck.grade in PUCK_IMAGES:
            offset = PUCK_RADIUS[puck.grade]
            image = assets.image(PUCK_IMAGES[puck.grade])
            if image is not None:
                surface.blit(image, (int(puck.pos.x) - offset, int(puck.pos.y) - offset))
            else:
                pygame.draw.circle(surface, PUCK_COLOR, (int(puck.pos.x), int(puck.pos.y)), offset)

        _text(surface, f"Bounces: {puck.bound_count}", (700, 10), WHITE)

        for effect, frame in match.advance_effects():
            frames = EFFECT_IMAGES[effect.kind]
            if frame < len(frames):
                image = assets.image(frames[frame])
                if image is not None:
                    surface.blit(image, (effect.x, effect.y))

        _text(surface, f"Player 1: {match.scores[0]}", (260, 10), RED)
        _text(surface, f"Player 2: {match.scores[1]}", (SCREEN_W - 650, 10), BLUE)

        remaining = match.remaining_time
        if remaining <= 0:
            finish = assets.image(FINISH_IMAGE)
            position = (SCREEN_W // 2 - 550, SCREEN_H // 2 - 170)
            if finish is not None:
                surface.blit(finish, position)
            else:
                _text(surface, "FINISH", position, WHITE, 160)
        if remaining >= 0:
            _text(surface, f"Time: {remaining}", (800, 120), TIME_COLOR)


class ResultScene(Scene):
    """Shows the winner (0 draw, 1 or 2); the X button returns to the title."""

    def __init__(self, winner: int | None = None) -> None:
        super().__init__()
        self.winner = winner

    def process(self) -> None:
        if "x" in self.pad1.buttons:
            self._go(TitleScene())

    def draw(self, surface: pygame.Surface) -> None:
        _text(surface, "Result", (0, 20), WHITE, 20)
        if self.winner not in RESULT_IMAGES:
            return
        image = self.assets.image(RESULT_IMAGES[self.winner])
        if image is not None:
            surface.blit(image, (0, 0))
        else:
            _text(surface, RESULT_TEXT[self.winner], (SCREEN_W // 2 - 200, SCREEN_H // 2 - 32), WHITE)


class SceneManager:
    """Runs the current scene each frame and switches to a requested one."""

    def __init__(self, initial: Scene | None = None, assets_root=DEFAULT_ASSETS) -> None:
        self.assets = _Assets(assets_root)
        self.pending: Scene | None = None
        self.scene: Scene = initial if initial is not None else TitleScene()
        self.scene.manager = self
        self.scene.init()

    def change(self, scene: Scene) -> None:
        """Prepare ``scene`` now and make it current at the start of the next frame."""
        scene.manager = self
        self.pending = scene
        scene.init()

    def frame(self, pad1: PadState, pad2: PadState, surface: pygame.Surface) -> Scene:
        """Run one frame: switch scenes if asked, then input, process and draw."""
        if self.pending is not None:
            self.scene, self.pending = self.pending, None
        self.scene.input(pad1, pad2)
        self.scene.process()
        surface.fill(BLACK)
        self.scene.draw(surface)
        return self.scene