# airhockey

A two-player air hockey game for the desktop, played with two gamepads.

Each player steers a paddle with the left stick of their gamepad and pushes
the puck around the rink. Every bounce off a fence counts toward the puck's
grade: up to 5 bounces it is small, from 6 it is medium and from 11 it is
big. Medium and big pucks move faster, and pucks are worth 1, 2 or 4 points
by grade. A big puck breaks the fences it hits instead of bouncing off them.

- A puck that enters a goal scores for the player defending the other goal.
- A puck that leaves the screen scores for the player who touched it last.
- After either, the puck and paddles go back to their spots, the bounce
  count is cleared and broken fences are restored.

The match lasts 100 seconds; the higher score wins, equal scores are a draw.

## Installing

```
pip install .
```

This installs `pygame` as well.

## Playing

```
airhockey
```

Options:

- `--assets DIR` – directory holding the images and sounds (default `res`).
- `--fullscreen` – use the whole screen instead of a window.
- `--fps N` – frame rate limit, `0` for none (default 60).
- `--frames N` – stop after this many frames.

The window is 1920×1080. The first two connected gamepads are read each
frame; a missing gamepad counts as idle.

Screens follow one another in this order:

1. **Title** – press the left shoulder button on pad 1 to start the match.
   Title music loops if it is found in the assets directory.
2. **Match** – play until the timer runs out; "FINISH" is shown and the
   result follows five seconds later.
3. **Result** – shows the winner or a draw; press X on pad 1 to return to
   the title screen.

Images and sounds are loaded by file name from the assets directory. When an
image is missing, the game draws plain shapes or text in its place; missing
sounds are simply not played.

## Using it as a library

The game logic can be driven without a window:

- `airhockey.geometry` – the `Vec` type and the hit tests
  `is_hit_box`, `is_hit_circle`, `is_hit_box_circle` and `check_hit_all`.
- `airhockey.character` – `Character`, `Puck`, `PuckGrade`, `PadState`,
  `distance_sqr`, `grade_for_bounds` and `radius_for_grade`.
- `airhockey.match` – `Match`, which holds the puck, paddles, goals,
  fences, scores, effects and the clock; call `Match.step(pad1, pad2)` once
  per frame. Sounds to play are queued in `Match.sounds`. `Match` takes a
  clock function, so time can be controlled in tests.
- `airhockey.scenes` – `TitleScene`, `RuleScene`, `GameMainScene` and
  `ResultScene`, and the `SceneManager` that runs one frame at a time with
  `SceneManager.frame(pad1, pad2, surface)`.
- `airhockey.app` – `read_pad` turns a pygame joystick into a `PadState`;
  `main` is the `airhockey` command.
- `airhockey.rally` – `RallyState`, a small 800×600 rally with two paddles
  moved by held keys (`"w"`/`"s"` and `"up"`/`"down"`), and `draw_rally`.

## What it does not do

- There is no keyboard control of the match; it needs gamepads.
- `RuleScene` (a rules screen that starts a match on A) is available to
  code using the library, but the `airhockey` command never shows it.
- `RallyState` has no command of its own; it is only a library piece.
- There is no computer opponent and no saving of scores.

## Running the tests

```
pip install .[test]
pytest
```