# pachinko

Building blocks for a pachinko arcade game, drawn with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

### `pachinko.ball` — `Ball`

A ball with a position, radius, velocity, gravity (600 px/s² by default) and
an `active` flag.

- `update(dt)` adds gravity to the velocity, then moves the ball by it.
- `collide_with_pin(pin_position, pin_radius, rng=None)` resolves an overlap
  with a pin: the ball is pushed out along the normal, its velocity is
  reflected and multiplied by 0.9, and a random sideways push of −30…30 px/s
  is added (from `rng.randint`, or the `random` module). Returns whether they
  touched.
- `reset(position)` moves the ball, stops it and makes it active again.
- `draw(surface)` draws a glossy steel ball. An inactive ball neither moves,
  collides nor draws.

### `pachinko.pin` — `Pin`

A fixed round pin with `position` and `radius`; `draw(surface)` draws it
with an outline and highlight.

### `pachinko.slot` — `Slot`

A prize target given as `(x, y, width, height)`.
`check_hit(ball_position, ball_radius)` tells whether a circle touches or
overlaps the rectangle; `draw(surface)` draws it in gold with a border.

### `pachinko.reward_system` — `RewardSystem`

Draws three-character lottery results. The left reel holds `1`–`9` and `W`,
the middle reel `1`–`9` and `I`, the right reel `1`–`9` and `N`.
`generate_result()` returns a string such as `"3I9"`; `left_char()`,
`middle_char()` and `right_char()` draw a single reel. Pass `rng` (anything
with `choice`) to make draws repeatable.

Two prize tables are available:

| Result | `reward_value` (after `init()`) | `reward_for_result` |
|--------|-------------------------------|---------------------|
| `111` … `666` | 100 × the digit | 100 |
| `777`, `888` | 100 × the digit | 200 |
| `999` | 900 | 300 |
| `WIN` | 9999 | 1000 |
| anything else | 0 | 0 |

`reward_value` returns 0 for everything until `init()` has been called.

### `pachinko.reward_effect` — `RewardEffect`

A timed ring of twelve flashing lights. `trigger()` starts it (2 seconds by
default) and plays `sound` if one was given; `update(dt)` counts down and
switches it off; `lights(center)` returns the position and colour of each
light; `draw(surface)` draws the ring at the surface centre while active.

### `pachinko.ui`

- `FrameInput`: one frame's input — mouse position, whether the left button
  was pressed or released, the keys pressed and the text typed.
- `measure_text`, `draw_label`, `draw_text_centered`: text helpers.
- `draw_button(surface, bounds, text, hovered=False)`: a bordered button.
- `draw_hud(surface, balls_remaining, score, show_congrats, screen_width)`:
  help line, ball count, score and a "CONGRATULATIONS!" banner.
- `is_button_clicked(surface, bounds, text, frame_input)`: draws a button and
  reports a left-button release over it.
- `is_mouse_over(bounds, frame_input)`: hit test, right and bottom edges
  excluded.

### `pachinko.button` — `Button`

A labelled rectangle; `update(frame_input)` sets `hovered`, and `clicked`
when the left button was pressed over it.

### `pachinko.menu` — `Menu`

The title screen with Start, Settings, Exit and Admin buttons.
`update(frame_input)` sets one of `start_game`, `exit_game` or `go_to_admin`
for a button pressed this frame (Settings sets nothing);
`draw(surface, frame_input)` draws the menu with hover highlighting.

## What the package does not do

There is no command and no window: the package does not open a display, run
a frame loop or read pygame events into a `FrameInput`. There is no playing
board that ties the pieces together — no launcher, pin layout, side walls,
firing buttons, score keeping or spin queue — and no admin login screen.
Nothing loads music or sound files; a sound for `RewardEffect` must be
supplied by the caller.