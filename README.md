# Corgi Treats

A small arcade game. Dog treats fall from the sky. Move the corgi left and right to catch them before they land.

## Playing

Install the package, then start the game:

```
corgi-treats
```

The game opens an 800×600 window titled "CORGI TREATS" and runs at 60 frames per second. The command takes no options apart from `--help`.

### Controls

- `A` or `Left`: move left
- `D` or `Right`: move right
- Closing the window quits at any time.
- Once the game is over, press any key to close the window.

### Rules

- A new treat appears above the screen every 120 frames, at a random horizontal position.
- Each treat you catch adds one point. The score is shown in the top-left corner.
- After every fifth treat caught, treats fall a little faster: the fall speed starts at 2.0 and grows by 0.2 each time.
- A treat that reaches the ground costs one of your three hearts, shown in the top-right corner. When the last heart is gone, the game ends. The end screen dims the picture, shows "Game Over", and turns the music down.
- Every 700 frames a lightning bolt falls. Catching one raises the corgi's speed by 0.5. The speed starts at 3.0 and stops growing once it reaches 10.0. Bolts that reach the ground just vanish.

### Assets

The game looks for its images, sounds and font in the working directory:

- images: `background.png`, `corgi.png`, `dog_treat.png`, `lightning.png`, `heart.png`
- sounds: `background_music.ogg`, `collect_sound.wav`, `fail_sound.wav`, `power_up_sound.wav`
- font: `OpenSans-Bold.ttf`

If a file is missing, the game still runs:

- A missing image is drawn as a small solid box.
- A missing sound is simply silent.
- A missing font is replaced by pygame's default font.

## Using the pieces

The game logic is split into plain classes:

- `corgi_treats.player.Player`
- `corgi_treats.treat.Treats`
- `corgi_treats.boost.Boosts`
- `corgi_treats.hearts.Hearts`
- `corgi_treats.text.PointsText`
- `corgi_treats.game_over.GameOverScreen`
- `corgi_treats.background.Background`

`corgi_treats.game.Game` ties them together:

- `Game.step(pressed)` advances one frame. `pressed` is a mapping or sequence indexed by pygame key codes, such as the result of `pygame.key.get_pressed()`.
- `Game.handle_event(event)` reacts to `QUIT` and `KEYDOWN` events and sets `Game.running` to `False` when the game should close.
- `Game.draw(surface)` renders a frame onto any pygame surface.

`Treats` and `Boosts` accept an `rng` argument, a `random.Random`, which makes spawn positions repeatable. Their `spawn(width)` and `drop(width)` methods raise `ValueError` if the width leaves no room for an item. `Hearts.remove_heart()` raises `ValueError` when no hearts are left.

## Limitations

There is no restart, pause or menu. Once the game is over, the only way forward is to close the window. Scores are not saved between runs.

## Development

```
pip install -e ".[test]"
pytest
```