# evansengine

evansengine is a small top-down game built on pygame. A hunter walks around a
background field and is animated from sprite sheets. A zombie stands nearby,
and a small light-blue gem is drawn on the ground.

## Installation

```
pip install .
```

## Running the game

Run the game from a directory that holds the `Resources/` folder with the
sprite sheets, or point `--root` at that directory:

```
evansengine
evansengine --root path/to/game
evansengine --frames 600
```

- `--root DIR` changes into `DIR` before the images are loaded.
- `--frames N` stops after `N` frames have been drawn.

An 800×600 window titled "Evans Engine" opens. The controls are:

- `W` / `S` move up and down.
- `A` / `D` move left and right. The hunter faces the way he walks.

When the hunter stands still, he shows the idle sheet for the last direction
he walked: up, down, or side. The idle cycle runs slower than the walk cycle.
Close the window to quit. If the window cannot be created, the command prints
the error and exits with status 1.

### Expected resources

```
Resources/Background/BackgroundImage.png
Resources/Hunter/Idle/Idle-{Side,Up,Down}-Sheet.png
Resources/Hunter/Walk/Walk-{Side,Up,Down}-Sheet.png
Resources/Hunter/Attack/Slice-{Side,Up,Down}-Sheet.png
Resources/Zombie/Idle/Zombie-{Base,Banshee,Overweight}-Idle-Sheet.png
```

Each sheet is a row of 64×64 frames. An image that cannot be loaded is left
out of the scene, and the game keeps running. A missing background prints
`Background Texture is null` on every frame. For the character sheets, call
`TextureSet.check_player_textures()` or `TextureSet.check_enemy_textures()`.
Each one prints and returns a message for every sheet that is not loaded.

## Using the pieces

The modules can also be used on their own:

- `evansengine.animation.Animation` times the frames of the walk and idle cycles. Use `handle_walk` and `handle_idle`.
- `evansengine.textures.load_texture(path)` loads an image and returns `None` if it cannot be read.
- `evansengine.textures.TextureSet` loads, checks and releases the player and enemy sheets. Loading takes a custom loader callable, so images need not come from disk.
- `evansengine.gem.disc_points` yields the integer points of a filled disc. `Gem.drop_gem` plots them onto a surface.
- `evansengine.player.Movement` holds the direction keys pressed. `read_movement(keys)` builds one from a `pygame.key.get_pressed()` lookup.
- `evansengine.player.Player` moves, animates and draws the hunter. `select_texture` picks the sheet for a movement.
- `evansengine.enemy.Enemy` draws the base zombie's first idle frame.
- `evansengine.game.Game` loads and draws the whole scene. It is a context manager that releases its images on exit.
- `evansengine.app.run(game, surface, max_frames)` runs the frame loop, and `main` is the command above.

## What it does not do

- The attack sheets are loaded, but the hunter has no attack.
- The zombie does not move or animate. Only the base zombie is drawn. The banshee and overweight sheets are loaded but not used.
- The gem cannot be picked up, and there is no collision between objects.
- The player's health, running and dead flags exist, but nothing changes them.
- There is no score, menu, sound or saved state.

## Tests

```
pip install .[test]
pytest
```