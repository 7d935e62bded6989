"""The game world: background, player, enemy and gem."""

from __future__ import annotations

from typing import Optional

import pygame

from evansengine.enemy import Enemy
from evansengine.gem import Gem
from evansengine.player import Movement, Player
from evansengine.textures import Loader, Texture, load_texture

BACKGROUND_PATH = "Resources/Background/BackgroundImage.png"
GEM_POSITION = (260, 260)
GEM_RADIUS = 2
GEM_COLOR = (173, 216, 230, 1)


class Game:
    """Owns every object in the scene and drives them each frame."""

    def __init__(self) -> None:
        self.player = Player()
        self.enemy = Enemy()
        self.gem = Gem()
        self.background: Optional[Texture] = None

    def init(self, loader: Loader = load_texture) -> None:
        """Load the background and every character's sheets."""
        self.background = loader(BACKGROUND_PATH)
        self.player.init(loader)
        self.enemy.init(loader)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the background stretched over the surface, then the gem."""
        if self.background is not None:
            surface.blit(pygame.transform.scale(self.background, surface.get_size()), (0, 0))
        self.gem.drop_gem(surface, *GEM_POSITION, GEM_RADIUS, GEM_COLOR)
        if self.background is None:
            print("Background Texture is null")

    def update(self, delta_time: float, surface: pygame.Surface, movement: Movement) -> None:
        """Advance and draw the player and the enemy."""
        self.player.update(delta_time, surface, movement)
        self.enemy.update(surface, delta_time)

    def close(self) -> None:
        """Release every loaded image."""
        self.background = None
        self.player.textures.destroy_player_textures()
        self.enemy.textures.destroy_enemy_textures()

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()