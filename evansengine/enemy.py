"""The zombie enemy."""

from __future__ import annotations

import pygame

from evansengine.player import FRAME_SIZE
from evansengine.textures import Loader, TextureSet, load_texture


class Enemy:
    """A zombie drawn from its idle sheet."""

    def __init__(self) -> None:
        self.textures = TextureSet()
        self.pos_x = 400
        self.pos_y = 250
        self.src_rect = pygame.Rect(0, 0, FRAME_SIZE, FRAME_SIZE)
        self.dest_rect = pygame.Rect(0, 0, FRAME_SIZE, FRAME_SIZE)

    def init(self, loader: Loader = load_texture) -> None:
        """Load the enemy sprite sheets."""
        self.textures.load_enemy_textures(loader)

    def update(self, surface: pygame.Surface, delta_time: float) -> None:
        """Advance the enemy by one frame and draw it."""
        self.render(surface)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the base zombie's current frame, if its sheet is loaded."""
        texture = self.textures.zombie_base_idle
        if texture is None:
            return
        surface.blit(texture, self.dest_rect.topleft, self.src_rect)