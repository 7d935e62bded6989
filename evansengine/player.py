"""The player character: movement, animation state and drawing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from evansengine.animation import Animation
from evansengine.textures import Loader, Texture, TextureSet, load_texture

FRAME_SIZE = 64


@dataclass(frozen=True)
class Movement:
    """Which direction keys are held this frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @property
    def side(self) -> bool:
        return self.left or self.right

    @property
    def is_moving(self) -> bool:
        return self.up or self.down or self.side

    @property
    def only_up(self) -> bool:
        return self.up and not self.down and not self.side

    @property
    def only_down(self) -> bool:
        return self.down and not self.up and not self.side


def read_movement(keys) -> Movement:
    """Build a Movement from a key-state lookup indexed by key constants."""
    return Movement(
        up=bool(keys[pygame.K_w]),
        down=bool(keys[pygame.K_s]),
        left=bool(keys[pygame.K_a]),
        right=bool(keys[pygame.K_d]),
    )


class Player:
    """The hunter controlled with W, A, S and D."""

    def __init__(self) -> None:
        self.animation = Animation()
        self.textures = TextureSet()
        self.pos_x = 250.0
        self.pos_y = 250.0
        self.dest_x = self.pos_x
        self.dest_y = self.pos_y
        self.src_rect = pygame.Rect(0, 0, FRAME_SIZE, FRAME_SIZE)
        self.is_idle = True
        self.is_walking = False
        self.is_running = False
        self.is_dead = False
        self.is_facing_left = False
        self.health = 100
        self.speed = 100.0
        self.last_moving_up = False
        self.last_moving_down = False

    def init(self, loader: Loader = load_texture) -> None:
        """Load the player's sprite sheets."""
        self.textures.load_player_textures(loader)

    def check_textures(self) -> list[str]:
        """Print and return the messages for missing player sheets."""
        return self.textures.check_player_textures()

    def update(
        self, delta_time: float, surface: pygame.Surface, movement: Movement
    ) -> Optional[Texture]:
        """Move, animate and draw the player; return the sheet drawn from."""
        self.is_walking = movement.is_moving
        self.is_idle = not self.is_walking

        step = self.speed * delta_time
        if movement.up:
            self.dest_y -= step
        if movement.down:
            self.dest_y += step
        if movement.left:
            self.dest_x -= step
            self.is_facing_left = True
        if movement.right:
            self.dest_x += step
            self.is_facing_left = False

        if self.is_walking:
            self.last_moving_up = movement.only_up
            self.last_moving_down = movement.only_down

        self.animation.handle_walk(self.is_walking, self.is_idle, delta_time)
        self.src_rect.x = self.animation.current_frame * FRAME_SIZE

        texture = self.select_texture(movement)
        self.render(surface, texture)
        return texture

    def select_texture(self, movement: Movement) -> Optional[Texture]:
        """Choose the sheet for this movement and the last direction faced."""
        textures = self.textures
        if movement.is_moving:
            if movement.only_up:
                texture = textures.player_up_walk
            elif movement.only_down:
                texture = textures.player_down_walk
            else:
                texture = textures.player_side_walk
        elif self.last_moving_up:
            texture = textures.player_up_idle
        elif self.last_moving_down:
            texture = textures.player_down_idle
        else:
            texture = textures.player_side_idle
        return texture if texture is not None else textures.player_side_idle

    def render(self, surface: pygame.Surface, texture: Optional[Texture]) -> None:
        """Draw the current frame of ``texture``, mirrored when facing left."""
        if texture is None:
            return
        frame = pygame.Surface(self.src_rect.size, pygame.SRCALPHA)
        frame.blit(texture, (0, 0), self.src_rect)
        if self.is_facing_left:
            frame = pygame.transform.flip(frame, True, False)
        surface.blit(frame, (int(self.dest_x), int(self.dest_y)))