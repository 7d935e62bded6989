"""Loading and bookkeeping of the sprite sheets used by the game."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Callable, Optional

import pygame

Texture = pygame.Surface
Loader = Callable[[str], Optional[Texture]]

# (attribute, image path, message printed when the image is missing)
PLAYER_TEXTURES = (
    ("player_side_idle", "Resources/Hunter/Idle/Idle-Side-Sheet.png",
     "Player Side Idle Texture is null"),
    ("player_up_idle", "Resources/Hunter/Idle/Idle-Up-Sheet.png",
     "Player Up Idle Texture is null"),
    ("player_down_idle", "Resources/Hunter/Idle/Idle-Down-Sheet.png",
     "Player Down Idle Texture is null"),
    ("player_side_walk", "Resources/Hunter/Walk/Walk-Side-Sheet.png",
     "Player Side Walk Texture is null"),
    ("player_up_walk", "Resources/Hunter/Walk/Walk-Up-Sheet.png",
     "Player Up Walk Texture is null"),
    ("player_down_walk", "Resources/Hunter/Walk/Walk-Down-Sheet.png",
     "Player Down Walk Texture is null"),
    ("player_attack_side", "Resources/Hunter/Attack/Slice-Side-Sheet.png",
     "Player Attack side texture is null"),
    ("player_attack_up", "Resources/Hunter/Attack/Slice-Up-Sheet.png",
     "Player Attack up texture is null"),
    ("player_attack_down", "Resources/Hunter/Attack/Slice-Down-Sheet.png",
     "Player Attack up texture is null"),
)

ENEMY_TEXTURES = (
    ("zombie_base_idle", "Resources/Zombie/Idle/Zombie-Base-Idle-Sheet.png",
     "Zombie Base Idle Texture is null"),
    ("zombie_banshee_idle", "Resources/Zombie/Idle/Zombie-Banshee-Idle-Sheet.png",
     "Zombie Banshee Idle Texture is null"),
    ("zombie_overweight_idle", "Resources/Zombie/Idle/Zombie-Overweight-Idle-Sheet.png",
     "Zombie Overweight Idle Texture is null"),
)


def load_texture(path: str) -> Optional[Texture]:
    """Load an image from disk, returning None if it cannot be read."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


@dataclass
class TextureSet:
    """The player and enemy sprite sheets; None marks a sheet not loaded."""

    player_side_idle: Optional[Texture] = None
    player_up_idle: Optional[Texture] = None
    player_down_idle: Optional[Texture] = None
    player_side_walk: Optional[Texture] = None
    player_up_walk: Optional[Texture] = None
    player_down_walk: Optional[Texture] = None
    player_attack_side: Optional[Texture] = None
    player_attack_up: Optional[Texture] = None
    player_attack_down: Optional[Texture] = None
    zombie_base_idle: Optional[Texture] = None
    zombie_banshee_idle: Optional[Texture] = None
    zombie_overweight_idle: Optional[Texture] = None

    def _load(self, table, loader: Loader) -> None:
        for attr, path, _ in table:
            setattr(self, attr, loader(path))

    def _missing(self, table) -> list[str]:
        return [message for attr, _, message in table if getattr(self, attr) is None]

    def _report(self, table) -> list[str]:
        missing = self._missing(table)
        for message in missing:
            print(message)
        return missing

    def _clear(self, table) -> None:
        for attr, _, _ in table:
            setattr(self, attr, None)

    def load_player_textures(self, loader: Loader = load_texture) -> None:
        """Load every player sheet through ``loader``."""
        self._load(PLAYER_TEXTURES, loader)

    def missing_player_textures(self) -> list[str]:
        """Messages for the player sheets that are not loaded."""
        return self._missing(PLAYER_TEXTURES)

    def check_player_textures(self) -> list[str]:
        """Print and return the messages for missing player sheets."""
        return self._report(PLAYER_TEXTURES)

    def destroy_player_textures(self) -> None:
        """Release every player sheet."""
        self._clear(PLAYER_TEXTURES)

    def load_enemy_textures(self, loader: Loader = load_texture) -> None:
        """Load every enemy sheet through ``loader``."""
        self._load(ENEMY_TEXTURES, loader)

    def missing_enemy_textures(self) -> list[str]:
        """Messages for the enemy sheets that are not loaded."""
        return self._missing(ENEMY_TEXTURES)

    def check_enemy_textures(self) -> list[str]:
        """Print and return the messages for missing enemy sheets."""
        return self._report(ENEMY_TEXTURES)

    def destroy_enemy_textures(self) -> None:
        """Release every enemy sheet."""
        self._clear(ENEMY_TEXTURES)

    def loaded(self) -> dict[str, Texture]:
        """All sheets currently loaded, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }