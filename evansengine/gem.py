"""A small filled disc drawn as the gem pickup."""

from __future__ import annotations

from typing import Iterator

import pygame


def disc_points(center_x: int, center_y: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield every integer point within ``radius`` of the centre, row by row."""
    for y in range(-radius, radius + 1):
        for x in range(-radius, radius + 1):
            if x * x + y * y <= radius * radius:
                yield center_x + x, center_y + y


class Gem:
    """Draws the gem as a filled disc of points."""

    def drop_gem(
        self,
        surface: pygame.Surface,
        center_x: int,
        center_y: int,
        radius: int,
        color,
    ) -> list[tuple[int, int]]:
        """Plot the disc onto ``surface`` and return the points drawn."""
        points = list(disc_points(center_x, center_y, radius))
        for point in points:
            surface.set_at(point, color)
        return points