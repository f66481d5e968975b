"""The interactive restaurant finder window."""

import argparse
import os
import sys
from typing import Dict, List, Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .lcd_image import LcdImage, rgb565_to_rgb  # noqa: E402
from .listing import RestaurantMenu, sort_distances  # noqa: E402
from .restaurants import RestaurantStore, distances, star_rating  # noqa: E402
from .viewport import (  # noqa: E402
    CURSOR_SIZE,
    DISPLAY_HEIGHT,
    DISPLAY_WIDTH,
    JOY_CENTER,
    MAP_VIEW_WIDTH,
    YEG_SIZE,
    MapView,
)

RATING_BUTTON = 0
SORT_BUTTON = 1

_ROW_HEIGHT = 15
_TOUCH_MAP_MIN_X = 60
_JOY_MIN = 0
_JOY_MAX = 1023
_FPS = 30

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BLUE = (0, 0, 255)


class FinderApp:
    """Map browsing and nearby-restaurant listing driven by keyboard and mouse."""

    def __init__(self, image: LcdImage, store, view: Optional[MapView] = None) -> None:
        self.image = image
        self.store = store
        self.view = view if view is not None else MapView()
        self._menu: Optional[RestaurantMenu] = None
        self._running = False
        self._map_cache: Dict[Tuple[int, int], "pygame.Surface"] = {}
        self._dots: List[Tuple[int, int]] = []

    def button_at(self, x: int, y: int) -> Optional[int]:
        """Which sidebar button lies under a screen point, or None."""
        if x > MAP_VIEW_WIDTH:
            if 0 < y < DISPLAY_HEIGHT // 2:
                return RATING_BUTTON
            if DISPLAY_HEIGHT // 2 < y < DISPLAY_HEIGHT:
                return SORT_BUTTON
        return None

    def run(self) -> None:
        """Open the window and process input until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((DISPLAY_WIDTH, DISPLAY_HEIGHT))
            pygame.display.set_caption("Restaurant finder")
            font = pygame.font.Font(None, 20)
            clock = pygame.time.Clock()
            self._running = True
            while self._running:
                for event in pygame.event.get():
                    self._handle_event(event)
                if self._running and self._menu is None:
                    self._step_cursor(pygame.key.get_pressed())
                if self._menu is None:
                    self._draw_map_mode(screen, font)
                else:
                    self._draw_menu(screen, font)
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.quit()

    def _handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._running = False
            elif self._menu is None:
                if event.key == pygame.K_RETURN:
                    self._open_menu()
            elif event.key == pygame.K_UP:
                self._menu.up()
            elif event.key == pygame.K_DOWN:
                self._menu.down()
            elif event.key == pygame.K_RETURN:
                self._choose()
        elif event.type == pygame.MOUSEBUTTONDOWN and self._menu is None:
            self._touch(*event.pos)

    def _touch(self, x: int, y: int) -> None:
        button = self.button_at(x, y)
        if button == RATING_BUTTON:
            print(f"Rating selected is: {self.view.cycle_rating()}")
        elif button == SORT_BUTTON:
            print(f"Doing: {self.view.cycle_sort().label}")
        if x > _TOUCH_MAP_MIN_X:
            self._dots = self._visible_dots()

    def _visible_dots(self) -> List[Tuple[int, int]]:
        dots = []
        for rest in self.store:
            if star_rating(rest.rating) >= self.view.rating:
                position = self.view.dot_position(rest.lat, rest.lon)
                if position is not None:
                    dots.append(position)
        return dots

    def _step_cursor(self, keys) -> None:
        x_val = y_val = JOY_CENTER
        if keys[pygame.K_LEFT]:
            x_val = _JOY_MAX
        elif keys[pygame.K_RIGHT]:
            x_val = _JOY_MIN
        if keys[pygame.K_UP]:
            y_val = _JOY_MIN
        elif keys[pygame.K_DOWN]:
            y_val = _JOY_MAX
        self.view.move_cursor(x_val, y_val)
        direction = self.view.edge_direction()
        if direction is not None:
            self.view.shift(direction)
            self._dots = []

    def _open_menu(self) -> None:
        entries = distances(self.store, *self.view.map_cursor(), self.view.rating)
        for name, ms in sort_distances(entries, self.view.sort_method).items():
            print(f"{name} running time: {ms:.0f} ms")
        if not entries:
            print("No restaurants match the selected rating")
            return
        self._menu = RestaurantMenu(entries)

    def _choose(self) -> None:
        rest = self.store.get(self._menu.selected_index())
        print(rest.name)
        self.view.center_on(rest)
        self._menu = None
        self._dots = []

    def _map_surface(self) -> "pygame.Surface":
        origin = (self.view.map_x, self.view.map_y)
        surface = self._map_cache.get(origin)
        if surface is None:
            rows = self.image.read_patch(*origin, MAP_VIEW_WIDTH, DISPLAY_HEIGHT)
            data = bytearray()
            for row in rows:
                for pixel in row:
                    data.extend(rgb565_to_rgb(pixel))
            surface = pygame.image.frombuffer(
                bytes(data), (MAP_VIEW_WIDTH, DISPLAY_HEIGHT), "RGB"
            ).copy()
            self._map_cache = {origin: surface}
        return surface

    def _draw_map_mode(self, screen, font) -> None:
        screen.fill(_BLACK)
        screen.blit(self._map_surface(), (0, 0))
        for dot in self._dots:
            pygame.draw.circle(screen, _BLUE, dot, 3)
        half = CURSOR_SIZE // 2
        pygame.draw.rect(
            screen,
            _RED,
            (self.view.cursor_x - half, self.view.cursor_y - half, CURSOR_SIZE, CURSOR_SIZE),
        )
        self._draw_buttons(screen, font)

    def _draw_buttons(self, screen, font) -> None:
        half_height = DISPLAY_HEIGHT // 2
        text_x = DISPLAY_WIDTH - 35
        pygame.draw.rect(screen, _WHITE, (MAP_VIEW_WIDTH, 0, 60, half_height))
        pygame.draw.rect(screen, _RED, (MAP_VIEW_WIDTH, 0, 60, half_height), 1)
        screen.blit(font.render(str(self.view.rating), True, _BLACK), (text_x, 72))
        pygame.draw.rect(screen, _WHITE, (MAP_VIEW_WIDTH, half_height, 60, half_height))
        pygame.draw.rect(screen, _GREEN, (MAP_VIEW_WIDTH, half_height, 60, half_height), 1)
        for line, letter in enumerate(self.view.sort_method.label):
            screen.blit(font.render(letter, True, _BLACK), (text_x, 200 + line * 16))

    def _draw_menu(self, screen, font) -> None:
        screen.fill(_BLACK)
        for row, entry in enumerate(self._menu.visible()):
            name = self.store.get(entry.index).name
            if row == self._menu.selected:
                text = font.render(name, True, _BLACK, _WHITE)
            else:
                text = font.render(name, True, _WHITE, _BLACK)
            screen.blit(text, (0, row * _ROW_HEIGHT))


def main(argv=None) -> int:
    """Start the finder on an image file and a restaurant record file."""
    parser = argparse.ArgumentParser(description="Browse the city map and find nearby restaurants.")
    parser.add_argument("image", help="raw RGB565 map image")
    parser.add_argument("restaurants", help="file of 64-byte restaurant records")
    parser.add_argument("--image-size", type=int, default=YEG_SIZE, help="image width and height")
    parser.add_argument("--start-block", type=int, default=0, help="first 512-byte block of records")
    parser.add_argument("--count", type=int, default=None, help="number of restaurants")
    args = parser.parse_args(argv)

    if not os.path.isfile(args.image):
        print(f"File not found: '{args.image}'", file=sys.stderr)
        return 1
    try:
        store = RestaurantStore(args.restaurants, args.start_block, args.count)
    except OSError as exc:
        print(f"Cannot open restaurants: {exc}", file=sys.stderr)
        return 1
    image = LcdImage(args.image, args.image_size, args.image_size)
    with store:
        FinderApp(image, store).run()
    return 0