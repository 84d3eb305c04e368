"""
radarscope.window
=================

The pygame side of the program: display creation, event dispatch and
frame presentation.  Handlers are plain callables registered by the
frame loop and invoked synchronously from `poll_events()`.

Key handling
------------
Escape, or the key in the physical Q position (scancode, so Dvorak/AZERTY
layouts still quit with the same finger), requests close.  Every other
key and every typed character is only logged.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

import pygame

from radarscope import constants as C
from radarscope.canvas import Canvas

logger = logging.getLogger(__name__)

ResizeHandler = Callable[[int, int], None]
KeyHandler    = Callable[[int, int, bool], None]
CharHandler   = Callable[[int], None]


class StartupError(RuntimeError):
    """Display, window or drawing surface could not be created."""


def is_quit_key(key: int, scancode: int) -> bool:
    return key == pygame.K_ESCAPE or scancode == pygame.KSCAN_Q


class Window:
    def __init__(self, width: int = C.DEFAULT_SIZE[0], height: int = C.DEFAULT_SIZE[1],
                 title: str = C.DEFAULT_TITLE) -> None:
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            raise StartupError(f"cannot open {width}x{height} window: {exc}") from exc
        pygame.display.set_caption(title)
        pygame.key.start_text_input()
        self.canvas = Canvas(self.screen)
        self._close = False
        self.on_resize: Optional[ResizeHandler] = None
        self.on_key:    Optional[KeyHandler]    = None
        self.on_char:   Optional[CharHandler]   = self._log_char
        logger.info("window %dx%d '%s' opened (%s driver)",
                    width, height, title, pygame.display.get_driver())

    @property
    def size(self):
        return self.screen.get_size()

    # ───────────────────────────────────────── close flag
    def should_close(self) -> bool:
        return self._close

    def request_close(self) -> None:
        if not self._close:
            logger.info("close requested")
        self._close = True

    # ───────────────────────────────────────── events
    def poll_events(self) -> None:
        for e in pygame.event.get():
            self.handle_event(e)

    def handle_event(self, e: pygame.event.Event) -> None:
        if e.type == pygame.QUIT:
            self.request_close()

        elif e.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.get_surface()
            self.canvas = Canvas(self.screen)
            if self.on_resize:
                self.on_resize(*e.size)

        elif e.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = e.type == pygame.KEYDOWN
            if pressed and is_quit_key(e.key, e.scancode):
                self.request_close()
            elif self.on_key:
                self.on_key(e.key, e.scancode, pressed)
            else:
                logger.debug("key %s ignored", pygame.key.name(e.key))

        elif e.type == pygame.TEXTINPUT and self.on_char:
            for ch in e.text:
                self.on_char(ord(ch))

    @staticmethod
    def _log_char(codepoint: int) -> None:
        logger.info("char input %d", codepoint)

    # ───────────────────────────────────────── frame
    def present(self) -> None:
        pygame.display.flip()

    def close(self) -> None:
        pygame.key.stop_text_input()
        pygame.display.quit()
