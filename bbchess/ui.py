"""Window, drawing and mouse handling for playing a game."""

import argparse
import sys
from pathlib import Path

import pygame

from .constants import TILESIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from .fen import START_FEN
from .game import Game

FULL_BOARD = (1 << 64) - 1

DEFAULT_ASSETS = "assets/pieces-basic-png"

PIECE_IMAGE_NAMES = tuple(
    f"{colour}-{piece}.png"
    for colour in ("black", "white")
    for piece in ("pawn", "knight", "bishop", "rook", "queen", "king")
)

BACKGROUND = (130, 115, 185)
LIGHT_SQUARE = (245, 245, 235)
HIGHLIGHT = (150, 0, 0, 100)


def square_at(mouse_x, mouse_y, blocked):
    """Square under the mouse, or None when that square is set in `blocked`."""
    square = mouse_y // TILESIZE * 8 + mouse_x // TILESIZE
    if blocked & (1 << square):
        return None
    return square


def load_piece_images(directory=DEFAULT_ASSETS):
    """Load the twelve piece images, black pawn to white king."""
    images = []
    for name in PIECE_IMAGE_NAMES:
        path = Path(directory) / name
        if not path.is_file():
            raise FileNotFoundError(f"missing piece image: {path}")
        images.append(pygame.image.load(str(path)))
    return images


class Renderer:
    """Draws the board, pieces and move highlights onto a surface."""

    def __init__(self, surface, images):
        if len(images) != 12:
            raise ValueError(f"expected 12 piece images, got {len(images)}")
        self.surface = surface
        self.images = [
            pygame.transform.scale(image, (TILESIZE, TILESIZE)) for image in images
        ]

    def _present(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def _draw_board(self):
        self.surface.fill(BACKGROUND)
        for i in range(8):
            for j in range(8):
                if (i + j) % 2 == 0:
                    rect = (i * TILESIZE, j * TILESIZE, TILESIZE, TILESIZE)
                    self.surface.fill(LIGHT_SQUARE, rect)

    def _draw_pieces(self, bitboards):
        for square in range(64):
            for index, bb in enumerate(bitboards[:12]):
                if bb & (1 << square):
                    position = (square % 8 * TILESIZE, square // 8 * TILESIZE)
                    self.surface.blit(self.images[index], position)

    def render(self, bitboards):
        """Draw the board and every piece."""
        self._draw_board()
        self._draw_pieces(bitboards)
        self._present()

    def render_legal_moves(self, start, legal_moves):
        """Shade the destination squares of the moves starting on `start`."""
        overlay = pygame.Surface((TILESIZE, TILESIZE), pygame.SRCALPHA)
        overlay.fill(HIGHLIGHT)
        for move in legal_moves:
            if move.start == start:
                position = (move.dest % 8 * TILESIZE, move.dest // 8 * TILESIZE)
                self.surface.blit(overlay, position)
        self._present()


class Controller:
    """Turns window events into moves of a game."""

    def __init__(self, game, renderer):
        self.game = game
        self.renderer = renderer
        self.running = True
        self.selected = None

    def handle_event(self, event):
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            own = self.game.occupancy()[self.game.flags.player]
            x, y = event.pos
            self.selected = square_at(x, y, ~own & FULL_BOARD)
            self.renderer.render_legal_moves(self.selected, self.game.legal_moves)
        elif event.type == pygame.MOUSEBUTTONUP:
            own = self.game.occupancy()[self.game.flags.player]
            x, y = event.pos
            dest = square_at(x, y, own)
            if self.game.try_move(self.selected, dest):
                if self.game.is_checkmate():
                    print("CHECKMATE")
                elif self.game.in_check():
                    print("CHECK!")
            self.selected = None
            self.renderer.render(self.game.bitboards)


def main(argv=None):
    """Open a window and play a game until it is closed."""
    parser = argparse.ArgumentParser(prog="bbchess", description="Play chess.")
    parser.add_argument("--assets", default=DEFAULT_ASSETS, help="piece image directory")
    parser.add_argument("--fen", default=START_FEN, help="starting position")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.NOFRAME)
        try:
            images = load_piece_images(args.assets)
        except (FileNotFoundError, pygame.error) as exc:
            print(f"Image Loading: {exc}", file=sys.stderr)
            return 1
        game = Game(args.fen)
        renderer = Renderer(screen, images)
        controller = Controller(game, renderer)
        renderer.render(game.bitboards)
        while controller.running:
            controller.handle_event(pygame.event.wait())
    finally:
        pygame.quit()
    return 0