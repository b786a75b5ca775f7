# game.py
import logging

logger = logging.getLogger(__name__)

# ==== KONFIGURASI ====
GAME_DURATION = 180     # detik
SCORE_INCREMENT = 10

PLAYING = "playing"
WON = "won"
LOST = "lost"

# Arah gerak: (d_row, d_col, dinding yang harus terbuka)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
MOVES = {
    UP: (-1, 0, "top"),
    DOWN: (1, 0, "bottom"),
    LEFT: (0, -1, "left"),
    RIGHT: (0, 1, "right"),
}


class GameState:
    """
    State satu sesi game, tanpa pygame.

    Player mulai di (0, 0), exit di pojok kanan bawah. Setiap langkah
    dicek ke flag dinding grid sebelum posisi diubah.
    """

    def __init__(self, grid, duration=GAME_DURATION, score_increment=SCORE_INCREMENT):
        self.duration = duration
        self.score_increment = score_increment
        self.restart(grid)

    def restart(self, grid):
        self.grid = grid
        self.player_row, self.player_col = 0, 0
        self.exit_row = self.exit_col = grid.size - 1
        self.time_left = self.duration
        self.score = 0
        self.status = PLAYING
        self.moves = 0
        self.stepped = {(0, 0)}
        # Maze 1x1: start sudah di exit
        self._check_exit()

    @property
    def player(self):
        return self.player_row, self.player_col

    @property
    def finished(self):
        return self.status != PLAYING

    def move(self, direction):
        if direction not in MOVES:
            raise ValueError(f"unknown direction: {direction!r}")
        if self.finished:
            return False

        dr, dc, side = MOVES[direction]
        if not self.grid.can_move(self.player_row, self.player_col, side):
            return False

        self.player_row += dr
        self.player_col += dc
        self.moves += 1
        if self.player not in self.stepped:
            self.stepped.add(self.player)
            self.score += self.score_increment
        self._check_exit()
        return True

    def tick(self, seconds=1):
        if self.finished:
            return
        self.time_left = max(0, self.time_left - seconds)
        if self.time_left == 0:
            self.status = LOST
            logger.info("time expired at %s after %d moves", self.player, self.moves)

    def _check_exit(self):
        if self.player == (self.exit_row, self.exit_col):
            self.status = WON
            # Bonus sisa waktu
            self.score += self.time_left * self.score_increment
            logger.info("exit reached in %d moves, score %d", self.moves, self.score)
