import argparse
import asyncio
import os
import random
import sys

import pygame

from maze_data import generate_maze, CELL_SIZE, MAZE_SIZE as DEFAULT_MAZE_SIZE
from game import GameState, GAME_DURATION, UP, DOWN, LEFT, RIGHT, WON

# ==== DETECT WEB ====
IS_WEB = sys.platform == "emscripten"

# ==== KONFIGURASI ====
MAZE_SIZE = int(os.environ.get("MAZE_SIZE", DEFAULT_MAZE_SIZE))
MAZE_SEED = os.environ.get("MAZE_SEED")
TIMER_INTERVAL = 1000   # ms per detik timer
MOVE_DELAY = 150        # ms antar langkah saat tombol ditahan
PANEL_HEIGHT = 40
WALL_WIDTH = 2

# ==== WARNA ====
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
WALL = (51, 51, 51)
PLAYER = (255, 99, 71)
EXIT = (0, 255, 0)
RED = (255, 0, 0)
GRAY = (128, 128, 128)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def positive_int(value):
    size = int(value)
    if size <= 0:
        raise argparse.ArgumentTypeError(f"ukuran harus positif, dapat {value}")
    return size


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Maze runner game")
    parser.add_argument("--size", type=positive_int, default=MAZE_SIZE, help="grid side length")
    parser.add_argument("--seed", type=int, default=MAZE_SEED, help="seed for a reproducible maze")
    parser.add_argument("--text", action="store_true", help="print the maze as ASCII and exit")
    return parser.parse_args(argv)


def new_maze(size, seed):
    rng = random.Random(seed) if seed is not None else random.Random()
    maze = generate_maze(size, rng)
    print(f"🎮 Maze {size}x{size} generated" + (f" (seed {seed})" if seed is not None else ""))
    return maze


def step_player(state, keys):
    """Coba tiap tombol arah yang ditekan; berhenti di langkah pertama yang berhasil."""
    for key, direction in KEY_DIRECTIONS.items():
        if keys[key] and state.move(direction):
            return True
    return False


# ==== DRAW ====
def draw_maze(screen, grid):
    for cell in grid:
        x = cell.col * CELL_SIZE
        y = cell.row * CELL_SIZE + PANEL_HEIGHT
        if cell.has_wall("top"):
            pygame.draw.line(screen, WALL, (x, y), (x + CELL_SIZE, y), WALL_WIDTH)
        if cell.has_wall("right"):
            pygame.draw.line(screen, WALL, (x + CELL_SIZE, y), (x + CELL_SIZE, y + CELL_SIZE), WALL_WIDTH)
        if cell.has_wall("bottom"):
            pygame.draw.line(screen, WALL, (x, y + CELL_SIZE), (x + CELL_SIZE, y + CELL_SIZE), WALL_WIDTH)
        if cell.has_wall("left"):
            pygame.draw.line(screen, WALL, (x, y), (x, y + CELL_SIZE), WALL_WIDTH)


def draw_token(screen, row, col, color, inset):
    rect = pygame.Rect(
        col * CELL_SIZE + inset,
        row * CELL_SIZE + PANEL_HEIGHT + inset,
        CELL_SIZE - 2 * inset,
        CELL_SIZE - 2 * inset,
    )
    pygame.draw.rect(screen, color, rect)


# ==== MAIN GAME LOOP ====
async def main(args):
    pygame.init()
    screen_width = args.size * CELL_SIZE
    screen_height = args.size * CELL_SIZE + PANEL_HEIGHT
    screen = pygame.display.set_mode((screen_width, screen_height))
    pygame.display.set_caption("Maze Runner")

    font_small = pygame.font.SysFont(None, 28)
    font_large = pygame.font.SysFont(None, 64)

    state = GameState(new_maze(args.size, args.seed), duration=GAME_DURATION)
    timer_event = pygame.USEREVENT + 1
    pygame.time.set_timer(timer_event, TIMER_INTERVAL)

    clock = pygame.time.Clock()
    running = True
    last_move_time = 0

    while running:
        clock.tick(60)
        current_time = pygame.time.get_ticks()

        # Handle events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == timer_event:
                was_playing = not state.finished
                state.tick()
                if was_playing and state.finished:
                    print(f"⏰ Time up! Score: {state.score}")
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r and state.finished:
                    state.restart(new_maze(args.size, args.seed))

        # ============ MOVEMENT ============
        if not state.finished and current_time - last_move_time > MOVE_DELAY:
            if step_player(state, pygame.key.get_pressed()):
                last_move_time = current_time
                if state.status == WON:
                    print(f"🎉 Win! Score: {state.score}, time left: {state.time_left}s")

        # ============ DRAW ============
        screen.fill(WHITE)
        draw_maze(screen, state.grid)
        draw_token(screen, state.exit_row, state.exit_col, EXIT, 2)
        draw_token(screen, state.player_row, state.player_col, PLAYER, 6)

        # UI panel
        pygame.draw.rect(screen, GRAY, (0, 0, screen_width, PANEL_HEIGHT))
        score_text = font_small.render(f"Score: {state.score}", True, WHITE)
        screen.blit(score_text, (10, 10))
        timer_text = font_small.render(f"Time: {state.time_left}s", True, WHITE)
        screen.blit(timer_text, (screen_width - timer_text.get_width() - 10, 10))

        # Win / lose screen
        if state.finished:
            overlay = pygame.Surface((screen_width, screen_height - PANEL_HEIGHT))
            overlay.set_alpha(200)
            overlay.fill(BLACK)
            screen.blit(overlay, (0, PANEL_HEIGHT))

            won = state.status == WON
            result_text = font_large.render("You Won!" if won else "Game Over!", True, EXIT if won else RED)
            result_rect = result_text.get_rect(center=(screen_width // 2, screen_height // 2))
            screen.blit(result_text, result_rect)

            restart_text = font_small.render("Press R to Restart", True, WHITE)
            restart_rect = restart_text.get_rect(center=(screen_width // 2, screen_height // 2 + 50))
            screen.blit(restart_text, restart_rect)

        pygame.display.flip()
        await asyncio.sleep(0)  # CRITICAL for Pygbag

    pygame.quit()


def run(argv=None):
    args = parse_args([] if IS_WEB else argv)
    if args.text:
        print(new_maze(args.size, args.seed).to_text())
        return
    asyncio.run(main(args))


# ==== RUN ====
if __name__ == "__main__":
    run()
