# src/platformer/game.py
import sys, argparse
import pygame
from pygame import K_ESCAPE, K_RETURN
from .config import WIDTH, HEIGHT, FPS, COLOR_BG, COLOR_FG, COLOR_CHECKPOINT
from .hud import MessageOverlay
from .simulation import Simulation, Viewport, KEY_BINDINGS


def parse_args():
    p = argparse.ArgumentParser(description="Side-scrolling checkpoint platformer")
    p.add_argument("--width", type=int, default=WIDTH, help="Window width in px.")
    p.add_argument("--height", type=int, default=HEIGHT,
                   help="Window height in px. Below 500 every size is scaled down at load.")
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--debug", action="store_true", help="Print checkpoint claims to stdout.")
    return p.parse_args()


def draw_start_screen(screen, font, title_font):
    w, h = screen.get_size()
    screen.fill(COLOR_BG)
    title = title_font.render("Platformer", True, COLOR_CHECKPOINT)
    hint = font.render("Press ENTER or click to start", True, COLOR_FG)
    rules = font.render("ARROWS move | UP / SPACE jump | reach every checkpoint in order", True, COLOR_FG)
    screen.blit(title, (w // 2 - title.get_width() // 2, h // 3))
    screen.blit(hint, (w // 2 - hint.get_width() // 2, h // 3 + 60))
    screen.blit(rules, (w // 2 - rules.get_width() // 2, h // 3 + 90))


def run():
    args = parse_args()

    pygame.init()
    pygame.display.set_caption("Platformer")
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)
    title_font = pygame.font.SysFont("jetbrainsmono", 36)

    overlay = MessageOverlay()
    finished = {"done": False}

    def on_message(text, auto_hide):
        overlay.show(text, auto_hide, pygame.time.get_ticks())

    def on_complete():
        finished["done"] = True

    viewport = Viewport(*screen.get_size())
    sim = Simulation(viewport,
                     on_checkpoint_message=on_message,
                     on_run_complete=on_complete,
                     debug=args.debug or None)

    while True:
        clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.VIDEORESIZE:
                # later resizes move the floor / right bound only, sizes stay as loaded
                viewport = Viewport(event.w, event.h)
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if not sim.running:
                    if event.key == K_RETURN:
                        sim.start()
                    continue
                if event.key in KEY_BINDINGS:
                    sim.on_input(event.key, True)
            if event.type == pygame.KEYUP and sim.running and event.key in KEY_BINDINGS:
                sim.on_input(event.key, False)
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not sim.running:
                sim.start()

        if not sim.running:
            draw_start_screen(screen, font, title_font)
            pygame.display.flip()
            continue

        # draw the pre-move state, then advance
        sim.render(screen)
        sim.step_frame(viewport)

        overlay.update(pygame.time.get_ticks())
        overlay.draw(screen, font)

        total = len(sim.state.checkpoints)
        hud = f"Checkpoints: {sim.state.claimed_count}/{total}   {'DONE' if finished['done'] else ''}"
        screen.blit(font.render(hud, True, COLOR_FG), (12, 10))
        screen.blit(font.render("ARROWS move | UP/SPACE jump | ESC quit", True, (160, 180, 210)), (12, 32))

        pygame.display.flip()


if __name__ == "__main__":
    run()
