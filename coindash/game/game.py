# coindash/game/game.py
import argparse
import pygame
from .config import (
    WIDTH, HEIGHT, FPS, SEED_DEFAULT, SPAWN_POLICY, PLATFORM_ENABLED, LOG_EVENTS,
    GROUND_LINE_Y, COLOR_BG, COLOR_FG, COLOR_GROUND, COLOR_HERO, COLOR_COIN, COLOR_DANGER, COLOR_OVERLAY
)
from .controller import GameController, Phase
from .input import InputSampler
from .track import SPAWN_POLICIES
from .world import WorldSnapshot

HELP_LINES = (
    "LEFT / RIGHT  run",
    "SPACE         jump (twice in the air)",
    "P             pause",
    "R             restart",
    "ESC           close help",
)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Coin Dash endless runner")
    p.add_argument("--seed", type=int, default=None,
                   help="Track seed. Omit for SEED_DEFAULT, use -1 for random each restart.")
    p.add_argument("--spawn-policy", choices=SPAWN_POLICIES, default=SPAWN_POLICY,
                   help="Coin/spike spawning: randomized intervals or per-frame draws")
    p.add_argument("--no-platform", action="store_true",
                   help="Disable the floating platform variant")
    p.add_argument("--log-events", action="store_true", default=LOG_EVENTS,
                   help="Print game events to stdout")
    return p.parse_args(argv)


def resolve_seed(seed):
    # None -> SEED_DEFAULT; -1 -> random (Track picks one)
    if seed is None:
        return SEED_DEFAULT
    if seed == -1:
        return None
    return seed


def _rect(box) -> pygame.Rect:
    x, y, w, h = box
    return pygame.Rect(int(x), int(y), int(w), int(h))


def draw_world(surf: pygame.Surface, snap: WorldSnapshot):
    """Ground, platform, coins, spikes and hero as flat shapes, from a snapshot only."""
    surf.fill(COLOR_BG)
    pygame.draw.rect(surf, COLOR_GROUND, pygame.Rect(0, GROUND_LINE_Y, WIDTH, surf.get_height() - GROUND_LINE_Y))
    if snap.platform is not None:
        pygame.draw.rect(surf, COLOR_GROUND, _rect(snap.platform))
    for c in snap.coins:
        pygame.draw.ellipse(surf, COLOR_COIN, _rect(c))
    for s in snap.spikes:
        r = _rect(s)
        pygame.draw.polygon(surf, COLOR_DANGER, (r.bottomleft, r.bottomright, (r.centerx, r.top)))
    color = COLOR_DANGER if snap.phase == Phase.GAME_OVER.value else COLOR_HERO
    pygame.draw.rect(surf, color, _rect(snap.hero))


def draw(screen: pygame.Surface, font: pygame.font.Font, ctrl: GameController):
    snap = ctrl.snapshot()
    draw_world(screen, snap)

    hud = f"Score: {snap.score}   Lives: {snap.lives}   Seed: {ctrl.world.track.seed}"
    screen.blit(font.render(hud, True, COLOR_FG), (12, 10))
    screen.blit(font.render("ESC help | P pause | R restart", True, (160, 180, 210)), (12, 32))

    lines = ()
    if snap.help_open:
        lines = HELP_LINES
    elif snap.phase == Phase.GAME_OVER.value:
        lines = ("Game Over - Press R to restart",)
    elif snap.phase == Phase.PAUSED.value:
        lines = ("Paused - Press P to resume",)

    if lines:
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))
        y0 = HEIGHT // 2 - 11 * len(lines)
        for i, msg in enumerate(lines):
            txt = font.render(msg, True, COLOR_FG)
            screen.blit(txt, (WIDTH // 2 - txt.get_width() // 2, y0 + i * 22))


def run(argv=None):
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("Coin Dash")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    ctrl = GameController(seed=resolve_seed(args.seed),
                          spawn_policy=args.spawn_policy,
                          platform_enabled=PLATFORM_ENABLED and not args.no_platform,
                          log_events=args.log_events)
    sampler = InputSampler()

    try:
        while True:
            dt = clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                sampler.handle_event(event)

            ctrl.tick(dt, sampler.sample())
            draw(screen, font, ctrl)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
