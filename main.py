import argparse
import logging
import sys

import pygame

from render import blit_field
from settings import Settings, SpawnMode
from simulation import Simulation

log = logging.getLogger("physarum")


def configure_logging(level: str = "INFO"):
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(handler)
    root.setLevel(level.upper())


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Physarum (slime mold) simulation")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--agents", type=int, help="number of agents to spawn")
    parser.add_argument("--mode", choices=[m.name.lower() for m in SpawnMode], help="spawn mode")
    parser.add_argument("--radius", type=float, help="spawn radius for the circle modes")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--frames", type=int, help="stop after this many frames")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def load_settings(args) -> Settings:
    settings = Settings.from_file(args.config) if args.config else Settings()
    overrides = {
        "num_agents": args.agents,
        "spawn_mode": args.mode,
        "spawn_radius": args.radius,
        "seed": args.seed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        settings = Settings.from_dict({**settings.to_dict(), **overrides})
    return settings


class App:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.simulation = Simulation.from_settings(settings)
        self.field_surface = pygame.Surface((settings.width, settings.height), 0, 32)

    def _init_pygame(self):
        pygame.init()
        screen = pygame.display.set_mode((self.settings.window_width, self.settings.window_height))
        pygame.display.set_caption("Physarum (Slime Mold) Simulation")
        return screen

    def draw(self, screen, font, fps: float):
        blit_field(self.field_surface, self.simulation.field_snapshot(),
                   self.settings.background_color, self.settings.pheromone_color)
        screen.blit(pygame.transform.scale(self.field_surface, screen.get_size()), (0, 0))
        fps_text = font.render(f"FPS: {fps:.0f}", True, (255, 255, 255))
        fps_text.set_alpha(77)
        screen.blit(fps_text, (10, 10))

    def run(self, max_frames: int = None):
        screen = self._init_pygame()
        font = pygame.font.Font(None, 22)
        clock = pygame.time.Clock()
        log.info("Running %r", self.simulation)
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            dt = clock.tick() / 1000.0
            self.simulation.step(dt)
            self.draw(screen, font, clock.get_fps())
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False

        log.info("Stopped after %d frames", frames)
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings(args)
    App(settings).run(args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
