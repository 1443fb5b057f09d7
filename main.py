import argparse
import logging
import sys

import pygame

from settings import FPS, TITLE

from core.input_manager import InputManager
from core.render_surface import PygameSurface
from core.visibility import SAMPLING_MODES

from maps import DemoMap
from maps.map_base import MapBase

log = logging.getLogger("lightcast")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Soft-shadow light visibility demo")
    parser.add_argument("--map", type=str, default=None,
                        help="Map JSON file, or map module name (e.g. 'demo' for maps/demo_map.py)")
    parser.add_argument("--jitter-mode", choices=SAMPLING_MODES, default=None,
                        help="How rays are fanned around each obstacle vertex")
    parser.add_argument("--jitter-step", type=float, default=None,
                        help="Fan spacing: radians for 'angular', pixels for 'offset'")
    parser.add_argument("--colinear-hits", action="store_true",
                        help="Let rays running along a segment hit it")
    parser.add_argument("--no-buddies", action="store_true",
                        help="Single hard-edged light, no penumbra")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def load_map(name):
    if name is None:
        return DemoMap()
    if name.endswith(".json"):
        return MapBase.from_json(name)

    import importlib
    mod = importlib.import_module(f"maps.{name}_map")
    # Find the map class: first class that is a subclass of MapBase
    for attr_name in dir(mod):
        attr = getattr(mod, attr_name)
        if isinstance(attr, type) and issubclass(attr, MapBase) and attr is not MapBase:
            return attr()
    raise ValueError(f"maps.{name}_map defines no MapBase subclass")


def configure_scene(scene, args):
    if args.jitter_mode:
        scene.sampling["mode"] = args.jitter_mode
    if args.jitter_step is not None:
        scene.sampling["step"] = args.jitter_step
    scene.strict_parallel = not args.colinear_hits
    scene.buddies_enabled = not args.no_buddies
    return scene


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    current_map = load_map(args.map)
    scene = configure_scene(current_map.build_scene(), args)
    log.info(f"Scene ready: {len(scene.shapes)} shapes, sampling={scene.sampling}")

    pygame.init()
    screen = pygame.display.set_mode((current_map.width, current_map.height))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    surface = PygameSurface(screen)
    input_manager = InputManager(on_move=scene.set_light)

    while not input_manager.quit_requested:
        # -----------------------------
        # Input
        # -----------------------------
        input_manager.pump()

        if input_manager.is_pressed("toggle_buddies"):
            scene.buddies_enabled = not scene.buddies_enabled
        if input_manager.is_pressed("toggle_hits"):
            scene.show_hits = not scene.show_hits
        if input_manager.is_pressed("toggle_parallel"):
            scene.strict_parallel = not scene.strict_parallel
            log.info(f"strict_parallel={scene.strict_parallel}")

        # -----------------------------
        # Draw
        # -----------------------------
        scene.draw(surface)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
