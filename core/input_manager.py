import pygame


class InputManager:
    """Turns the pygame event stream into light moves and toggle actions.

    on_move(x, y) is called for every pointer motion; the last call before
    a frame wins. Toggle keys are edge-detected once per frame in update().
    """

    def __init__(self, on_move=None):
        self.on_move = on_move
        self.keymap = {
            "toggle_buddies": pygame.K_b,
            "toggle_hits": pygame.K_h,
            "toggle_parallel": pygame.K_p,
            "quit": pygame.K_ESCAPE,
        }
        self.quit_requested = False

        # Filled by update(); key polling needs an initialised display
        self.keys = None
        self.prev_keys = None

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.quit_requested = True
        elif event.type == pygame.MOUSEMOTION and self.on_move:
            x, y = event.pos
            self.on_move(x, y)

    def pump(self):
        """Drain the pygame queue and refresh key state for this frame."""
        for event in pygame.event.get():
            self.handle_event(event)
        self.update(pygame.key.get_pressed())

    def update(self, keys):
        self.prev_keys = self.keys
        self.keys = keys
        if self.is_pressed("quit"):
            self.quit_requested = True

    def is_pressed(self, action):
        """True only on the frame the action's key went down."""
        key = self.keymap.get(action)
        if key is None or self.keys is None:
            return False
        was_down = self.prev_keys[key] if self.prev_keys is not None else False
        return bool(self.keys[key]) and not was_down
