WIDTH = 1000
HEIGHT = 600
FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
TITLE = "Lightcast"
