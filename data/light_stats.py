# data/light_stats.py

LIGHT_STATS = {
    "buddy_distance": 7,
    "primary_color": (255, 255, 255, 255),
    "buddy_color": (255, 255, 255, 51),
    "outline_color": (255, 255, 255, 255),
    "outline_width": 2,
    "point_color": (255, 164, 0),
    "point_radius": 4,
    "hit_color": (220, 50, 50),
    "sampling": {
        "mode": "angular",
        "step": 0.0001,
    },
}

# Historical positional fan: vertex offsets in units of "step"
OFFSET_FAN = [(0, 0), (2, 1), (1, 1), (-1, -1), (-2, -1)]
