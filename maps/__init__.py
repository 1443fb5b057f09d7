from maps.demo_map import DemoMap
from maps.map_base import MapBase
