from maps.map_base import MapBase
from settings import WIDTH, HEIGHT


class DemoMap(MapBase):
    def __init__(self):
        super().__init__(width=WIDTH, height=HEIGHT)

        self.add_obstacle([(10, 10), (120, 120), (10, 50)])
        self.add_obstacle([(600, 50), (450, 250), (230, 150)])
        self.add_obstacle([(50, 350), (100, 350), (60, 200), (20, 180)])
        self.add_obstacle([(800, 500), (900, 400), (870, 320), (760, 410)])
        self.add_obstacle([(300, 300), (310, 580), (510, 420), (560, 500), (550, 280)])
