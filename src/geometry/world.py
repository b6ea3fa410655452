# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Optional, List, Tuple
from core.interval import Interval
from core.ray import Ray

class HittableList(Hittable):
    """
    The scene: an ordered list of Hittable objects. The hit() method returns
    the closest hit. Nothing here changes during a render, so one list is
    shared by every worker thread.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[Tuple[HitRecord, "Material"]]:
        result = None
        closest_so_far = ray_t.end
        for obj in self.objects:
            # Only a strictly nearer hit can replace the current best.
            found = obj.hit(ray, Interval(ray_t.start, closest_so_far))
            if found is not None:
                closest_so_far = found[0].t
                result = found
        return result
