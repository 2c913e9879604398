from .box import Box
from .bvh import BVHNode
from .hittable import HitRecord, Hittable, RotateY, Translate
from .medium import ConstantMedium
from .rect import AxisAlignedRect, XYRect, XZRect, YZRect
from .sphere import MovingSphere, Sphere
from .world import HittableList

__all__ = [
    "AxisAlignedRect",
    "BVHNode",
    "Box",
    "ConstantMedium",
    "HitRecord",
    "Hittable",
    "HittableList",
    "MovingSphere",
    "RotateY",
    "Sphere",
    "Translate",
    "XYRect",
    "XZRect",
    "YZRect",
]
