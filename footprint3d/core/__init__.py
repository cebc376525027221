from footprint3d.core.coordinates import AxisConvention, UpAxis, lift, up_vector

__all__ = ["AxisConvention", "UpAxis", "lift", "up_vector"]
