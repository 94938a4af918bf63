from .apartment import Apartment
from .value_objects import Address, Amenity, Description, Name

__all__ = [
    "Address",
    "Amenity",
    "Apartment",
    "Description",
    "Name",
]
