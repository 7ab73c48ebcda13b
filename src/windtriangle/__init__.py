"""Wind triangle calculator: true airspeed and wind correction angle."""

__version__ = "0.1.0"
