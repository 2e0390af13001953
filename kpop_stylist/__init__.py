"""K-Pop Stylist API: photo-based styling reports and outfit images."""

__version__ = "1.0.0"
