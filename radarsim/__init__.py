"""Air traffic radar simulation with planes, control towers and collisions."""

__version__ = "0.1.0"