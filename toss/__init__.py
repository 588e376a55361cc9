"""
balltoss

Animates a ball along a gravity arc between two points on a container and
reports completion. The trajectory code is pure; the frame adapter, the
animation loop and the pygame sprite sit around it.
"""

__version__ = "0.1.0"

__all__ = ['__version__']
