"""Ray tracing building blocks: scene parsing, geometry, ray intersection and PPM canvas output."""

__version__ = "0.1.0"