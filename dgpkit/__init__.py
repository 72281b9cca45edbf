"""Geometry-processing building blocks: tokenizer, bounding boxes, rotations and loader/saver registries."""

__version__ = "0.1.0"
__all__ = ["tokenizer", "bbox", "rotation", "registry"]