"""A small widget toolkit: frames, buttons and toplevels with a placer, recorded drawing and colour picking."""

__version__ = "0.1.0"
__all__ = ["geometry", "pixels", "events", "rendering", "widget", "frame", "button", "toplevel"]