from .callbacks_display import register_display_callbacks

__all__ = ["register_display_callbacks"]
