from shortcuts.models.shortcut_model import ShortcutModel


__all__ = ['ShortcutModel']
