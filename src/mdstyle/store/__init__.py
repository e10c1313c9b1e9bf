from mdstyle.store.themes import ThemeStore

__all__ = ["ThemeStore"]
