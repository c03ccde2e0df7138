"""vitekit -- interactive scaffolding for Vite frontend projects."""

__version__ = "0.1.0"
