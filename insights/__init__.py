"""Motor de blog: posts markdown con frontmatter leídos de GitHub y renderizados a HTML."""

__version__ = "0.1.0"
