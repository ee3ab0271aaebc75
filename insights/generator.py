import os
import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def format_date(value):
    """'2025-01-02' -> 'January 2, 2025'; si no es una fecha válida se deja igual"""
    try:
        d = datetime.strptime(value, '%Y-%m-%d')
    except (TypeError, ValueError):
        return value
    return f"{d:%B} {d.day}, {d.year}"


class SiteGenerator:
    def __init__(self, config, posts):
        self.config = config
        self.posts = posts
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)))
        self.env.filters['format_date'] = format_date
        self.output_dir = config.get('output_dir', 'docs')

    def generate(self):
        os.makedirs(self.output_dir, exist_ok=True)

        # 1. Renderizar Indice
        written = [self._render_index()]

        # 2. Renderizar Posts Individuales
        written.extend(self._render_posts())

        logger.info(f"✅ {len(written)} páginas generadas en {self.output_dir}")
        return written

    def _write(self, filename, html):
        path = os.path.join(self.output_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
        return path

    def _render_index(self):
        template = self.env.get_template('index.html')
        html = template.render(config=self.config, posts=self.posts)
        return self._write("index.html", html)

    def _render_posts(self):
        template = self.env.get_template('post.html')
        paths = []
        for post in self.posts:
            html = template.render(config=self.config, post=post, body=post.html())
            paths.append(self._write(f"{post.slug}.html", html))
        return paths
