import os
import json
import logging

logger = logging.getLogger(__name__)

DEFAULTS = {
    'path': 'blog',
    'branch': 'main',
    'max_posts': 3,
    'site_url': '',
    'site_title': 'Blog',
    'description': '',
    'author': '',
    'output_dir': 'docs',
    'content_dir': 'blog',
    'timeout': 20,
}

REQUIRED = ('name', 'owner', 'repo')


def github_token():
    """Token opcional para la API de GitHub (GH_TOKEN o, si no, GITHUB_TOKEN)"""
    return os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN")


class BlogSelector:
    """Gestiona la selección y carga de configuraciones de blogs"""

    def __init__(self, config_file='config.json'):
        self.config_file = config_file
        self.blogs = [self._with_defaults(blog) for blog in self._load_config()]

    def _load_config(self):
        """Carga el archivo de configuración JSON"""
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(f"❌ No se encontró {self.config_file}")

        with open(self.config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        # Se admite un único blog como objeto suelto
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError(f"❌ {self.config_file} debe contener una lista de blogs")
        return data

    def _with_defaults(self, blog):
        missing = [key for key in REQUIRED if not blog.get(key)]
        if missing:
            raise ValueError(f"❌ Faltan claves en la configuración del blog: {', '.join(missing)}")
        return {**DEFAULTS, **blog}

    def list_blogs(self):
        """Lista todos los blogs disponibles"""
        return [blog['name'] for blog in self.blogs]

    def get_blog_config(self, blog_name=None):
        """Obtiene la configuración de un blog específico o todos"""
        if blog_name:
            for blog in self.blogs:
                if blog['name'].lower() == blog_name.lower():
                    return blog
            raise ValueError(f"❌ Blog '{blog_name}' no encontrado en {self.config_file}")
        return self.blogs
