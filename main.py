import os
import sys
import argparse
import logging
from pathlib import Path

from insights.config import BlogSelector, github_token
from insights.fetcher import GitHubFetcher, LocalFetcher, ContentSourceError, load_posts
from insights.generator import SiteGenerator, format_date
from insights.logger import setup_logger
from insights.renderer import render
from insights.seo import generate_sitemap, generate_rss

logger = logging.getLogger("insights.main")


class BlogEngine:
    """Lee los posts de la fuente configurada y construye el sitio"""

    def __init__(self, config, source='github'):
        self.config = config
        self.name = config['name']
        if source == 'local':
            self.fetcher = LocalFetcher(config)
        else:
            self.fetcher = GitHubFetcher(config, token=github_token())

        logger.info(f"🎯 Blog configurado: {self.name}")
        logger.info(f"📂 Source: {source} ({config['owner']}/{config['repo']}/{config['path']})")

    def fetch_posts(self, limit=True):
        max_posts = self.config.get('max_posts') if limit else None
        return load_posts(self.fetcher, max_posts=max_posts)

    def show_posts(self, limit=True):
        posts = self.fetch_posts(limit)
        if not posts:
            print("No posts yet")
            return posts
        for post in posts:
            print(f"{format_date(post.date):<20} [{post.category}] {post.title}")
        return posts

    def build_site(self):
        """Listado completo -> páginas HTML + sitemap + RSS"""
        logger.info(f"🏗️  [{self.name}] Construyendo sitio estático...")
        posts = self.fetch_posts(limit=False)
        if not posts:
            logger.warning("⚠️ No se encontraron posts para renderizar.")

        written = SiteGenerator(self.config, posts).generate()

        output_dir = self.config['output_dir']
        base_url = self.config.get('site_url', '')
        written.append(generate_sitemap(posts, base_url, output_dir))
        written.append(generate_rss(
            posts, base_url, self.config['site_title'],
            self.config.get('description', ''), output_dir,
        ))
        logger.info(f"✅ Sitio {self.name} generado en {output_dir}")
        return written


def build_parser():
    parser = argparse.ArgumentParser(
        description="Blog de Insights: posts markdown desde GitHub a HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ejemplos de uso:
  # Listar los últimos posts publicados
  python main.py --posts

  # Construir el sitio desde la carpeta local blog/
  python main.py --source local --build

  # Ver el HTML de un post concreto
  python main.py --render blog/2025-01-02-future-of-ai-in-construction.md
        """
    )

    parser.add_argument('--config', '-c', default='config.json',
                        help='Archivo de configuración (por defecto config.json)')
    parser.add_argument('--blog', '-b', type=str,
                        help='Nombre del blog a procesar (de config.json)')
    parser.add_argument('--list-blogs', '-l', action='store_true',
                        help='Listar todos los blogs disponibles')
    parser.add_argument('--source', choices=['github', 'local'], default='github',
                        help='De dónde leer los posts')

    parser.add_argument('--posts', '-p', action='store_true',
                        help='Mostrar el listado de posts')
    parser.add_argument('--all', action='store_true',
                        help='Usar el listado completo en vez de max_posts')
    parser.add_argument('--render', metavar='FILE',
                        help='Renderizar un archivo markdown local a HTML')
    parser.add_argument('--build', action='store_true',
                        help='Generar index, páginas de posts, sitemap y RSS')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Logging en modo debug')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(logging.DEBUG if args.verbose else logging.INFO, os.getenv("INSIGHTS_LOG_FILE"))

    # Renderizar un archivo suelto no necesita configuración
    if args.render:
        try:
            print(render(Path(args.render).read_text(encoding='utf-8')))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"❌ No se pudo leer {args.render}: {e}")
            return 1
        return 0

    try:
        blog_selector = BlogSelector(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    if args.list_blogs:
        print(f"\n📋 Blogs disponibles en {args.config}:")
        for i, blog_name in enumerate(blog_selector.list_blogs(), 1):
            print(f"  {i}. {blog_name}")
        return 0

    if not args.posts and not args.build:
        parser.print_help()
        return 0

    try:
        if args.blog:
            blog_configs = [blog_selector.get_blog_config(args.blog)]
        else:
            blog_configs = blog_selector.get_blog_config()
    except ValueError as e:
        logger.error(str(e))
        return 1

    status = 0
    for blog_config in blog_configs:
        engine = BlogEngine(blog_config, source=args.source)
        try:
            if args.posts:
                engine.show_posts(limit=not args.all)
            if args.build:
                engine.build_site()
        except ContentSourceError as e:
            logger.error(f"❌ No se pudieron cargar los posts de {blog_config['name']}: {e}")
            if args.verbose:
                logger.exception(e)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
