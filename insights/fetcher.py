import logging
from pathlib import Path
from concurrent.futures import ThreadPoolExecutor

import requests

from insights.parser import ContentParser

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
MAX_WORKERS = 8


class ContentSourceError(RuntimeError):
    """No se pudo obtener el listado o el contenido de los posts"""


def select_markdown(entries):
    """Filtra .md (sin README.md) y ordena por nombre descendente (fecha en el nombre)"""
    files = [
        {'name': e['name'], 'download_url': e.get('download_url')}
        for e in entries
        if e['name'].endswith('.md') and e['name'].lower() != 'readme.md'
    ]
    return sorted(files, key=lambda e: e['name'], reverse=True)


class GitHubFetcher:
    def __init__(self, config, token=None):
        self.owner = config['owner']
        self.repo = config['repo']
        self.base_path = config.get('path', 'blog')
        self.branch = config.get('branch', 'main')
        self.timeout = config.get('timeout', 20)
        self.api_url = f"{GITHUB_API}/repos/{self.owner}/{self.repo}/contents/{self.base_path}"
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        if token:
            self.headers['Authorization'] = f"Bearer {token}"

    def _get(self, url, **kwargs):
        try:
            r = requests.get(url, headers=self.headers, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ContentSourceError(f"Error de red en {url}: {e}") from e
        if r.status_code != 200:
            raise ContentSourceError(f"{url} devolvió {r.status_code}")
        return r

    def list_files(self):
        """Lista [{name, download_url}] de los posts en la carpeta configurada"""
        params = {"ref": self.branch} if self.branch != "main" else {}
        r = self._get(self.api_url, params=params)
        try:
            data = r.json()
        except ValueError as e:
            raise ContentSourceError(f"{self.api_url} no devolvió JSON: {e}") from e
        if not isinstance(data, list):
            raise ContentSourceError(f"{self.api_url} no es un directorio")

        files = select_markdown(data)
        logger.info(f"📂 {len(files)} posts en {self.owner}/{self.repo}/{self.base_path}")
        return files

    def get_content(self, entry):
        """Obtiene el markdown crudo desde su download_url"""
        return self._get(entry['download_url']).text


class LocalFetcher:
    """Misma interfaz que GitHubFetcher pero sobre una carpeta local (desarrollo)"""

    def __init__(self, config):
        self.folder = Path(config.get('content_dir', 'blog'))

    def list_files(self):
        if not self.folder.is_dir():
            raise ContentSourceError(f"No existe la carpeta {self.folder}")

        entries = [
            {'name': p.name, 'download_url': p.resolve().as_uri()}
            for p in self.folder.iterdir() if p.is_file()
        ]
        files = select_markdown(entries)
        logger.info(f"📂 {len(files)} posts en {self.folder}")
        return files

    def get_content(self, entry):
        try:
            return (self.folder / entry['name']).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ContentSourceError(f"No se pudo leer {entry['name']}: {e}") from e


def load_posts(fetcher, max_posts=None, parser=None):
    """
    Listado -> descarga en paralelo -> parseo.

    Mantiene el orden del listado. Si falla cualquier descarga se propaga
    la excepción y se abandona el listado completo.
    """
    parser = parser or ContentParser()
    entries = fetcher.list_files()
    if max_posts is not None:
        entries = entries[:max_posts]
    if not entries:
        return []

    def fetch(entry):
        logger.debug(f"⬇️  {entry['name']}")
        return parser.parse(fetcher.get_content(entry), entry['name'])

    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(entries))) as pool:
        return list(pool.map(fetch, entries))
