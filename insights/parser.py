import re
import logging
from dataclasses import dataclass, asdict
from datetime import datetime, timezone

from insights import front_matter
from insights.renderer import render

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = 'Insights'
EXCERPT_LENGTH = 150

DATE_RE = re.compile(r'(\d{4}-\d{2}-\d{2})')
DATE_PREFIX_RE = re.compile(r'^\d{4}-\d{2}-\d{2}-')
MD_SUFFIX_RE = re.compile(r'\.md$')

# Limpieza del excerpt, en este orden
HEADING_LINE_RE = re.compile(r'^#+\s+[^\r\n]*', re.M)
LINK_RE = re.compile(r'\[([^\]]+)\]\([^)]+\)')
BOLD_RE = re.compile(r'\*\*([^*]+)\*\*')
ITALIC_RE = re.compile(r'\*([^*]+)\*')


@dataclass(frozen=True)
class Post:
    title: str
    date: str
    category: str
    excerpt: str
    slug: str
    content: str

    def html(self):
        """Cuerpo renderizado para mostrar el post completo"""
        return render(self.content)

    def to_dict(self):
        return asdict(self)


def _today():
    return datetime.now(timezone.utc).date().isoformat()


def make_excerpt(body: str) -> str:
    text = HEADING_LINE_RE.sub('', body)
    text = LINK_RE.sub(r'\1', text)
    text = BOLD_RE.sub(r'\1', text)
    text = ITALIC_RE.sub(r'\1', text)
    first = text.split('\n\n', 1)[0]
    # Corte duro, sin respetar palabras
    return first[:EXCERPT_LENGTH] + '...'


def assemble(body: str, metadata: dict, filename: str) -> Post:
    """Construye el Post: primero el frontmatter, luego los valores derivados."""
    stem = MD_SUFFIX_RE.sub('', filename)

    date = metadata.get('date')
    if not date:
        match = DATE_RE.search(filename)
        date = match.group(1) if match else _today()

    return Post(
        title=metadata.get('title') or DATE_PREFIX_RE.sub('', stem),
        date=date,
        category=metadata.get('category') or DEFAULT_CATEGORY,
        excerpt=metadata.get('excerpt') or make_excerpt(body),
        slug=stem,
        content=body,
    )


class ContentParser:
    def parse(self, raw_md, filename):
        metadata, body = front_matter.extract(raw_md)
        logger.debug(f"{filename}: {len(metadata)} claves de frontmatter")
        return assemble(body, metadata, filename)


def parse(raw_md: str, filename: str) -> Post:
    return ContentParser().parse(raw_md, filename)
