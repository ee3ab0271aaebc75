import os
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime

logger = logging.getLogger(__name__)


def post_url(base_url, post):
    return f"{base_url.rstrip('/')}/blog/{post.slug}.html"


def _pub_date(date):
    """Fecha RFC 822 para RSS; si la fecha del post no es válida se usa tal cual"""
    try:
        d = datetime.strptime(date, '%Y-%m-%d').replace(tzinfo=timezone.utc)
    except ValueError:
        return date
    return format_datetime(d)


def generate_sitemap(posts, base_url, output_dir="docs"):
    """
    Genera sitemap.xml con la home del blog y un <url> por post.
    """
    urlset = ET.Element("urlset", xmlns="http://www.sitemaps.org/schemas/sitemap/0.9")

    url = ET.SubElement(urlset, "url")
    ET.SubElement(url, "loc").text = f"{base_url.rstrip('/')}/blog"
    ET.SubElement(url, "lastmod").text = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    ET.SubElement(url, "changefreq").text = "daily"

    for post in posts:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = post_url(base_url, post)
        ET.SubElement(url, "lastmod").text = post.date
        ET.SubElement(url, "changefreq").text = "weekly"

    path = os.path.join(output_dir, "sitemap.xml")
    ET.ElementTree(urlset).write(path, encoding='utf-8', xml_declaration=True)
    logger.info("Sitemap.xml generado exitosamente.")
    return path


def generate_rss(posts, base_url, title, description="", output_dir="docs"):
    """
    Genera rss.xml; la descripción de cada item es el excerpt del post.
    """
    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")

    ET.SubElement(channel, "title").text = title
    ET.SubElement(channel, "link").text = f"{base_url.rstrip('/')}/blog"
    ET.SubElement(channel, "description").text = description
    ET.SubElement(channel, "lastBuildDate").text = format_datetime(datetime.now(timezone.utc))

    for post in posts:
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = post.title
        ET.SubElement(item, "link").text = post_url(base_url, post)
        ET.SubElement(item, "guid").text = post_url(base_url, post)
        ET.SubElement(item, "category").text = post.category
        ET.SubElement(item, "description").text = post.excerpt
        ET.SubElement(item, "pubDate").text = _pub_date(post.date)

    path = os.path.join(output_dir, "rss.xml")
    ET.ElementTree(rss).write(path, encoding='utf-8', xml_declaration=True)
    logger.info("RSS.xml generado exitosamente.")
    return path
