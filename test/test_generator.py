import xml.etree.ElementTree as ET

from insights.generator import SiteGenerator, format_date
from insights.parser import parse
from insights.seo import generate_rss, generate_sitemap


def _posts():
    return [
        parse("---\ncategory: AI & Technology\n---\n# Future\n\nAI on **site**.", "2025-01-02-future-of-ai.md"),
        parse("---\ntitle: Leadership Lessons\n---\nPeople scale slower.", "2025-01-01-leadership.md"),
    ]


def _config(tmp_path):
    return {
        "site_title": "Blog - Ian Yeo",
        "author": "Ian Yeo",
        "site_url": "https://ianyeo.com",
        "output_dir": str(tmp_path / "docs"),
    }


def test_format_date():
    assert format_date("2025-01-02") == "January 2, 2025"
    assert format_date("someday") == "someday"
    assert format_date(None) is None


def test_generate_writes_index_and_posts(tmp_path):
    written = SiteGenerator(_config(tmp_path), _posts()).generate()

    out = tmp_path / "docs"
    assert sorted(p.split("/")[-1] for p in written) == [
        "2025-01-01-leadership.html",
        "2025-01-02-future-of-ai.html",
        "index.html",
    ]

    index = (out / "index.html").read_text(encoding="utf-8")
    assert "Latest Insights &amp; News" in index
    assert 'href="2025-01-02-future-of-ai.html"' in index
    assert "January 2, 2025" in index
    assert "Leadership Lessons" in index

    page = (out / "2025-01-02-future-of-ai.html").read_text(encoding="utf-8")
    assert "<title>future-of-ai - Ian Yeo</title>" in page
    assert "Published on January 2, 2025 | Category: AI & Technology" in page
    assert "<p>AI on <strong>site</strong>.</p>" in page


def test_empty_index_shows_no_posts(tmp_path):
    SiteGenerator(_config(tmp_path), []).generate()
    index = (tmp_path / "docs" / "index.html").read_text(encoding="utf-8")
    assert "No posts yet" in index


def test_sitemap_and_rss(tmp_path):
    posts = _posts()
    sitemap = generate_sitemap(posts, "https://ianyeo.com/", str(tmp_path))
    rss = generate_rss(posts, "https://ianyeo.com", "Blog - Ian Yeo", output_dir=str(tmp_path))

    ns = {"s": "http://www.sitemaps.org/schemas/sitemap/0.9"}
    locs = [e.text for e in ET.parse(sitemap).getroot().findall("s:url/s:loc", ns)]
    assert locs == [
        "https://ianyeo.com/blog",
        "https://ianyeo.com/blog/2025-01-02-future-of-ai.html",
        "https://ianyeo.com/blog/2025-01-01-leadership.html",
    ]

    items = ET.parse(rss).getroot().findall("channel/item")
    assert [i.findtext("title") for i in items] == ["future-of-ai", "Leadership Lessons"]
    assert items[0].findtext("pubDate") == "Thu, 02 Jan 2025 00:00:00 +0000"
    assert items[1].findtext("description") == "People scale slower...."
