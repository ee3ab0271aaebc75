import json

import pytest

from insights.config import BlogSelector, github_token


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_defaults_are_applied(tmp_path):
    selector = BlogSelector(_write(tmp_path, [{"name": "Main", "owner": "o", "repo": "r"}]))
    blog = selector.get_blog_config("main")
    assert blog["path"] == "blog"
    assert blog["max_posts"] == 3
    assert blog["branch"] == "main"


def test_single_object_is_accepted(tmp_path):
    selector = BlogSelector(_write(tmp_path, {"name": "Solo", "owner": "o", "repo": "r", "max_posts": 5}))
    assert selector.list_blogs() == ["Solo"]
    assert selector.get_blog_config()[0]["max_posts"] == 5


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BlogSelector(str(tmp_path / "missing.json"))


def test_unknown_blog(tmp_path):
    selector = BlogSelector(_write(tmp_path, [{"name": "Main", "owner": "o", "repo": "r"}]))
    with pytest.raises(ValueError):
        selector.get_blog_config("Other")


def test_required_keys(tmp_path):
    with pytest.raises(ValueError, match="owner"):
        BlogSelector(_write(tmp_path, [{"name": "Main", "repo": "r"}]))


def test_github_token_fallback(monkeypatch):
    monkeypatch.delenv("GH_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "from-actions")
    assert github_token() == "from-actions"
    monkeypatch.setenv("GH_TOKEN", "explicit")
    assert github_token() == "explicit"
