"""Shared pytest fixtures for inkpost tests."""

import pytest

from inkpost import converter

BLOG_INDEX = """<!DOCTYPE html>
<html lang="en">
<head><title>Blog Posts - My Blog</title></head>
<body>
    <header><h1>Blog Posts</h1></header>
    <main>
        <p>placeholder</p>
    </main>
    <footer><p>&copy; 2025 My Blog.</p></footer>
</body>
</html>
"""

HOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><title>My Blog</title></head>
<body>
    <main>
        <section>
            <h2>Welcome</h2>
        </section>
        <section>
            <h2>Latest Posts</h2>
            <p>placeholder</p>
        </section>
    </main>
    <footer><p>&copy; 2025 My Blog.</p></footer>
</body>
</html>
"""


@pytest.fixture
def make_post():
    """Build markdown source text with an optional title and date."""

    def _make(title=None, date=None, body='Body text.\n', extra=()):
        lines = ['---']
        if title is not None:
            lines.append('title: ' + title)
        if date is not None:
            lines.append('date: ' + date)
        lines.extend(extra)
        lines.append('---')
        return '\n'.join(lines) + '\n' + body

    return _make


@pytest.fixture
def site(tmp_path):
    """Temporary site layout: _posts/ and the two aggregator pages."""
    (tmp_path / '_posts').mkdir()
    (tmp_path / 'blog.html').write_text(BLOG_INDEX, encoding='utf-8')
    (tmp_path / 'index.html').write_text(HOME_PAGE, encoding='utf-8')
    return tmp_path


@pytest.fixture
def write_post(site):
    """Write a markdown file into the site's _posts directory."""

    def _write(name, content):
        path = site / '_posts' / name
        path.write_text(content, encoding='utf-8')
        return path

    return _write


@pytest.fixture
def entry():
    """Build a post entry the way converter.parse_post does."""

    def _entry(slug, date, title=None, preview='Preview...'):
        return {
            'title': title or slug.replace('-', ' ').title(),
            'date': date,
            'sort_date': converter.parse_date(date),
            'slug': slug,
            'preview': preview,
        }

    return _entry
