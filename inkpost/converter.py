# inkpost/converter.py

import logging
import os
from datetime import datetime, timezone

import markdown
from jinja2 import Environment, PackageLoader

posts_dir = '_posts'
output_dir = os.path.join('_site', 'posts')
blog_index_path = 'blog.html'
home_page_path = 'index.html'

site_name = 'My Blog'
preview_length = 150
latest_posts = 3

FRONT_MATTER_MARKER = '---'
MARKDOWN_EXTENSIONS = ['fenced_code', 'tables']
DATE_FORMATS = ['%B %d, %Y', '%b %d, %Y', '%d %B %Y', '%Y/%m/%d', '%m/%d/%Y']

env = Environment(loader=PackageLoader('inkpost', 'templates'))
log = logging.getLogger(__name__)

# 按标记行拆分元数据和正文


def split_front_matter(text):
    lines = text.splitlines(keepends=True)
    markers = [i for i, line in enumerate(lines)
               if line.rstrip('\r\n') == FRONT_MATTER_MARKER]
    if len(markers) < 2:
        return None

    start, end = markers[0], markers[1]
    front_matter = [line.rstrip('\r\n') for line in lines[start + 1:end]]
    body = ''.join(lines[end + 1:])
    return front_matter, body


def extract_field(lines, key):
    prefix = key + ':'
    for line in lines:
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return None

# 日期只用于排序，无法解析的日期排在最后


def parse_date(value):
    value = value.strip()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = None
        for fmt in DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return datetime.min
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def make_preview(body, length=preview_length):
    # 取正文前两行，截断后总是加省略号
    lines = [line.rstrip('\r') for line in body.split('\n')[:2]]
    return ' '.join(lines)[:length] + '...'


def skip_post(filename, reason, skipped):
    log.warning('Skipping %s: %s', filename, reason)
    if skipped is not None:
        skipped.append((filename, reason))

# 解析Markdown文件并提取元数据


def parse_post(filename, text, skipped=None):
    parts = split_front_matter(text)
    if parts is None:
        skip_post(filename, 'missing front matter', skipped)
        return None

    front_matter, body = parts
    title = extract_field(front_matter, 'title')
    if title is None:
        skip_post(filename, 'missing title', skipped)
        return None
    date = extract_field(front_matter, 'date')
    if date is None:
        skip_post(filename, 'missing date', skipped)
        return None

    entry = {
        'title': title,
        'date': date,
        'sort_date': parse_date(date),
        'slug': filename[:-len('.md')] if filename.endswith('.md') else filename,
        'preview': make_preview(body),
    }
    return entry, body


def render_markdown(body):
    return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def render_post(entry, content):
    return env.get_template('post.html').render(
        title=entry['title'],
        date=entry['date'],
        content=content,
        site_name=site_name,
    )

# 把所有文章转换成HTML页面，返回未排序的文章列表


def convert_posts(source_dir, target_dir, skipped=None):
    entries = []
    filenames = [f for f in os.listdir(source_dir) if f.endswith('.md')]
    os.makedirs(target_dir, exist_ok=True)

    for filename in filenames:
        with open(os.path.join(source_dir, filename), 'r', encoding='utf-8') as file:
            text = file.read()

        parsed = parse_post(filename, text, skipped)
        if parsed is None:
            continue
        entry, body = parsed

        html = render_post(entry, render_markdown(body))
        output_filename = entry['slug'] + '.html'
        with open(os.path.join(target_dir, output_filename), 'w', encoding='utf-8') as file:
            file.write(html)
        entries.append(entry)

    return entries
