# inkpost/pages.py

import logging
import re

from inkpost import converter

MAIN_START = re.compile(r'<main>')
MAIN_END = '</main>'
LATEST_START = re.compile(r'<section>\s*<h2>Latest Posts</h2>')
LATEST_END = '</section>'

log = logging.getLogger(__name__)

# 替换第一个由开始标记和结束标记包围的区域（包括标记本身）
# 找不到区域时原样返回


def find_region(text, start, end):
    match = start.search(text)
    if match is None:
        return None
    close = text.find(end, match.end())
    if close == -1:
        return None
    return match.start(), close + len(end)


def replace_region(text, start, end, replacement):
    region = find_region(text, start, end)
    if region is None:
        return text
    begin, finish = region
    return text[:begin] + replacement + text[finish:]


def sort_entries(entries):
    # sorted 是稳定排序，reverse 不会打乱日期相同的文章
    return sorted(entries, key=lambda entry: entry['sort_date'], reverse=True)


def rewrite_page(path, start, end, replacement, label):
    with open(path, 'r', encoding='utf-8', newline='') as file:
        content = file.read()

    if find_region(content, start, end) is None:
        log.warning('No %s region found in %s, leaving it unchanged', label, path)

    with open(path, 'w', encoding='utf-8', newline='') as file:
        file.write(replace_region(content, start, end, replacement))

# 更新博客列表页


def update_blog_index(entries, blog_index_path):
    main = converter.env.get_template('blog_index.html').render(
        entries=sort_entries(entries))
    rewrite_page(blog_index_path, MAIN_START, MAIN_END, main, 'main')
    log.info('Updated blog index %s', blog_index_path)

# 首页只显示最新的几篇文章


def update_home_page(entries, home_page_path, limit=converter.latest_posts):
    section = converter.env.get_template('latest_posts.html').render(
        entries=sort_entries(entries)[:limit])
    rewrite_page(home_page_path, LATEST_START, LATEST_END, section, 'Latest Posts')
    log.info('Updated home page %s', home_page_path)
