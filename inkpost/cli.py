# inkpost/cli.py

import argparse
import logging

from inkpost import converter, pages


def build_all(posts_dir, output_dir, blog_index_path=None, home_page_path=None, skipped=None):
    entries = converter.convert_posts(posts_dir, output_dir, skipped)
    if not entries:
        return entries

    if blog_index_path is not None:
        pages.update_blog_index(entries, blog_index_path)
    if home_page_path is not None:
        pages.update_home_page(entries, home_page_path)
    return entries


def main(argv=None):
    # 设置命令行参数
    parser = argparse.ArgumentParser(
        description='Build the blog: convert _posts/*.md to HTML and refresh '
                    'the blog index and home page.')
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    print('Converting markdown files to HTML...')
    entries = build_all(converter.posts_dir, converter.output_dir,
                        converter.blog_index_path, converter.home_page_path)

    if entries:
        print('Done! Processed', len(entries), 'markdown files.')
    else:
        print('No markdown files found in', converter.posts_dir, 'directory.')


if __name__ == '__main__':
    main()
