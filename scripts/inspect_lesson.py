"""Inspect how a lesson is sectioned and highlighted."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx

from lessonrender.catalog import find_course, find_topic, load_bundled_catalog, load_catalog_data
from lessonrender.render import render_lesson
from lessonrender.routes import parse_hash
from lessonrender.schemas import Catalog, RenderedCode, RenderedHeading, RenderedLesson
from lessonrender.utils.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect lesson sections and code tokens.")
    parser.add_argument("course_id", help="Course identifier (e.g. python-intro) or a lesson link (e.g. '#/python-intro/t1')")
    parser.add_argument("topic_id", nargs="?", help="Topic identifier (e.g. t1)")
    parser.add_argument("--url", help="Catalog URL to fetch instead of the bundled catalog")
    parser.add_argument("--file", help="Local catalog JSON file path")
    parser.add_argument("--tokens", action="store_true", help="Print every code token")
    parser.add_argument("--log-level", type=str.upper, default=None, help="Logging level (default from LESSONRENDER_LOG_LEVEL)")
    args = parser.parse_args()
    configure_logging(args.log_level)

    course_id, topic_id = args.course_id, args.topic_id
    if course_id.startswith("#"):
        route = parse_hash(course_id)
        course_id, topic_id = route.course_id, route.topic_id
    if not course_id or not topic_id:
        parser.error("a course and a topic are required")

    catalog = load(url=args.url, file_path=args.file)
    topic = find_topic(find_course(catalog, course_id), topic_id)
    if topic.page_blocks is None:
        print(f"{topic.title}: en construcción")
        return

    lesson = render_lesson(topic.page_blocks)
    print_sections(lesson)

    kinds = collect_token_stats(lesson)
    print("\nToken kinds:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")

    if args.tokens:
        print("\nTokens:")
        for section in lesson.sections:
            for block in section.blocks:
                if not isinstance(block, RenderedCode):
                    continue
                for line in block.lines:
                    print("  ".join(f"{token.kind.value}:{token.text!r}" for token in line))
                print()


def load(*, url: str | None, file_path: str | None) -> Catalog:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return load_catalog_data(response.text)

    if file_path:
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Catalog file not found: {path}")
        return load_catalog_data(path.read_text(encoding="utf-8"))

    return load_bundled_catalog()


def print_sections(lesson: RenderedLesson) -> None:
    print("Sections:")
    for section in lesson.sections:
        print(f"{section.title or '(sin título)'} [{len(section.blocks)} blocks]")
        for block in section.blocks:
            if isinstance(block, RenderedHeading):
                print(f"    {block.text}")


def collect_token_stats(lesson: RenderedLesson) -> Counter:
    kinds = Counter()
    for section in lesson.sections:
        for block in section.blocks:
            if isinstance(block, RenderedCode):
                for line in block.lines:
                    for token in line:
                        kinds[token.kind.value] += 1
    return kinds


if __name__ == "__main__":
    main()
