# Entry point: stream the Wikipedia dump and write the first-paragraph abstracts file
import argparse
import sys

from tqdm import tqdm

from dump_parser import RECORD_TAG, is_article, iter_pages
from errors import PipelineError
from extractor import drop_duplicate_titles, summarize_pages
from fetcher import DUMP_URL, open_dump
from writer import OUTPUT_PATH, write_abstracts


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Stream a compressed MediaWiki dump and write a flat XML file of page abstracts."
    )
    parser.add_argument("--url", default=DUMP_URL, help=f"Dump to download (default: {DUMP_URL}).")
    parser.add_argument(
        "--output",
        default=OUTPUT_PATH,
        help=f"Where to write the abstracts XML (default: {OUTPUT_PATH}).",
    )
    parser.add_argument(
        "--record-tag",
        default=RECORD_TAG,
        help=f"Local name of the record element to summarize (default: {RECORD_TAG}).",
    )
    parser.add_argument(
        "--articles-only",
        action="store_true",
        help="Skip pages outside the main namespace and redirects.",
    )
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Render wikitext to plain text before taking the first paragraph.",
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Write only the first page seen for each title.",
    )
    parser.add_argument("--quiet", action="store_true", help="Hide the progress bar.")
    return parser.parse_args(argv)


def run(
    url=DUMP_URL,
    output_path=OUTPUT_PATH,
    record_tag=RECORD_TAG,
    articles_only=False,
    strip_markup=False,
    dedupe=False,
    show_progress=True,
):
    """Run the fetch -> decompress -> scan -> summarize -> write pipeline once.

    Returns the number of <doc> elements written. Raises PipelineError on any failure.
    """
    with open_dump(url) as stream:
        pages = iter_pages(stream, record_tag)
        if articles_only:
            pages = filter(is_article, pages)
        summaries = summarize_pages(pages, strip_markup)
        if dedupe:
            summaries = drop_duplicate_titles(summaries)
        if show_progress:
            summaries = tqdm(summaries, unit="docs", desc="abstracts")
        return write_abstracts(summaries, output_path)


def main(argv=None):
    args = parse_args(argv)
    try:
        run(
            url=args.url,
            output_path=args.output,
            record_tag=args.record_tag,
            articles_only=args.articles_only,
            strip_markup=args.strip_markup,
            dedupe=args.dedupe,
            show_progress=not args.quiet,
        )
    except PipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Done! {args.output} is ready.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
