import mwparserfromhell

from models import Summary

PARAGRAPH_BREAK = '\n\n'
WIKI_BASE_URL = 'https://en.wikipedia.org/wiki/'


def extract_abstract(text, strip_markup=False):
    """Return the first paragraph of a page's text, whitespace-trimmed.

    The paragraph ends at the first blank line; text without one is used whole.
    With `strip_markup`, wikitext is rendered to plain text before splitting.
    """
    if strip_markup:
        text = mwparserfromhell.parse(text).strip_code()
    return text.split(PARAGRAPH_BREAK, 1)[0].strip()


def derive_url(title):
    """Build the article URL for a title. Only spaces are rewritten."""
    return WIKI_BASE_URL + title.replace(' ', '_')


def summarize_page(page, strip_markup=False):
    """Turn a RawPage into a Summary, or None when its abstract is empty."""
    abstract = extract_abstract(page.text, strip_markup)
    if not abstract:
        return None
    return Summary(title=page.title, url=derive_url(page.title), abstract=abstract)


def summarize_pages(pages, strip_markup=False):
    for page in pages:
        summary = summarize_page(page, strip_markup)
        if summary is not None:
            yield summary


def drop_duplicate_titles(summaries):
    """Keep only the first summary seen for each title."""
    seen = set()
    for summary in summaries:
        if summary.title in seen:
            continue
        seen.add(summary.title)
        yield summary
