# Streaming scanner that turns a MediaWiki XML dump into RawPage records
import xml.etree.ElementTree as ET

from errors import ErrorKind, PipelineError
from models import RawPage

RECORD_TAG = 'page'
CHUNK_SIZE = 64 * 1024


def local_name(tag):
    """Strip the '{uri}' prefix ElementTree puts on namespaced tags."""
    return tag.rpartition('}')[2]


def _child(elem, name):
    for child in elem:
        if local_name(child.tag) == name:
            return child
    return None


def _own_text(elem):
    """Character data that belongs directly to `elem` (text plus tails of nested children)."""
    if elem is None:
        return ''
    return (elem.text or '') + ''.join(child.tail or '' for child in elem)


def decode_page(elem):
    """Decode a complete <page> element into a RawPage."""
    title = _child(elem, 'title')
    revision = _child(elem, 'revision')
    text = _child(revision, 'text') if revision is not None else None
    ns = _child(elem, 'ns')
    return RawPage(
        title=_own_text(title),
        text=_own_text(text),
        namespace=_own_text(ns) if ns is not None else None,
        redirect=_child(elem, 'redirect') is not None,
    )


def is_article(page):
    """True for main-namespace pages that are not redirects."""
    return page.namespace == '0' and not page.redirect


def _read_chunk(stream, chunk_size):
    try:
        return stream.read(chunk_size)
    except (OSError, EOFError) as e:
        raise PipelineError(ErrorKind.DECOMPRESS, f"failed to decompress dump: {e}") from e


def iter_pages(stream, record_tag=RECORD_TAG, chunk_size=CHUNK_SIZE):
    """Yield one RawPage per <record_tag> element found in the binary `stream`.

    Args:
        stream: binary file-like object with the XML document
        record_tag (String): local name of the record element, namespace ignored
        chunk_size (int): bytes pulled from the stream per parser feed

    Only one decoded page is held at a time; each subtree is cleared once yielded.
    """
    parser = ET.XMLPullParser(['start', 'end'])
    root = None
    depth = 0  # 0 while scanning, >0 while inside a matched record

    def fail(e):
        # Errors inside a matched record are reported as a failed decode of that record
        if depth:
            return PipelineError(ErrorKind.DECODE, f"failed to decode {record_tag} element: {e}")
        return PipelineError(ErrorKind.XML_TOKEN, f"XML token error: {e}")

    def drain():
        nonlocal root, depth
        try:
            for event, elem in parser.read_events():
                if root is None:
                    root = elem
                if local_name(elem.tag) != record_tag:
                    continue
                if event == 'start':
                    depth += 1
                    continue
                depth -= 1
                if depth:
                    continue
                yield decode_page(elem)
                elem.clear()
                if elem is not root:
                    root.clear()  # drop the references the document root keeps to finished pages
        except ET.ParseError as e:
            raise fail(e) from e

    while True:
        chunk = _read_chunk(stream, chunk_size)
        if not chunk:
            break
        parser.feed(chunk)
        yield from drain()

    if root is None:
        # Nothing but whitespace, comments or a declaration: no records, not an error
        return
    try:
        parser.close()
    except ET.ParseError as e:
        raise fail(e) from e
    yield from drain()
