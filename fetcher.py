# Download helper: opens the remote .bz2 dump as a decompressed byte stream
import bz2
from contextlib import contextmanager

import requests
import urllib3

from errors import ErrorKind, PipelineError

DUMP_URL = "https://dumps.wikimedia.org/enwiki/latest/enwiki-latest-pages-articles-multistream.xml.bz2"


class _ResponseReader:
    """File-like view of a streamed response body for BZ2File."""

    def __init__(self, raw):
        self._raw = raw

    def read(self, size=-1):
        try:
            # decode_content undoes any Content-Encoding (gzip, deflate) the server applied
            return self._raw.read(None if size < 0 else size, decode_content=True)
        except urllib3.exceptions.HTTPError as e:
            raise PipelineError(ErrorKind.FETCH, f"failed to download dump: {e}") from e


@contextmanager
def open_dump(url=DUMP_URL, timeout=None):
    """Stream the dump at `url` and yield a lazily decompressed binary stream.

    Args:
        url (String): location of the .bz2 dump
        timeout (float): optional connect/read timeout passed to requests

    The HTTP response is closed when the block exits, whether it finished or failed.
    """
    try:
        response = requests.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise PipelineError(ErrorKind.FETCH, f"failed to download dump: {e}") from e

    try:
        if response.status_code != requests.codes.ok:
            raise PipelineError(
                ErrorKind.STATUS,
                f"bad status: {response.status_code} {response.reason}",
            )
        # BZ2File keeps reading across concatenated streams (multistream dumps)
        with bz2.BZ2File(_ResponseReader(response.raw)) as stream:
            yield stream
    finally:
        response.close()
