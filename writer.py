# Serializer for the flat <documents> abstracts file
import xml.etree.ElementTree as ET

from errors import ErrorKind, PipelineError

OUTPUT_PATH = 'abstracts.xml'
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = '  '


def render_doc(summary):
    """Serialize one Summary as an indented <doc> element, without trailing newline."""
    doc = ET.Element('doc')
    ET.SubElement(doc, 'title').text = summary.title
    ET.SubElement(doc, 'url').text = summary.url
    ET.SubElement(doc, 'abstract').text = summary.abstract
    ET.indent(doc, space=INDENT, level=1)
    rendered = ET.tostring(doc, encoding='unicode', short_empty_elements=False)
    # Readers normalize a literal \r to \n; indentation itself only uses \n
    return INDENT + rendered.replace('\r', '&#xD;')


class AbstractsWriter:
    """Appends <doc> elements to an open text stream between one <documents> open/close pair."""

    def __init__(self, out):
        self.out = out
        self.written = 0
        self._closed = False

    def open(self):
        self.out.write(XML_HEADER)
        self.out.write('<documents>\n')

    def write(self, summary):
        self.out.write(render_doc(summary) + '\n')
        self.written += 1

    def close(self):
        if self._closed:
            return
        self.out.write('</documents>\n')
        self._closed = True


def write_abstracts(summaries, output_path=OUTPUT_PATH):
    """Stream `summaries` into a new abstracts file and return how many docs were written.

    Args:
        summaries: iterable of Summary, consumed in order
        output_path (String): file path to the output .xml file

    A failure part-way leaves the partial file on disk.
    """
    try:
        out_file = open(output_path, 'w', encoding='utf-8')
    except OSError as e:
        raise PipelineError(ErrorKind.CREATE, f"failed to create output file: {e}") from e

    with out_file:
        writer = AbstractsWriter(out_file)
        try:
            writer.open()
            for summary in summaries:
                writer.write(summary)
            writer.close()
            out_file.flush()
        except OSError as e:
            raise PipelineError(ErrorKind.WRITE, f"failed to write {output_path}: {e}") from e
    return writer.written
