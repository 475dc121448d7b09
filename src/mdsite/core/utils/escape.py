"""Entity escaping for HTML and XML output"""

import re


_HTML_ENTITIES = {'&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&#039;'}
_XML_ENTITIES = {'&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&apos;'}
_SPECIAL_RE = re.compile(r'[&<>"\']')


def escape_html(text: str) -> str:
    """Escape text for HTML body or attribute positions."""
    return _SPECIAL_RE.sub(lambda m: _HTML_ENTITIES[m[0]], text)


def escape_xml(text: str) -> str:
    """Escape text for XML element or attribute positions."""
    return _SPECIAL_RE.sub(lambda m: _XML_ENTITIES[m[0]], text)
