import logging
import xml.etree.ElementTree as ET
from typing import Optional

logger = logging.getLogger(__name__)


def parse_response(body: Optional[str]) -> Optional[ET.Element]:
    """Parse a response body into an element tree, or None if malformed.

    Namespaces are stripped from tags so callers can navigate by local name.
    """
    if not body or not body.strip():
        logger.warning("Empty response body")
        return None
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.warning("Malformed XML response: %s", e)
        return None

    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = element.tag.split("}", 1)[1]
    return root
