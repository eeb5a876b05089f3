"""Retrieval of hall diagrams from files or over HTTP."""
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

import requests

from pricemap.config import DEFAULT_LOADED_HEIGHT, DEFAULT_LOADED_WIDTH, FETCH_TIMEOUT
from pricemap.errors import DiagramLoadError
from pricemap.services.geometry_parser import parse_number

logger = logging.getLogger(__name__)


class DiagramLoader:
    """Loads hall diagrams and prepares them for binding."""

    def __init__(self, timeout: float = FETCH_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.http = session or requests.Session()

    @staticmethod
    def _is_url(source: str) -> bool:
        return source.startswith(("http://", "https://"))

    def fetch_text(self, source: Union[str, Path]) -> str:
        """
        Read the raw diagram markup.

        Args:
            source: http(s) URL or filesystem path

        Returns:
            Diagram markup

        Raises:
            DiagramLoadError: If the diagram cannot be read
        """
        source_str = str(source)

        if self._is_url(source_str):
            try:
                response = self.http.get(source_str, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                raise DiagramLoadError(source_str, str(e)) from e
            return response.text

        path = Path(source)
        if not path.exists():
            raise DiagramLoadError(source_str, "file not found")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DiagramLoadError(source_str, str(e)) from e

    def load(self, source: Union[str, Path]) -> ET.Element:
        """
        Load a diagram and return its root element.

        Diagrams without a viewBox get one derived from their width and height.

        Raises:
            DiagramLoadError: If the diagram cannot be read or is not valid markup
        """
        text = self.fetch_text(source)
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise DiagramLoadError(str(source), f"malformed markup: {e}") from e

        if not root.get("viewBox"):
            width = parse_number(root.get("width")) or DEFAULT_LOADED_WIDTH
            height = parse_number(root.get("height")) or DEFAULT_LOADED_HEIGHT
            root.set("viewBox", f"0 0 {width:g} {height:g}")
            logger.debug(f"Set viewBox of {source} to 0 0 {width:g} {height:g}")

        logger.info(f"Loaded diagram {source}")
        return root
