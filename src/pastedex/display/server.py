"""Serve the paste table, re-rendering it for each query string."""
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Sequence
from urllib.parse import parse_qs, urlsplit

from ..config import DisplayConfig
from ..pastes.models import Posting
from .render import SEARCH_PARAM, render_page
from .session import FilterSession

logger = logging.getLogger(__name__)


def render_for_query(postings: Sequence[Posting], config: DisplayConfig, query: str) -> str:
    """Render the page for a request query string.

    Each request starts a fresh session, so no filter state outlives it.
    """
    session = FilterSession.from_query_string(postings, config, query)
    search = parse_qs(query.lstrip("?")).get(SEARCH_PARAM, [""])[0].strip()
    return render_page(session, search=search)


def make_handler(postings: Sequence[Posting], config: DisplayConfig) -> type:
    """Build a request handler class bound to a loaded dataset."""

    class PasteTableHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            url = urlsplit(self.path)
            if url.path not in ("/", "/index.html"):
                self.send_error(404)
                return

            body = render_for_query(postings, config, url.query).encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args) -> None:
            logger.debug(format % args)

    return PasteTableHandler


def serve(postings: Sequence[Posting], config: DisplayConfig, host: str = "localhost", port: int = 8000) -> None:
    """Serve the table until interrupted."""
    server = HTTPServer((host, port), make_handler(postings, config))
    logger.info(f"Serving {len(postings)} pastes on http://{host}:{port}/")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Stopping server")
    finally:
        server.server_close()
