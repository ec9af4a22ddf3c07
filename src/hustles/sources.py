"""Text acquisition: local files, HTTP and in-memory sources."""

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

import requests
from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

_UTF8_BOM = b"\xef\xbb\xbf"


class SourceUnavailableError(RuntimeError):
    """The requested text could not be read."""


class TextSource(ABC):
    """Abstract interface for fetching raw CSV text by name."""

    @abstractmethod
    def read_text(self, name: str) -> str:
        """Return the full text stored under ``name``.

        Raises:
            SourceUnavailableError: if the text cannot be retrieved.
        """


def decode_bytes(raw: bytes) -> str:
    """Decode file bytes using a best-effort charset guess.

    UTF-8 input keeps working with or without a BOM; undecodable input falls
    back to UTF-8 with replacement characters.
    """
    if raw.startswith(_UTF8_BOM):
        return raw[len(_UTF8_BOM):].decode("utf-8", errors="replace")

    match = from_bytes(raw).best()
    encoding = match.encoding if match is not None else "utf-8"
    try:
        return raw.decode(encoding)
    except (LookupError, UnicodeDecodeError):
        logger.warning("Could not decode as %s, falling back to utf-8", encoding)
        return raw.decode("utf-8", errors="replace")


class FileTextSource(TextSource):
    """Reads files relative to ``base_dir`` (or the working directory)."""

    def __init__(self, base_dir: str | Path | None = None):
        self._base_dir = Path(base_dir) if base_dir is not None else None

    def _resolve(self, name: str) -> Path:
        path = Path(name)
        if self._base_dir is not None and not path.is_absolute():
            path = self._base_dir / path
        return path

    def read_text(self, name: str) -> str:
        path = self._resolve(name)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise SourceUnavailableError(f"Failed to read {path}: {e}") from e
        return decode_bytes(raw)


class HttpTextSource(TextSource):
    """Fetches text with an HTTP GET, with optional exponential backoff retry."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        max_retries: int = 1,
        base_delay: float = 1.0,
    ):
        self._base_url = base_url.rstrip("/") + "/" if base_url else None
        self._timeout = timeout
        self._max_retries = max(1, max_retries)
        self._base_delay = base_delay

    def _url_for(self, name: str) -> str:
        if self._base_url is None or name.startswith(("http://", "https://")):
            return name
        return self._base_url + name.lstrip("/")

    def read_text(self, name: str) -> str:
        url = self._url_for(name)

        for attempt in range(self._max_retries):
            try:
                resp = requests.get(url, timeout=self._timeout)
                resp.raise_for_status()
                return resp.text

            except requests.RequestException as e:
                if attempt < self._max_retries - 1:
                    delay = self._base_delay * (2**attempt)
                    logger.warning(
                        "Attempt %d failed: %s. Retrying in %.1fs...",
                        attempt + 1,
                        e,
                        delay,
                    )
                    time.sleep(delay)
                else:
                    raise SourceUnavailableError(f"Failed to fetch {url}: {e}") from e

        raise SourceUnavailableError(f"Failed to fetch {url}")


class StaticTextSource(TextSource):
    """In-memory source mapping names to text, for embedded data and tests."""

    def __init__(self, texts: dict[str, str]):
        self._texts = dict(texts)

    def read_text(self, name: str) -> str:
        try:
            return self._texts[name]
        except KeyError:
            raise SourceUnavailableError(f"No embedded text named {name!r}") from None
