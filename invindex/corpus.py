"""
Document acquisition for the index builder.
Reads plain text, HTML and JSON documents from a directory and assigns
integer doc_ids (1, 2, 3, ...) in path order.
"""

import json
import logging
import warnings
from pathlib import Path

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

logger = logging.getLogger(__name__)

# Julius Caesar, Act III Scene II
SAMPLE_DOCUMENTS: list[tuple[int, str]] = [
    (1, "Friends, Romans, countrymen, lend me your ears;"),
    (2, "I come to bury Caesar, not to praise him."),
    (3, "The evil that men do lives after them;"),
    (4, "The good is oft interred with their bones;"),
    (5, "So let it be with Caesar. The noble Brutus"),
]

HTML_SUFFIXES = {".html", ".htm"}
DOCUMENT_SUFFIXES = {".txt", ".json"} | HTML_SUFFIXES


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_document(filepath: Path) -> str:
    """
    Read one document's text.
    - .html/.htm: visible text.
    - .json: the "content" field, with any markup stripped.
    - anything else: the file as plain text.
    """
    filepath = Path(filepath)
    suffix = filepath.suffix.lower()
    raw = read_text_file(filepath)
    if suffix == ".json":
        data = json.loads(raw)
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, str):
            raise ValueError(f"JSON file has no 'content' string: {filepath}")
        return extract_text_from_html(content)
    if suffix in HTML_SUFFIXES:
        return extract_text_from_html(raw)
    return raw


def load_documents(data_dir: Path) -> tuple[list[tuple[int, str]], dict[int, str]]:
    """
    Load every supported document under data_dir (recursive).
    Files are taken in relative-path order and numbered from 1; files that
    cannot be read are logged and skipped without consuming an id.
    Returns (documents as (doc_id, text) pairs, doc_id -> relative path).
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    doc_files = sorted(
        (p for p in data_dir.rglob("*") if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES),
        key=lambda p: p.relative_to(data_dir).as_posix(),
    )

    documents: list[tuple[int, str]] = []
    doc_paths: dict[int, str] = {}
    next_doc_id = 1
    for filepath in doc_files:
        try:
            text = read_document(filepath)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", filepath, e)
            continue
        documents.append((next_doc_id, text))
        doc_paths[next_doc_id] = filepath.relative_to(data_dir).as_posix()
        next_doc_id += 1

    logger.info("Loaded %d documents from %s", len(documents), data_dir)
    return documents, doc_paths


def load_corpus(data_dir: Path | None = None) -> tuple[list[tuple[int, str]], dict[int, str]]:
    """
    Load documents from data_dir, or the sample documents when data_dir is None
    or does not exist.
    """
    if data_dir is not None and not Path(data_dir).is_dir():
        logger.warning("Data directory %s not found, using the sample documents", data_dir)
        data_dir = None
    if data_dir is None:
        return list(SAMPLE_DOCUMENTS), {doc_id: f"sample:{doc_id}" for doc_id, _ in SAMPLE_DOCUMENTS}
    return load_documents(data_dir)
