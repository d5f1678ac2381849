"""
Text cleaning, tokenization and stemming for the index.
Plain text is cleaned (accents stripped, lowercased, non-letters dropped) and
split on whitespace; HTML is first reduced to visible text.
Stems come from NLTK's English Snowball stemmer.
"""

import re
import unicodedata
import warnings
from pathlib import Path

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, XMLParsedAsHTMLWarning
from nltk.stem.snowball import SnowballStemmer

warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

STEMMER_LANGUAGE = "english"

HTML_SUFFIXES = (".html", ".htm")

_STEMMER = SnowballStemmer(STEMMER_LANGUAGE)

_NON_LETTERS = re.compile(r"[^\w\s]|[\d_]")


def clean_text(text: str) -> str:
    """
    Lowercase text, strip diacritics and replace anything that is not a
    letter or whitespace (punctuation, digits, underscores) with a space.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _NON_LETTERS.sub(" ", stripped.lower())


def tokenize(text: str) -> list[str]:
    """Split cleaned text into words (no stemming)."""
    if not text:
        return []
    return clean_text(text).split()


def stem_tokens(tokens: list[str]) -> list[str]:
    """Stem a list of tokens, keeping order and duplicates."""
    return [_STEMMER.stem(t) for t in tokens]


def get_stems(text: str) -> list[str]:
    """Tokenize and stem text. Index position i + 1 is the i-th stem."""
    return stem_tokens(tokenize(text))


def get_unique_stems(text: str) -> list[str]:
    """Distinct stems of text in ascending order."""
    return sorted(set(get_stems(text)))


def extract_text_from_html(html_content: str) -> str:
    """Visible text from HTML content, scripts and styles removed."""
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_document(filepath: Path) -> str:
    """Read a file's text as UTF-8, then cp1252, then latin-1 (never fails to decode)."""
    path = Path(filepath)
    for encoding in ("utf-8", "cp1252"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_text(encoding="latin-1")


def get_stems_from_file(filepath: Path) -> list[str]:
    """Stems of a document in order; HTML files are stripped to text first."""
    filepath = Path(filepath)
    content = read_document(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return get_stems(content)
