import threading
from functools import lru_cache
from typing import Dict, Optional

from inflector.Environment import env, env_flag
from inflector.Logging import get_logger

logger = get_logger(__name__)

ENTRY_SEPARATOR = "->"
VARIANT_SEPARATOR = ","


def parse_word_list(
    text: str, reverse: bool = True, source: str = "<string>"
) -> Dict[str, str]:
    """
    Parse ``canonical->variant[,variant...]`` lines into a lookup mapping.

    Blank lines and lines starting with "#" are skipped. Each canonical word maps
    to its first variant. With ``reverse`` every variant also maps back to its
    canonical word; forward entries win when both directions claim a key.

    Args:
        text: Contents of the word list
        reverse: Whether variants should map back to their canonical word
        source: Name used when reporting malformed lines

    Returns:
        Dict mapping each known word to its counterpart
    """
    forward: Dict[str, str] = {}
    backward: Dict[str, str] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        canonical, separator, rest = line.partition(ENTRY_SEPARATOR)
        canonical = canonical.strip()
        variants = [v.strip() for v in rest.split(VARIANT_SEPARATOR) if v.strip()]
        if not separator or not canonical or not variants:
            logger.warning(
                f"Skipping malformed entry in {source}:{line_no}: {raw_line!r}"
            )
            continue

        forward.setdefault(canonical, variants[0])
        for variant in variants:
            backward.setdefault(variant, canonical)

    if reverse:
        for variant, canonical in backward.items():
            forward.setdefault(variant, canonical)
    return forward


class WordDictionary:
    """
    A word list read once from a text resource and queried with :meth:`lookup`.

    The file is parsed on first use; later lookups hit the in-memory mapping.
    """

    def __init__(self, path: str, reverse: bool = True):
        self.path = path
        self.reverse = reverse
        self._mapping: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    def __repr__(self):
        return f"<WordDictionary path={self.path!r} reverse={self.reverse}>"

    @property
    def mapping(self) -> Dict[str, str]:
        if self._mapping is None:
            with self._lock:
                if self._mapping is None:
                    self._mapping = self._load()
        return self._mapping

    def _load(self) -> Dict[str, str]:
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        mapping = parse_word_list(content, reverse=self.reverse, source=self.path)
        logger.debug(f"Loaded {len(mapping)} entries from {self.path}")
        return mapping

    def lookup(self, word: str) -> Optional[str]:
        """Return the counterpart of ``word``, or None if it is not listed."""
        return self.mapping.get(word)

    def __contains__(self, word: str) -> bool:
        return word in self.mapping


@lru_cache(maxsize=None)
def homophones() -> WordDictionary:
    """The homophone list configured by HOMOPHONES_PATH."""
    return WordDictionary(env("HOMOPHONES_PATH"), reverse=True)


@lru_cache(maxsize=None)
def common_misspellings() -> WordDictionary:
    """The misspelling list configured by MISSPELLINGS_PATH."""
    return WordDictionary(
        env("MISSPELLINGS_PATH"), reverse=env_flag("MISSPELLINGS_REVERSE")
    )
