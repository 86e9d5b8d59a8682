"""
Decklist parsing and concurrent card resolution
"""
import logging
import pathlib
import re
from typing import List, NamedTuple, Optional

import gevent.pool
import gevent.queue

from .classes import OotvDeckItemObject
from .errors import SchemaDriftError
from .ootv_config import OotvConfig
from .providers import OracleProvider

LOGGER = logging.getLogger(__name__)

DECKLIST_LINE_REGEX = re.compile(r"^([0-9]*) ?(.*)$")


class DecklistEntry(NamedTuple):
    """
    One eligible decklist line
    """

    count: int
    query: str


class DecklistFailure(NamedTuple):
    """
    A decklist query that could not be resolved, and why
    """

    query: str
    error: Exception


def load_decklist(path: pathlib.Path) -> str:
    """
    Read a decklist file
    :param path: Decklist location
    :return Decklist contents
    """
    with pathlib.Path(path).expanduser().open(encoding="utf-8") as file:
        return file.read()


def parse_decklist(decklist: str) -> List[DecklistEntry]:
    """
    Parse "<count> <card query>" lines. Blank lines and lines starting
    with "#" are skipped; a missing count means one copy.
    :param decklist: Decklist contents
    :return Entries, in decklist order
    """
    entries = []
    for line in decklist.split("\n"):
        line = line.rstrip("\r")
        if not line.strip() or line.startswith("#"):
            continue

        count, query = DECKLIST_LINE_REGEX.match(line).groups()  # type: ignore
        entries.append(DecklistEntry(int(count or 0) or 1, query))

    return entries


def resolve_decklist(
    decklist: str,
    provider: Optional[OracleProvider] = None,
    pool_size: Optional[int] = None,
    failures: Optional[gevent.queue.Queue] = None,
) -> List[OotvDeckItemObject]:
    """
    Resolve every decklist entry against the Oracle, concurrently.
    Each entry yields exactly one item; entries that fail to resolve
    yield a zero count item and a DecklistFailure on `failures`.
    Items come back in completion order, not decklist order.
    :param decklist: Decklist contents
    :param provider: Oracle provider to resolve with
    :param pool_size: Number of concurrent workers
    :param failures: Queue receiving a DecklistFailure per unresolved entry
    :return One item per eligible decklist line
    """
    entries = parse_decklist(decklist)
    if not entries:
        return []

    provider = provider or OracleProvider()
    pool_size = pool_size or OotvConfig().pool_size

    work: gevent.queue.Queue = gevent.queue.Queue()
    for entry in entries:
        work.put(entry)

    results: gevent.queue.Queue = gevent.queue.Queue()
    schema_errors: List[SchemaDriftError] = []

    def worker() -> None:
        while True:
            try:
                entry = work.get_nowait()
            except gevent.queue.Empty:
                return

            try:
                card = provider.get_card_by_exact_name(entry.query)
            except Exception as error:
                LOGGER.warning(f"Unable to resolve {entry.query!r}: {error}")
                if isinstance(error, SchemaDriftError):
                    schema_errors.append(error)
                if failures is not None:
                    failures.put(DecklistFailure(entry.query, error))
                results.put(OotvDeckItemObject(0, query=entry.query))
            else:
                results.put(OotvDeckItemObject(entry.count, card, entry.query))

    pool = gevent.pool.Pool(pool_size)
    for _ in range(min(pool_size, len(entries))):
        pool.spawn(worker)

    deck = [results.get() for _ in entries]
    pool.join()

    if schema_errors:
        raise schema_errors[0]

    LOGGER.info(
        f"Resolved {sum(item.is_resolved for item in deck)}/{len(deck)} decklist entries"
    )
    return deck
