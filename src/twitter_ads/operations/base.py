"""Shared plumbing for the API façades."""

import logging
from typing import Any, AsyncIterator, Callable, List, Optional, Tuple, TypeVar

from ..decoding.cursor import CursorEnvelope, CursorListDecoder, decode_single
from ..encoding.encoder import build_form_body, encode_pairs, urlencode_pairs
from ..encoding.fields import ParameterSet
from ..queries import PagedQuery
from ..utils.http_client import AdsTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Pairs some endpoints always need, sent ahead of the caller's filters
WITH_DELETED = (("with_deleted", "true"),)
SCOPED_TO_NONE = (("scoped_to", "none"),)


def account_path(account_id: str, *segments: str) -> str:
    """``accounts/:account_id[/segment...]``"""
    return "/".join(("accounts", account_id) + segments)


def query_string(
    query: Optional[ParameterSet] = None, fixed: Tuple[Tuple[str, str], ...] = ()
) -> str:
    """Build a query string from fixed pairs followed by the caller's filters.

    :param query: Caller's filters, if any
    :type query: Optional[ParameterSet]
    :param fixed: Pairs the endpoint always sends
    :type fixed: Tuple[Tuple[str, str], ...]
    :return: ``?key=value&...`` or ``""``
    :rtype: str
    """
    pairs = list(fixed)
    if query is not None:
        pairs.extend(encode_pairs(query))
    return "?" + urlencode_pairs(pairs) if pairs else ""


class AdsOperations:
    """Base class for a group of related API calls.

    :param transport: Transport shared by every façade of a client
    :type transport: AdsTransport
    """

    def __init__(self, transport: AdsTransport):
        self.transport = transport

    async def _get_one(
        self,
        path: str,
        decode_one: Callable[[Any], T],
        query: Optional[ParameterSet] = None,
        fixed: Tuple[Tuple[str, str], ...] = (),
    ) -> T:
        body = await self.transport.get(path, query_string(query, fixed))
        return decode_single(body, decode_one)

    async def _get_page(
        self,
        path: str,
        decode_one: Callable[[Any], T],
        query: Optional[ParameterSet] = None,
        fixed: Tuple[Tuple[str, str], ...] = (),
    ) -> CursorEnvelope[T]:
        body = await self.transport.get(path, query_string(query, fixed))
        return CursorListDecoder(decode_one).decode(body)

    async def _post_one(self, path: str, form: ParameterSet, decode_one: Callable[[Any], T]) -> T:
        body = await self.transport.post(path, build_form_body(form))
        return decode_single(body, decode_one)

    async def _post_page(
        self, path: str, form: ParameterSet, decode_one: Callable[[Any], T]
    ) -> CursorEnvelope[T]:
        body = await self.transport.post(path, build_form_body(form))
        return CursorListDecoder(decode_one).decode(body)

    async def _put_one(self, path: str, form: ParameterSet, decode_one: Callable[[Any], T]) -> T:
        body = await self.transport.put(path, build_form_body(form))
        return decode_single(body, decode_one)

    async def _put_page(
        self, path: str, form: ParameterSet, decode_one: Callable[[Any], T]
    ) -> CursorEnvelope[T]:
        body = await self.transport.put(path, build_form_body(form))
        return CursorListDecoder(decode_one).decode(body)

    async def _delete_one(self, path: str, decode_one: Callable[[Any], T]) -> T:
        body = await self.transport.delete(path)
        return decode_single(body, decode_one)


async def iter_pages(
    fetch: Callable[[PagedQuery], Any],
    query: PagedQuery,
    page_size: Optional[int] = None,
) -> AsyncIterator[CursorEnvelope]:
    """Fetch pages one after another, following ``next_cursor``.

    ``fetch`` is a listing coroutine taking the query as its only
    argument, e.g. ``functools.partial(client.campaigns.get_campaigns,
    account_id)``. The query passed in is not modified; each further page
    is requested with a copy carrying the previous page's cursor.

    :param fetch: Coroutine function returning one :class:`CursorEnvelope`
    :type fetch: Callable[[PagedQuery], Any]
    :param query: Query for the first page
    :type query: PagedQuery
    :param page_size: ``count`` to send when the query sets none
    :type page_size: Optional[int]
    :return: Async iterator over the pages
    :rtype: AsyncIterator[CursorEnvelope]
    """
    if page_size and not query.is_set("count"):
        query = query.copy(count=page_size)
    page_number = 0
    while True:
        page = await fetch(query)
        page_number += 1
        yield page
        if not page.has_more:
            logger.debug("Pagination finished after %d page(s)", page_number)
            return
        query = query.copy(cursor=page.next_cursor)


async def collect_all(
    fetch: Callable[[PagedQuery], Any],
    query: PagedQuery,
    page_size: Optional[int] = None,
) -> List[Any]:
    """Return the items of every page, in order."""
    items: List[Any] = []
    async for page in iter_pages(fetch, query, page_size):
        items.extend(page.items)
    return items
