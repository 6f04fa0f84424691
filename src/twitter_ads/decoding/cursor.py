"""Decoding of cursor-paginated list envelopes.

List endpoints answer with::

    {"data": [...], "data_type": "campaign", "next_cursor": "c-1", "total_count": 42}

:class:`CursorListDecoder` turns one such page into a
:class:`CursorEnvelope`. It never fetches further pages; following
``next_cursor`` is up to the caller (see
:func:`twitter_ads.operations.base.iter_pages`).
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from ..exceptions import MalformedValue, PartialDecodeFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

RawBody = Union[str, bytes, Mapping[str, Any]]


def parse_body(raw_body: RawBody) -> Mapping[str, Any]:
    """Parse a response body into its top-level JSON object.

    :param raw_body: Response text, bytes, or an already parsed mapping
    :type raw_body: RawBody
    :return: The top-level JSON object
    :rtype: Mapping[str, Any]
    :raises MalformedValue: If the body is not a JSON object
    """
    if isinstance(raw_body, Mapping):
        return raw_body
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedValue(raw_body[:200], "body", "invalid UTF-8") from exc
    try:
        parsed = json.loads(raw_body)
    except json.JSONDecodeError as exc:
        raise MalformedValue(raw_body[:200], "body", f"invalid JSON: {exc.msg}") from exc
    if not isinstance(parsed, dict):
        raise MalformedValue(raw_body[:200], "body", "expected a JSON object")
    return parsed


@dataclass(frozen=True)
class CursorEnvelope(Generic[T]):
    """One page of a list response.

    :param items: Decoded entities in response order
    :param next_cursor: Cursor of the following page; ``None`` on the last page
    :param total_count: Size of the whole result set, when the API reports it
    :param data_type: Entity type name reported by the API
    """

    items: Tuple[T, ...]
    next_cursor: Optional[str] = None
    total_count: Optional[int] = None
    data_type: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_cursor)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]


class CursorListDecoder(Generic[T]):
    """Decode list envelopes with a per-element decoder.

    :param decode_one: Callable turning one raw JSON element into ``T``
    :type decode_one: Callable[[Any], T]
    """

    def __init__(self, decode_one: Callable[[Any], T]):
        self.decode_one = decode_one

    def decode(self, raw_body: RawBody) -> CursorEnvelope[T]:
        """Decode one page.

        :param raw_body: Response body
        :type raw_body: RawBody
        :return: The page with its pagination metadata
        :rtype: CursorEnvelope[T]
        :raises MalformedValue: If the envelope has no ``data`` array or the
            metadata has the wrong type
        :raises PartialDecodeFailure: If any element fails to decode
        """
        envelope = parse_body(raw_body)
        data = envelope.get("data")
        if not isinstance(data, list):
            raise MalformedValue(data, "data", "expected a JSON array")

        items = []
        for index, element in enumerate(data):
            try:
                items.append(self.decode_one(element))
            except Exception as exc:
                raise PartialDecodeFailure(index, exc) from exc

        next_cursor = envelope.get("next_cursor")
        if next_cursor is not None and not isinstance(next_cursor, str):
            raise MalformedValue(next_cursor, "next_cursor", "expected a string")
        total_count = envelope.get("total_count")
        if total_count is not None and (
            isinstance(total_count, bool) or not isinstance(total_count, int)
        ):
            raise MalformedValue(total_count, "total_count", "expected an integer")

        logger.debug(
            "Decoded page of %d item(s), next_cursor=%s, total_count=%s",
            len(items),
            next_cursor,
            total_count,
        )
        return CursorEnvelope(
            items=tuple(items),
            next_cursor=next_cursor or None,
            total_count=total_count,
            data_type=envelope.get("data_type"),
        )

    __call__ = decode


def decode_single(raw_body: RawBody, decode_one: Callable[[Any], T]) -> T:
    """Decode a ``{"data": {...}}`` envelope holding one entity.

    :raises MalformedValue: If ``data`` is missing or not an object
    """
    envelope = parse_body(raw_body)
    data = envelope.get("data")
    if not isinstance(data, dict):
        raise MalformedValue(data, "data", "expected a JSON object")
    return decode_one(data)


def decode_list(raw_body: RawBody, decode_one: Callable[[Any], T]) -> Tuple[T, ...]:
    """Decode the ``data`` array of an envelope, ignoring pagination metadata."""
    return CursorListDecoder(decode_one).decode(raw_body).items
