"""Query string and form body encoding.

Both encoders walk a :class:`~twitter_ads.encoding.fields.ParameterSet`
in declared order, skip parameters that were never set, and encode each
value through the codec before percent-encoding the ``key=value`` pair.
"""

import logging
from typing import List, Tuple
from urllib.parse import quote_plus

from .codec import ValueKind, encode_value
from .fields import ParameterSet

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_pairs(params: ParameterSet) -> List[Tuple[str, str]]:
    """Encode every set parameter into ``(wire_name, wire_value)`` pairs.

    Range parameters contribute one pair per bound that is present.

    :param params: Query or form to encode
    :type params: ParameterSet
    :return: Pairs in declared order
    :rtype: List[Tuple[str, str]]
    :raises UnsupportedValueKind: If a value does not match its declared kind
    """
    pairs: List[Tuple[str, str]] = []
    for param, value in params.items():
        encoded = encode_value(param.kind, value, param.enum_type, param.wire_name)
        if param.kind is ValueKind.TIMESTAMP_RANGE:
            for wire_name, token in zip(param.wire_names, encoded):
                if token is not None:
                    pairs.append((wire_name, token))
        elif encoded is not None:
            pairs.append((param.wire_name, encoded))
    return pairs


def urlencode_pairs(pairs: List[Tuple[str, str]]) -> str:
    return "&".join(f"{quote_plus(key)}={quote_plus(value)}" for key, value in pairs)


def build_query_string(params: ParameterSet) -> str:
    """Build the query string for a request, including the leading ``?``.

    :param params: Query declaration holding the caller's filters
    :type params: ParameterSet
    :return: ``?key=value&...`` or an empty string when nothing is set
    :rtype: str
    """
    pairs = encode_pairs(params)
    if not pairs:
        return ""
    return "?" + urlencode_pairs(pairs)


def build_form_body(params: ParameterSet) -> str:
    """Build a URL-encoded request body.

    Only parameters the caller assigned are included, which lets an update
    leave every other attribute unchanged server-side.

    :param params: Form declaration holding the caller's changes
    :type params: ParameterSet
    :return: ``key=value&...``, possibly empty
    :rtype: str
    """
    pairs = encode_pairs(params)
    logger.debug("Encoded %s with %d field(s)", type(params).__name__, len(pairs))
    return urlencode_pairs(pairs)
