"""Decoding of statistics payloads.

A statistics response holds one or more snapshots::

    {"data": [{"id": "abc", "granularity": "DAY",
               "start_time": "2015-05-01T07:00:00Z", "end_time": "2015-05-02T07:00:00Z",
               "segment": {"segmentation_type": "GENDER", "segmentation_value": "1", "name": "Male"},
               "billed_follows": [3],
               "mobile_conversion_installs_breakdown": {"post_view": [1], "post_engagement": [2]}}]}

Every key other than the snapshot attributes names a metric and must be
present in the metric catalogue. Scalar metrics decode to one number per
time bucket; breakdown metrics decode to named component series.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..encoding.codec import decode_enum, decode_timestamp
from ..exceptions import MalformedValue, UnknownMetric
from ..models.enums import StatisticsGranularity, StatisticsSegmentationType
from ..models.statistics import (
    METRIC_CATALOG,
    BreakdownMetric,
    MetricCatalogEntry,
    MetricSnapshotValue,
    Number,
    ScalarMetric,
    StatisticsSegment,
    StatisticsSnapshot,
)
from .cursor import RawBody, parse_body

logger = logging.getLogger(__name__)

SNAPSHOT_ATTRIBUTES = frozenset(
    {
        "id",
        "id_str",
        "granularity",
        "start_time",
        "end_time",
        "segment",
        "segmentation_type",
        "metrics",
        "data_type",
    }
)


class MetricValueDecoder:
    """Decode metric values against a metric catalogue.

    :param catalog: Mapping of metric name to catalogue entry
    :type catalog: Mapping[str, MetricCatalogEntry]
    """

    def __init__(self, catalog: Mapping[str, MetricCatalogEntry] = METRIC_CATALOG):
        self.catalog = catalog

    def entry_for(self, name: str) -> MetricCatalogEntry:
        try:
            return self.catalog[name]
        except KeyError:
            raise UnknownMetric(name) from None

    def decode(
        self, name: str, raw: Any, entry: Optional[MetricCatalogEntry] = None
    ) -> MetricSnapshotValue:
        """Decode the value of one metric.

        :param name: Metric name
        :type name: str
        :param raw: Parsed JSON value of the metric
        :type raw: Any
        :param entry: Catalogue entry; looked up by ``name`` when omitted
        :type entry: Optional[MetricCatalogEntry]
        :return: Scalar series or breakdown
        :rtype: MetricSnapshotValue
        :raises UnknownMetric: If the metric is not in the catalogue
        :raises MalformedValue: If the value does not match the metric's shape
        """
        entry = entry or self.entry_for(name)
        if entry.is_breakdown:
            return BreakdownMetric(name, self._decode_components(name, raw))
        return ScalarMetric(name, self._decode_series(name, raw))

    def _decode_series(self, name: str, raw: Any) -> Tuple[Number, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, list):
            raise MalformedValue(raw, name, "expected one value per time bucket")
        return tuple(self._decode_number(name, token) for token in raw)

    def _decode_components(self, name: str, raw: Any) -> Mapping[str, Tuple[Number, ...]]:
        if raw is None:
            return MappingProxyType({})
        if not isinstance(raw, dict):
            raise MalformedValue(raw, name, "expected named component series")
        return MappingProxyType(
            {key: self._decode_series(f"{name}.{key}", value) for key, value in raw.items()}
        )

    @staticmethod
    def _decode_number(name: str, token: Any) -> Number:
        if isinstance(token, bool):
            raise MalformedValue(token, name, "expected a number")
        if isinstance(token, (int, float)):
            return token
        if isinstance(token, str):
            try:
                return float(token) if "." in token else int(token)
            except ValueError:
                pass
        raise MalformedValue(token, name, "expected a number")

    def decode_snapshot(self, raw: Any) -> StatisticsSnapshot:
        """Decode one snapshot object.

        :param raw: Parsed JSON snapshot
        :type raw: Any
        :return: The snapshot with its metrics keyed by name
        :rtype: StatisticsSnapshot
        """
        if not isinstance(raw, dict):
            raise MalformedValue(raw, "data", "expected a statistics object")

        if isinstance(raw.get("metrics"), dict):
            metric_items = raw["metrics"].items()
        else:
            metric_items = [
                (key, value) for key, value in raw.items() if key not in SNAPSHOT_ATTRIBUTES
            ]
        metrics: Dict[str, MetricSnapshotValue] = {}
        for name, value in metric_items:
            metrics[name] = self.decode(name, value)

        granularity = raw.get("granularity")
        start_time = raw.get("start_time")
        end_time = raw.get("end_time")
        entity_id = raw.get("id_str", raw.get("id"))
        return StatisticsSnapshot(
            id=str(entity_id) if entity_id is not None else None,
            granularity=decode_enum(granularity, StatisticsGranularity, "granularity")
            if granularity is not None
            else None,
            start_time=decode_timestamp(start_time, "start_time") if start_time is not None else None,
            end_time=decode_timestamp(end_time, "end_time") if end_time is not None else None,
            segment=self._decode_segment(raw),
            metrics=MappingProxyType(metrics),
        )

    @staticmethod
    def _decode_segment(raw: Dict[str, Any]) -> Optional[StatisticsSegment]:
        segment = raw.get("segment")
        if segment is None:
            return None
        if not isinstance(segment, dict):
            raise MalformedValue(segment, "segment", "expected an object")
        segmentation_type = segment.get("segmentation_type", raw.get("segmentation_type"))
        value = segment.get("segmentation_value")
        return StatisticsSegment(
            segmentation_type=decode_enum(
                segmentation_type, StatisticsSegmentationType, "segment.segmentation_type"
            )
            if segmentation_type is not None
            else None,
            segmentation_value=str(value) if value is not None else None,
            name=segment.get("name"),
        )

    def decode_stats(self, raw_body: RawBody) -> List[StatisticsSnapshot]:
        """Decode a statistics response.

        ``data`` may hold a single snapshot object or an array of them;
        snapshots are returned in response order, one per entity and
        segment, without merging.

        :param raw_body: Response body
        :type raw_body: RawBody
        :return: Snapshots in response order
        :rtype: List[StatisticsSnapshot]
        """
        envelope = parse_body(raw_body)
        data = envelope.get("data")
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise MalformedValue(data, "data", "expected statistics object or array")
        snapshots = [self.decode_snapshot(item) for item in data]
        logger.debug("Decoded %d statistics snapshot(s)", len(snapshots))
        return snapshots
