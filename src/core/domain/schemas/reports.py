"""Tipos del API de reportes: maps, arrays anidados, UUID y fechas."""

from __future__ import annotations

from core.domain.wire import DateTimeStr, UUIDStr, WireModel
from core.services.validator import TypeSchema


class APIDataPoint(WireModel):
    timestamp: DateTimeStr
    value: float


class APISubEntry(WireModel):
    label: str | None = None
    dataPoints: list[APIDataPoint] | None = None


class APIEntry(WireModel):
    value: float | None = None
    tags: list[str] | None = None
    subentries: list[APISubEntry] | None = None


class APIReport(WireModel):
    id: UUIDStr
    createdAt: DateTimeStr
    metadata: dict[str, str] | None = None
    entries: list[APIEntry]


APIDataPointSchema: TypeSchema[APIDataPoint] = TypeSchema(APIDataPoint)
APISubEntrySchema: TypeSchema[APISubEntry] = TypeSchema(APISubEntry)
APIEntrySchema: TypeSchema[APIEntry] = TypeSchema(APIEntry)
APIReportSchema: TypeSchema[APIReport] = TypeSchema(APIReport)
APIReportListSchema: TypeSchema[list[APIReport]] = TypeSchema(list[APIReport], name="APIReportList")
