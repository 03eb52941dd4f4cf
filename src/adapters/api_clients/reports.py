"""Cliente del API de reportes anidados."""

from __future__ import annotations

from adapters.api_clients.base import BaseApiClient
from core.domain.models import EndpointDescriptor, HttpMethod, RequestOptions
from core.domain.schemas.reports import APIReport, APIReportListSchema

LIST_REPORTS = EndpointDescriptor(
    name="listReports",
    method=HttpMethod.GET,
    path="/reports",
    response_schema=APIReportListSchema,
)


class NestedDataApiClient(BaseApiClient):
    async def list_reports(self, options: RequestOptions | None = None) -> list[APIReport]:
        return await self._call(LIST_REPORTS, options=options)
