"""JSON formatter for ownership reports."""

import json

from ..models import OwnershipReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: OwnershipReport) -> None:
        print(self.format(report))

    def format(self, report: OwnershipReport) -> str:
        return json.dumps(report.to_dict(), indent=2)
