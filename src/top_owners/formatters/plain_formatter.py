"""Plain-text formatter: one numbered line per owner, no markup."""

from ..models import OwnershipReport, RankedOwner
from .base import BaseFormatter


def format_owner_line(position: int, owner: RankedOwner) -> str:
    alias_info = ""
    if owner.aliases:
        alias_info = f" (aliases: {', '.join(owner.aliases)})"
    return (
        f"{position}. {owner.canonical_id} "
        f"(Score: {owner.final_score:.2f}, Repos: {owner.repository_count}){alias_info}"
    )


class PlainFormatter(BaseFormatter):
    """Numbered list suitable for piping into other tools."""

    def render(self, report: OwnershipReport) -> None:
        text = self.format(report)
        if text:
            print(text)

    def format(self, report: OwnershipReport) -> str:
        return "\n".join(
            format_owner_line(i, owner) for i, owner in enumerate(report.owners, start=1)
        )
