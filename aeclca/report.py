"""ImpactReport model and IMPACT.md generation."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from aeclca.diagnostics import Evaluation


class ImpactEntry:
    """Evaluation outcome for one element."""

    def __init__(
        self,
        element_id: str,
        ifc_class: str,
        name: str,
        epd_name: str,
        evaluation: Evaluation,
    ) -> None:
        self.element_id = element_id
        self.ifc_class = ifc_class
        self.name = name
        self.epd_name = epd_name
        self.evaluation = evaluation

    def to_dict(self) -> dict[str, Any]:
        return {
            "element_id": self.element_id,
            "ifc_class": self.ifc_class,
            "name": self.name,
            "epd_name": self.epd_name,
            **self.evaluation.to_dict(),
        }


class ImpactReport:
    """Impact of a set of elements for one EPD field."""

    def __init__(
        self,
        field: str,
        project: str = "",
        entries: list[ImpactEntry] | None = None,
        generated_at: datetime | None = None,
    ) -> None:
        self.field = field
        self.project = project
        self.entries = entries or []
        self.generated_at = generated_at or datetime.now(timezone.utc)

    @property
    def total(self) -> float:
        """Sum of all successful evaluations."""
        return sum(e.evaluation.value for e in self.entries if e.evaluation.ok)

    @property
    def failed(self) -> list[ImpactEntry]:
        return [e for e in self.entries if not e.evaluation.ok]

    def by_class(self) -> dict[str, float]:
        """Successful totals grouped by IFC class."""
        totals: dict[str, float] = {}
        for entry in self.entries:
            if entry.evaluation.ok:
                totals[entry.ifc_class] = totals.get(entry.ifc_class, 0.0) + entry.evaluation.value
        return totals

    def to_markdown(self) -> str:
        """Generate IMPACT.md content."""
        lines: list[str] = []

        lines.append(f"# Impact Report — {self.project or 'Unknown'}")
        lines.append("")
        lines.append(f"**Field:** {self.field}")
        lines.append(f"**Generated:** {self.generated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append(f"**Elements:** {len(self.entries)} ({len(self.failed)} failed)")
        lines.append(f"**Total:** {self.total:,.3f}")
        lines.append("")

        if self.entries:
            lines.append("## Elements")
            lines.append("")
            lines.append("| Element | Class | EPD | Basis | Quantity | Impact |")
            lines.append("|---------|-------|-----|-------|----------|--------|")
            for entry in self.entries:
                ev = entry.evaluation
                quantity = f"{ev.quantity:,.3f}" if ev.quantity is not None else "-"
                impact = f"{ev.value:,.3f}" if ev.ok else "FAILED"
                label = entry.name or entry.element_id
                lines.append(
                    f"| {label} | {entry.ifc_class} | {entry.epd_name or '-'} "
                    f"| {ev.quantity_type or '-'} | {quantity} | {impact} |"
                )
            lines.append("")

        totals = self.by_class()
        if totals:
            lines.append("## By Class")
            lines.append("")
            for ifc_class, value in sorted(totals.items()):
                lines.append(f"- **{ifc_class or 'Unclassified'}:** {value:,.3f}")
            lines.append("")

        issues = [(e, d) for e in self.entries for d in e.evaluation.diagnostics]
        if issues:
            lines.append("## Diagnostics")
            lines.append("")
            for entry, diag in issues:
                msg = diag.message.replace("|", "\\|")
                lines.append(f"- {diag.severity.upper()} `{entry.element_id}` {msg}")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Return structured JSON for audit trail."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "project": self.project,
            "field": self.field,
            "generated_at": self.generated_at.isoformat(),
            "total": self.total,
            "failed_count": len(self.failed),
            "by_class": self.by_class(),
            "entries": [e.to_dict() for e in self.entries],
        }
