"""
Export result types.

These are the shapes handed back to the privacy-export orchestrator:
an ExportPage holds ExportItems, each an ordered list of ExportFields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ExportField:
    """One name/value pair of an export item"""

    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class ExportItem:
    """A single exported record.

    Attributes:
        group_id: Stable category key (e.g. ``bp_activity``)
        group_label: Localised category label
        item_id: Identifier unique within the category
        data: Ordered fields, in display order
    """

    group_id: str
    group_label: str
    item_id: str
    data: List[ExportField] = field(default_factory=list)

    def add_field(self, name: str, value: Any) -> "ExportItem":
        """Append a field, coercing the value to a string"""
        self.data.append(ExportField(name=name, value=_as_text(value)))
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_id": self.group_id,
            "group_label": self.group_label,
            "item_id": self.item_id,
            "data": [f.to_dict() for f in self.data],
        }


@dataclass
class ExportPage:
    """One page of exporter output"""

    data: List[ExportItem] = field(default_factory=list)
    done: bool = True

    @classmethod
    def empty(cls) -> "ExportPage":
        """Result for an address with nothing to export"""
        return cls(data=[], done=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": [item.to_dict() for item in self.data],
            "done": self.done,
        }


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
