"""Human-friendly output formatter - renders an ownership summary as text."""

import os
from typing import List, Optional
from ..contracts.summary import OwnershipSummary


def _use_ascii(ascii_mode: Optional[bool] = None) -> bool:
    """Resolve whether to use ASCII output (checked at format time)."""
    if ascii_mode is not None:
        return bool(ascii_mode)
    return os.environ.get("OWNERFMT_ASCII", "").lower() in ("1", "true", "yes")


def _box(title: str, width: int = 65, ascii_mode: bool = False) -> List[str]:
    """Return box-drawing header lines."""
    b = {"tl": "+", "tr": "+", "h": "-", "v": "|"} if ascii_mode else {"tl": "┌", "tr": "┐", "h": "─", "v": "│"}
    h = b["h"] * (width - 2)
    return [
        b["tl"] + h + b["tr"],
        f"{b['v']} {title:<{width - 4}} {b['v']}",
        ("+" if ascii_mode else "└") + h + ("+" if ascii_mode else "┘"),
        "",
    ]


def _row(label: str, value: str) -> str:
    return f"  {label:<18}{value or '-'}"


def format_human_friendly(summary: OwnershipSummary, ascii_mode: Optional[bool] = None) -> str:
    """
    Render an ownership summary for terminal output.
    
    Args:
        summary: Formatted ownership strings
        ascii_mode: Force ASCII borders (defaults to OWNERFMT_ASCII env var)
        
    Returns:
        Multi-line text block
    """
    ascii_mode = _use_ascii(ascii_mode)
    lines = _box("OWNERSHIP", ascii_mode=ascii_mode)
    
    if not summary.ownership_enabled:
        lines.append("  Ownership is disabled for this item.")
        lines.append("")
    
    lines.append(_row("Owner:", summary.owner_id))
    lines.append(_row("Owner email:", summary.owner_email))
    lines.append(_row("Owners:", summary.co_owner_ids))
    lines.append(_row("Owner emails:", summary.co_owner_emails))
    
    return "\n".join(lines)
