"""
Pure presentation helpers: snapshot plus mode flags in, rich Text out.

Nothing here touches the terminal. Each fragment carries its own settle
state, so download, upload, latency and bufferbloat can settle independently.
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from ...schemas import Snapshot
from .theme import ICONS, THEME

UPLOAD_PLACEHOLDER = "- Mbps"
MISSING = "-"


def format_number(value: Optional[float]) -> str:
    """Render a figure the way the engine reports it: 17, not 17.0."""
    if value is None:
        return MISSING
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _join(value: Optional[float], unit: Optional[str], sep: str = " ") -> str:
    if value is None:
        return MISSING
    return f"{format_number(value)}{sep}{unit or ''}".rstrip()


def download_settled(snapshot: Snapshot) -> bool:
    """Download settles at the end of the run or as soon as upload starts."""
    return snapshot.is_done or snapshot.upload_speed is not None


def upload_settled(snapshot: Snapshot) -> bool:
    return snapshot.is_done


def latency_settled(snapshot: Snapshot) -> bool:
    return snapshot.is_latency_done


def bufferbloat_settled(snapshot: Snapshot) -> bool:
    return snapshot.is_bufferbloat_done


def speed_style(settled: bool) -> str:
    return THEME["settled"] if settled else THEME["in_progress"]


def latency_style(settled: bool) -> str:
    return THEME["settled_latency"] if settled else THEME["in_progress"]


def _append_figure(text: Text, value: Optional[float], unit: Optional[str]) -> None:
    text.append(format_number(value))
    if unit:
        text.append(" ")
        text.append(unit, style=THEME["muted"])


def download_text(snapshot: Snapshot) -> Text:
    """`<speed> <unit> ↓` colored by the download settle state."""
    text = Text(style=speed_style(download_settled(snapshot)))
    _append_figure(text, snapshot.download_speed, snapshot.download_unit)
    text.append(f" {ICONS['download']}")
    return text


def upload_text(snapshot: Snapshot) -> Text:
    """`<speed> <unit> ↑`, or a dimmed placeholder before upload starts."""
    text = Text(style=speed_style(upload_settled(snapshot)))
    if snapshot.upload_speed is None:
        text.append(f"{UPLOAD_PLACEHOLDER} {ICONS['upload']}", style=THEME["muted"])
        return text
    _append_figure(text, snapshot.upload_speed, snapshot.upload_unit)
    text.append(f" {ICONS['upload']}")
    return text


def speed_text(snapshot: Snapshot, measure_upload: bool) -> Text:
    """Main speed line; the upload half only appears in upload mode."""
    if not measure_upload:
        return download_text(snapshot)
    return Text.assemble(
        download_text(snapshot),
        " ",
        (ICONS["separator"], THEME["muted"]),
        " ",
        upload_text(snapshot),
    )


def latency_text(snapshot: Snapshot) -> Text:
    """
    Unloaded and loaded latency, each half colored by its own settle state.
    """
    return Text.assemble(
        "Latency:  ",
        (
            _join(snapshot.latency, snapshot.latency_unit, sep=""),
            latency_style(latency_settled(snapshot)),
        ),
        " ",
        ("(unloaded)", THEME["muted"]),
        "  ",
        (
            _join(snapshot.bufferbloat, snapshot.bufferbloat_unit, sep=""),
            latency_style(bufferbloat_settled(snapshot)),
        ),
        " ",
        ("(loaded)", THEME["muted"]),
    )


def metadata_text(snapshot: Snapshot) -> Text:
    """Client and server block shown once the run is over (verbose only)."""
    client = snapshot.client
    client_parts = (
        [client.location, client.ip, client.isp] if client is not None else []
    )
    client_line = " ".join(part or MISSING for part in client_parts) or MISSING
    return Text(
        f"     Client:  {client_line}\n"
        f"    Servers:  {snapshot.server_locations or MISSING}"
    )


def speed_block(snapshot: Snapshot, measure_upload: bool, verbose: bool) -> Text:
    """Speed line, a blank line, and the latency line in verbose mode."""
    block = Text.assemble(speed_text(snapshot, measure_upload), "\n\n")
    if verbose:
        block.append("    ")
        block.append_text(latency_text(snapshot))
        block.append("\n")
    return block


def pending_frame(
    snapshot: Snapshot, measure_upload: bool, verbose: bool, spinner: str
) -> Text:
    """
    One animation frame: the spinner, then either blank space (no data yet)
    or the current speed block.
    """
    frame = Text("\n\n  ")
    frame.append(f"{spinner} ", style=THEME["spinner"])
    if not snapshot.has_data:
        frame.append("\n\n")
        return frame
    frame.append_text(speed_block(snapshot, measure_upload, verbose))
    return frame


def final_frame(snapshot: Snapshot, measure_upload: bool, verbose: bool) -> Text:
    """The last interactive frame, with the metadata block in verbose mode."""
    frame = Text("\n\n    ")
    frame.append_text(speed_block(snapshot, measure_upload, verbose))
    if verbose:
        frame.append("\n")
        frame.append_text(metadata_text(snapshot))
    return frame


def plain_report(snapshot: Snapshot, measure_upload: bool, verbose: bool) -> str:
    """
    Final text for pipes and files. No styling, one figure per line.
    """
    lines = [_join(snapshot.download_speed, snapshot.download_unit)]
    if measure_upload:
        if snapshot.upload_speed is None:
            lines.append(UPLOAD_PLACEHOLDER)
        else:
            lines.append(_join(snapshot.upload_speed, snapshot.upload_unit))
    if verbose:
        lines.append(f"    {latency_text(snapshot).plain}")
        lines.append(metadata_text(snapshot).plain)
    return "\n".join(lines)
