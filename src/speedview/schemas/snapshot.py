"""
Type-safe schemas for measurement snapshots.

A snapshot is one cumulative progress report from the measurement engine. Each
new snapshot fully supersedes the previous one; fields are never merged.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientInfo(BaseModel):
    """
    Descriptive metadata about the measuring client.
    """

    model_config = ConfigDict(frozen=True)

    location: Optional[str] = Field(default=None, description="City, country")
    ip: Optional[str] = Field(default=None, description="Public IP address")
    isp: Optional[str] = Field(default=None, description="Internet provider")


class Snapshot(BaseModel):
    """
    Measurement progress at one point in time.

    Accepts both camelCase keys (as emitted by the engine) and snake_case
    field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    download_speed: Optional[float] = Field(
        default=None, alias="downloadSpeed", description="Current download speed"
    )
    download_unit: Optional[str] = Field(
        default=None, alias="downloadUnit", description="Unit of download_speed"
    )
    upload_speed: Optional[float] = Field(
        default=None, alias="uploadSpeed", description="Current upload speed"
    )
    upload_unit: Optional[str] = Field(
        default=None, alias="uploadUnit", description="Unit of upload_speed"
    )
    latency: Optional[float] = Field(
        default=None, description="Unloaded latency (verbose only)"
    )
    latency_unit: Optional[str] = Field(default=None, alias="latencyUnit")
    bufferbloat: Optional[float] = Field(
        default=None, description="Loaded latency (verbose only)"
    )
    bufferbloat_unit: Optional[str] = Field(default=None, alias="bufferbloatUnit")
    client: Optional[ClientInfo] = Field(
        default=None, description="Client metadata (verbose only)"
    )
    server_locations: Optional[str] = Field(
        default=None,
        alias="serverLocations",
        description="Comma separated list of test server locations",
    )
    is_done: bool = Field(default=False, alias="isDone")
    is_latency_done: bool = Field(default=False, alias="isLatencyDone")
    is_bufferbloat_done: bool = Field(default=False, alias="isBufferbloatDone")

    @property
    def has_data(self) -> bool:
        """True once a download figure has arrived."""
        return self.download_speed is not None
