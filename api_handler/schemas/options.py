"""
Request options for a single API call.

Every recognised option is enumerated here with its default. Unknown
option names are rejected so misspelled keys fail loudly instead of
being ignored. The camelCase aliases used by existing callers are
accepted alongside the snake_case field names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


JSON_MEDIA_TYPE = "application/json"


class RequestOptions(BaseModel):
    """Options describing one outbound request."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    url: str = Field(
        ...,
        description="Full API endpoint URL",
    )
    method: str = Field(
        default="GET",
        description="HTTP method; GET, POST, PATCH or DELETE. Other values pass through unchecked.",
    )
    body: Any = Field(
        default=None,
        description="JSON-serializable payload, sent only for POST and PATCH",
    )
    file_type: str = Field(
        default=JSON_MEDIA_TYPE,
        alias="fileType",
        description="Expected response media type, also sent as the Accept header",
    )
    query_params: str = Field(
        default="",
        alias="queryParams",
        description="Pre-encoded query string appended after '?'",
    )
    access_token: Any = Field(
        default=None,
        alias="accessToken",
        description="Explicit credential; None falls back to the token store",
    )
    headers: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra headers, overriding defaults on exact name match; values are stringified",
    )

    @property
    def expects_json(self) -> bool:
        return self.file_type == JSON_MEDIA_TYPE

    def complete_url(self) -> str:
        """Base URL with the query fragment appended when present."""
        if self.query_params:
            return f"{self.url}?{self.query_params}"
        return self.url
