from typing import Union

from pydantic import BaseModel, Field
from typing_extensions import TypeAliasType

HeaderValue = TypeAliasType(
    "HeaderValue",
    Union[
        str, bool, int, float, None, list["HeaderValue"], dict[str, "HeaderValue"]
    ],
)


class Document(BaseModel):
    """
    A source document split into its header block and its body.

    The header is None when the document has no header block at all, and an
    empty mapping when the block is present but holds no usable lines.
    """

    header: dict[str, HeaderValue] | None = Field(
        default=None,
        description="Ordered key/value pairs from the header block, if any.",
    )
    body: str = Field(
        default="",
        description="Text after the header block, leading whitespace trimmed.",
    )

    @property
    def has_header(self) -> bool:
        return self.header is not None

    def get(self, key: str, default: HeaderValue = None) -> HeaderValue:
        """Look up a header value, treating a missing header as empty."""
        if self.header is None:
            return default
        return self.header.get(key, default)
