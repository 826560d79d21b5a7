"""Tag and source tallies returned by the tags and sources endpoints."""

from lever_data.models.base import LeverModel


class Tag(LeverModel):
    """A tag and the number of opportunities carrying it."""

    text: str = ""
    count: int = 0


class Source(LeverModel):
    """A source and the number of opportunities attributed to it."""

    text: str = ""
    count: int = 0
