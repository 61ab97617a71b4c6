"""Ready-made shapes used in the documentation and by ``shapecast --examples``.

Load one from the CLI with ``shapecast repair shapecast.examples:preferences``.
"""

from __future__ import annotations

from shapecast.domain.choices import either
from shapecast.domain.combinators import list_of, maybe, set_of
from shapecast.domain.primitives import always, boolean, number, string
from shapecast.domain.records import record

# User preferences read back from local storage.
preferences = record(
    {
        "language": either(["english", "spanish"]),
        "items_per_page": number(10),
    }
)

track = record(
    {
        "title": string("Untitled"),
        "artist": maybe(string("Unknown artist")),
        "duration": number(0),
        "explicit": boolean(False),
    }
)

playlist = record(
    {
        "version": always(1),
        "name": string(""),
        "visibility": either(["private", "public", "unlisted"]),
        "tracks": list_of(track),
        "tags": set_of(string(None)),
        "owner": maybe(record({"id": string(""), "display_name": maybe(string(""))})),
    }
)
