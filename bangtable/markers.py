"""Figures standing at the table, with their floating name tag and HP markers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

Vector = tuple[float, float, float]

CAPSULE_RADIUS = 42.0
CAPSULE_HALF_HEIGHT = 96.0
NAME_TAG_HEIGHT = 70.0
HP_MARKER_HEIGHT = 10.0
HP_MARKER_SPACING = 30.0
DEFAULT_HP = 5


@dataclass(eq=False)
class _Attachment:
    """Something attached to a figure, placed relative to its capsule."""

    location: Vector = (0.0, 0.0, 0.0)
    owner: Optional[Any] = None
    has_authority: bool = True
    destroyed: bool = field(default=False, init=False)

    @property
    def is_valid(self) -> bool:
        return not self.destroyed

    def destroy(self) -> None:
        """Remove the attachment from the world."""
        self.destroyed = True


@dataclass(eq=False)
class HPMarker(_Attachment):
    """One life point shown above a figure; hiding it is replicated to clients."""

    hidden: bool = False
    hidden_in_game: bool = field(default=False, init=False)

    def set_hidden(self, hidden: bool) -> None:
        """Hide or show the marker; only the authority may change it."""
        if not self.has_authority:
            return
        self.hidden = hidden
        self.hidden_in_game = hidden

    def on_rep_hidden_state(self) -> None:
        """Apply a replicated hidden flag to the visible state."""
        self.hidden_in_game = self.hidden


@dataclass(eq=False)
class NameTag(_Attachment):
    """Centred floating text above a figure, invisible to its own owner."""

    display_text: str = ""
    rendered_text: str = field(default="", init=False)
    owner_no_see: bool = field(default=True, init=False)
    horizontal_alignment: str = field(default="center", init=False)
    vertical_alignment: str = field(default="text_center", init=False)

    def set_display_text(self, text: str) -> None:
        """Change the text; only the authority may, and it renders at once."""
        if not self.has_authority:
            return
        self.display_text = text
        self.on_rep_display_text()

    def on_rep_display_text(self) -> None:
        """Render the replicated text."""
        self.rendered_text = self.display_text


class PlayerFigure:
    """A player's figure with a name tag and a row of HP markers."""

    def __init__(
        self,
        has_authority: bool = True,
        name_tag_class: Optional[type[NameTag]] = None,
        hp_marker_class: Optional[type[HPMarker]] = None,
        capsule_half_height: float = CAPSULE_HALF_HEIGHT,
    ) -> None:
        self.has_authority = has_authority
        self.name_tag_class = name_tag_class
        self.hp_marker_class = hp_marker_class
        self.capsule_radius = CAPSULE_RADIUS
        self.capsule_half_height = capsule_half_height
        self.name_tag: Optional[NameTag] = None
        self.hp_markers: list[HPMarker] = []
        self.hp = DEFAULT_HP

    def begin_play(self) -> None:
        """Spawn the name tag above the capsule; only the authority spawns."""
        if not (self.has_authority and self.name_tag_class is not None):
            return
        location = (0.0, 0.0, self.capsule_half_height + NAME_TAG_HEIGHT)
        self.name_tag = self.name_tag_class(
            location=location, owner=self, has_authority=self.has_authority
        )

    def set_hp(self, new_hp: int) -> None:
        """Spawn one visible marker per life point, centred in a row."""
        if not (self.has_authority and self.hp_marker_class is not None):
            return
        self.hp = new_hp
        z = self.capsule_half_height + HP_MARKER_HEIGHT
        for i in range(new_hp):
            y = (i - (self.hp - 1) / 2.0) * HP_MARKER_SPACING
            marker = self.hp_marker_class(
                location=(0.0, y, z), owner=self, has_authority=self.has_authority
            )
            marker.set_hidden(False)
            self.hp_markers.append(marker)

    def update_hp(self, new_hp: int) -> None:
        """Show the first new_hp markers and hide the rest."""
        for index, marker in enumerate(self.hp_markers):
            if marker.is_valid:
                marker.set_hidden(index >= new_hp)

    def end_play(self) -> None:
        """Destroy the name tag and markers; only the authority does so."""
        if not self.has_authority:
            return
        if self.name_tag is not None and self.name_tag.is_valid:
            self.name_tag.destroy()
        self.name_tag = None
        for marker in self.hp_markers:
            if marker.is_valid:
                marker.destroy()
        self.hp_markers.clear()