"""Models for animation clips and their decomposed names.

`Animation` is the per-clip record handed to serializers. `ClipName` and
`TransitionTarget` are the parse result of a clip name and are never
persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PRIMARY_ALTERNATE = "A"


class TransitionTarget(BaseModel):
    """Transition suffix of a clip name (the part after `-`).

    Example:
        `A_intro_01-02` -> raw="02", next_name=None, next_clip_index=2
        `A_intro_01-relax_01` -> raw="relax_01", next_name="relax", next_clip_index=1
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw: str = Field(description="Matched text after the hyphen")
    next_name: str | None = Field(
        default=None, description="Action of the destination group (cross-group transition)"
    )
    next_clip_index: int = Field(ge=0, description="Clip index of the destination")
    next_clip_text: str = Field(description="Destination index as written (two digits)")


class ClipName(BaseModel):
    """Fields decomposed from an animation clip name.

    Name shape: `A_<action>_[<char>[_]]<NN>[_][<alternate>][-[<next_name>_]<NN>]`

    Example:
        >>> clip = ClipName(matched="A_intro_B_01", action="intro", character="B",
        ...                 clip_index=1, clip_text="01")
        >>> clip.base_name()
        'A_intro_B_01'
        >>> clip.base_name(clip.clip_index + 1)
        'A_intro_B_02'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    matched: str = Field(description="Full text matched by the name pattern")
    action: str = Field(min_length=1, description="Lowercase action word (e.g. 'intro')")
    character: str | None = Field(default=None, description="Character letter, if any")
    clip_index: int = Field(ge=0, description="Numeric clip index")
    clip_text: str = Field(description="Clip index as written (two digits)")
    alternate: str | None = Field(default=None, description="Alternate letter, if any")
    transition: TransitionTarget | None = Field(default=None)

    @property
    def is_transition(self) -> bool:
        return self.transition is not None

    @property
    def is_primary(self) -> bool:
        """True for the unlettered form and the `A` alternate."""
        return self.alternate is None or self.alternate == PRIMARY_ALTERNATE

    def group_prefix(self) -> str:
        """`A_<action>_` plus `<char>_` when a character is present."""
        if self.character:
            return f"A_{self.action}_{self.character}_"
        return f"A_{self.action}_"

    def base_name(self, index: int | None = None) -> str:
        """Clip name without alternate letter or transition suffix.

        Args:
            index: Clip index to format (two-digit zero padded). Defaults to
                   the index exactly as written in the parsed name.
        """
        if index is None:
            return self.group_prefix() + self.clip_text
        return f"{self.group_prefix()}{index:02d}"


class Animation(BaseModel):
    """One animation clip and the sequencing edges inferred for it.

    Serialized with PascalCase keys (`Name`, `NextAnimations`,
    `AlternateAnimations`, `PreviousAnimation`) via `model_dump(by_alias=True)`.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    name: str = Field(alias="Name", frozen=True)
    next_animations: list[str] = Field(default_factory=list, alias="NextAnimations")
    alternate_animations: list[str] = Field(default_factory=list, alias="AlternateAnimations")
    previous_animation: str | None = Field(default=None, alias="PreviousAnimation")
