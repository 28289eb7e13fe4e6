# topmark:header:start
#
#   project      : RoboCmd
#   file         : actions.py
#   file_relpath : src/robocmd/options/actions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Copy mode, move mode and post-copy attribute actions.

`CopyMode` and `Move` are plain one-of choices and render a single token.
`PostCopyActions` is a flag set with two attribute payloads: attributes to add to the
copied files (``/a+:<letters>``) and attributes to remove (``/a-:<letters>``).
"""

from __future__ import annotations

from dataclasses import dataclass

from robocmd.core.flagset import FlagSet, FlagTag, merge_optional
from robocmd.options.properties import FileAttributes


class CopyMode(FlagTag):
    """How files are opened for copying."""

    RESTARTABLE = ("restartable", "Restartable mode", "/z")
    BACKUP = ("backup", "Backup mode", "/b")
    RESTARTABLE_WITH_BACKUP_FALLBACK = (
        "restartable_backup_fallback",
        "Restartable mode, falling back to backup mode on access denied",
        "/zb",
        ("restartable_with_backup_fallback",),
    )

    def render(self) -> list[str]:
        """Return ``[token]``."""
        return [self.token]


class Move(FlagTag):
    """Delete the source after copying."""

    FILES = ("files", "Move files", "/mov")
    FILES_AND_DIRS = ("files_and_dirs", "Move files and directories", "/move")

    def render(self) -> list[str]:
        """Return ``[token]``."""
        return [self.token]


class PostCopyActionTag(FlagTag):
    """Attribute changes applied to copied files."""

    ADD_ATTRIBUTES = ("add_attributes", "Add attributes to copied files", "/a+:")
    REMOVE_ATTRIBUTES = ("remove_attributes", "Remove attributes from copied files", "/a-:")


@dataclass(frozen=True)
class PostCopyActions(FlagSet[PostCopyActionTag]):
    """Attributes to add to and remove from copied files.

    A value with neither payload is the family's empty value and renders nothing.

    Attributes:
        added (FileAttributes | None): Attributes to add (``/a+:``).
        removed (FileAttributes | None): Attributes to remove (``/a-:``).
    """

    vocabulary = PostCopyActionTag

    added: FileAttributes | None = None
    removed: FileAttributes | None = None

    @classmethod
    def add_attributes(cls, attributes: FileAttributes) -> PostCopyActions:
        """Add ``attributes`` to copied files."""
        return cls(added=attributes)

    @classmethod
    def remove_attributes(cls, attributes: FileAttributes) -> PostCopyActions:
        """Remove ``attributes`` from copied files."""
        return cls(removed=attributes)

    @classmethod
    def none(cls) -> PostCopyActions:
        """Return the empty value."""
        return cls()

    @property
    def tags(self) -> tuple[PostCopyActionTag, ...]:
        """Present tags, in vocabulary order."""
        present: list[PostCopyActionTag] = []
        if self.added is not None:
            present.append(PostCopyActionTag.ADD_ATTRIBUTES)
        if self.removed is not None:
            present.append(PostCopyActionTag.REMOVE_ATTRIBUTES)
        return tuple(present)

    def only(self, tag: PostCopyActionTag) -> PostCopyActions:
        """Return the single-flag value for ``tag``."""
        self._check_present(tag)
        if tag is PostCopyActionTag.ADD_ATTRIBUTES:
            return type(self)(added=self.added)
        return type(self)(removed=self.removed)

    def combine(self, other: PostCopyActions) -> PostCopyActions:
        """Union of both actions; attribute payloads merge per slot."""
        self._check_family(other)
        return type(self)(
            added=merge_optional(self.added, other.added, lambda a, b: a.combine(b)),
            removed=merge_optional(self.removed, other.removed, lambda a, b: a.combine(b)),
        )

    def render_single(self) -> list[str]:
        """Return ``["/a+:<letters>"]`` or ``["/a-:<letters>"]``."""
        if self.added is not None:
            return [f"{PostCopyActionTag.ADD_ATTRIBUTES.token}{self.added.codes}"]
        if self.removed is not None:
            return [f"{PostCopyActionTag.REMOVE_ATTRIBUTES.token}{self.removed.codes}"]
        return []
