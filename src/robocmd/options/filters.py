# topmark:header:start
#
#   project      : RoboCmd
#   file         : filters.py
#   file_relpath : src/robocmd/options/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File selection filters.

This module defines the four exclusion families and the `Filter` record that groups
them together with the scalar selection bounds (size, age, last access date).

Two families carry payloads next to their boolean flags:

- `FileExclusionFilter`: an attribute bundle (``/xa:<letters>``) and a path/name list
  (``/xf`` followed by one token per entry).
- `DirectoryExclusionFilter`: a path/name list (``/xd`` followed by one token per entry).

When two values both carry a payload for the same slot, attribute bundles are merged
with `FileAttributes.combine` and path/name lists are concatenated left then right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from robocmd.core.flagset import (
    FlagSet,
    FlagTag,
    TagSet,
    as_names,
    bind_single_flags,
    concat_names,
    mask_of,
    merge_optional,
    tags_in,
)
from robocmd.options.properties import FileAttributes


# --------------------------- File exclusion ---------------------------


class FileExclusionTag(FlagTag):
    """Ways to exclude files from the copy."""

    ATTRIBUTES = ("attributes", "Files with any of the given attributes", "/xa:")
    PATH_OR_NAME = ("path_or_name", "Files matching the given paths or names", "/xf", ("names",))
    CHANGED = ("changed", "Changed files", "/xc")
    OLDER = ("older", "Older files", "/xo")
    NEWER = ("newer", "Newer files", "/xn")
    JUNCTION_POINTS = ("junction_points", "Junction points for files", "/xjf")


_FILE_PAYLOAD_MASK: int = mask_of((FileExclusionTag.ATTRIBUTES, FileExclusionTag.PATH_OR_NAME))


@dataclass(frozen=True)
class FileExclusionFilter(FlagSet[FileExclusionTag]):
    """File exclusion flags with optional attribute and path/name payloads.

    Attributes:
        mask (int): Bits of the boolean tags (`CHANGED`, `OLDER`, `NEWER`,
            `JUNCTION_POINTS`).
        attributes (FileAttributes | None): Attribute payload; ``None`` when
            `ATTRIBUTES` is absent.
        path_or_name (tuple[str, ...] | None): Path/name payload; ``None`` when
            `PATH_OR_NAME` is absent. An empty tuple is present and renders ``/xf`` alone.
    """

    vocabulary = FileExclusionTag

    mask: int = 0
    attributes: FileAttributes | None = None
    path_or_name: tuple[str, ...] | None = None

    CHANGED: ClassVar[FileExclusionFilter]
    OLDER: ClassVar[FileExclusionFilter]
    NEWER: ClassVar[FileExclusionFilter]
    JUNCTION_POINTS: ClassVar[FileExclusionFilter]

    def __post_init__(self) -> None:
        if self.mask & _FILE_PAYLOAD_MASK or self.mask >> len(FileExclusionTag):
            raise ValueError(f"invalid switch mask {self.mask:#x} for FileExclusionFilter")
        if self.path_or_name is not None and not isinstance(self.path_or_name, tuple):
            object.__setattr__(self, "path_or_name", as_names(self.path_or_name))

    @classmethod
    def of(cls, *tags: FileExclusionTag) -> FileExclusionFilter:
        """Return the value with the given boolean tags present.

        Raises:
            ValueError: If a payload-bearing tag is passed (use `by_attributes` or
                `by_path_or_name`).
        """
        for tag in tags:
            if not isinstance(tag, FileExclusionTag):
                raise TypeError(f"{tag!r} is not a FileExclusionTag")
            if tag in (FileExclusionTag.ATTRIBUTES, FileExclusionTag.PATH_OR_NAME):
                raise ValueError(f"{tag.name} requires a payload")
        return cls(mask=mask_of(tags))

    @classmethod
    def by_attributes(cls, attributes: FileAttributes) -> FileExclusionFilter:
        """Exclude files having any of ``attributes`` (``/xa:<letters>``)."""
        return cls(attributes=attributes)

    @classmethod
    def by_path_or_name(cls, *names: str) -> FileExclusionFilter:
        """Exclude files matching any of ``names`` (``/xf name...``); wildcards allowed."""
        return cls(path_or_name=as_names(names))

    @classmethod
    def none(cls) -> FileExclusionFilter:
        """Return the empty value."""
        return cls()

    @property
    def tags(self) -> tuple[FileExclusionTag, ...]:
        """Present tags, in vocabulary order."""
        mask = self.mask
        if self.attributes is not None:
            mask |= FileExclusionTag.ATTRIBUTES.bit
        if self.path_or_name is not None:
            mask |= FileExclusionTag.PATH_OR_NAME.bit
        return tags_in(FileExclusionTag, mask)

    def only(self, tag: FileExclusionTag) -> FileExclusionFilter:
        """Return the single-flag value for ``tag``, carrying its payload."""
        self._check_present(tag)
        if tag is FileExclusionTag.ATTRIBUTES:
            return type(self)(attributes=self.attributes)
        if tag is FileExclusionTag.PATH_OR_NAME:
            return type(self)(path_or_name=self.path_or_name)
        return type(self).of(tag)

    def combine(self, other: FileExclusionFilter) -> FileExclusionFilter:
        """Union of flags; attribute payloads merge, path/name lists concatenate."""
        self._check_family(other)
        return type(self)(
            mask=self.mask | other.mask,
            attributes=merge_optional(
                self.attributes, other.attributes, lambda a, b: a.combine(b)
            ),
            path_or_name=concat_names(self.path_or_name, other.path_or_name),
        )

    def render_single(self) -> list[str]:
        """Return the tokens of a single-flag value."""
        (tag,) = self.tags
        if tag is FileExclusionTag.ATTRIBUTES and self.attributes is not None:
            return [f"{tag.token}{self.attributes.codes}"]
        if tag is FileExclusionTag.PATH_OR_NAME and self.path_or_name is not None:
            return [tag.token, *self.path_or_name]
        return [tag.token]


for _tag in (
    FileExclusionTag.CHANGED,
    FileExclusionTag.OLDER,
    FileExclusionTag.NEWER,
    FileExclusionTag.JUNCTION_POINTS,
):
    setattr(FileExclusionFilter, _tag.name, FileExclusionFilter.of(_tag))


# ------------------------ Directory exclusion ------------------------


class DirectoryExclusionTag(FlagTag):
    """Ways to exclude directories from the copy."""

    PATH_OR_NAME = (
        "path_or_name",
        "Directories matching the given paths or names",
        "/xd",
        ("names",),
    )
    JUNCTION_POINTS = ("junction_points", "Junction points for directories", "/xjd")


@dataclass(frozen=True)
class DirectoryExclusionFilter(FlagSet[DirectoryExclusionTag]):
    """Directory exclusion flags with an optional path/name payload.

    Attributes:
        path_or_name (tuple[str, ...] | None): Path/name payload; ``None`` when absent.
        junction_points (bool): Exclude junction points for directories (``/xjd``).
    """

    vocabulary = DirectoryExclusionTag

    path_or_name: tuple[str, ...] | None = None
    junction_points: bool = False

    JUNCTION_POINTS: ClassVar[DirectoryExclusionFilter]

    def __post_init__(self) -> None:
        if self.path_or_name is not None and not isinstance(self.path_or_name, tuple):
            object.__setattr__(self, "path_or_name", as_names(self.path_or_name))

    @classmethod
    def by_path_or_name(cls, *names: str) -> DirectoryExclusionFilter:
        """Exclude directories matching any of ``names`` (``/xd name...``)."""
        return cls(path_or_name=as_names(names))

    @classmethod
    def none(cls) -> DirectoryExclusionFilter:
        """Return the empty value."""
        return cls()

    @property
    def tags(self) -> tuple[DirectoryExclusionTag, ...]:
        """Present tags, in vocabulary order."""
        present: list[DirectoryExclusionTag] = []
        if self.path_or_name is not None:
            present.append(DirectoryExclusionTag.PATH_OR_NAME)
        if self.junction_points:
            present.append(DirectoryExclusionTag.JUNCTION_POINTS)
        return tuple(present)

    def only(self, tag: DirectoryExclusionTag) -> DirectoryExclusionFilter:
        """Return the single-flag value for ``tag``."""
        self._check_present(tag)
        if tag is DirectoryExclusionTag.PATH_OR_NAME:
            return type(self)(path_or_name=self.path_or_name)
        return type(self)(junction_points=True)

    def combine(self, other: DirectoryExclusionFilter) -> DirectoryExclusionFilter:
        """Union of flags; path/name lists concatenate."""
        self._check_family(other)
        return type(self)(
            path_or_name=concat_names(self.path_or_name, other.path_or_name),
            junction_points=self.junction_points or other.junction_points,
        )

    def render_single(self) -> list[str]:
        """Return the tokens of a single-flag value."""
        if self.path_or_name is not None:
            return [DirectoryExclusionTag.PATH_OR_NAME.token, *self.path_or_name]
        return [DirectoryExclusionTag.JUNCTION_POINTS.token]


DirectoryExclusionFilter.JUNCTION_POINTS = DirectoryExclusionFilter(junction_points=True)


# --------------------- File and directory exclusion ---------------------


class FileAndDirectoryExclusionTag(FlagTag):
    """Exclusions applying to both files and directories."""

    EXTRA = ("extra", "Extra files and directories", "/xx")
    LONELY = ("lonely", "Lonely files and directories", "/xl")
    JUNCTION_POINTS = ("junction_points", "All junction points", "/xj")


@bind_single_flags
class FileAndDirectoryExclusionFilter(TagSet[FileAndDirectoryExclusionTag]):
    """Exclusions for files and directories (``/xx``, ``/xl``, ``/xj``)."""

    vocabulary = FileAndDirectoryExclusionTag

    EXTRA: ClassVar[FileAndDirectoryExclusionFilter]
    LONELY: ClassVar[FileAndDirectoryExclusionFilter]
    JUNCTION_POINTS: ClassVar[FileAndDirectoryExclusionFilter]


# ----------------------- Exclusion exceptions -----------------------


class FileExclusionExceptionTag(FlagTag):
    """Files to include even though an exclusion would otherwise apply."""

    MODIFIED = ("modified", "Modified files", "/im")
    SAME = ("same", "Same files", "/is")
    TWEAKED = ("tweaked", "Tweaked files", "/it")


@bind_single_flags
class FileExclusionFilterException(TagSet[FileExclusionExceptionTag]):
    """Exceptions to the exclusion filters (``/im``, ``/is``, ``/it``)."""

    vocabulary = FileExclusionExceptionTag

    MODIFIED: ClassVar[FileExclusionFilterException]
    SAME: ClassVar[FileExclusionFilterException]
    TWEAKED: ClassVar[FileExclusionFilterException]


# ------------------------------ Filter ------------------------------


@dataclass(frozen=True)
class Filter:
    """Everything that selects which files take part in the copy.

    Sizes are in bytes. Ages and last access dates are passed through verbatim:
    the external tool accepts a day count (``n``) or a date (``YYYYMMDD``).
    """

    archive_and_reset: bool = False
    include_only_attributes: FileAttributes | None = None

    file_exclusion: FileExclusionFilter | None = None
    directory_exclusion: DirectoryExclusionFilter | None = None
    file_and_directory_exclusion: FileAndDirectoryExclusionFilter | None = None
    exclusion_exceptions: FileExclusionFilterException | None = None

    max_size: int | None = None
    min_size: int | None = None
    max_age: str | None = None
    min_age: str | None = None
    max_last_access_date: str | None = None
    min_last_access_date: str | None = None

    def render(self) -> list[str]:
        """Return the filter tokens in their fixed order."""
        tokens: list[str] = []
        if self.archive_and_reset:
            tokens.append("/m")
        if self.include_only_attributes is not None:
            tokens.append(f"/ia:{self.include_only_attributes.codes}")

        for family in (
            self.file_exclusion,
            self.directory_exclusion,
            self.file_and_directory_exclusion,
            self.exclusion_exceptions,
        ):
            if family is not None:
                tokens.extend(family.render())

        for template, value in (
            ("/max:{}", self.max_size),
            ("/min:{}", self.min_size),
            ("/maxage:{}", self.max_age),
            ("/minage:{}", self.min_age),
            ("/maxlad:{}", self.max_last_access_date),
            ("/minlad:{}", self.min_last_access_date),
        ):
            if value is not None:
                tokens.append(template.format(value))
        return tokens
