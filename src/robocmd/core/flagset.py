# topmark:header:start
#
#   project      : RoboCmd
#   file         : flagset.py
#   file_relpath : src/robocmd/core/flagset.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded-vocabulary flag sets: combination, decomposition and token rendering.

Every option family (file properties, attributes, exclusion filters, performance
options, ...) is a `FlagSet` over a fixed, ordered vocabulary of `FlagTag` members.
A value holds either exactly one flag (a *single* value) or any combination of flags.

The base class implements the two operations that are identical for every family:

- ``single_variants()``: decompose a value into one single-flag value per present tag,
  in vocabulary order. A single value decomposes to itself.
- ``render()``: decompose, render every single flag, and concatenate the tokens.

Families only provide the per-tag payload handling:

- ``tags``: the present tags, in vocabulary order.
- ``only(tag)``: the single-flag value a caller would have supplied for ``tag``.
- ``combine(other)``: the union of two values of the same family.
- ``render_single()``: the tokens of a single-flag value.

Boolean-only families derive from `TagSet`, a bitmask over the vocabulary
(bit *i* is the *i*-th tag). Families whose whole set is written as one token with a
run of code letters (``/copy:DAT``) derive from `CodeSet`.

Whether a value is single is derived from its content, never stored: combining a value
with the family's empty value yields a value equal to the original.

Example:
    ```python
    props = combine(FileProperties.DATA, FileProperties.TIME_STAMPS)
    assert props.render() == ["/copy:DT"]
    assert decompose(props) == (FileProperties.DATA, FileProperties.TIME_STAMPS)
    ```
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from robocmd.config.logging import get_logger
from robocmd.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)

_TAG = TypeVar("_TAG", bound="FlagTag")
_FS = TypeVar("_FS", bound="FlagSet[Any]")
_TS = TypeVar("_TS", bound="TagSet[Any]")
_P = TypeVar("_P")


class FlagTag(KeyedStrEnum):
    """A vocabulary entry: config key, human label and wire token template.

    The member definition order of a `FlagTag` subclass is the family's canonical order.

    Attributes:
        token (str): The token (or token prefix, or code letter) the external tool expects.
    """

    token: str

    def __new__(
        cls: type[_TAG],
        key: str,
        label: str,
        token: str,
        aliases: Iterable[str] = (),
    ) -> _TAG:
        """Create a vocabulary member.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label.
            token (str): The wire token, token prefix or code letter.
            aliases (Iterable[str]): Optional aliases accepted by `parse()`.

        Returns:
            _TAG: The newly created enum member.
        """
        obj: _TAG = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.token = token
        obj.aliases = tuple(aliases)
        return obj

    @property
    def bit(self) -> int:
        """Bitmask bit of this tag within its vocabulary."""
        return 1 << tag_index(self)


@functools.cache
def vocabulary_of(tag_type: type[_TAG]) -> tuple[_TAG, ...]:
    """Return the ordered vocabulary of a tag enum."""
    return tuple(tag_type)


def tag_index(tag: FlagTag) -> int:
    """Return the position of ``tag`` in its vocabulary."""
    return vocabulary_of(type(tag)).index(tag)


def mask_of(tags: Iterable[FlagTag]) -> int:
    """Return the bitmask with the bit of every tag in ``tags`` set."""
    mask = 0
    for tag in tags:
        mask |= tag.bit
    return mask


def tags_in(tag_type: type[_TAG], mask: int) -> tuple[_TAG, ...]:
    """Return the tags of ``tag_type`` whose bit is set in ``mask``, in vocabulary order."""
    return tuple(tag for tag in vocabulary_of(tag_type) if mask & tag.bit)


def full_mask(tag_type: type[FlagTag]) -> int:
    """Return the bitmask with every tag of ``tag_type`` set."""
    return (1 << len(vocabulary_of(tag_type))) - 1


def merge_optional(left: _P | None, right: _P | None, merge: Callable[[_P, _P], _P]) -> _P | None:
    """Merge two optional payloads; ``None`` is the identity.

    Args:
        left (_P | None): Left payload.
        right (_P | None): Right payload.
        merge (Callable[[_P, _P], _P]): Merge applied when both payloads are present.

    Returns:
        _P | None: The merged payload, or ``None`` when both sides are absent.
    """
    if left is None:
        return right
    if right is None:
        return left
    return merge(left, right)


def concat_names(
    left: tuple[str, ...] | None,
    right: tuple[str, ...] | None,
) -> tuple[str, ...] | None:
    """Concatenate two optional path/name lists, keeping every entry of both sides."""
    return merge_optional(left, right, lambda a, b: a + b)


def as_names(values: str | Iterable[str]) -> tuple[str, ...]:
    """Return ``values`` as a tuple of path/name strings.

    A bare string is one name, not a sequence of one-letter names.
    """
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values)


class FlagSet(ABC, Generic[_TAG]):
    """Abstract option-family value: one flag, or a combination of flags.

    Subclasses set ``vocabulary`` to their `FlagTag` enum and implement ``tags``,
    ``only``, ``combine`` and ``render_single``.
    """

    vocabulary: ClassVar[type[Any]]

    @property
    @abstractmethod
    def tags(self) -> tuple[_TAG, ...]:
        """Present tags, in vocabulary order."""

    @abstractmethod
    def only(self: _FS, tag: _TAG) -> _FS:
        """Return the single-flag value for ``tag`` (which must be present)."""

    @abstractmethod
    def combine(self: _FS, other: _FS) -> _FS:
        """Return the union of ``self`` and ``other``."""

    @abstractmethod
    def render_single(self) -> list[str]:
        """Return the tokens of a single-flag value."""

    def has(self, tag: _TAG) -> bool:
        """Return True if ``tag`` is present."""
        # Tags of different families may share a key, and str enums compare by value.
        return isinstance(tag, self.vocabulary) and any(t is tag for t in self.tags)

    @property
    def is_single(self) -> bool:
        """True when exactly one tag is present."""
        return len(self.tags) == 1

    @property
    def is_empty(self) -> bool:
        """True when no tag is present."""
        return not self.tags

    def single_variants(self: _FS) -> tuple[_FS, ...]:
        """Decompose into single-flag values, in vocabulary order.

        Returns:
            tuple[_FS, ...]: ``(self,)`` for a single value; otherwise one value per
            present tag. The empty value decomposes to ``()``.
        """
        if self.is_single:
            return (self,)
        return tuple(self.only(tag) for tag in self.tags)

    def render(self) -> list[str]:
        """Render this value into command-line tokens.

        Returns:
            list[str]: The concatenated tokens of every single flag, in vocabulary order.
        """
        tokens: list[str] = []
        for flag in self.single_variants():
            tokens.extend(flag.render_single())
        return tokens

    def _check_family(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}",
            )

    def _check_present(self, tag: _TAG) -> None:
        if not self.has(tag):
            raise ValueError(f"{tag.name} is not present in {self!r}")


@dataclass(frozen=True, repr=False)
class TagSet(FlagSet[_TAG]):
    """Bitmask-backed flag set for families made only of boolean flags.

    Attributes:
        mask (int): Bit *i* set when the *i*-th vocabulary tag is present.
    """

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= full_mask(self.vocabulary):
            raise ValueError(f"mask {self.mask:#x} out of range for {type(self).__name__}")

    def __repr__(self) -> str:
        names = "|".join(tag.name for tag in self.tags) or "NONE"
        return f"{type(self).__name__}({names})"

    @classmethod
    def of(cls: type[_TS], *tags: FlagTag) -> _TS:
        """Return the value with exactly ``tags`` present.

        Raises:
            TypeError: If a tag does not belong to this family's vocabulary.
        """
        for tag in tags:
            if not isinstance(tag, cls.vocabulary):
                raise TypeError(f"{tag!r} is not a {cls.vocabulary.__name__}")
        return cls(mask=mask_of(tags))

    @classmethod
    def all(cls: type[_TS]) -> _TS:
        """Return the value with every tag of the vocabulary present."""
        return cls(mask=full_mask(cls.vocabulary))

    @classmethod
    def none(cls: type[_TS]) -> _TS:
        """Return the empty value (the identity of `combine`)."""
        return cls(mask=0)

    @property
    def tags(self) -> tuple[_TAG, ...]:
        """Present tags, in vocabulary order."""
        return tags_in(self.vocabulary, self.mask)

    def has(self, tag: _TAG) -> bool:
        """Return True if ``tag`` is present."""
        return isinstance(tag, self.vocabulary) and bool(self.mask & tag.bit)

    def only(self: _TS, tag: _TAG) -> _TS:
        """Return the single-flag value for ``tag``."""
        self._check_present(tag)
        return type(self).of(tag)

    def combine(self: _TS, other: _TS) -> _TS:
        """Return the union of both flag sets (bitwise OR)."""
        self._check_family(other)
        return type(self)(mask=self.mask | other.mask)

    def render_single(self) -> list[str]:
        """Return the tokens of a single-flag value (one token per tag)."""
        return [tag.token for tag in self.tags]


@dataclass(frozen=True, repr=False)
class CodeSet(TagSet[_TAG]):
    """Flag set rendered as one token: ``prefix`` followed by the code letters.

    Each tag's ``token`` is its code letter. Letters appear in vocabulary order,
    filtered by presence, so the rendering does not depend on how a value was built.
    """

    prefix: ClassVar[str] = ""

    @property
    def codes(self) -> str:
        """Code letters of the present tags, in vocabulary order."""
        return "".join(tag.token for tag in self.tags)

    def render_single(self) -> list[str]:
        """Return ``[prefix + codes]``."""
        return [f"{self.prefix}{self.codes}"]

    def render(self) -> list[str]:
        """Return ``[prefix + codes]`` for the whole set (also for the empty set)."""
        return self.render_single()


def bind_single_flags(cls: type[_TS]) -> type[_TS]:
    """Class decorator: expose each vocabulary tag as a single-flag class constant.

    After decoration, ``FileProperties.DATA == FileProperties.of(FilePropertyTag.DATA)``.
    """
    for tag in vocabulary_of(cls.vocabulary):
        setattr(cls, tag.name, cls.of(tag))
    return cls


# ---------------------------- Free functions ----------------------------


def combine(left: _FS, right: _FS) -> _FS:
    """Combine two values of the same family.

    Args:
        left (_FS): Left operand (single or combined).
        right (_FS): Right operand (single or combined).

    Returns:
        _FS: The combined value.

    Raises:
        TypeError: If the operands belong to different families.
        PerformanceChoiceMismatchError: For performance options with conflicting choices.
    """
    result: _FS = left.combine(right)
    logger.trace("combine(%r, %r) -> %r", left, right, result)
    return result


def combine_all(values: Iterable[_FS]) -> _FS:
    """Fold ``values`` left to right with `combine`.

    Raises:
        ValueError: If ``values`` is empty.
    """
    items: list[_FS] = list(values)
    if not items:
        raise ValueError("combine_all() requires at least one value")
    return functools.reduce(combine, items)


def decompose(value: _FS) -> tuple[_FS, ...]:
    """Return the single-flag values contained in ``value``, in vocabulary order."""
    return value.single_variants()


def render(value: FlagSet[Any]) -> list[str]:
    """Return the command-line tokens of ``value``."""
    tokens: list[str] = value.render()
    logger.trace("render(%r) -> %s", value, tokens)
    return tokens
