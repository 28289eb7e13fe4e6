# topmark:header:start
#
#   project      : RoboCmd
#   file         : performance.py
#   file_relpath : src/robocmd/options/performance.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Performance and retry options.

`PerformanceOptions` is the one option family whose combination is partial: next to its
boolean flags it carries a mutually exclusive `PerformanceChoice` (thread count,
inter-packet gap, or the default placeholder). `PerformanceChoice.DEFAULT` is the
identity for the choice; two different concrete choices cannot be combined and raise
`PerformanceChoiceMismatchError`.

The choice is part of the vocabulary (`PerformanceTag.CHOICE`, listed first) so that a
combined value decomposes into a choice-only single flag followed by one single flag per
boolean switch, and rendering the decomposition reproduces the combined rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from robocmd.config.logging import get_logger
from robocmd.core.errors import PerformanceChoiceMismatchError
from robocmd.core.flagset import FlagSet, FlagTag, mask_of, tags_in

if TYPE_CHECKING:
    from robocmd.config.logging import RobocmdLogger

logger: RobocmdLogger = get_logger(__name__)

MAX_THREADS: int = 128


class ChoiceKind(str, Enum):
    """Kind of performance choice."""

    DEFAULT = "default"
    THREADS = "threads"
    INTER_PACKET_GAP = "inter_packet_gap"


@dataclass(frozen=True)
class PerformanceChoice:
    """Multi-threading (``/MT:n``) or inter-packet gap (``/ipg:n``), or neither.

    Use the `threads()` and `inter_packet_gap()` constructors; they validate the value.

    Attributes:
        kind (ChoiceKind): Which choice this is.
        value (int | None): Thread count or gap in milliseconds; ``None`` for the default.
    """

    kind: ChoiceKind = ChoiceKind.DEFAULT
    value: int | None = None

    DEFAULT: ClassVar[PerformanceChoice]

    def __post_init__(self) -> None:
        if self.kind is ChoiceKind.DEFAULT:
            if self.value is not None:
                raise ValueError("the default performance choice takes no value")
        elif self.value is None:
            raise ValueError(f"performance choice {self.kind.value} requires a value")
        elif self.kind is ChoiceKind.THREADS and not 1 <= self.value <= MAX_THREADS:
            raise ValueError(f"thread count must be within 1..{MAX_THREADS}, got {self.value}")
        elif self.kind is ChoiceKind.INTER_PACKET_GAP and self.value < 0:
            raise ValueError(f"inter-packet gap must be >= 0, got {self.value}")

    def __str__(self) -> str:
        if self.is_default:
            return "default"
        return f"{self.kind.value}={self.value}"

    @classmethod
    def threads(cls, count: int) -> PerformanceChoice:
        """Copy with ``count`` threads (1..128)."""
        return cls(ChoiceKind.THREADS, count)

    @classmethod
    def inter_packet_gap(cls, milliseconds: int) -> PerformanceChoice:
        """Wait ``milliseconds`` between packets to free bandwidth on slow lines."""
        return cls(ChoiceKind.INTER_PACKET_GAP, milliseconds)

    @property
    def is_default(self) -> bool:
        """True for the default placeholder."""
        return self.kind is ChoiceKind.DEFAULT

    def token(self) -> str | None:
        """Return the token for this choice, or ``None`` for the default."""
        if self.kind is ChoiceKind.THREADS:
            return f"/MT:{self.value}"
        if self.kind is ChoiceKind.INTER_PACKET_GAP:
            return f"/ipg:{self.value}"
        return None

    def merge(self, other: PerformanceChoice) -> PerformanceChoice:
        """Merge two choices; the default yields to a concrete choice.

        Raises:
            PerformanceChoiceMismatchError: If both choices are concrete and differ.
        """
        if self.is_default:
            return other
        if other.is_default or other == self:
            return self
        raise PerformanceChoiceMismatchError(self, other)


PerformanceChoice.DEFAULT = PerformanceChoice()


class PerformanceTag(FlagTag):
    """Performance flags; `CHOICE` stands for the carried `PerformanceChoice`."""

    CHOICE = ("choice", "Thread count or inter-packet gap", "")
    DONT_OFFLOAD = ("dont_offload", "Copy without Windows copy offload", "/nooffload")
    REQUEST_NETWORK_COMPRESSION = (
        "request_network_compression",
        "Request network compression",
        "/compress",
        ("compress",),
    )
    COPY_RATHER_THAN_FOLLOW_LINK = (
        "copy_rather_than_follow_link",
        "Copy symbolic links instead of their targets",
        "/sl",
        ("symbolic_links", "sl"),
    )


_CHOICE_BIT: int = PerformanceTag.CHOICE.bit


@dataclass(frozen=True)
class PerformanceOptions(FlagSet[PerformanceTag]):
    """Performance switches plus a performance choice.

    Attributes:
        mask (int): Bits of the boolean switches (the `CHOICE` bit is never stored).
        choice (PerformanceChoice): The carried choice; the default when unset.
    """

    vocabulary = PerformanceTag

    mask: int = 0
    choice: PerformanceChoice = field(default=PerformanceChoice.DEFAULT)

    DONT_OFFLOAD: ClassVar[PerformanceOptions]
    REQUEST_NETWORK_COMPRESSION: ClassVar[PerformanceOptions]
    COPY_RATHER_THAN_FOLLOW_LINK: ClassVar[PerformanceOptions]

    def __post_init__(self) -> None:
        if self.mask & _CHOICE_BIT or self.mask >> len(PerformanceTag):
            raise ValueError(f"invalid switch mask {self.mask:#x} for PerformanceOptions")

    @classmethod
    def of(
        cls,
        *tags: PerformanceTag,
        choice: PerformanceChoice = PerformanceChoice.DEFAULT,
    ) -> PerformanceOptions:
        """Return the value with the given switches and ``choice``."""
        for tag in tags:
            if not isinstance(tag, PerformanceTag):
                raise TypeError(f"{tag!r} is not a PerformanceTag")
            if tag is PerformanceTag.CHOICE:
                raise ValueError("pass the performance choice with choice=")
        return cls(mask=mask_of(tags), choice=choice)

    @classmethod
    def with_choice(cls, choice: PerformanceChoice) -> PerformanceOptions:
        """Return a value carrying only ``choice``."""
        return cls(choice=choice)

    @classmethod
    def none(cls) -> PerformanceOptions:
        """Return the empty value (no switches, default choice)."""
        return cls()

    @property
    def tags(self) -> tuple[PerformanceTag, ...]:
        """Present tags, in vocabulary order; `CHOICE` when the choice is concrete."""
        mask = self.mask if self.choice.is_default else self.mask | _CHOICE_BIT
        return tags_in(PerformanceTag, mask)

    def only(self, tag: PerformanceTag) -> PerformanceOptions:
        """Return the single-flag value for ``tag``.

        Switch singles carry the default choice: the concrete choice is rendered once,
        by the `CHOICE` single.
        """
        self._check_present(tag)
        if tag is PerformanceTag.CHOICE:
            return type(self).with_choice(self.choice)
        return type(self).of(tag)

    def combine(self, other: PerformanceOptions) -> PerformanceOptions:
        """Union of switches; choices merge via `PerformanceChoice.merge`.

        Raises:
            PerformanceChoiceMismatchError: If both choices are concrete and differ.
        """
        self._check_family(other)
        try:
            choice = self.choice.merge(other.choice)
        except PerformanceChoiceMismatchError:
            logger.debug("Conflicting performance choices: %s vs. %s", self.choice, other.choice)
            raise
        return type(self)(mask=self.mask | other.mask, choice=choice)

    def render_single(self) -> list[str]:
        """Return the tokens of a single-flag value."""
        (tag,) = self.tags
        if tag is PerformanceTag.CHOICE:
            token = self.choice.token()
            return [token] if token is not None else []
        return [tag.token]


for _tag in (
    PerformanceTag.DONT_OFFLOAD,
    PerformanceTag.REQUEST_NETWORK_COMPRESSION,
    PerformanceTag.COPY_RATHER_THAN_FOLLOW_LINK,
):
    setattr(PerformanceOptions, _tag.name, PerformanceOptions.of(_tag))


@dataclass(frozen=True)
class RetrySettings:
    """Retry behavior of the external tool for failed copies.

    Unset values are omitted, so the tool's own defaults (from the registry) apply.

    Attributes:
        retries (int | None): Number of retries on failed copies (``/r:n``).
        wait (int | None): Seconds to wait between retries (``/w:n``).
        save_as_default (bool): Save ``retries``/``wait`` as the tool's defaults (``/reg``).
        await_share_names (bool): Wait for share names to be defined (``/tbd``).
    """

    retries: int | None = None
    wait: int | None = None
    save_as_default: bool = False
    await_share_names: bool = False

    def __post_init__(self) -> None:
        for name in ("retries", "wait"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    def render(self) -> list[str]:
        """Return the retry tokens, each only when set."""
        tokens: list[str] = []
        if self.retries is not None:
            tokens.append(f"/r:{self.retries}")
        if self.wait is not None:
            tokens.append(f"/w:{self.wait}")
        if self.save_as_default:
            tokens.append("/reg")
        if self.await_share_names:
            tokens.append("/tbd")
        return tokens
