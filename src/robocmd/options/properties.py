# topmark:header:start
#
#   project      : RoboCmd
#   file         : properties.py
#   file_relpath : src/robocmd/options/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Letter-code option families: file properties, directory properties and file attributes.

All three families render the whole set as a single token made of a prefix and a run of
code letters in vocabulary order:

- `FileProperties`: ``/copy:DATSOU``
- `DirectoryProperties`: ``/dcopy:DAT``
- `FileAttributes`: ``RASHCNET`` (no prefix; embedded by filters and post-copy actions)
"""

from __future__ import annotations

from typing import ClassVar

from robocmd.core.flagset import CodeSet, FlagTag, bind_single_flags


class FilePropertyTag(FlagTag):
    """File properties the external tool can copy."""

    DATA = ("data", "File data", "D")
    ATTRIBUTES = ("attributes", "File attributes", "A")
    TIME_STAMPS = ("time_stamps", "Time stamps", "T", ("timestamps",))
    NTFS_ACCESS_CONTROL_LIST = ("ntfs_acl", "NTFS access control list", "S", ("acl", "security"))
    OWNER_INFO = ("owner_info", "Owner information", "O", ("owner",))
    AUDITING_INFO = ("auditing_info", "Auditing information", "U", ("auditing",))


@bind_single_flags
class FileProperties(CodeSet[FilePropertyTag]):
    """Set of file properties to copy (``/copy:<letters>``)."""

    vocabulary = FilePropertyTag
    prefix: ClassVar[str] = "/copy:"

    DATA: ClassVar[FileProperties]
    ATTRIBUTES: ClassVar[FileProperties]
    TIME_STAMPS: ClassVar[FileProperties]
    NTFS_ACCESS_CONTROL_LIST: ClassVar[FileProperties]
    OWNER_INFO: ClassVar[FileProperties]
    AUDITING_INFO: ClassVar[FileProperties]


class DirectoryPropertyTag(FlagTag):
    """Directory properties the external tool can copy."""

    DATA = ("data", "Directory data", "D")
    ATTRIBUTES = ("attributes", "Directory attributes", "A")
    TIME_STAMPS = ("time_stamps", "Time stamps", "T", ("timestamps",))


@bind_single_flags
class DirectoryProperties(CodeSet[DirectoryPropertyTag]):
    """Set of directory properties to copy (``/dcopy:<letters>``)."""

    vocabulary = DirectoryPropertyTag
    prefix: ClassVar[str] = "/dcopy:"

    DATA: ClassVar[DirectoryProperties]
    ATTRIBUTES: ClassVar[DirectoryProperties]
    TIME_STAMPS: ClassVar[DirectoryProperties]


class FileAttributeTag(FlagTag):
    """File attributes, in the external tool's ``RASHCNET`` letter order."""

    READ_ONLY = ("read_only", "Read only", "R", ("readonly",))
    ARCHIVE = ("archive", "Archive", "A")
    SYSTEM = ("system", "System", "S")
    HIDDEN = ("hidden", "Hidden", "H")
    COMPRESSED = ("compressed", "Compressed", "C")
    NOT_CONTENT_INDEXED = ("not_content_indexed", "Not content indexed", "N")
    ENCRYPTED = ("encrypted", "Encrypted", "E")
    TEMPORARY = ("temporary", "Temporary", "T")


@bind_single_flags
class FileAttributes(CodeSet[FileAttributeTag]):
    """Set of file attributes, rendered as bare letters.

    Filters and post-copy actions embed ``codes`` after their own prefix
    (``/xa:``, ``/ia:``, ``/a+:``, ``/a-:``).
    """

    vocabulary = FileAttributeTag

    READ_ONLY: ClassVar[FileAttributes]
    ARCHIVE: ClassVar[FileAttributes]
    SYSTEM: ClassVar[FileAttributes]
    HIDDEN: ClassVar[FileAttributes]
    COMPRESSED: ClassVar[FileAttributes]
    NOT_CONTENT_INDEXED: ClassVar[FileAttributes]
    ENCRYPTED: ClassVar[FileAttributes]
    TEMPORARY: ClassVar[FileAttributes]
