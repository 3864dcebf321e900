"""Convention-based prefix derivation from file paths.

Given the path of a file holding a GraphQL document, derive:
- PathInfo:  the directory and file-name tokens that carry meaning
- Prefix:    PascalCase(dir) + PascalCase(file), e.g. "UsersUserCard"

    features/users/components/UserCard.vue  -> users / UserCard -> "UsersUserCard"
    features/users/Users.vue                -> users / Users    -> "Users"

All functions here are pure: no I/O, no state between calls.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from gqlnaming.config import DEFAULT_SKIP_DIRS

_BRACKETS = re.compile(r"[\[\]]")
_SEPARATORS = re.compile(r"[-_]+")
_WORD_START = re.compile(r"(?:^|\s)(\w)")
_WHITESPACE = re.compile(r"\s+")

# Applied in order; each strips at most one trailing suffix
_PLURAL_SUFFIX = re.compile(r"(s|es|ies)$")
_LIST_SUFFIX = re.compile(r"list$")
_DATA_SUFFIX = re.compile(r"data$")


@dataclass(frozen=True)
class PathInfo:
    """The two raw tokens used for prefix derivation."""

    dir_name: str
    file_name: str


@dataclass(frozen=True)
class PathOptions:
    skip_dirs: Sequence[str] | None = None

    @property
    def effective_skip_dirs(self) -> Sequence[str]:
        return DEFAULT_SKIP_DIRS if self.skip_dirs is None else self.skip_dirs


def _strip_brackets(value: str) -> str:
    return _BRACKETS.sub("", value)


def _split_path(path: str) -> tuple[list[str], str]:
    """Split *path* into its directory segments and its base name."""
    normalized = path.replace("\\", "/")
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    head, _, base = normalized.rpartition("/")
    return head.split("/"), base


def extract_path_info(path: str, options: PathOptions | None = None) -> PathInfo:
    """Extract the directory and file-name tokens from a file path.

    /path/to/features/users/components/UserCard.vue
        -> PathInfo(dir_name="users", file_name="UserCard")
    .../OrderDetail/Main/Header/OrderTask.client.fragment.ts
        -> PathInfo(dir_name="Header", file_name="OrderTask")

    A skipped directory is replaced by its parent only once; the parent is
    used even when it is itself in the skip set.
    Backslashes are treated as separators too, so Windows paths split the
    same way as POSIX ones.
    """
    skip_dirs = (options or PathOptions()).effective_skip_dirs

    dirs, base = _split_path(path)

    dir_name = dirs[-1]
    if dir_name in skip_dirs and len(dirs) > 1:
        dir_name = dirs[-2]
    dir_name = _strip_brackets(dir_name)

    # Everything up to the first dot: handles .vue, .client.fragment.ts, ...
    file_name = _strip_brackets(base.split(".")[0])

    return PathInfo(dir_name=dir_name, file_name=file_name)


def to_pascal_case(token: str) -> str:
    """Convert a token to PascalCase.

    "user-card" -> "UserCard", "user_list" -> "UserList", "[id]" -> "Id",
    "UserCard" -> "UserCard".
    """
    value = _strip_brackets(token)
    value = _SEPARATORS.sub(" ", value)
    value = _WORD_START.sub(lambda m: m.group(1).upper(), value)
    value = _WHITESPACE.sub("", value)
    return value[:1].upper() + value[1:]


def calculate_prefix(path: str, options: PathOptions | None = None) -> str:
    """Return PascalCase(dir) + PascalCase(file), collapsing identical halves."""
    info = extract_path_info(path, options)

    pascal_dir = to_pascal_case(info.dir_name)
    pascal_file = to_pascal_case(info.file_name)

    if pascal_dir == pascal_file:
        return pascal_dir
    return pascal_dir + pascal_file


def _strip_suffixes(value: str) -> str:
    value = _PLURAL_SUFFIX.sub("", value, count=1)
    value = _LIST_SUFFIX.sub("", value, count=1)
    return _DATA_SUFFIX.sub("", value, count=1)


def has_significant_overlap(type_name: str, file_name: str) -> bool:
    """Whether *type_name* and *file_name* name the same concept.

    Both are lower-cased and stripped of a plural, "list" or "data" suffix;
    they overlap when either contains the other.

    ("AssignmentMessage", "AssignmentMessages") -> True
    ("User", "UserList") -> True
    ("User", "OrderCard") -> False
    """
    stripped_type = _strip_suffixes(type_name.lower())
    stripped_file = _strip_suffixes(file_name.lower())

    return (
        stripped_file in stripped_type
        or stripped_type in stripped_file
        or stripped_type == stripped_file
    )


def calculate_prefix_with_type_name(
    path: str,
    type_name: str,
    options: PathOptions | None = None,
) -> str:
    """Calculate the prefix, dropping the file name when the type name covers it.

    src/queries/AssignmentMessages.gql + "AssignmentMessage" -> ""
    features/users/components/UserCard.vue + "Order"         -> "UsersUserCard"
    features/users/components/UserList.vue + "User"          -> "Users"
    """
    options = options or PathOptions()
    skip_dirs = options.effective_skip_dirs
    info = extract_path_info(path, options)

    pascal_dir = to_pascal_case(info.dir_name)
    pascal_file = to_pascal_case(info.file_name)
    dir_is_structural = info.dir_name.lower() in {d.lower() for d in skip_dirs}

    if has_significant_overlap(type_name, info.file_name):
        if pascal_dir == pascal_file:
            return ""
        if pascal_dir and not dir_is_structural:
            return pascal_dir
        return ""

    if pascal_dir == pascal_file:
        return pascal_dir

    if not pascal_dir or dir_is_structural:
        return pascal_file

    return pascal_dir + pascal_file
