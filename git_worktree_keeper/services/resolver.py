"""Resolution of user-supplied worktree references"""

import re
from typing import Sequence

from git_worktree_keeper.exceptions import WorktreeNotFoundError
from git_worktree_keeper.models.worktree import ByIndex, ByPath, WorktreeEntry, WorktreeRef

# A leading run of ASCII digits, optionally signed; whatever follows is ignored
INDEX_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_reference(target: str) -> WorktreeRef:
    """Turn a target string into an index or path reference.

    Text starting with a base-10 integer becomes ByIndex (whether or not it
    is in range), so "2." copied from the list output selects entry 2.
    Anything else is a ByPath.
    """
    match = INDEX_PATTERN.match(target)
    if match:
        return ByIndex(index=int(match.group(1)), raw=target)
    return ByPath(fragment=target)


def resolve_reference(entries: Sequence[WorktreeEntry], ref: WorktreeRef) -> WorktreeEntry:
    """Find the entry a reference points to.

    An index in ``[1, len(entries)]`` selects by position (1-based). Any
    other index, and every path reference, matches the first entry whose
    path equals the text or ends with it.

    Raises:
        WorktreeNotFoundError: If nothing matches
    """
    if isinstance(ref, ByIndex):
        if 1 <= ref.index <= len(entries):
            return entries[ref.index - 1]
        fragment = ref.raw
    else:
        fragment = ref.fragment

    for entry in entries:
        if entry.path == fragment or entry.path.endswith(fragment):
            return entry

    raise WorktreeNotFoundError(fragment)


def resolve_target(entries: Sequence[WorktreeEntry], target: str) -> WorktreeEntry:
    """Parse and resolve ``target`` in one step."""
    return resolve_reference(entries, parse_reference(target))
