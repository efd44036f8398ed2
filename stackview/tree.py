"""Commit graph layout and the text rendering of its rows."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


class RefType(enum.Enum):
    """The kind of reference that points at a commit."""

    HEAD = "head"
    BRANCH = "branch"
    REMOTE = "remote"
    TAG = "tag"


@dataclass(frozen=True)
class GitRef:
    """A named reference such as a branch, tag or HEAD."""

    name: str
    ref_type: RefType


@dataclass
class Commit:
    """The details of one commit as shown in the graph."""

    hash: str
    short_hash: str
    message: str
    summary: str
    author: str
    email: str
    date: datetime
    parent_hashes: list[str] = field(default_factory=list)
    refs: list[GitRef] = field(default_factory=list)


class CommitType(enum.Enum):
    """How a commit is drawn in the graph."""

    INITIAL = "initial"
    BRANCH = "branch"
    MERGE = "merge"
    TAG = "tag"
    REVERT = "revert"
    SQUASH = "squash"
    REGULAR = "regular"


@dataclass
class BranchLane:
    """The state of one lane column on a commit's row."""

    is_continuing: bool
    is_branch_point: bool
    is_merge: bool
    is_active: bool
    lane_color: int | None = None


@dataclass
class TreeNode:
    """A commit placed in the graph."""

    commit: Commit
    children: list[TreeNode] = field(default_factory=list)
    is_main_branch: bool = False
    branch_lanes: list[BranchLane] = field(default_factory=list)
    lane_index: int = 0
    commit_type: CommitType = CommitType.REGULAR


def _detect_commit_type(
    commit: Commit, children: Sequence[str], parents: Sequence[str], is_merge: bool
) -> CommitType:
    summary = commit.summary.lower()
    if any(ref.ref_type is RefType.TAG for ref in commit.refs):
        return CommitType.TAG
    if summary.startswith("merge") or is_merge:
        return CommitType.MERGE
    if summary.startswith(("revert ", "revert:")):
        return CommitType.REVERT
    if summary.startswith("squash "):
        return CommitType.SQUASH
    if not parents:
        return CommitType.INITIAL
    if len(children) > 1:
        return CommitType.BRANCH
    return CommitType.REGULAR


class CommitTree:
    """Lays commits out in lanes, newest first."""

    def __init__(self, commits: Sequence[Commit]) -> None:
        self._nodes: list[TreeNode] = []
        self._max_depth = 0
        self._build(list(commits))

    def nodes(self) -> list[TreeNode]:
        """The placed commits, newest first."""
        return self._nodes

    def max_depth(self) -> int:
        """The deepest level reached while walking from the roots."""
        return self._max_depth

    def _build(self, commits: list[Commit]) -> None:
        if not commits:
            return

        by_hash = {commit.hash: commit for commit in commits}
        children_of: dict[str, list[str]] = {}
        for commit in commits:
            for parent in commit.parent_hashes:
                children_of.setdefault(parent, []).append(commit.hash)

        roots = [
            commit
            for commit in commits
            if not commit.parent_hashes or commit.hash not in children_of
        ]

        processed: set[str] = set()
        for root in roots:
            self._walk(root, by_hash, children_of, processed)

        self._nodes.sort(key=lambda node: node.commit.date)
        self._nodes.reverse()

    def _walk(
        self,
        root: Commit,
        by_hash: dict[str, Commit],
        children_of: dict[str, list[str]],
        processed: set[str],
    ) -> None:
        # Depth-first, children in order, without recursion.
        stack: list[tuple[Commit, list[bool], int, int]] = [(root, [], 0, 0)]
        while stack:
            commit, lanes, depth, lane_index = stack.pop()
            if commit.hash in processed:
                continue
            processed.add(commit.hash)

            children = children_of.get(commit.hash, [])
            is_merge = len(children) > 1 or len(commit.parent_hashes) > 1
            commit_type = _detect_commit_type(
                commit, children, commit.parent_hashes, is_merge
            )
            branch_lanes = [
                BranchLane(
                    is_continuing=continuing,
                    is_branch_point=idx == lane_index and len(children) > 1,
                    is_merge=is_merge and idx == lane_index,
                    is_active=idx == lane_index,
                    lane_color=idx % 8,
                )
                for idx, continuing in enumerate(lanes)
            ]
            self._max_depth = max(self._max_depth, depth)
            self._nodes.append(
                TreeNode(
                    commit=commit,
                    is_main_branch=any(r.ref_type is RefType.HEAD for r in commit.refs),
                    branch_lanes=branch_lanes,
                    lane_index=lane_index,
                    commit_type=commit_type,
                )
            )

            pending = []
            for i, child_hash in enumerate(children):
                child = by_hash.get(child_hash)
                if child is None:
                    continue
                new_lanes = list(lanes)
                if i == 0:
                    child_lane = lane_index
                    if lane_index < len(new_lanes):
                        new_lanes[lane_index] = True
                else:
                    child_lane = depth + i
                    if len(new_lanes) <= child_lane:
                        new_lanes.extend([False] * (child_lane + 1 - len(new_lanes)))
                    new_lanes[child_lane] = True
                pending.append((child, new_lanes, depth + 1, child_lane))
            stack.extend(reversed(pending))


_SYMBOLS = {
    CommitType.INITIAL: "┌",
    CommitType.MERGE: "┼",
    CommitType.TAG: "◆",
    CommitType.REVERT: "↩",
    CommitType.SQUASH: "≡",
    CommitType.BRANCH: "┬",
    CommitType.REGULAR: "─",
}


def _lane_char(idx: int, lane: BranchLane, lane_index: int) -> str:
    if lane.is_continuing:
        if lane.is_merge:
            return "┤"
        return "│" if lane.is_active else " "
    if lane.is_branch_point and idx == lane_index:
        return "┬"
    return " "


def _branch_name(name: str) -> str:
    for prefix in ("refs/heads/", "refs/remotes/"):
        if name.startswith(prefix):
            return name[len(prefix):]
    return name


def format_tree_node(node: TreeNode, is_last: bool, selected: bool) -> str:
    """Render one graph row: lanes, commit symbol, hash, summary and refs."""
    lanes = "".join(
        _lane_char(idx, lane, node.lane_index)
        for idx, lane in enumerate(node.branch_lanes)
    )
    marker = " >" if selected else " "
    symbol = _SYMBOLS[node.commit_type] + ("●" if node.is_main_branch else "○")

    commit = node.commit
    hash_part = f"{commit.short_hash}*" if node.is_main_branch else commit.short_hash

    branch_names = [
        name
        for name in (
            _branch_name(ref.name)
            for ref in commit.refs
            if ref.ref_type is not RefType.REMOTE and not ref.name.startswith("HEAD")
        )
        if name
    ]
    tags = [
        ref.name.removeprefix("refs/tags/")
        for ref in commit.refs
        if ref.ref_type is RefType.TAG
    ]

    content = f"{hash_part} - {commit.summary} ({format_relative_time(commit.date)})"
    if branch_names:
        content += f" [{', '.join(branch_names)}]"
    if tags:
        content += f" (tags: {', '.join(tags)})"

    return f"{lanes}{marker}{symbol} {content}"


def format_relative_time(date: datetime, now: datetime | None = None) -> str:
    """How long ago a moment was, in its largest whole unit."""
    if now is None:
        now = datetime.now(timezone.utc)
    delta = now - date
    seconds = delta // timedelta(seconds=1)
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = seconds // 3600
    if hours < 24:
        return f"{hours}h ago"
    days = seconds // 86400
    if days < 7:
        return f"{days}d ago"
    if days < 30:
        return f"{days // 7}w ago"
    if days < 365:
        return f"{days // 30}mo ago"
    return f"{days // 365}y ago"


def format_tree_lines(
    commits: Sequence[TreeNode], visible_start: int, visible_count: int
) -> list[str]:
    """Render the visible window of graph rows."""
    window = commits[visible_start:visible_start + visible_count]
    return [
        format_tree_node(node, visible_start + i == len(commits) - 1, False)
        for i, node in enumerate(window)
    ]