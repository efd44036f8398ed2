from datetime import datetime, timedelta, timezone

import pytest

from stackview.tree import (
    Commit,
    CommitTree,
    CommitType,
    GitRef,
    RefType,
    format_relative_time,
    format_tree_lines,
    format_tree_node,
)


def create_test_commit(hash_, summary, parents, date=None):
    return Commit(
        hash=hash_,
        short_hash=hash_[:7],
        message=summary,
        summary=summary,
        author="Test",
        email="test@example.com",
        date=date if date is not None else datetime.now(timezone.utc),
        parent_hashes=list(parents),
        refs=[],
    )


def linear_commits():
    return [
        create_test_commit("c123456789abcde", "Third", ["b123456789abcde"]),
        create_test_commit("b123456789abcde", "Second", ["a123456789abcde"]),
        create_test_commit("a123456789abcde", "First", []),
    ]


def node_for(tree, hash_):
    return next(n for n in tree.nodes() if n.commit.hash == hash_)


def test_empty_commits():
    assert len(CommitTree([]).nodes()) == 0


def test_single_commit():
    tree = CommitTree([create_test_commit("abc123def456789", "Initial commit", [])])
    assert len(tree.nodes()) == 1


def test_linear_commits():
    assert len(CommitTree(linear_commits()).nodes()) == 3


def test_branched_commits():
    commits = [
        create_test_commit(
            "c123456789abcde", "Feature merge", ["b123456789abcde", "d123456789abcde"]
        ),
        create_test_commit("d123456789abcde", "Feature commit", ["a123456789abcde"]),
        create_test_commit("b123456789abcde", "Main commit", ["a123456789abcde"]),
        create_test_commit("a123456789abcde", "Initial", []),
    ]
    assert len(CommitTree(commits).nodes()) == 4


def test_format_tree_node():
    tree = CommitTree([create_test_commit("abc123def456789", "Test commit", [])])
    line = format_tree_node(tree.nodes()[0], True, False)
    assert "abc123d" in line
    assert "Test commit" in line


def test_format_tree_selected():
    tree = CommitTree([create_test_commit("abc123def456789", "Test commit", [])])
    line = format_tree_node(tree.nodes()[0], False, False)
    assert "abc123d" in line
    assert "Test commit" in line


def test_format_tree_node_contains_symbols():
    tree = CommitTree([create_test_commit("abc123def456789", "Test commit", [])])
    line = format_tree_node(tree.nodes()[0], True, False)
    assert "●" in line or "○" in line


def test_format_tree_node_exact():
    old = datetime.now(timezone.utc) - timedelta(days=400)
    tree = CommitTree([create_test_commit("abc123def456789", "Test commit", [], old)])
    line = format_tree_node(tree.nodes()[0], True, False)
    assert line == " ┌○ abc123d - Test commit (1y ago)"


def test_format_tree_lines():
    tree = CommitTree(linear_commits())
    lines = format_tree_lines(tree.nodes(), 0, 10)
    assert len(lines) == 3
    content = " ".join(lines)
    assert "c123456" in content or "b123456" in content or "a123456" in content


def test_format_tree_lines_with_offset():
    tree = CommitTree(linear_commits())
    lines = format_tree_lines(tree.nodes(), 1, 10)
    assert len(lines) == 2
    content = " ".join(lines)
    assert "b123456" in content or "a123456" in content


def test_format_tree_lines_with_limit():
    tree = CommitTree(linear_commits())
    assert len(format_tree_lines(tree.nodes(), 0, 2)) == 2


def test_tree_max_depth():
    commits = [
        create_test_commit("d123456789abcde", "Fourth", ["c123456789abcde"]),
        create_test_commit("c123456789abcde", "Third", ["b123456789abcde"]),
        create_test_commit("b123456789abcde", "Second", ["a123456789abcde"]),
        create_test_commit("a123456789abcde", "First", []),
    ]
    assert CommitTree(commits).max_depth() > 0


def test_tree_with_merge_commit():
    commits = [
        create_test_commit(
            "e123456789abcde", "Merge", ["c123456789abcde", "d123456789abcde"]
        ),
        create_test_commit("d123456789abcde", "Feature B", ["b123456789abcde"]),
        create_test_commit("c123456789abcde", "Feature A", ["b123456789abcde"]),
        create_test_commit("b123456789abcde", "Second", ["a123456789abcde"]),
        create_test_commit("a123456789abcde", "First", []),
    ]
    assert len(CommitTree(commits).nodes()) == 5


def test_tree_preserves_commit_order():
    nodes = CommitTree(linear_commits()).nodes()
    assert len(nodes) == 3
    assert "Third" in nodes[0].commit.summary or "First" in nodes[0].commit.summary


def test_nodes_sorted_newest_first():
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    commits = [
        create_test_commit("c1", "Third", ["b1"], base + timedelta(days=2)),
        create_test_commit("b1", "Second", ["a1"], base + timedelta(days=1)),
        create_test_commit("a1", "First", [], base),
    ]
    nodes = CommitTree(commits).nodes()
    assert [n.commit.hash for n in nodes] == ["c1", "b1", "a1"]


def test_tree_node_clone():
    tree = CommitTree([create_test_commit("abc123def456789", "Test", [])])
    assert tree.nodes()[0].commit.hash == "abc123def456789"


def test_format_tree_node_with_branches():
    commit = create_test_commit("abc123def456789", "Test commit", [])
    commit.refs = [GitRef("refs/heads/main", RefType.BRANCH)]
    tree = CommitTree([commit])
    line = format_tree_node(tree.nodes()[0], True, False)
    assert "main" in line
    assert line.endswith("[main]")


def test_commit_type_initial():
    tree = CommitTree([create_test_commit("abc123def456789", "Initial", [])])
    assert tree.nodes()[0].commit_type is CommitType.INITIAL


def test_commit_type_merge():
    tree = CommitTree(
        [create_test_commit("merge123", "Merge branch 'feature'", ["parent1", "parent2"])]
    )
    assert tree.nodes()[0].commit_type is CommitType.MERGE


def test_commit_type_revert():
    tree = CommitTree([create_test_commit("revert123", "Revert: Bad commit", ["parent1"])])
    assert tree.nodes()[0].commit_type is CommitType.REVERT


def test_commit_type_squash():
    tree = CommitTree([create_test_commit("squash123", "Squash changes", ["parent1"])])
    assert tree.nodes()[0].commit_type is CommitType.SQUASH


def test_commit_type_regular():
    tree = CommitTree([create_test_commit("plain123", "Fix typo", ["parent1"])])
    assert tree.nodes()[0].commit_type is CommitType.REGULAR


def test_commit_type_tag():
    commit = create_test_commit("tag123", "Tagged commit", [])
    commit.refs = [GitRef("refs/tags/v1.0.0", RefType.TAG)]
    tree = CommitTree([commit])
    assert tree.nodes()[0].commit_type is CommitType.TAG


def test_format_tree_node_with_tags():
    commit = create_test_commit("abc123def456789", "Test commit", [])
    commit.refs = [GitRef("refs/tags/v1.0.0", RefType.TAG)]
    tree = CommitTree([commit])
    line = format_tree_node(tree.nodes()[0], True, False)
    assert "tags" in line
    assert "v1.0.0" in line
    assert line.endswith("(tags: v1.0.0)")


def test_format_tree_node_selected():
    tree = CommitTree([create_test_commit("abc123def456789", "Test commit", [])])
    line = format_tree_node(tree.nodes()[0], False, True)
    assert ">" in line
    assert line.startswith(" >")


def test_head_marks_main_branch():
    commit = create_test_commit("abc123def456789", "Test commit", [])
    commit.refs = [GitRef("HEAD", RefType.HEAD), GitRef("origin/main", RefType.REMOTE)]
    tree = CommitTree([commit])
    node = tree.nodes()[0]
    assert node.is_main_branch
    line = format_tree_node(node, True, False)
    assert "┌●" in line
    assert "abc123d*" in line
    assert "[" not in line


def test_lane_index_assigned():
    nodes = CommitTree(linear_commits()).nodes()
    assert nodes
    for node in nodes:
        assert node.lane_index < 10


def test_branch_lane_colors():
    tree = CommitTree([create_test_commit("abc123def456789", "Test", [])])
    for lane in tree.nodes()[0].branch_lanes:
        if lane.is_active:
            assert lane.lane_color is not None
    assert tree.nodes()[0].branch_lanes == []


def test_second_child_gets_new_lane():
    commits = [
        create_test_commit("d1", "After b", ["b1"]),
        create_test_commit("e1", "After c", ["c1"]),
        create_test_commit("b1", "Left", ["a1"]),
        create_test_commit("c1", "Right", ["a1"]),
        create_test_commit("a1", "Root", []),
    ]
    tree = CommitTree(commits)
    right = node_for(tree, "c1")
    assert right.lane_index == 1
    assert [lane.is_continuing for lane in right.branch_lanes] == [False, True]
    assert [lane.is_active for lane in right.branch_lanes] == [False, True]
    assert right.branch_lanes[1].lane_color == 1
    assert node_for(tree, "b1").lane_index == 0
    assert tree.max_depth() == 1
    assert format_tree_node(right, False, False).startswith(" │ ─○ c1")


def test_fork_point_is_drawn_as_merge():
    commits = [
        create_test_commit("d1", "After b", ["b1"]),
        create_test_commit("e1", "After c", ["c1"]),
        create_test_commit("b1", "Left", ["a1"]),
        create_test_commit("c1", "Right", ["a1"]),
        create_test_commit("a1", "Root", []),
    ]
    tree = CommitTree(commits)
    assert node_for(tree, "a1").commit_type is CommitType.MERGE


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=30), "just now"),
        (timedelta(seconds=-30), "just now"),
        (timedelta(minutes=5), "5m ago"),
        (timedelta(hours=3), "3h ago"),
        (timedelta(days=2), "2d ago"),
        (timedelta(days=14), "2w ago"),
        (timedelta(days=60), "2mo ago"),
        (timedelta(days=400), "1y ago"),
        (timedelta(days=800), "2y ago"),
    ],
)
def test_format_relative_time(delta, expected):
    now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    assert format_relative_time(now - delta, now) == expected


def test_format_relative_time_defaults_to_now():
    recent = datetime.now(timezone.utc) - timedelta(days=3, minutes=1)
    assert format_relative_time(recent) == "3d ago"