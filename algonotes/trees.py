"""Operations on binary trees and binary search trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import groupby, pairwise
from typing import Optional

from .structures import TreeNode

INT_MAX = 2**31 - 1


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def find_mode(root: Optional[TreeNode]) -> list[int]:
    """Return the most frequent values of a BST, in ascending order."""
    runs = [(value, sum(1 for _ in group)) for value, group in groupby(_inorder(root))]
    if not runs:
        return []
    best = max(count for _, count in runs)
    return [value for value, count in runs if count == best]


def get_minimum_difference(root: Optional[TreeNode]) -> int:
    """Return the smallest gap between in-order neighbours of a BST of non-negative values."""
    return min(
        (current - previous for previous, current in pairwise(_inorder(root)) if previous >= 0),
        default=INT_MAX,
    )


def max_level_sum(root: Optional[TreeNode]) -> int:
    """Return the 1-based level with the greatest sum; the smallest such level on ties."""
    if root is None:
        raise ValueError("tree is empty")
    best_level = -1
    best_sum: Optional[int] = None
    level = 0
    queue = deque([root])
    while queue:
        level += 1
        total = 0
        for _ in range(len(queue)):
            node = queue.popleft()
            total += node.val
            queue.extend(child for child in (node.left, node.right) if child is not None)
        if best_sum is None or total > best_sum:
            best_sum = total
            best_level = level
    return best_level


def average_of_subtree(root: Optional[TreeNode]) -> int:
    """Count nodes whose value equals the truncated average of their subtree."""
    matches = 0

    def visit(node: Optional[TreeNode]) -> tuple[int, int]:
        nonlocal matches
        if node is None:
            return 0, 0
        left_sum, left_count = visit(node.left)
        right_sum, right_count = visit(node.right)
        total = node.val + left_sum + right_sum
        count = 1 + left_count + right_count
        if _trunc_div(total, count) == node.val:
            matches += 1
        return total, count

    visit(root)
    return matches