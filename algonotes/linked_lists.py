"""Operations on singly linked lists."""

from __future__ import annotations

from typing import Optional

from .structures import ListNode


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink every node whose value already appeared earlier in the list."""
    seen: set[int] = set()
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        if node.val in seen:
            assert previous is not None
            previous.next = node.next
        else:
            seen.add(node.val)
            previous = node
        node = node.next
    return head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def remove_zero_sum_sublists(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop runs of consecutive nodes summing to zero, scanning from the front."""
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    node = head
    while node is not None:
        total = 0
        runner: Optional[ListNode] = node
        cut: Optional[ListNode] = None
        while runner is not None:
            total += runner.val
            if total == 0:
                cut = runner
                break
            runner = runner.next
        if cut is not None:
            node = cut.next
            continue
        if tail is None:
            new_head = node
        else:
            tail.next = node
        tail = node
        node = node.next
    if tail is not None:
        tail.next = None
    return new_head


def get_decimal_value(head: Optional[ListNode]) -> int:
    """Read the list as binary digits, most significant first."""
    value = 0
    node = head
    while node is not None:
        value = value * 2 + node.val
        node = node.next
    return value