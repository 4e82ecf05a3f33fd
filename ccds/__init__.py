"""Linked lists, object and node pools, list sorting, and list-backed queues and stacks."""

__version__ = "1.0.0"
__all__ = ["pool", "linked_list", "list_sort", "list_pool", "list_queue", "list_stack"]