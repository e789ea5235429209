import heapq
import itertools
from collections import deque


class StackFrontier:
    """LIFO frontier: the most recently added node is removed first (DFS)."""
    def __init__(self):
        self.items = []

    def push(self, node):
        self.items.append(node)

    def pop(self):
        return self.items.pop()

    def __len__(self):
        return len(self.items)


class QueueFrontier:
    """FIFO frontier: the earliest added node is removed first (BFS)."""
    def __init__(self):
        self.items = deque()

    def push(self, node):
        self.items.append(node)

    def pop(self):
        return self.items.popleft()

    def __len__(self):
        return len(self.items)


class PriorityFrontier:
    """Min-heap keyed by key(node); equal keys come out in insertion order."""
    def __init__(self, key):
        self.key = key
        self.heap = []
        self.counter = itertools.count()

    def push(self, node):
        heapq.heappush(self.heap, (self.key(node), next(self.counter), node))

    def pop(self):
        return heapq.heappop(self.heap)[2]

    def __len__(self):
        return len(self.heap)
