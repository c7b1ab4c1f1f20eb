from collections import deque
from pydantic import BaseModel
from typing import Iterator, Optional

from course_planner.models.Courses import Course
from course_planner.helpers.exceptions import CourseNotFoundError

class CourseTreeNode(BaseModel):
    """Model for a node in the course tree"""
    course: Course
    left: Optional["CourseTreeNode"] = None
    right: Optional["CourseTreeNode"] = None

CourseTreeNode.model_rebuild()

class CourseTree:
    """Unbalanced binary search tree of courses keyed by course number.

    Smaller keys go left, equal or greater keys go right, so a duplicate
    course number becomes a second node down the right path and search
    returns the shallower of the two. Nothing rebalances the tree: sorted
    input degrades it to a linked list, which is why every walk below is
    iterative rather than recursive.

    Nodes never leave this class; callers work with course numbers and get
    `Course` records back.
    """

    def __init__(self):
        self.root: Optional[CourseTreeNode] = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[Course]:
        return self.enumerate()

    def __contains__(self, course_id) -> bool:
        return self.contains(course_id)

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, course: Course):
        new_node = CourseTreeNode(course=course)
        self._size += 1
        if self.root is None:
            self.root = new_node
            return

        node = self.root
        while True:
            if course.course_id < node.course.course_id:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def remove(self, course_id: str):
        parent = None
        node = self.root
        while node is not None and node.course.course_id != course_id:
            parent = node
            node = node.left if course_id < node.course.course_id else node.right

        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Take over the in-order successor, then unlink it; it has no left child
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.course = successor.course
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1

    def _find_node(self, course_id: str) -> Optional[CourseTreeNode]:
        node = self.root
        while node is not None:
            if course_id == node.course.course_id:
                return node
            node = node.left if course_id < node.course.course_id else node.right
        return None

    def search(self, course_id: str) -> Course:
        """Return the course stored under `course_id` or raise CourseNotFoundError"""
        node = self._find_node(course_id)
        if node is None:
            raise CourseNotFoundError(course_id)
        return node.course

    def contains(self, course_id: str) -> bool:
        return self._find_node(course_id) is not None

    def enumerate(self) -> Iterator[Course]:
        """Yield courses in ascending course number order (in-order walk)"""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def height(self) -> int:
        if self.root is None:
            return 0
        levels = 0
        level = deque([self.root])
        while level:
            levels += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return levels

    def clear(self):
        """Release every node, children before parents"""
        pending = [self.root]
        visited = []
        while pending:
            node = pending.pop()
            if node is None:
                continue
            visited.append(node)
            pending.append(node.left)
            pending.append(node.right)

        for node in reversed(visited):
            node.left = None
            node.right = None

        self.root = None
        self._size = 0
