"""Tests for the reactive Node."""

import pytest

from stackman.model.node import Node
from stackman.model.records import Stack

# --- Node basics ---


def test_node_set_and_get():
    node = Node()
    node.title = "Backlog"
    assert node.title == "Backlog"


def test_node_get_missing_returns_none():
    node = Node()
    assert node.nonexistent is None


def test_node_set_none_deletes():
    node = Node(background_image="data:image/png;base64,AAAA")
    node.background_image = None
    assert node.background_image is None
    assert "background_image" not in node


def test_node_delete_missing_is_noop():
    node = Node()
    node.drag = None  # should not raise
    assert "drag" not in node


def test_node_init_kwargs():
    node = Node(tasks=(), stacks=())
    assert node.tasks == ()
    assert node.stacks == ()


def test_node_private_attribute_lookup_raises():
    node = Node()
    with pytest.raises(AttributeError):
        node._missing


def test_node_version_increments():
    node = Node()
    assert node._version == 0
    node.title = "Backlog"
    assert node._version == 1
    node.title = "Done"
    assert node._version == 2


def test_node_version_no_change():
    node = Node()
    node.stacks = (Stack("s1", "A", ("t1",)),)
    v = node._version
    node.stacks = (Stack("s1", "A", ("t1",)),)  # equal value, different object
    assert node._version == v


def test_node_keys():
    node = Node(a="1", b="2")
    assert set(node.keys()) == {"a", "b"}
    assert dict(node.items()) == {"a": "1", "b": "2"}


def test_node_contains():
    node = Node(tasks=())
    assert "tasks" in node
    assert "stacks" not in node


# --- Watchers ---


def test_watch_fires_on_change():
    events = []
    node = Node(title="A")
    node.watch("title", lambda n, k, old, new: events.append((n, k, old, new)))
    node.title = "B"
    assert events == [(node, "title", "A", "B")]


def test_watch_fires_on_delete():
    events = []
    node = Node(title="A")
    node.watch("title", lambda n, k, old, new: events.append((old, new)))
    node.title = None
    assert events == [("A", None)]


def test_watch_fires_on_add():
    events = []
    node = Node()
    node.watch("title", lambda n, k, old, new: events.append((old, new)))
    node.title = "A"
    assert events == [(None, "A")]


def test_no_event_on_equal_tuple():
    events = []
    node = Node(stacks=(Stack("s1", "A"),))
    node.watch("stacks", lambda n, k, old, new: events.append(1))
    node.stacks = (Stack("s1", "A"),)
    assert events == []


def test_watch_only_its_key():
    events = []
    node = Node(tasks=(), stacks=())
    node.watch("tasks", lambda n, k, old, new: events.append(k))
    node.stacks = (Stack("s1", "A"),)
    assert events == []


def test_unwatch():
    events = []
    node = Node()
    unwatch = node.watch("title", lambda n, k, old, new: events.append(1))
    node.title = "A"
    unwatch()
    node.title = "B"
    assert events == [1]


def test_unwatch_twice_is_harmless():
    node = Node()
    unwatch = node.watch("title", lambda n, k, old, new: None)
    unwatch()
    unwatch()


def test_watcher_can_unwatch_during_emit():
    events = []
    node = Node()

    def once(n, k, old, new):
        events.append(new)
        unwatch()

    unwatch = node.watch("title", once)
    node.title = "A"
    node.title = "B"
    assert events == ["A"]


def test_repr_lists_keys():
    assert repr(Node(tasks=(), stacks=())) == "<Node [tasks, stacks]>"
