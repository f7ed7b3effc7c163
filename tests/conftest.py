"""
Shared pytest fixtures for smartgrid tests.
"""

import pytest
from pubsub import pub

from smartgrid import topics
from smartgrid.protocol import RowItem, UnitContext


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast unit tests")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop listeners and topic definitions left behind by a test."""
    yield
    pub.unsubAll()
    topic_mgr = pub.getDefaultTopicMgr()
    for name in (
        topics.ITEMS_CHANGED,
        topics.ITEM_SIZE_CHANGED,
        topics.CONFIG_CHANGED,
        topics.STYLE_CHANGED,
        topics.CONTAINER_RESIZED,
        topics.CMD_REFRESH,
        topics.LAYOUT_COMPUTED,
        topics.CONFIG_WARNING,
    ):
        if topic_mgr.getTopic(name, okIfNone=True) is not None:
            topic_mgr.delTopic(name)


@pytest.fixture
def make_rows():
    """Factory fixture building rows from nested lists of unit sizes."""

    def factory(*row_sizes, tagged=()):
        rows = []
        index = 0
        for sizes in row_sizes:
            row = []
            for size in sizes:
                row.append(RowItem(index, size, index in tagged))
                index += 1
            rows.append(row)
        return rows

    return factory


@pytest.fixture
def default_context():
    """16px fonts in a 1000x800 viewport."""
    return UnitContext(
        font_size=16.0, root_font_size=16.0, viewport_width=1000, viewport_height=800
    )


@pytest.fixture
def fake_timer():
    """Factory fixture for timers that only fire when told to."""

    class FakeTimer:
        created = []

        def __init__(self, interval, function, args=None, kwargs=None):
            self.interval = interval
            self.function = function
            self.args = args or ()
            self.kwargs = kwargs or {}
            self.daemon = False
            self.started = False
            self.cancelled = False
            FakeTimer.created.append(self)

        def start(self):
            self.started = True

        def cancel(self):
            self.cancelled = True

        def fire(self):
            if not self.cancelled:
                self.function(*self.args, **self.kwargs)

    FakeTimer.created = []
    return FakeTimer
