"""Tests for the observable container."""

import logging

import pytest

from viewstate.shared.core.lifecycle import Loading, Success
from viewstate.shared.core.observable import ObservableContainer, SubscriptionToken

from conftest import Recorder


class TestSetAndNotify:
    def test_get_returns_initial_value(self, container):
        assert container.get() == 0
        assert container.value == 0

    def test_set_notifies_with_new_value_visible(self, container):
        recorder = Recorder(container.get)
        container.subscribe(recorder)

        assert container.set(1) is True
        assert recorder.seen == [1]

    def test_equal_write_is_suppressed(self, container):
        recorder = Recorder(container.get)
        container.subscribe(recorder)

        assert container.set(0) is False
        assert recorder.calls == 0

    def test_consecutive_equal_writes_notify_once(self, container):
        recorder = Recorder(container.get)
        container.subscribe(recorder)

        for value in [1, 1, 2, 2, 2, 1, 1]:
            container.set(value)

        assert recorder.seen == [1, 2, 1]

    def test_structurally_equal_states_are_suppressed(self):
        states = ObservableContainer(Success(data="John Doe"), name="user")
        recorder = Recorder(states.get)
        states.subscribe(recorder)

        states.set(Success(data="John Doe"))
        states.set(Loading())
        states.set(Loading())

        assert recorder.seen == [Loading()]

    def test_update_applies_function(self, container):
        container.update(lambda v: v + 5)
        assert container.get() == 5

    def test_custom_equality_gate(self):
        case_insensitive = ObservableContainer("a", equals=lambda x, y: x.lower() == y.lower())
        recorder = Recorder(case_insensitive.get)
        case_insensitive.subscribe(recorder)

        case_insensitive.set("A")
        case_insensitive.set("b")

        assert recorder.seen == ["b"]


class TestSubscriptions:
    def test_listeners_run_in_subscription_order(self, container):
        order = []
        container.subscribe(lambda: order.append("first"))
        container.subscribe(lambda: order.append("second"))
        container.subscribe(lambda: order.append("third"))

        container.set(1)

        assert order == ["first", "second", "third"]

    def test_duplicate_listener_registrations_are_independent(self, container):
        recorder = Recorder(container.get)
        first = container.subscribe(recorder)
        container.subscribe(recorder)

        container.set(1)
        assert recorder.calls == 2

        container.unsubscribe(first)
        container.set(2)
        assert recorder.calls == 3

    def test_unsubscribe_stops_delivery(self, container):
        recorder = Recorder(container.get)
        token = container.subscribe(recorder)
        container.unsubscribe(token)

        container.set(1)

        assert recorder.calls == 0
        assert container.listener_count == 0

    def test_unsubscribe_is_idempotent(self, container):
        token = container.subscribe(lambda: None)
        container.unsubscribe(token)
        container.unsubscribe(token)
        assert container.listener_count == 0

    def test_unknown_token_is_ignored(self, container):
        container.subscribe(lambda: None)
        container.unsubscribe(SubscriptionToken("elsewhere"))
        assert container.listener_count == 1

    def test_tokens_are_unique(self, container):
        listener = lambda: None  # noqa: E731
        assert container.subscribe(listener) != container.subscribe(listener)


class TestReentrantNotification:
    def test_listener_unsubscribing_itself_does_not_skip_others(self, container):
        order = []
        tokens = {}

        def once():
            order.append("once")
            container.unsubscribe(tokens["once"])

        container.subscribe(lambda: order.append("before"))
        tokens["once"] = container.subscribe(once)
        container.subscribe(lambda: order.append("after"))

        container.set(1)
        container.set(2)

        assert order == ["before", "once", "after", "before", "after"]

    def test_listener_removing_a_later_one_still_delivers_this_round(self, container):
        order = []
        tokens = {}

        def remover():
            order.append("remover")
            container.unsubscribe(tokens["victim"])

        container.subscribe(remover)
        tokens["victim"] = container.subscribe(lambda: order.append("victim"))

        container.set(1)
        container.set(2)

        assert order == ["remover", "victim", "remover"]

    def test_listener_added_during_notification_waits_for_next_round(self, container):
        late = Recorder(container.get)

        def adder():
            container.subscribe(late)

        token = container.subscribe(adder)
        container.set(1)
        container.unsubscribe(token)

        assert late.calls == 0
        container.set(2)
        assert late.seen == [2]

    def test_failing_listener_is_logged_and_others_still_run(self, container, caplog):
        recorder = Recorder(container.get)

        def broken():
            raise RuntimeError("render failed")

        container.subscribe(broken)
        container.subscribe(recorder)

        with caplog.at_level(logging.ERROR, logger="viewstate.shared.core.observable"):
            assert container.set(1) is True

        assert recorder.seen == [1]
        assert "broken" in caplog.text


class TestDispose:
    def test_dispose_releases_listeners(self, container):
        recorder = Recorder(container.get)
        container.subscribe(recorder)

        container.dispose()

        assert container.disposed
        assert container.listener_count == 0

    def test_set_after_dispose_is_a_noop(self, container):
        container.dispose()

        assert container.set(5) is False
        assert container.get() == 0

    def test_subscribe_after_dispose_never_fires(self, container):
        container.dispose()
        token = container.subscribe(lambda: pytest.fail("should not run"))

        container.set(1)
        container.unsubscribe(token)
        assert container.listener_count == 0

    def test_select_after_dispose_returns_disposed_selector(self, container):
        container.set(3)
        container.dispose()

        selector = container.select(lambda v: v * 2)

        assert selector.disposed
        assert selector.current() == 6
        assert selector.listener_count == 0

    def test_dispose_twice_is_safe(self, container):
        container.dispose()
        container.dispose()
        assert container.disposed


class TestReadOnlyView:
    def test_view_reads_and_subscribes(self, container):
        view = container.view()
        recorder = Recorder(view.get)
        token = view.subscribe(recorder)

        container.set(3)
        view.unsubscribe(token)
        container.set(4)

        assert recorder.seen == [3]
        assert view.value == 4

    def test_view_cannot_write(self, container):
        view = container.view()
        assert not hasattr(view, "set")
        assert not hasattr(view, "update")
        assert not hasattr(view, "dispose")
