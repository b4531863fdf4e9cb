"""End-to-end: register factories and states, then build fixtures."""

from dataclasses import dataclass, field

import pytest

from fixturekit import Collection, EmptyCollection, FixtureRegistry, StateMode, UnknownType


@dataclass(eq=False)
class Widget:
    enabled: bool = True


@dataclass(eq=False)
class Account:
    email: str = "user@example.com"
    roles: list[str] = field(default_factory=list)
    active: bool = True


SUPPORT = Account(email="support@example.com", roles=["support"])


@pytest.fixture
def accounts(registry):
    registry.register(Account, Account)
    registry.register_state(Account, "admin", lambda a: a.roles.append("admin"))
    registry.register_state(Account, "inactive", lambda a: setattr(a, "active", False))
    registry.register_state(Account, "support", lambda a: SUPPORT, mode=StateMode.REPLACE)
    return registry


def test_widget_scenario(registry):
    registry.register(Widget, lambda: Widget(enabled=True))
    registry.register_state(Widget, "disabled", lambda w: setattr(w, "enabled", False))
    builder = registry.new_builder(Widget)

    assert builder.one().enabled is True
    assert builder.state("disabled").one().enabled is False

    widgets = builder.state("disabled").many(3)

    assert widgets.count() == 3
    assert all(widget.enabled is False for widget in widgets)


def test_empty_registry_has_no_builders():
    with pytest.raises(UnknownType):
        FixtureRegistry().new_builder(Widget)


def test_empty_collection_scenario():
    collection = Collection()

    with pytest.raises(EmptyCollection):
        collection.first()

    widget = Widget()
    collection.add(widget)

    assert collection.first() is widget
    assert collection.last() is widget


def test_states_and_override_combine(accounts):
    account = (
        accounts.new_builder(Account)
        .state("admin", "inactive")
        .one(lambda a: setattr(a, "email", "root@example.com"))
    )

    assert account.roles == ["admin"]
    assert account.active is False
    assert account.email == "root@example.com"


def test_replacing_state_substitutes_shared_fixture(accounts):
    builder = accounts.new_builder(Account).state("admin", "support")

    first, second = builder.one(), builder.one()

    assert first is SUPPORT
    assert second is SUPPORT
    assert SUPPORT.roles == ["support"]


def test_many_then_work_with_collection(accounts):
    builder = accounts.new_builder(Account)
    admins = builder.state("admin").many(2)
    users = builder.state("inactive").many(3)

    everyone = admins.merge(users)
    active = everyone.filter(lambda a: a.active)

    assert everyone.count() == 5
    assert active.to_list() == admins.to_list()
    assert everyone.random() in everyone.to_list()

    everyone.apply(lambda a: setattr(a, "email", "bulk@example.com"))
    assert all(a.email == "bulk@example.com" for a in admins)


def test_plugin_registry_with_widget_registry(widget_registry, widget_cls):
    widgets = widget_registry.new_builder(widget_cls).state("disabled").many(2)

    assert [w.enabled for w in widgets] == [False, False]
