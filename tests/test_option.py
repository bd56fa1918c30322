import pytest

from dckit.option import IntrusiveOption, Option, OptionError, none, some


class Box:
    def __init__(self, obj):
        self.object = obj


class Tracked:
    copies = 0

    def __init__(self, obj):
        self.object = obj

    def __copy__(self):
        Tracked.copies += 1
        return Tracked(self.object)

    def __eq__(self, other):
        if isinstance(other, Tracked):
            return self.object == other.object
        return self.object == other


def test_default_construction_is_none():
    simple = Option()
    assert not simple
    assert simple.is_none()


def test_some_construction():
    opt = some(1200300)
    assert opt
    assert opt.value() == 1200300


def test_none_construction():
    assert not none()


def test_holding_python_none_is_some():
    opt = some(None)
    assert opt.is_some()
    assert opt.value() is None


def test_value_on_none_raises():
    with pytest.raises(OptionError):
        none().value()


def test_unwrap_on_none_raises():
    with pytest.raises(OptionError):
        none().unwrap()


def test_value_gives_the_held_object():
    opt = some(Box(77))
    opt.value().object = -11
    assert opt.value().object == -11


def test_clone_copies_once():
    Tracked.copies = 0
    opt = some(Tracked(3))
    clone = opt.clone()
    assert Tracked.copies == 1
    assert clone.value() == opt.value()
    assert clone.value() is not opt.value()


def test_clone_of_none_is_none():
    assert none().clone().is_none()


def test_match_some():
    opt = some(Box(7))
    result = opt.match(lambda v: 1 if v.object == 7 else -1, lambda: -100)
    assert result == 1


def test_match_none():
    assert none().match(lambda v: 10, lambda: 11) == 11


def test_unwrap():
    opt = some(Box(101))
    assert opt.unwrap().object == 101


def test_value_or_and_unwrap_or():
    assert some(3).value_or(9) == 3
    assert none().value_or(9) == 9
    assert some(3).unwrap_or(9) == 3
    assert none().unwrap_or(9) == 9


def test_is_some_none_bool():
    s = some(7)
    n = none()
    assert s.is_some()
    assert not s.is_none()
    assert n.is_none()
    assert not n.is_some()
    assert bool(s) is True
    assert bool(n) is False


def test_contains():
    s = some("c")
    n = none()
    assert s.contains("c") is True
    assert s.contains("w") is False
    assert n.contains("c") is False


def test_compare():
    now = some(2021)
    then = some(1969)
    now_clone = now.clone()
    assert (now == then) is False
    assert (now != then) is True
    assert (now == now_clone) is True
    assert (now != now_clone) is False


def test_compare_with_empty_is_never_equal():
    assert (none() == none()) is False
    assert (none() != none()) is True
    assert (some(1) == none()) is False
    assert (some(1) != none()) is True


def test_intrusive_option_is_some():
    opt = IntrusiveOption(-1, some(1337))
    assert opt.is_some()
    assert opt.value() == 1337


def test_intrusive_option_is_none():
    opt = IntrusiveOption(-1, none())
    assert opt.is_none()
    assert not opt


def test_intrusive_option_is_none_by_some_assignment():
    opt = IntrusiveOption(-1, some(-1))
    assert opt.is_none()


def test_intrusive_option_default_is_none():
    opt = IntrusiveOption(-1)
    assert opt.is_none()
    with pytest.raises(OptionError):
        opt.value()


def test_intrusive_option_plain_value():
    opt = IntrusiveOption(0, 5)
    assert bool(opt) is True
    assert opt.value() == 5