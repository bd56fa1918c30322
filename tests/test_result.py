import pytest

from dckit.option import Option
from dckit.result import Err, Ok, Result, UnwrapError, make_err, make_ok


def test_result_ok_state():
    result = Result(Ok(1337))
    assert result.is_ok()
    assert not result.is_err()
    assert bool(result) is True


def test_result_err_state():
    result = Result(Err("bad"))
    assert result.is_err()
    assert not result.is_ok()
    assert bool(result) is False


def test_result_requires_ok_or_err():
    with pytest.raises(TypeError):
        Result(5)


def test_access_value():
    value = Result(Ok(1337))
    assert value.value() == 1337


def test_access_method_on_value():
    class Foo:
        def foo(self):
            return 1337

    value = Result(Ok(Foo()))
    assert value.value().foo() == 1337


def test_modification_through_value():
    class Foo:
        def __init__(self):
            self.foo = 0

    value = Result(Ok(Foo()))
    value.value().foo = -81
    assert value.value().foo == -81


def test_ok():
    result = make_ok(27)
    maybe_int = result.ok()
    maybe_string = result.err()
    assert isinstance(maybe_int, Option)
    assert maybe_int.is_some()
    assert maybe_int.value() == 27
    assert maybe_string.is_none()


def test_err():
    result = make_err("carrot")
    maybe_int = result.ok()
    maybe_string = result.err()
    assert maybe_int.is_none()
    assert maybe_string.is_some()
    assert maybe_string.value() == "carrot"


def test_value_is_shared_not_copied():
    original = [27]
    result = make_ok(original)
    assert result.value() is original
    result.value()[0] = 13
    assert result.value() == [13]


def test_err_value():
    result = make_err(27.0)
    assert 26.0 < result.err_value() < 28.0


def test_value_on_err_raises():
    with pytest.raises(UnwrapError):
        make_err("x").value()


def test_err_value_on_ok_raises():
    with pytest.raises(UnwrapError):
        make_ok(1).err_value()


def test_unwrap():
    result = make_ok(66)
    assert result.unwrap() == 66


def test_unwrap_on_err_raises():
    with pytest.raises(UnwrapError):
        make_err(3).unwrap()


def test_unwrap_err():
    result = make_err(5050)
    assert result.unwrap_err() == 5050


def test_unwrap_err_on_ok_raises():
    with pytest.raises(UnwrapError):
        make_ok(3).unwrap_err()


def test_unwrap_or():
    assert make_ok(1).unwrap_or(9) == 1
    assert make_err("e").unwrap_or(9) == 9


def test_unwrap_err_or():
    assert make_err("e").unwrap_err_or("d") == "e"
    assert make_ok(1).unwrap_err_or("d") == "d"


def test_contains():
    result_ok = make_ok(-133)
    result_err = make_err("wow")
    assert result_ok.contains(-133)
    assert result_err.contains_err("wow")
    assert not result_ok.contains_err("wow")
    assert not result_err.contains(-133)


def test_eq_ok_err():
    result = Result(Ok(15))
    assert result == Ok(15)
    assert not (result == Err(15.0))


def test_neq_ok_err():
    result = Result(Ok(15))
    assert not (result != Ok(15))
    assert result != Err(15.0)


def test_ok_and_err_wrappers_compare():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Ok(2)
    assert not (Ok(1) == Err(1))
    assert Err("a") == Err("a")
    assert Err("a") != Ok("a")


def test_reflected_comparison_with_wrappers():
    assert Ok(15) == Result(Ok(15))
    assert Err("x") == Result(Err("x"))
    assert Err("x") != Result(Ok("x"))


def test_eq_result():
    a_ok = make_ok(42)
    a_err = make_err("X")
    b_ok = make_ok(42)
    b_err = make_err("X")
    assert a_ok == b_ok
    assert not (a_ok == b_err)
    assert not (a_err == b_ok)
    assert a_err == b_err


def test_neq_result():
    a_ok = make_ok(42)
    a_err = make_err("X")
    b_ok = make_ok(42)
    b_err = make_err("X")
    assert not (a_ok != b_ok)
    assert a_ok != b_err
    assert a_err != b_ok
    assert not (a_err != b_err)


def test_match_ok():
    ok_result = Result(Ok(13))
    value = ok_result.match(lambda v: 1.0, lambda e: -1.0)
    assert value > 0.0


def test_match_err():
    err_result = Result(Err(13))
    value = err_result.match(lambda v: 1.0, lambda e: -1.0)
    assert value < 0.0


def test_match_passes_payload():
    assert make_ok(4).match(lambda v: v * 2, lambda e: 0) == 8
    assert make_err("ab").match(lambda v: "", lambda e: e.upper()) == "AB"


def test_clone():
    original = [77]
    ok_result = Result(Ok(original))
    clone = ok_result.clone()
    clone_of_clone = clone.clone()
    assert clone == ok_result
    assert clone_of_clone == ok_result
    assert clone.value() is not original
    assert clone_of_clone.value() is not clone.value()


def test_clone_err():
    err_result = make_err(["e"])
    clone = err_result.clone()
    assert clone.is_err()
    assert clone.err_value() == ["e"]
    assert clone.err_value() is not err_result.err_value()


def test_make_ok():
    result = make_ok(13.0)
    assert result.is_ok()


def test_make_err():
    result = make_err("hey")
    assert result.is_err()


def test_map():
    res0 = Result(Ok(10))
    res1 = res0.map(lambda v: "y" if v == 10 else "n")
    assert res1.value() == "y"


def test_map_passes_err_through():
    res = make_err(-1).map(lambda v: v + 1)
    assert res.is_err()
    assert res.err_value() == -1


def test_map_err():
    res0 = Result(Err(-103))
    res1 = res0.map_err(lambda v: "y" if v == 10 else "n")
    assert res1.err_value() == "n"


def test_map_err_passes_ok_through():
    res = make_ok(5).map_err(lambda e: "changed")
    assert res.is_ok()
    assert res.value() == 5