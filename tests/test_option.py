import pytest
import sys
import os

# 添加项目路径到系统路径
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from funcbox.option import Option, Some, Nothing, option, EMPTY_OPTION_MESSAGE
from funcbox.result import Success, Failure
from funcbox.errors import MissingArgumentError, MissingValueError


@pytest.fixture
def calls():
    """收集回调调用记录"""
    return []


# ==================== 构造与访问 ====================

def test_of_wraps_value():
    opt = Option.of("A")

    assert opt.is_present()
    assert not opt.is_empty()
    assert opt.is_not_empty()
    assert opt.get() == "A"
    assert isinstance(opt, Some)


def test_of_none_is_canonical_empty():
    assert Option.of(None) is Option.empty()
    assert Option.of_nullable(None) is Option.empty()
    assert Option.empty() is Option.empty()


def test_of_and_of_nullable_agree():
    assert Option.of(42) == Option.of_nullable(42)
    assert option(42) == Option.of(42)
    assert option(None) == Option.empty()


def test_empty_get_returns_none():
    empty = Option.empty()

    assert empty.get() is None
    assert empty.is_empty()
    assert not empty.is_present()
    assert not empty.is_not_empty()


def test_falsy_values_are_present():
    assert Option.of(0).is_present()
    assert Option.of("").is_present()
    assert Option.of([]).is_present()


def test_some_rejects_none_payload():
    with pytest.raises(MissingArgumentError):
        Some(None)


def test_option_base_cannot_be_instantiated():
    """只有 Some 和 Nothing 两种变体"""
    with pytest.raises(TypeError):
        Option()


# ==================== 副作用 ====================

def test_apply_runs_only_when_present(calls):
    opt = Option.of(10)

    assert opt.apply(calls.append) is opt
    assert calls == [10]

    empty = Option.empty()
    assert empty.apply(calls.append) is empty
    assert calls == [10]


def test_and_runs_unconditionally(calls):
    present = Option.of("A")
    empty = Option.empty()

    assert present.and_(lambda: calls.append("p")) is present
    assert empty.and_(lambda: calls.append("e")) is empty
    assert calls == ["p", "e"]


def test_if_present_and_if_empty(calls):
    Option.of("ping").if_present(calls.append)
    Option.empty().if_present(calls.append)
    Option.empty().if_empty(lambda: calls.append("missing"))
    Option.of("x").if_empty(lambda: calls.append("never"))

    assert calls == ["ping", "missing"]


def test_if_empty_or_else_runs_exactly_one_branch(calls):
    Option.of("A").if_empty_or_else(lambda: calls.append("empty"), lambda v: calls.append(f"got {v}"))
    Option.empty().if_empty_or_else(lambda: calls.append("empty"), lambda v: calls.append(f"got {v}"))

    assert calls == ["got A", "empty"]


@pytest.mark.parametrize("call", [
    lambda o: o.apply(None),
    lambda o: o.and_(None),
    lambda o: o.if_present(None),
    lambda o: o.if_empty(None),
    lambda o: o.if_empty_or_else(None, print),
    lambda o: o.if_empty_or_else(print, None),
    lambda o: o.map(None),
    lambda o: o.map_to(None),
    lambda o: o.flat_map(None),
    lambda o: o.filter(None),
    lambda o: o.take_if(None),
    lambda o: o.take_unless(None),
    lambda o: o.is_instance(None),
    lambda o: o.if_instance(None),
    lambda o: o.if_instance(str, None),
    lambda o: o.if_instance_run(str, None),
    lambda o: o.if_not_instance(None),
    lambda o: o.if_present_or_else(None, lambda: 0),
    lambda o: o.if_present_or_else_get(lambda: 0, None),
    lambda o: o.or_else_get(None),
    lambda o: o.or_else_throw(None),
    lambda o: o.run_catching(None),
])
@pytest.mark.parametrize("opt", [Option.of("x"), Option.empty()], ids=["some", "nothing"])
def test_missing_callback_raises_eagerly(opt, call):
    """无论是否有值，缺少回调都会立即报错"""
    with pytest.raises(MissingArgumentError):
        call(opt)


# ==================== 变换 ====================

def test_map_present():
    assert Option.of("abc").map(len) == Option.of(3)


def test_map_empty_does_not_call(calls):
    mapped = Option.empty().map(lambda v: calls.append(v))

    assert mapped.is_empty()
    assert calls == []


def test_map_to_none_result_is_empty():
    assert Option.of("abc").map(lambda v: None) is Option.empty()


def test_map_to_applies_even_when_empty():
    size = lambda s: 0 if s is None else len(s)

    assert Option.empty().map_to(size) == 0
    assert Option.of("abcd").map_to(size) == 4


def test_flat_map_and_bind():
    parse = lambda s: Option.of(int(s)) if s.isdigit() else Option.empty()

    assert Option.of("42").flat_map(parse) == Option.of(42)
    assert Option.of("x").flat_map(parse).is_empty()
    assert Option.empty().flat_map(parse).is_empty()
    assert Option.of("7").bind(parse) == Option.of(7)


def test_flat_map_rejects_none_result():
    with pytest.raises(MissingValueError):
        Option.of(1).flat_map(lambda v: None)


def test_flat_map_rejects_foreign_result():
    with pytest.raises(TypeError):
        Option.of(1).flat_map(lambda v: v + 1)


def test_filter():
    six = Option.of(6)

    assert six.filter(lambda x: x % 2 == 0) is six
    assert Option.of(5).filter(lambda x: x % 2 == 0).is_empty()
    assert Option.empty().filter(lambda x: True).is_empty()


def test_take_if_and_take_unless():
    abc = Option.of("abc")
    a = Option.of("a")
    longer = lambda v: len(v) > 2

    assert abc.take_if(longer) is abc
    assert a.take_if(longer).is_empty()
    assert a.take_unless(longer) is a
    assert abc.take_unless(longer).is_empty()


def test_take_if_on_empty_skips_predicate(calls):
    assert Option.empty().take_if(lambda v: calls.append(v) or True).is_empty()
    assert Option.empty().take_unless(lambda v: calls.append(v) or False).is_empty()
    assert calls == []


# ==================== 类型检查 ====================

def test_is_instance():
    assert Option.of("x").is_instance(str)
    assert not Option.of("x").is_instance(int)
    assert not Option.empty().is_instance(object)


def test_if_instance_narrows():
    number = Option.of(10)

    assert number.if_instance(int) == Option.of(10)
    assert number.if_instance(str).is_empty()
    assert Option.empty().if_instance(int).is_empty()


def test_if_instance_with_action(calls):
    Option.of("abc").if_instance(str, lambda v: calls.append(len(v)))
    Option.of("abc").if_instance(int, lambda v: calls.append("never"))

    assert calls == [3]


def test_if_instance_run(calls):
    Option.of("abc").if_instance_run(str, lambda: calls.append("seen"))
    Option.of(1).if_instance_run(str, lambda: calls.append("never"))
    Option.empty().if_instance_run(object, lambda: calls.append("never"))

    assert calls == ["seen"]


def test_if_not_instance():
    s = Option.of("x")

    assert s.if_not_instance(int) is s
    assert s.if_not_instance(str).is_empty()
    assert Option.empty().if_not_instance(int).is_empty()


# ==================== 分支与默认值 ====================

def test_if_present_or_else():
    assert Option.of("abc").if_present_or_else(len, lambda: 0) == 3
    assert Option.empty().if_present_or_else(len, lambda: 0) == 0


def test_if_present_or_else_get():
    assert Option.of(1).if_present_or_else_get(lambda: "present", lambda: "empty") == "present"
    assert Option.empty().if_present_or_else_get(lambda: "present", lambda: "empty") == "empty"


def test_or_else_and_or_else_get(calls):
    assert Option.empty().or_else("fallback") == "fallback"
    assert Option.of("v").or_else("fallback") == "v"
    assert Option.empty().or_else_get(lambda: "lazy") == "lazy"
    assert Option.of("v").or_else_get(lambda: calls.append("never")) == "v"
    assert calls == []


def test_or_else_throw():
    assert Option.of("v").or_else_throw(lambda: LookupError("nope")) == "v"

    with pytest.raises(LookupError, match="nope"):
        Option.empty().or_else_throw(lambda: LookupError("nope"))


def test_to_optional():
    assert Option.of("x").to_optional() == "x"
    assert Option.empty().to_optional() is None


# ==================== run_catching ====================

def test_run_catching_success():
    assert Option.of("42").run_catching(int) == Success(42)


def test_run_catching_captures_exception():
    result = Option.of("N/A").run_catching(int)

    assert result.is_failure()
    assert isinstance(result.exception_or_null(), ValueError)


def test_run_catching_on_empty_does_not_call(calls):
    result = Option.empty().run_catching(calls.append)

    assert calls == []
    assert isinstance(result.exception_or_null(), MissingValueError)
    assert result == Failure(MissingValueError(EMPTY_OPTION_MESSAGE))


# ==================== 相等性与字符串 ====================

def test_equality_and_hash():
    assert Option.of("x") == Option.of("x")
    assert hash(Option.of("x")) == hash(Option.of("x"))
    assert Option.of("x") != Option.of("y")
    assert Option.of("x") != Option.empty()
    assert Option.empty() != Option.of("x")


def test_nothing_instances_are_equal():
    other = Nothing()

    assert other is not Option.empty()
    assert other == Option.empty()
    assert hash(other) == hash(Option.empty())


def test_not_equal_to_none_or_foreign():
    assert Option.of("x") != None  # noqa: E711
    assert Option.of("x") != "x"
    assert Option.empty() != None  # noqa: E711
    assert Option.empty() != 0


def test_str():
    assert str(Option.of(3)) == "Some(3)"
    assert str(Option.empty()) == "Nothing"


def test_iteration_and_truthiness():
    assert list(Option.of(5)) == [5]
    assert list(Option.empty()) == []
    assert Option.of(0)
    assert not Option.empty()


def test_some_is_immutable():
    with pytest.raises(AttributeError):
        Option.of(1).value = 2
