import numpy as np
import pytest

from scalargrad import Op, Tape, Var, leaf, add, mul, use_tape
from scalargrad.core import tape as tape_mod


def test_leaf_fields(tape):
    a = leaf(2.0, "a")
    assert a.value == 2.0
    assert a.grad == 0.0
    assert a.op is Op.LEAF
    assert a.operands == []
    assert a.label == "a"
    assert isinstance(a.value, np.float64), "Leaf values are stored as float64."


def test_leaf_accepts_ints_and_numpy_scalars(tape):
    assert leaf(3).value == 3.0
    assert leaf(np.float32(1.5)).value == 1.5


@pytest.mark.parametrize("bad", ["1.0", None, [1.0], np.array([1.0, 2.0])])
def test_leaf_rejects_non_numeric(tape, bad):
    with pytest.raises(TypeError):
        leaf(bad)


def test_forward_values(tape):
    x = leaf(2.0)
    y = leaf(-3.0)
    assert add(x, y).value == x.value + y.value
    assert mul(x, y).value == x.value * y.value
    assert (x + y).value == -1.0
    assert (x * y).value == -6.0


def test_binary_records_operands_in_order(tape):
    a = leaf(2.0, "a")
    b = leaf(5.0, "b")
    p = mul(b, a)
    assert p.op is Op.MUL
    assert p.operands == [b, a], "Operand order must be (left, right)."
    assert p.grad == 0.0
    assert p.label is None


def test_binary_does_not_touch_operands(tape):
    a = leaf(2.0, "a")
    b = leaf(5.0, "b")
    add(a, b)
    assert (a.value, a.grad, a.label) == (2.0, 0.0, "a")
    assert (b.value, b.grad, b.label) == (5.0, 0.0, "b")


def test_plain_numbers_become_constant_leaves(tape):
    a = leaf(4.0, "a")
    r = 3 * a + 1
    assert r.value == 13.0
    left, right = r.operands
    assert right.op is Op.LEAF and right.value == 1.0
    const, same_a = left.operands
    assert const.op is Op.LEAF and const.value == 3.0
    assert same_a == a


def test_label_is_display_only(tape):
    a = leaf(1.0)
    b = a * a
    b.label = "b"
    assert b.label == "b"
    assert b.value == 1.0


def test_shared_operand_is_the_same_node(tape):
    a = leaf(2.0, "a")
    b = leaf(3.0, "b")
    c = a * b
    d = a + b
    assert c.operands[0] == d.operands[0] == a
    assert len(tape) == 4, "Sharing an operand must not copy it."


def test_var_identity_and_hash(tape):
    a = leaf(1.0)
    b = leaf(1.0)
    assert a != b, "Equal values do not make equal nodes."
    assert Var(tape, a.index) == a
    assert len({a, b, Var(tape, a.index)}) == 2


def test_push_node_checks_arity():
    t = Tape()
    idx = t.push_node(op=Op.LEAF, value=1.0)
    with pytest.raises(ValueError):
        t.push_node(op=Op.ADD, value=1.0, operands=(idx,))
    with pytest.raises(ValueError):
        t.push_node(op=Op.LEAF, value=1.0, operands=(idx,))


def test_push_node_rejects_unknown_handles():
    t = Tape()
    idx = t.push_node(op=Op.LEAF, value=1.0)
    with pytest.raises(ValueError):
        t.push_node(op=Op.MUL, value=1.0, operands=(idx, idx + 1))
    with pytest.raises(ValueError):
        t.push_node(op=Op.MUL, value=1.0, operands=(idx, -1))


def test_operands_from_different_tapes_rejected():
    with use_tape():
        a = leaf(1.0)
    with use_tape():
        b = leaf(2.0)
        with pytest.raises(ValueError):
            a + b


def test_use_tape_switches_and_restores():
    before = tape_mod.global_tape
    mine = Tape()
    with use_tape(mine) as t:
        assert t is mine
        x = leaf(1.0)
        assert x.tape is mine
    assert tape_mod.global_tape is before
    assert len(mine) == 1


def test_use_tape_restores_after_error():
    before = tape_mod.global_tape
    with pytest.raises(RuntimeError):
        with use_tape():
            raise RuntimeError("boom")
    assert tape_mod.global_tape is before


def test_explicit_tape_keyword():
    t = Tape()
    x = leaf(2.0, tape=t)
    y = x * 3
    assert y.tape is t
    assert len(t) == 3


def test_tape_reset(tape):
    leaf(1.0)
    leaf(2.0)
    tape.reset()
    assert len(tape) == 0
