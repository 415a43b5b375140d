import dataclasses

import pytest

from compilerlab.tac import Instruction


def test_format_binary():
    assert Instruction("t3", "+", "t1", "t2").format() == "t3 = t1 + t2"


def test_format_copy():
    assert Instruction("t1", "=", "a").format() == "t1 = a"


def test_format_contains_operands():
    instr = Instruction("t4", "*", "t3", "c")
    text = instr.format()
    assert text.startswith("t4 = ")
    assert text.split()[2:] == ["t3", "*", "c"]


def test_is_copy():
    assert Instruction("t1", "=", "a").is_copy() is True
    assert Instruction("t1", "+", "a", "b").is_copy() is False
    assert Instruction("t1", "=", "a", "b").is_copy() is False


def test_default_arg2_is_empty():
    assert Instruction("x", "=", "t3").arg2 == ""


def test_instruction_is_immutable():
    instr = Instruction("t1", "=", "a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        instr.result = "t2"
    assert instr.result == "t1"
    assert instr.format() == "t1 = a"


def test_equality_by_value():
    first = Instruction("t1", "+", "a", "b")
    second = Instruction("t1", "+", "a", "b")
    assert (first == second) is True
    assert (first == Instruction("t1", "-", "a", "b")) is False
    assert len({first, second}) == 1