from compilerlab.copyprop import main, propagate_copies, remove_dead_copies, sample_program
from compilerlab.tac import Instruction


def test_propagation_removes_uses_of_copy_targets():
    program = sample_program()
    result = propagate_copies(program)
    assert len(result) == len(program)
    for i, instr in enumerate(result):
        if instr.is_copy():
            for later in result[i + 1:]:
                assert instr.result not in (later.arg1, later.arg2)


def test_propagation_follows_copy_chain():
    result = propagate_copies(sample_program())
    assert result[1].arg1 == "a"
    assert result[2].arg1 == "a"


def test_propagation_does_not_modify_input():
    program = sample_program()
    propagate_copies(program)
    assert program == sample_program()


def test_propagation_replaces_second_operand():
    program = [Instruction("t1", "=", "a"), Instruction("t2", "+", "b", "t1")]
    assert propagate_copies(program)[1].arg2 == "a"


def test_optimised_sample():
    result = remove_dead_copies(propagate_copies(sample_program()))
    assert [instr.format() for instr in result] == ["t3 = a + b", "t4 = t3 * c"]


def test_remove_keeps_used_copy():
    program = [Instruction("t1", "=", "a"), Instruction("t2", "+", "t1", "b")]
    assert remove_dead_copies(program) == program


def test_remove_keeps_non_copies():
    program = [Instruction("t1", "+", "a", "b")]
    assert remove_dead_copies(program) == program


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    original, optimised = out.split("Optimized TAC after Copy Propagation:")
    assert original.startswith("Original TAC:")
    assert "t2 = t1" in original
    assert "t2 = t1" not in optimised