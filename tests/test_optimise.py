from compilerlab.optimise import (
    dead_code_report,
    eliminate_common_subexpressions,
    main,
    sample_program,
)
from compilerlab.tac import Instruction


def test_sample_program_shape():
    program = sample_program()
    assert len(program) == 5
    assert program[-1].result == "x"
    assert program[-1].arg1 == "t3"


def test_report_flags_everything_when_nothing_used():
    program = sample_program()
    lines = dead_code_report(program, used=())
    assert len(lines) == len(program)
    assert all(line.startswith("Dead code found: ") for line in lines)


def test_report_flags_nothing_when_all_used():
    program = sample_program()
    lines = dead_code_report(program, used={instr.result for instr in program})
    assert not any(line.startswith("Dead code found") for line in lines)
    assert all(line.startswith(instr.result + " = ") for line, instr in zip(lines, program))


def test_report_flags_only_unused():
    program = sample_program()
    lines = dead_code_report(program, used={"t1", "t2", "t3", "x"})
    flagged = [line for line in lines if line.startswith("Dead code found")]
    assert len(flagged) == 1
    assert "t4 = t1 + t2" in flagged[0]


def test_cse_leaves_sample_unchanged():
    program = sample_program()
    assert eliminate_common_subexpressions(program) == program


def test_cse_repeated_identical_operands():
    program = [Instruction("t1", "+", "a", "a"), Instruction("t2", "+", "a", "a")]
    result = eliminate_common_subexpressions(program)
    assert result == program


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Dead Code Elimination:")
    assert "Common Subexpression Elimination:" in out
    assert out.count("Dead code found: ") == len(sample_program())