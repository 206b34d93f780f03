import intcode.runtime.emulator as emulator
import intcode.runtime.cpu as cpu

from unit_utils import make_cpu, run_program, load_program


def test_immediate_add():
    proc = make_cpu([1101, 100, -1, 4, 0]).run()
    assert proc.memory[4] == 99
    assert proc.state == cpu.HALTED


def test_mixed_mode_mul():
    proc = make_cpu([1002, 4, 3, 4, 33]).run()
    assert proc.memory[4] == 99


def test_operands_read_before_write():
    assert make_cpu([1, 0, 0, 0, 99]).run().memory[0] == 2
    assert make_cpu([2, 0, 0, 0, 99]).run().memory[0] == 4


def test_position_mode_chain():
    proc = make_cpu([1, 1, 1, 4, 99, 5, 6, 0, 99]).run()
    assert proc.memory[0] == 30
    assert proc.memory[4] == 2


def test_product_into_padding():
    proc = make_cpu([2, 4, 4, 5, 99, 0]).run()
    assert proc.memory[5] == 9801


def test_large_product():
    outputs = run_program(load_program('bigmul'))
    assert outputs == [1219070632396864]
    assert len(str(outputs[0])) == 16


def test_large_immediate(capsys):
    emulator.execute([104, 1125899906842624, 99])
    assert capsys.readouterr().out == '1125899906842624\n'


def test_less_than_and_equals():
    program = [3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8]
    assert run_program(program, [8]) == [1]
    assert run_program(program, [7]) == [0]

    program = [3, 9, 7, 9, 10, 9, 4, 9, 99, -1, 8]
    assert run_program(program, [5]) == [1]
    assert run_program(program, [8]) == [0]

    program = [3, 3, 1108, -1, 8, 3, 4, 3, 99]
    assert run_program(program, [8]) == [1]
    assert run_program(program, [-8]) == [0]

    program = [3, 3, 1107, -1, 8, 3, 4, 3, 99]
    assert run_program(program, [-100]) == [1]
    assert run_program(program, [100]) == [0]


def test_halt_stops_execution():
    proc = make_cpu([99, 104, 1, 99]).run()
    assert proc.output.values == []
    assert proc.steps == 1
    assert proc.ip == 1


def test_terminal_cpu_does_not_rerun():
    proc = make_cpu([104, 7, 99]).run()
    proc.run()
    assert proc.output.values == [7]
