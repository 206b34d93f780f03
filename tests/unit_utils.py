from pathlib import Path
from typing import Sequence

import intcode.loader.loader as loader
import intcode.runtime.cpu as cpu
from intcode.runtime.peripheral import ScriptedInput, ScriptedOutput


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_program(name: str) -> list[int]:
    return loader.load_file(find_file(f'testdata/{name}.int'))


def make_cpu(program: Sequence[int], inputs: Sequence[int | str] = (), memory_size: int | None = None):
    memory = cpu.Memory(program) if memory_size is None else cpu.Memory(program, memory_size)
    return cpu.CPU(memory, ScriptedInput(inputs), ScriptedOutput())


def run_program(program: Sequence[int], inputs: Sequence[int | str] = ()) -> list[int]:
    proc = make_cpu(program, inputs).run()
    return proc.output.values
