import sys
from pathlib import Path
from typing import Sequence, Tuple
import logging as lg
import traceback

import click

from intcode.common.hwconf import MEMORY_SIZE
from intcode.runtime.peripheral import (
    InputDevice, OutputDevice, ConsoleInput, ConsoleOutput, ScriptedInput
)
import intcode.runtime.cpu as cpu
import intcode.loader.loader as loader


EXIT_HALT = 0
EXIT_FAULT = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def execute(
    program: Sequence[int],
    input_device: InputDevice | None = None,
    output_device: OutputDevice | None = None,
    memory_size: int = MEMORY_SIZE
) -> cpu.CPU:
    memory = cpu.Memory(program, memory_size)

    if input_device is None:
        # Prompt only for interactive sessions
        input_device = ConsoleInput(prompt='$ ' if sys.stdin.isatty() else None)

    if output_device is None:
        output_device = ConsoleOutput()

    proc = cpu.CPU(memory, input_device, output_device)
    return proc.run()


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug and traces execution')
@click.option('-m', '--memory-size', type=click.IntRange(min=1), default=MEMORY_SIZE, show_default=True,
              help='Memory capacity in words')
@click.option('-i', '--input', 'inputs', multiple=True, type=int,
              help='Scripted input value, may be repeated; reads stdin otherwise')
@click.argument('program_filename', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def run(verbose: bool, memory_size: int, inputs: Tuple[int], program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("INTCODE")

    try:
        program = loader.load_file(program_filename)
        input_device = ScriptedInput(inputs) if inputs else None
        proc = execute(program, input_device=input_device, memory_size=memory_size)
        lg.info(f'Execution halted gracefully after {proc.steps} steps')
        sys.exit(EXIT_HALT)

    except cpu.Fault as e:
        lg.error(f'Execution halted on fault: {e}')
        sys.exit(EXIT_FAULT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
