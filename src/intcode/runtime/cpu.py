import logging as lg
from dataclasses import dataclass
from typing import Callable, Literal, Sequence, TypeAlias

import intcode.common.ops as ops
from intcode.common.hwconf import MEMORY_SIZE, OPCODE_BASE, MODE_BASE
from intcode.runtime.peripheral import InputDevice, OutputDevice
from intcode.runtime.faults import (  # noqa: F401
    Halt,
    Fault,
    InvalidOpcode,
    InvalidAddressingMode,
    InvalidWriteDestination,
    MemoryOutOfBounds,
    InputReadFailure,
    InputParseFailure
)


State: TypeAlias = Literal['running', 'halted', 'faulted']

RUNNING: State = 'running'
HALTED: State = 'halted'
FAULTED: State = 'faulted'


class Memory:
    ''' Fixed capacity word memory, every access is bounds-checked '''

    def __init__(self, program: Sequence[int], size: int = MEMORY_SIZE):
        self.cells = list(program)

        if size > len(self.cells):
            self.cells.extend([0] * (size - len(self.cells)))

    def __len__(self) -> int:
        return len(self.cells)

    def check(self, index: int) -> int:
        # No negative indexing from the end
        if index < 0 or index >= len(self.cells):
            raise MemoryOutOfBounds(index)

        return index

    def read(self, index: int) -> int:
        return self.cells[self.check(index)]

    def write(self, index: int, value: int):
        self.cells[self.check(index)] = value

    def __getitem__(self, index: int) -> int:
        return self.read(index)

    def __setitem__(self, index: int, value: int):
        self.write(index, value)


# - Parameters - #

@dataclass(frozen=True)
class Parameter:
    value: int

    TAG = '?'

    def __str__(self) -> str:
        return f'{self.TAG}({self.value})'


class Position(Parameter):
    TAG = 'P'


class Immediate(Parameter):
    TAG = 'I'


class Relative(Parameter):
    TAG = 'R'


MODES: dict[int, type[Parameter]] = {
    ops.POSITION: Position,
    ops.IMMEDIATE: Immediate,
    ops.RELATIVE: Relative
}


@dataclass
class Instruction:
    opcode: int
    params: list[Parameter]
    position: int      # Address of the opcode word
    modes: int         # Mode digits as encoded above the opcode

    def __str__(self) -> str:
        params = ', '.join(str(p) for p in self.params)
        return f'{ops.MNEMONICS[self.opcode]} [{params}]'


def decode_opcode(word: int) -> int:
    # Truncated remainder, so negative words never alias valid opcodes
    if word < 0:
        return -(-word % OPCODE_BASE)

    return word % OPCODE_BASE


class CPU():
    ip: int         # Instruction pointer
    rbase: int      # Relative base
    memory: Memory
    state: State
    steps: int      # Executed instructions

    def __init__(self, memory: Memory, input_device: InputDevice, output_device: OutputDevice):
        self.memory = memory
        self.input = input_device
        self.output = output_device

        self.ip = 0
        self.rbase = 0
        self.state = RUNNING
        self.steps = 0

    # - Helpers - #

    def debug_dump(self):
        lg.debug(f'IP:{self.ip} RB:{self.rbase} STATE:{self.state} STEPS:{self.steps}')

    def pack_parameters(self, modes: int, count: int) -> list[Parameter]:
        params: list[Parameter] = []

        for i in range(count):
            raw = self.memory[self.ip + i]
            digit = modes % MODE_BASE

            if digit not in MODES:
                raise InvalidAddressingMode(digit)

            params.append(MODES[digit](raw))
            modes //= MODE_BASE

        self.ip += count
        return params

    def unpack_parameter(self, param: Parameter) -> int:
        if isinstance(param, Immediate):
            return param.value

        return self.memory[self.address_of(param)]

    def address_of(self, param: Parameter) -> int:
        if isinstance(param, Position):
            return param.value

        if isinstance(param, Relative):
            return self.rbase + param.value

        raise InvalidWriteDestination(param)

    def fetch_and_decode(self) -> Instruction:
        position = self.ip
        word = self.memory[position]
        self.ip += 1

        opcode = decode_opcode(word)

        if opcode not in ops.PARAM_COUNTS:
            raise InvalidOpcode(opcode, position)

        modes = word // OPCODE_BASE
        params = self.pack_parameters(modes, ops.PARAM_COUNTS[opcode])
        return Instruction(opcode, params, position, modes)

    def arithm_pair(self, params: list[Parameter], op: Callable[[int, int], int]):
        # Immediate destination faults before any operand is read
        dest = self.address_of(params[2])
        a = self.unpack_parameter(params[0])
        b = self.unpack_parameter(params[1])
        self.memory[dest] = op(a, b)

    def jump(self, params: list[Parameter], test: bool):
        if (self.unpack_parameter(params[0]) != 0) == test:
            self.ip = self.unpack_parameter(params[1])

    # - Operations - #

    def add(self, params: list[Parameter]):
        self.arithm_pair(params, lambda a, b: a + b)

    def mul(self, params: list[Parameter]):
        self.arithm_pair(params, lambda a, b: a * b)

    def inp(self, params: list[Parameter]):
        dest = self.memory.check(self.address_of(params[0]))
        value = self.input.read_value()
        self.memory[dest] = value
        lg.debug(f'\t[{dest}] = {value}')

    def out(self, params: list[Parameter]):
        self.output.write_value(self.unpack_parameter(params[0]))

    def jit(self, params: list[Parameter]):
        self.jump(params, True)

    def jif(self, params: list[Parameter]):
        self.jump(params, False)

    def lth(self, params: list[Parameter]):
        self.arithm_pair(params, lambda a, b: int(a < b))

    def eql(self, params: list[Parameter]):
        self.arithm_pair(params, lambda a, b: int(a == b))

    def arb(self, params: list[Parameter]):
        self.rbase += self.unpack_parameter(params[0])
        lg.debug(f'\trbase = {self.rbase}')

    def hlt(self, params: list[Parameter]):
        raise Halt()

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.INP: inp,
        ops.OUT: out,
        ops.JIT: jit,
        ops.JIF: jif,
        ops.LTH: lth,
        ops.EQL: eql,
        ops.ARB: arb,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def exec_next(self):
        instruction = self.fetch_and_decode()
        self.steps += 1

        lg.debug(
            f'{self.steps:3}: {instruction.position:04}  '
            f'{instruction.opcode:02} {instruction.modes:03} {instruction}'
        )

        handler = self.HANDLERS[instruction.opcode]
        handler(self, instruction.params)

    def run(self) -> 'CPU':
        try:
            # Running off the end of memory is a normal termination
            while self.state == RUNNING and self.ip < len(self.memory):
                self.exec_next()

        except Halt:
            self.state = HALTED
            lg.debug(f'Halted after {self.steps} steps')

        except Fault:
            self.state = FAULTED
            self.debug_dump()
            raise

        if self.state == RUNNING:
            self.state = HALTED
            lg.debug(f'Ran off the end of memory after {self.steps} steps')

        return self
