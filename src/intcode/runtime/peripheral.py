import sys
from collections import deque
from typing import Iterable, TextIO

from intcode.runtime.faults import InputReadFailure, InputParseFailure


def parse_input_line(line: str) -> int:
    text = line.strip()

    try:
        return int(text)
    except ValueError:
        raise InputParseFailure(text)


class InputDevice:
    def read_value(self) -> int:
        raise NotImplementedError()


class OutputDevice:
    def write_value(self, value: int):
        raise NotImplementedError()


class ConsoleInput(InputDevice):
    ''' Line-buffered reader, one integer per line '''

    def __init__(
        self,
        stream: TextIO | None = None,
        prompt: str | None = None,
        prompt_stream: TextIO | None = None
    ):
        self.stream = stream
        self.prompt = prompt
        self.prompt_stream = prompt_stream

    def read_value(self) -> int:
        stream = self.stream if self.stream is not None else sys.stdin

        if self.prompt is not None:
            prompt_stream = self.prompt_stream if self.prompt_stream is not None else sys.stderr
            prompt_stream.write(self.prompt)
            prompt_stream.flush()

        try:
            line = stream.readline()
        except OSError as e:
            raise InputReadFailure(f'Input stream failed: {e}') from e

        # readline() returns an empty string only at end of stream
        if line == '':
            raise InputReadFailure('Input stream closed')

        return parse_input_line(line)


class ConsoleOutput(OutputDevice):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def write_value(self, value: int):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(f'{value}\n')
        stream.flush()


class ScriptedInput(InputDevice):
    def __init__(self, values: Iterable[int | str] = ()):
        self.queue: deque[int | str] = deque(values)

    def push(self, value: int | str):
        self.queue.append(value)
        return self

    def read_value(self) -> int:
        if not self.queue:
            raise InputReadFailure('Scripted input exhausted')

        value = self.queue.popleft()

        if isinstance(value, str):
            return parse_input_line(value)

        return value


class ScriptedOutput(OutputDevice):
    values: list[int]

    def __init__(self):
        self.values = []

    def write_value(self, value: int):
        self.values.append(value)
