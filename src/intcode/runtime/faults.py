class Halt(Exception):
    pass


class Fault(Exception):
    pass


class InvalidOpcode(Fault):
    def __init__(self, opcode: int, position: int):
        super().__init__(f'Invalid opcode: {opcode} at position {position}')
        self.opcode = opcode
        self.position = position


class InvalidAddressingMode(Fault):
    def __init__(self, digit: int):
        super().__init__(f'Invalid parameter mode: {digit}')
        self.digit = digit


class InvalidWriteDestination(Fault):
    def __init__(self, param):
        super().__init__(f'Destination parameter should never be immediate: {param}')
        self.param = param


class MemoryOutOfBounds(Fault):
    def __init__(self, index: int):
        super().__init__(f'Memory index out of range: {index}')
        self.index = index


class InputReadFailure(Fault):
    pass


class InputParseFailure(Fault):
    def __init__(self, text: str):
        super().__init__(f'Cannot parse input as an integer: {text!r}')
        self.text = text
