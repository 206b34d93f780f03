MEMORY_SIZE = 4096          # Words, program is zero-padded up to this
OPCODE_BASE = 100           # Opcode lives in the two low decimal digits
MODE_BASE = 10              # One decimal digit per parameter mode
