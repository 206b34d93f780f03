# Opcodes
ADD = 1     # P1 + P2 -> M[P3]
MUL = 2     # P1 * P2 -> M[P3]
INP = 3     # input -> M[P1]
OUT = 4     # P1 -> output
JIT = 5     # if P1 .ne 0 jmp P2
JIF = 6     # if P1 .eq 0 jmp P2
LTH = 7     # P1 .lt P2 -> M[P3]
EQL = 8     # P1 .eq P2 -> M[P3]
ARB = 9     # RB + P1 -> RB
HLT = 99

# Addressing modes
POSITION = 0
IMMEDIATE = 1
RELATIVE = 2

PARAM_COUNTS = {
    ADD: 3,
    MUL: 3,
    INP: 1,
    OUT: 1,
    JIT: 2,
    JIF: 2,
    LTH: 3,
    EQL: 3,
    ARB: 1,
    HLT: 0
}

MNEMONICS = {
    ADD: 'ADD',
    MUL: 'MUL',
    INP: 'INPUT',
    OUT: 'OUTPUT',
    JIT: 'JUMP-TRUE',
    JIF: 'JUMP-FALSE',
    LTH: 'LESSTHAN',
    EQL: 'EQUALS',
    ARB: 'RELBASE',
    HLT: 'HALT'
}
