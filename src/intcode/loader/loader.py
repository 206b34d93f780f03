from pathlib import Path
import logging as lg

import pyparsing as pp

import intcode.loader.grammar as grammar


def load_string(text: str) -> list[int]:
    if not text.strip():
        raise UserWarning('Empty program')

    try:
        result = grammar.program.parse_string(text)
    except pp.ParseException as e:
        raise UserWarning(f'Malformed program: {e}') from e

    return [int(word) for word in result]


def load_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')
    program = load_string(filepath.read_text())
    lg.info(f'Loaded {len(program)} words from {filepath.name}')
    return program
