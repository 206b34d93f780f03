''' Program text grammar: comma separated signed decimals '''

import pyparsing as pp


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))

program = integer + pp.ZeroOrMore(pp.Suppress(',') + integer) + pp.StringEnd()
