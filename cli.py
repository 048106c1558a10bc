#!/usr/bin/env python3

from automata.errors import AutomatonError
from algorithms.minimization import minimize, equivalence_classes
from algorithms.equivalence import are_equivalent, distinguishing_word, z3_are_equivalent, z3_distinguishing_word
from config import get_config
from utils import read_dfa_file, read_pda_file
import logscan

import logging
import sys

def _split_word(word):
    """ 'a,b,a' -> ['a', 'b', 'a'], 'aba' -> ['a', 'b', 'a'] """
    if ',' in word:
        return [char for char in word.split(',') if char]
    return list(word)

def _format_word(word):
    return ' '.join(word) if word else 'ε'

def _show(args, config):
    dfa = read_dfa_file(args.filename)
    print(dfa)
    if args.diagram is not None:
        dfa.show_diagram(args.diagram or config.diagram_path)
    return 0

def _minimize(args, config):
    dfa = read_dfa_file(args.filename)
    max_rounds = config.max_refinement_rounds

    if args.classes:
        for state_class in equivalence_classes(dfa, max_rounds):
            print('{' + ', '.join(state_class) + '}')

    minimal = minimize(dfa, max_rounds=max_rounds, remove_unreachable=args.prune)
    if args.output:
        minimal.to_dfa_file(args.output)
    else:
        sys.stdout.write(minimal.to_dfa_string())
    return 0

def _equivalent(args, config):
    dfa_a, dfa_b = read_dfa_file(args.first), read_dfa_file(args.second)
    strict = args.strict or config.strict_alphabets

    check = z3_are_equivalent if args.z3 else are_equivalent
    if check(dfa_a, dfa_b, strict=strict):
        print('equivalent')
        return 0

    print('not equivalent')
    if dfa_a.alphabet != dfa_b.alphabet:
        print('alphabets differ: {} vs {}'.format(dfa_a.alphabet, dfa_b.alphabet))
    else:
        counterexample = z3_distinguishing_word if args.z3 else distinguishing_word
        print('distinguishing word: {}'.format(_format_word(counterexample(dfa_a, dfa_b))))
    return 1

def _accepts(args, config):
    dfa = read_dfa_file(args.filename)
    for word in args.words:
        print('{}: {}'.format(word, 'accepted' if dfa.accepts(_split_word(word)) else 'rejected'))
    return 0

def _pda(args, config):
    pda = read_pda_file(args.filename)
    for word in args.words:
        print('{}: {}'.format(word, 'accepted' if pda.accepts(_split_word(word)) else 'rejected'))
    return 0

def _logscan(args, config):
    report = logscan.format_report(logscan.scan_file(args.filename))
    if args.output:
        with open(args.output, 'w') as fout:
            fout.write(report + '\n')
    else:
        print(report)
    return 0

def _make_parser():
    from argparse import ArgumentParser
    ap = ArgumentParser(prog='dfamin', description='Minimize deterministic finite automata and check them for equivalence')
    ap.add_argument('-v', '--verbose', action='store_true', help='Log the steps of the algorithms')
    sub = ap.add_subparsers(dest='command', required=True)

    p = sub.add_parser('show', help='Print a DFA')
    p.add_argument('filename')
    p.add_argument('--diagram', nargs='?', const='', help='Also render a diagram (to the configured path if none is given)')
    p.set_defaults(run=_show)

    p = sub.add_parser('minimize', help='Print the minimal DFA in the same file format')
    p.add_argument('filename')
    p.add_argument('-o', '--output', help='The file to store the minimized DFA to')
    p.add_argument('--prune', action='store_true', help='Drop states unreachable from the start state first')
    p.add_argument('--classes', action='store_true', help='Show the classes of equivalent states')
    p.set_defaults(run=_minimize)

    p = sub.add_parser('equivalent', help='Check two DFAs for language equivalence')
    p.add_argument('first')
    p.add_argument('second')
    p.add_argument('--strict', action='store_true', help='Treat different alphabets as an error')
    p.add_argument('--z3', action='store_true', help='Decide with the z3 solver instead of the product search')
    p.set_defaults(run=_equivalent)

    p = sub.add_parser('accepts', help='Run a DFA on words')
    p.add_argument('filename')
    p.add_argument('words', nargs='+', help='Words as plain strings, or comma separated symbols')
    p.set_defaults(run=_accepts)

    p = sub.add_parser('pda', help='Run a pushdown automaton on words')
    p.add_argument('filename')
    p.add_argument('words', nargs='+', help='Words as plain strings, or comma separated symbols')
    p.set_defaults(run=_pda)

    p = sub.add_parser('logscan', help='Count pattern matches and errors in a log file')
    p.add_argument('filename')
    p.add_argument('-o', '--output', help='The file to store the report to')
    p.set_defaults(run=_logscan)

    return ap

def _main(argv=None):
    args = _make_parser().parse_args(argv)
    config = get_config()
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level_number,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        return args.run(args, config)
    except (AutomatonError, OSError, ValueError) as e:
        print('error: {}'.format(e), file=sys.stderr)
        return 2

if __name__ == '__main__':
    sys.exit(_main())
