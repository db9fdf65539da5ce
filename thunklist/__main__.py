from thunklist import (
    from_eager_sequence, generate, take, drop, map, reduce, length,
    to_eager_sequence
)
from thunklist.errors import ThunkListError
import operator
import argparse
import logging
import sys


logger = logging.getLogger(__name__)

STEPS = {
    'square': lambda x: x * x,
    'double': lambda x: x * 2,
    'increment': lambda x: x + 1,
    'decrement': lambda x: x - 1,
    'negate': operator.neg,
    'halve': lambda x: x // 2,
}


thunklist = argparse.ArgumentParser(
    description='Build a lazy list from integers and print (part of) it',
    prog='thunklist'
)

thunklist.add_argument(
    'values', nargs='*', type=int,
    help='elements of the list, or the seed when using --generate'
)

thunklist.add_argument(
    '--generate', metavar='STEP', choices=STEPS,
    help='build an infinite list by repeatedly applying STEP to the seed'
)

thunklist.add_argument(
    '--map', metavar='STEP', choices=STEPS, dest='map_step',
    help='apply STEP to every element'
)

thunklist.add_argument(
    '--drop', metavar='N', type=int, default=0,
    help='skip the first N elements [default: 0]'
)

thunklist.add_argument(
    '--take', metavar='N', type=int,
    help='keep at most N elements (required with --generate)'
)

thunklist.add_argument(
    '--memo', help='cache each element once it has been computed',
    action='store_true'
)

summary = thunklist.add_mutually_exclusive_group()
summary.add_argument(
    '--sum', help='print the sum of the elements rather than the elements',
    action='store_true'
)
summary.add_argument(
    '--length', help='print the number of elements rather than the elements',
    action='store_true'
)

thunklist.add_argument(
    '-v', '--verbose', help='log each stage of the pipeline',
    action='store_true'
)


def build(args):
    if args.generate is not None:
        logger.debug('generating from seed %d with %s', args.values[0], args.generate)
        lst = generate(args.values[0], STEPS[args.generate])
    else:
        logger.debug('list of %d value(s)', len(args.values))
        lst = from_eager_sequence(args.values)

    if args.memo:
        lst = lst.memoize()
    if args.drop:
        logger.debug('dropping %d', args.drop)
        lst = drop(lst, args.drop)
    if args.take is not None:
        logger.debug('taking %d', args.take)
        lst = take(lst, args.take)
    if args.map_step is not None:
        logger.debug('mapping %s', args.map_step)
        lst = map(lst, STEPS[args.map_step])
    return lst


def main(argv=None):
    args = thunklist.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if args.generate is not None:
        if len(args.values) != 1:
            thunklist.error('--generate needs exactly one seed value')
            return 1
        if args.take is None:
            thunklist.error('--generate makes an infinite list, --take is required')
            return 1

    try:
        lst = build(args)
        if args.sum:
            print(reduce(lst, operator.add, 0))
        elif args.length:
            print(length(lst))
        else:
            print(to_eager_sequence(lst))
    except ThunkListError as err:
        print(f'thunklist: {err}', file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
