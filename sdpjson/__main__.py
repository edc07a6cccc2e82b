import argparse
import logging
import sys

from .exceptions import SdpError
from .serialization import sdp_to_json

logger = logging.getLogger('sdpjson')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Convert an SDP session description to JSON')
    parser.add_argument('input', nargs='?',
                        help='Read the SDP from a file instead of standard input.')
    parser.add_argument('--output', '-o',
                        help='Write the JSON to a file instead of standard output.')
    parser.add_argument('--indent', type=int, help='Pretty-print with this indentation.')
    parser.add_argument('--sort-keys', action='store_true')
    parser.add_argument('--verbose', '-v', action='count')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.input:
        with open(args.input, 'r') as fp:
            sdp = fp.read()
    else:
        sdp = sys.stdin.read()

    try:
        data = sdp_to_json(sdp, indent=args.indent, sort_keys=args.sort_keys)
    except SdpError as exc:
        logger.error('Could not parse session description: %s', exc)
        return 1

    if args.output:
        with open(args.output, 'w') as fp:
            fp.write(data + '\n')
    else:
        sys.stdout.write(data + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
