
import argparse
import json
import logging
import sys

from rich.console import Console

from ip3 import encoder
from ip3 import network

logger = logging.getLogger('ip3')

console = Console(highlight=False)


def setup_logging(verbosity):
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def both_forms(address):
    return {
        'ipv4': encoder.format_ipv4(address),
        'ip3': str(encoder.encode(address)),
    }


def print_json(obj):
    print(json.dumps(obj), flush=True)


def print_labelled(label, value):
    console.print('[bold bright_blue]{}[/] [bright_green]{}[/]'.format(
        label, value))


def display_me(as_json):
    public = both_forms(network.public_ip())
    local = both_forms(network.local_ip())
    if as_json:
        print_json({'public_ip': public, 'local_ip': local})
    else:
        print_labelled('Public IP: ', public['ip3'])
        print_labelled('Local IP: ', local['ip3'])


def display_encode(text, as_json):
    result = both_forms(encoder.parse_ipv4(text))
    if as_json:
        print_json(result)
    else:
        print(result['ip3'])


def display_decode(text, as_json):
    words = encoder.parse_ip3(text)
    result = {
        'ipv4': encoder.format_ipv4(encoder.decode(words)),
        'ip3': str(words),
    }
    if as_json:
        print_json(result)
    else:
        print(result['ipv4'])


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='ip3', description='IPv4 addresses as three words.')
    parser.add_argument('-d', '--debug', action='count', default=0,
                        help='Turn debugging information on')
    commands = parser.add_subparsers(dest='command')

    me = commands.add_parser('me', help='Display current ip3')
    me.add_argument('-j', '--json', action='store_true')

    enc = commands.add_parser('encode', help='Dotted quad to ip3')
    enc.add_argument('ipv4')
    enc.add_argument('-j', '--json', action='store_true')

    dec = commands.add_parser('decode', help='ip3 to dotted quad')
    dec.add_argument('ip3')
    dec.add_argument('-j', '--json', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        if args.command == 'me':
            display_me(args.json)
        elif args.command == 'encode':
            display_encode(args.ipv4, args.json)
        elif args.command == 'decode':
            display_decode(args.ip3, args.json)
        else:
            print('No command! Exiting...')
    except (encoder.Ip3Error, network.NetworkError) as e:
        logger.debug('Conversion failed', exc_info=True)
        print('error: {}'.format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
