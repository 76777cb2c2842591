
import logging
import socket

import httpx

from ip3.constants import config
from ip3.encoder import MalformedInput, parse_ipv4

logger = logging.getLogger(__name__)

# Any routable address works; connecting a UDP socket sends nothing.
_PROBE_ADDRESS = ('8.8.8.8', 80)


class NetworkError(RuntimeError):
    '''
    An address of this host could not be determined.
    '''


def public_ip(client=None, url=None):
    '''
    Ask an echo service for the address our requests come from.
    The service must answer with the bare dotted quad as its body.
    '''
    url = url or config.public_ip_url
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=config.timeout) as owned:
                response = owned.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise NetworkError(
            'Public IP lookup failed with status {}'.format(
                e.response.status_code)) from e
    except httpx.HTTPError as e:
        raise NetworkError(
            'Public IP lookup against {} failed'.format(url)) from e

    body = response.text.strip()
    try:
        address = parse_ipv4(body)
    except MalformedInput as e:
        raise NetworkError(
            'Public IP service returned {!r}, not an IPv4 address'.format(
                body)) from e
    logger.info('Public IP is %s', body)
    return address


def local_ip():
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(_PROBE_ADDRESS)
            host = sock.getsockname()[0]
    except OSError as e:
        raise NetworkError('No local IPv4 address found') from e
    logger.info('Local IP is %s', host)
    return parse_ipv4(host)
