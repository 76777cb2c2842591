
import json
import logging

import pytest

from ip3 import cli
from ip3 import network


@pytest.fixture(autouse=True)
def fresh_logger():
    logger = logging.getLogger('ip3')
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fake_host(monkeypatch):
    monkeypatch.setattr(network, 'public_ip', lambda: 0x01010101)
    monkeypatch.setattr(network, 'local_ip', lambda: 0x7F000001)


def test_me_json(fake_host, capsys):
    assert cli.main(['me', '--json']) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == {
        'public_ip': {'ipv4': '1.1.1.1', 'ip3': 'cage.advice.above'},
        'local_ip': {'ipv4': '127.0.0.1', 'ip3': 'ability.abandon.display'},
    }
    assert out.count('\n') == 1


def test_me_plain(fake_host, capsys):
    assert cli.main(['me']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        'Public IP:  cage.advice.above',
        'Local IP:  ability.abandon.display',
    ]


def test_me_network_error(monkeypatch, capsys):
    def fail():
        raise network.NetworkError('offline')

    monkeypatch.setattr(network, 'public_ip', fail)
    assert cli.main(['me']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'error: offline' in captured.err


def test_encode(capsys):
    assert cli.main(['encode', '127.0.0.1']) == 0
    assert capsys.readouterr().out == 'ability.abandon.display\n'


def test_decode_json(capsys):
    assert cli.main(['decode', 'cage.advice.above', '--json']) == 0
    assert json.loads(capsys.readouterr().out) == {
        'ipv4': '1.1.1.1', 'ip3': 'cage.advice.above'}


def test_decode_unknown_word(capsys):
    assert cli.main(['decode', 'cage.advice.nope']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "'nope' not in wordlist" in captured.err


def test_encode_malformed(capsys):
    assert cli.main(['encode', '300.1.1.1']) == 1
    assert 'out of range' in capsys.readouterr().err


def test_no_command(capsys):
    assert cli.main([]) == 0
    assert capsys.readouterr().out == 'No command! Exiting...\n'


@pytest.mark.parametrize('flags, level', [
    ([], logging.WARNING),
    (['-d'], logging.INFO),
    (['-dd'], logging.DEBUG),
])
def test_debug_levels(flags, level, capsys):
    assert cli.main(flags + ['encode', '1.1.1.1']) == 0
    assert logging.getLogger('ip3').level == level
