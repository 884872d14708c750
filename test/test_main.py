import json
import logging

import pytest
from ethabi_types.__main__ import main


def test_signatures(capsys):
    assert main(['tuple(bool[3],bytes)', 'uint']) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == [
        'tuple(bool[3],bytes): Tuple(FixedArray(Bool(), 3), Bytes())',
        'uint: Uint(256)',
    ]
    assert err == ''


def test_dynamic(capsys):
    assert main(['--dynamic', 'tuple(address,bool)', 'string[2]', 'bytes', 'tuple(bytes[2])']) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        'tuple(address,bool): FixedTuple(Address(), Bool()) [static]',
        'string[2]: FixedArray(String(), 2) [dynamic]',
        'bytes: Bytes() [dynamic]',
        'tuple(bytes[2]): FixedTuple(FixedArray(Bytes(), 2)) [dynamic]',
    ]


def test_errors_keep_going(capsys):
    assert main(['foo123', 'bool', 'bool[x]']) == 1
    out, err = capsys.readouterr()
    assert out == 'bool: Bool()\n'
    assert err.splitlines() == [
        "foo123: error: Invalid type name: 'foo123'",
        "bool[x]: error: Invalid number 'x' in type: 'bool[x]'",
    ]


def test_max_depth(capsys):
    assert main(['--max-depth', '1', 'bool[][]']) == 1
    _, err = capsys.readouterr()
    assert 'Type nesting exceeds 1 levels' in err


def test_abi(capsys, tmp_path):
    path = tmp_path / 'contract.json'
    path.write_text(json.dumps([
        {"type": "constructor", "inputs": [{"name": "owner", "type": "address"}]},
        {"type": "function", "name": "get", "inputs": [],
         "outputs": [{"name": "", "type": "tuple(uint8,string)"}], "stateMutability": "view"},
        {"type": "function", "name": "get", "inputs": [{"name": "key", "type": "bytes32"}],
         "outputs": [{"name": "value", "type": "bool"}]},
        {"type": "event", "name": "Set", "anonymous": True,
         "inputs": [{"name": "key", "type": "bytes32", "indexed": True}]},
    ]))
    assert main(['--abi', str(path)]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        'constructor',
        '  inputs',
        '    owner: Address()',
        'function get (view)',
        '  inputs',
        '  outputs',
        '    _: Tuple(Uint(8), String())',
        'function get (nonpayable)',
        '  inputs',
        '    key: FixedBytes(32)',
        '  outputs',
        '    value: Bool()',
        'event Set (anonymous)',
        '  inputs',
        '    key: FixedBytes(32) (indexed)',
    ]


def test_abi_errors(capsys, tmp_path):
    assert main(['--abi', str(tmp_path / 'missing.json')]) == 1
    _, err = capsys.readouterr()
    assert 'missing.json: error:' in err

    path = tmp_path / 'broken.json'
    path.write_text('[{"name": "f", "inputs": [{"name": "x", "type": "uint256[y]"}]}]')
    assert main(['--abi', str(path)]) == 1
    _, err = capsys.readouterr()
    assert "Invalid number 'y'" in err


def test_nothing_to_do(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_debug(capsys):
    root = logging.getLogger()
    level = root.level
    try:
        assert main(['--debug', 'address']) == 0
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(level)
