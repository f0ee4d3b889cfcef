"""
Tests for the engine, report generator and command-line interface
"""

import json

import pytest

from cryptoscope.cli import main
from cryptoscope.core.aes_ecb import aes_128_ecb_encrypt
from cryptoscope.core.engine import CryptoscopeEngine
from cryptoscope.core.padding import pkcs7_pad
from cryptoscope.core.raw_bytes import ByteBuffer
from cryptoscope.utils.report_generator import ReportGenerator


COOKING_HEX = "1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736"


def test_engine_unknown_preset():
    with pytest.raises(ValueError):
        CryptoscopeEngine(preset="reckless")


def test_engine_break_repeating_key(repeating_key_ciphertext, paragraph):
    engine = CryptoscopeEngine(preset="thorough")

    result = engine.break_repeating_key(repeating_key_ciphertext, "paragraph")

    assert result.key_lengths[0].key_length == 3
    assert result.best().key.to_text() == "ICE"
    assert result.output[160:] == paragraph

    data = result.to_dict()
    assert data['metadata']['operation'] == "break-repeating"
    assert data['candidates'][0]['key_hex'] == "494345"
    assert data['key_lengths'][0] == {'key_length': 3, 'distance': 0.0}


def test_engine_detect_ecb():
    ecb_like = ByteBuffer(b"YELLOW SUBMARINE" * 3)
    other = ByteBuffer(bytes(range(48)))

    result = CryptoscopeEngine().detect_ecb([other, ecb_like])

    assert result.block_scores[0].index == 1
    assert result.to_dict()['block_scores'][0]['duplicate_blocks'] == 2


def test_engine_decrypt_aes_ecb():
    key = ByteBuffer.from_text("YELLOW SUBMARINE")
    plaintext = ByteBuffer.from_text("Play that funky music white boy")
    ciphertext = aes_128_ecb_encrypt(pkcs7_pad(plaintext, 16), key)

    result = CryptoscopeEngine().decrypt_aes_ecb(ciphertext, key, unpad=True)

    assert result.output == plaintext


def test_engine_convert():
    result = CryptoscopeEngine().convert(ByteBuffer.from_text("Man"))

    assert result.encodings == {'hex': '4d616e', 'base64': 'TWFu', 'text': 'Man'}


def test_report_generator(repeating_key_ciphertext):
    result = CryptoscopeEngine().break_repeating_key(repeating_key_ciphertext)

    report = ReportGenerator().generate_markdown(result, "Repeating key")

    assert report.startswith("# Cryptoscope Report: Repeating key")
    assert "## Key Length Estimates" in report
    assert "`494345`" in report


def test_cli_break_single(capsys):
    main(['break-single', '--string', COOKING_HEX])

    out = capsys.readouterr().out
    assert "Cooking MC's like a pound of bacon" in out
    assert "Key (hex): 58" in out


def test_cli_json_output(capsys):
    main(['break-single', '--string', COOKING_HEX, '--json'])

    data = json.loads(capsys.readouterr().out)
    assert data['candidates'][0]['plaintext'] == "Cooking MC's like a pound of bacon"


def test_cli_xor(capsys):
    main(['xor', '--string', "Burning 'em", '--key', 'ICE', '--json'])

    data = json.loads(capsys.readouterr().out)
    assert data['encodings']['hex'] == "0b3637272a2b2e63622c2e"


def test_cli_hamming(capsys):
    main(['hamming', '--string', 'this is a test', 'wokka wokka!!!'])

    assert "hamming_distance: 37" in capsys.readouterr().out


def test_cli_pad(capsys):
    main(['pad', '--string', 'ABC', '--block-size', '3', '--json'])

    data = json.loads(capsys.readouterr().out)
    assert data['encodings']['hex'] == "414243030303"


def test_cli_detect_ecb_file(tmp_path, capsys):
    path = tmp_path / "8.txt"
    path.write_text('\n'.join([
        bytes(range(64)).hex(),
        (b"YELLOW SUBMARINE" * 4).hex(),
    ]) + '\n')
    report_path = tmp_path / "report.md"

    main(['detect-ecb', str(path), '--report', str(report_path)])

    out = capsys.readouterr().out
    assert "Most duplicate blocks: line 1 (3)" in out
    assert "**Likely ECB**: line 1" in report_path.read_text()


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(['convert', str(tmp_path / "missing.txt")])

    assert exc.value.code == 1
    assert "Input file not found" in capsys.readouterr().err


def test_cli_malformed_input(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['convert', '--string', 'xyz'])

    assert exc.value.code == 1
    assert "[!] Error:" in capsys.readouterr().err
